"""Permite executar `python -m gaeenv`."""

from gaeenv.cli import app

if __name__ == "__main__":
    app(prog_name="gaeenv")

"""
CLI do gaeenv: dumps app.yaml env variables to source in scripts/startup.

Uso:
    eval "$(gaeenv --config app.yaml)"

Códigos de saída:
    - 0: run concluída (inclusive com falhas engolidas por --force)
    - 1: run abortada por uma falha reportada
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.markup import escape

from gaeenv import __version__
from gaeenv.core.resolution import ErrorPolicy, ResolutionContext, Resolver
from gaeenv.export import write_exports
from gaeenv.settings import (
    DEFAULT_CONFIG_PATH,
    ENV_CONFIG,
    ENV_FORCE,
    ENV_SILENT,
    ResolverSettings,
)

app = typer.Typer(
    name="gaeenv",
    help="Dumps app.yaml env variables to source in scripts/startup.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gaeenv {__version__}")
        raise typer.Exit()


def _print_events(console: Console, ctx: ResolutionContext) -> None:
    for event in ctx.events:
        console.print(
            f"[dim]{event['timestamp']}[/dim] {event['level']:<5} "
            f"{escape(event['file'])} {escape(event['message'])}",
            soft_wrap=True,
            highlight=False,
        )


def run(settings: ResolverSettings, *, console: Console | None = None) -> int:
    """Executa uma run completa e retorna o código de saída."""
    err_console = console or Console(stderr=True)
    ctx = ResolutionContext()
    resolver = Resolver(
        ctx=ctx,
        policy=ErrorPolicy.from_settings(settings, console=err_console),
    )
    result = resolver.run(settings.config_path)

    if settings.verbose:
        _print_events(err_console, ctx)

    if result.aborted:
        return result.exit_code

    write_exports(result.variables, sys.stdout)
    return result.exit_code


@app.command()
def main(
    config: str = typer.Option(
        DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        envvar=ENV_CONFIG,
        help="Export env from `app.yaml`",
    ),
    silent: bool = typer.Option(
        False, "--silent", "-s", envvar=ENV_SILENT, help="Don't print errors"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", envvar=ENV_FORCE, help="Keep processing regardless of errors"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print the resolution event log to stderr"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Resolve CONFIG and its includes into `export NAME="VALUE"` lines."""
    settings = ResolverSettings(
        config_path=config,
        silent=silent,
        force=force,
        verbose=verbose,
    )
    code = run(settings)
    if code != 0:
        raise typer.Exit(code=code)


if __name__ == "__main__":
    app()

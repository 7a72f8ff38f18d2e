"""
src/gaeenv/export/exporter.py

Gerador canônico das linhas `export` (v1) — gaeenv

Regras:
- A saída é derivada EXCLUSIVAMENTE do snapshot do VariableStore.
- Uma linha por variável: export NAME="VALUE"
- Mesmo snapshot => mesma saída (ordenação estável por nome).
- O valor é escapado para aspas duplas de shell POSIX (\\ " $ `), de modo
  que `source` nunca expande referências; valores comuns saem inalterados.
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, TextIO, Tuple

# caracteres com significado especial dentro de aspas duplas
_SHELL_SPECIAL = ("\\", '"', "$", "`")


def _sorted_items(variables: Mapping[str, str]) -> List[Tuple[str, str]]:
    return sorted(variables.items(), key=lambda kv: kv[0])


def shell_quote(value: str) -> str:
    escaped = str(value)
    for ch in _SHELL_SPECIAL:
        escaped = escaped.replace(ch, "\\" + ch)
    return f'"{escaped}"'


def format_export(name: str, value: str) -> str:
    return f"export {name}={shell_quote(value)}"


def render_exports(variables: Mapping[str, str]) -> List[str]:
    """Renderiza o snapshot como linhas `export`, ordenadas por nome."""
    return [format_export(name, value) for name, value in _sorted_items(variables)]


def write_exports(variables: Mapping[str, str], stream: TextIO) -> int:
    """Escreve as linhas em `stream` e retorna quantas foram escritas."""
    lines: Iterable[str] = render_exports(variables)
    count = 0
    for line in lines:
        stream.write(line + "\n")
        count += 1
    return count

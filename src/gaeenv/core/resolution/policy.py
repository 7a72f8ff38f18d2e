# src/gaeenv/core/resolution/policy.py
"""
Política de erro de uma run de resolução.

A ErrorPolicy decide, para cada falha reportada pelo Resolver:
    - se um diagnóstico humano é emitido (controlado por `silent`)
    - se a run inteira aborta ou continua (controlado por `force`)

Decisões arquiteturais:
    - A decisão é binária e vale para toda a run, nunca por subárvore
    - O tipo do erro não influencia a decisão
    - A política nunca encerra o processo: devolve um PolicyOutcome e o
      ponto de entrada decide o código de saída
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from .types import PolicyOutcome

if TYPE_CHECKING:  # pragma: no cover
    from gaeenv.settings import ResolverSettings


class ErrorPolicy:
    """Política run-wide de diagnóstico e continuação (`silent`, `force`)."""

    def __init__(
        self,
        *,
        silent: bool = False,
        force: bool = False,
        console: Optional[Console] = None,
    ):
        self.silent = bool(silent)
        self.force = bool(force)
        self._console = console

    @classmethod
    def from_settings(
        cls, settings: "ResolverSettings", *, console: Optional[Console] = None
    ) -> "ErrorPolicy":
        return cls(silent=settings.silent, force=settings.force, console=console)

    @property
    def console(self) -> Console:
        # criado sob demanda para respeitar o sys.stderr corrente
        if self._console is None:
            self._console = Console(stderr=True)
        return self._console

    def handle(self, operation: str, error: Exception) -> PolicyOutcome:
        if not self.silent:
            self.console.print(
                f"[bold red]Erro em {escape(operation)}[/bold red], {escape(str(error))}",
                soft_wrap=True,
                highlight=False,
            )

        if not self.force:
            return PolicyOutcome.ABORT
        return PolicyOutcome.CONTINUE

# src/gaeenv/core/resolution/context.py
"""
Contexto de execução de uma run de resolução.

Este módulo define o `ResolutionContext`, a estrutura canônica que concentra
todo o estado compartilhado por referência entre as chamadas recursivas do
Resolver durante uma única run.

O ResolutionContext atua como o único meio permitido de:
    - registrar arquivos visitados (InclusionTracker)
    - acumular variáveis mescladas (VariableStore)
    - registrar eventos de log estruturados
    - coletar as falhas reportadas

Princípios fundamentais:
    - Isolamento por execução (cada run possui seu próprio contexto)
    - Ausência de estado global compartilhado
    - Estrutura simples e testável

Invariantes:
    - Logs sempre incluem `run_id` e `file`
    - Erros são registrados na ordem em que foram reportados
    - O contexto é mutável apenas durante a run

Limites explícitos:
    - Não lê arquivos
    - Não decide políticas de erro
    - Não produz saída
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from gaeenv.core.errors import ErrorPayload

from .store import VariableStore
from .tracker import InclusionTracker


def _new_run_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass
class ResolutionContext:
    """
    Contexto compartilhado de uma run de resolução.

    Decisões arquiteturais:
        - O Resolver interage com estado compartilhado apenas via contexto
        - Tracker e store são passados por referência a toda chamada recursiva
        - Logs e erros são estruturados e rastreáveis
    """
    run_id: str = field(default_factory=_new_run_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    tracker: InclusionTracker = field(default_factory=InclusionTracker)
    store: VariableStore = field(default_factory=VariableStore)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    errors: List[ErrorPayload] = field(default_factory=list, init=False)

    # -----------------------------
    # Logging & errors
    # -----------------------------
    def log(self, *, file: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "file": file,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def record_error(self, error: ErrorPayload) -> None:
        self.errors.append(error)

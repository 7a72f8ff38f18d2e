# src/gaeenv/core/resolution/__init__.py
"""
Motor de resolução de includes do gaeenv.

Componentes:
    - tracker  → InclusionTracker (arquivos visitados e suas origens)
    - store    → VariableStore (variáveis mescladas, último escritor vence)
    - policy   → ErrorPolicy (silent / force)
    - context  → ResolutionContext (estado compartilhado de uma run)
    - resolver → Resolver (travessia recursiva depth-first)
    - types    → PolicyOutcome, ResolveStatus, ResolveResult, RunResult

Limites explícitos:
    - Não interpreta o formato textual dos documentos
    - Não produz saída nem encerra o processo
"""

from .context import ResolutionContext
from .policy import ErrorPolicy
from .resolver import Resolver, include_path, normalize_path, resolve_environment
from .store import VariableStore
from .tracker import InclusionTracker
from .types import ROOT_ORIGIN, PolicyOutcome, ResolveResult, ResolveStatus, RunResult

__all__ = [
    "ROOT_ORIGIN",
    "ErrorPolicy",
    "InclusionTracker",
    "PolicyOutcome",
    "ResolutionContext",
    "ResolveResult",
    "ResolveStatus",
    "Resolver",
    "RunResult",
    "VariableStore",
    "include_path",
    "normalize_path",
    "resolve_environment",
]

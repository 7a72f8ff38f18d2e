# src/gaeenv/core/resolution/types.py
"""
Tipos canônicos da resolução do gaeenv.

Este módulo define as estruturas e enums que padronizam a comunicação entre
Resolver, ErrorPolicy e o ponto de entrada (CLI).

Componentes principais:
    - PolicyOutcome → decisão da ErrorPolicy para uma falha (ABORT, CONTINUE)
    - ResolveStatus → estado final de uma chamada de resolução (SUCCESS, ABORTED)
    - ResolveResult → resultado imutável de `Resolver.resolve`
    - RunResult     → resultado agregado e imutável de uma run completa

Princípios fundamentais:
    - Falhas são valores retornados, nunca término do processo
    - A decisão de encerrar o programa pertence apenas ao ponto de entrada
    - Valores textuais dos enums são estáveis e serializáveis

Limites explícitos:
    - Não executa resolução
    - Não decide políticas de erro
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from gaeenv.core.errors import ErrorPayload

# Rótulo de origem usado para o documento raiz de uma run.
ROOT_ORIGIN = "<root>"


class PolicyOutcome(str, Enum):
    """
    Decisão da ErrorPolicy para uma falha reportada.

    Estados definidos:
        - ABORT: a run inteira termina; nenhuma saída é produzida
        - CONTINUE: o chamador trata a falha como sucesso e segue adiante

    Invariantes:
        - A decisão é binária e válida para toda a run (depende só de `force`)
    """
    ABORT = "abort"
    CONTINUE = "continue"


class ResolveStatus(str, Enum):
    """
    Estados finais possíveis de uma chamada de resolução.

    Estados definidos:
        - SUCCESS: subárvore resolvida, ou falha engolida por `force`
        - ABORTED: falha reportada com política ABORT; propaga sem alteração
    """
    SUCCESS = "success"
    ABORTED = "aborted"


@dataclass(frozen=True)
class ResolveResult:
    """Resultado de `Resolver.resolve(origin, path)`."""

    status: ResolveStatus
    path: str
    error: Optional[ErrorPayload] = None

    @property
    def aborted(self) -> bool:
        return self.status == ResolveStatus.ABORTED


@dataclass(frozen=True)
class RunResult:
    """
    Resultado agregado de uma run (RunResult v1).

    Campos:
        - status: SUCCESS se a run chegou ao fim, ABORTED caso contrário
        - root: caminho do documento raiz
        - variables: snapshot final do VariableStore (vazio se abortada)
        - errors: payloads de todas as falhas reportadas, engolidas ou não
        - files: InclusionRecord (caminho → origem)
    """

    status: ResolveStatus
    root: str
    variables: Dict[str, str] = field(default_factory=dict)
    errors: List[ErrorPayload] = field(default_factory=list)
    files: Dict[str, str] = field(default_factory=dict)

    @property
    def aborted(self) -> bool:
        return self.status == ResolveStatus.ABORTED

    @property
    def exit_code(self) -> int:
        return 1 if self.aborted else 0

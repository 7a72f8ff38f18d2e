"""
gaeenv — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros reportados durante uma
resolução. Erros reportados fazem parte do resultado da run e devem ser:

- explícitos
- serializáveis
- rastreáveis até o arquivo que os causou

Nenhuma decisão implícita é permitida: o tipo do erro nunca altera o fluxo
de execução; apenas a ErrorPolicy decide entre abortar e continuar.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .exceptions import ResolutionError


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do gaeenv.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados (path, origin, ...)
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

DUPLICATE_INCLUSION = "DUPLICATE_INCLUSION"
INCLUDE_NOT_FOUND = "INCLUDE_NOT_FOUND"
INCLUDE_READ_FAILURE = "INCLUDE_READ_FAILURE"
INCLUDE_DEPTH_EXCEEDED = "INCLUDE_DEPTH_EXCEEDED"
DOCUMENT_PARSE_FAILURE = "DOCUMENT_PARSE_FAILURE"


def exception_to_payload(exc: ResolutionError) -> ErrorPayload:
    """Converte uma ResolutionError em ErrorPayload (serializável, acionável)."""
    return ErrorPayload(
        type=exc.code,
        message=str(exc),
        details=dict(exc.details or {}),
        hint=exc.hint,
    )

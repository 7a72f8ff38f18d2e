"""
gaeenv — Canonical Exceptions (v1)

Este módulo define as exceções tipadas de resolução do gaeenv.

Taxonomia (ResolutionError):
- DuplicateInclusion: arquivo já carregado nesta run (carrega a origem)
- IncludeNotFound: arquivo raiz ou incluído não existe
- IncludeReadFailure: arquivo existe, mas não pode ser lido
- IncludeDepthExceeded: cadeia de includes além da profundidade máxima
- DocumentParseFailure: documento malformado

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- São detectadas no ponto de uso dentro do Resolver e nunca escapam dele:
  o Resolver as converte em ErrorPayload e as submete à ErrorPolicy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from .errors import (
    DOCUMENT_PARSE_FAILURE,
    DUPLICATE_INCLUSION,
    INCLUDE_DEPTH_EXCEEDED,
    INCLUDE_NOT_FOUND,
    INCLUDE_READ_FAILURE,
)


@dataclass(frozen=True)
class ResolutionError(Exception):
    """Base class para falhas de resolução.

    Importante:
    - `details["path"]` sempre identifica o arquivo problemático
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    code: ClassVar[str] = "RESOLUTION_ERROR"

    def __str__(self) -> str:
        return self.message

    @property
    def path(self) -> str:
        return str(self.details.get("path", ""))


@dataclass(frozen=True)
class DuplicateInclusion(ResolutionError):
    """Arquivo referenciado novamente na mesma run (ciclo ou diamante)."""

    code: ClassVar[str] = DUPLICATE_INCLUSION

    @classmethod
    def create(cls, *, path: str, origin: str, referenced_by: str) -> "DuplicateInclusion":
        return cls(
            message=(
                f"Arquivo duplicado: {path} referenciado em {referenced_by}, "
                f"já carregado em {origin}"
            ),
            details={"path": path, "origin": origin, "referenced_by": referenced_by},
            hint="Remova uma das referências: cada arquivo pode ser incluído uma única vez por run.",
        )

    @property
    def origin(self) -> str:
        return str(self.details.get("origin", ""))


@dataclass(frozen=True)
class IncludeNotFound(ResolutionError):
    """Arquivo raiz ou incluído não existe."""

    code: ClassVar[str] = INCLUDE_NOT_FOUND

    @classmethod
    def create(cls, *, path: str, referenced_by: str) -> "IncludeNotFound":
        return cls(
            message=f"Arquivo não encontrado: {path}",
            details={"path": path, "referenced_by": referenced_by},
            hint="Caminhos de includes são relativos ao diretório do arquivo que os declara.",
        )


@dataclass(frozen=True)
class IncludeReadFailure(ResolutionError):
    """Arquivo existe, mas a leitura falhou (diretório, permissão, ...)."""

    code: ClassVar[str] = INCLUDE_READ_FAILURE

    @classmethod
    def create(cls, *, path: str, referenced_by: str, reason: str) -> "IncludeReadFailure":
        return cls(
            message=f"Não foi possível ler {path}, o arquivo parece existir mas falha na leitura: {reason}",
            details={"path": path, "referenced_by": referenced_by, "reason": reason},
            hint="Verifique permissões e se o caminho aponta para um arquivo regular.",
        )


@dataclass(frozen=True)
class DocumentParseFailure(ResolutionError):
    """Conteúdo do arquivo não é um documento válido."""

    code: ClassVar[str] = DOCUMENT_PARSE_FAILURE

    @classmethod
    def create(cls, *, path: str, referenced_by: str, reason: str) -> "DocumentParseFailure":
        return cls(
            message=f"Documento inválido {path}: {reason}",
            details={"path": path, "referenced_by": referenced_by, "reason": reason},
            hint="O documento deve conter apenas `env_variables` (mapa) e `includes` (lista).",
        )


@dataclass(frozen=True)
class IncludeDepthExceeded(ResolutionError):
    """Cadeia de includes mais profunda que o limite da run."""

    code: ClassVar[str] = INCLUDE_DEPTH_EXCEEDED

    @classmethod
    def create(cls, *, path: str, referenced_by: str, max_depth: int) -> "IncludeDepthExceeded":
        return cls(
            message=f"Profundidade máxima de includes ({max_depth}) excedida em {path}",
            details={"path": path, "referenced_by": referenced_by, "max_depth": max_depth},
            hint="Reduza o aninhamento de includes.",
        )

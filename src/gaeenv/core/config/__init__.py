# src/gaeenv/core/config/__init__.py
"""
Camada de documentos de configuração do gaeenv.

Este pacote contém as estruturas e utilitários responsáveis por decodificar
um único arquivo `app.yaml` em um `ConfigDocument`.

Responsabilidades do pacote:
    - Parsing de documentos (bytes → ConfigDocument)
    - Exceções tipadas para documentos malformados

Limites explícitos:
    - Não lê arquivos do disco
    - Não resolve includes
    - Não decide política de erro
"""

from .document import ConfigDocument
from .errors import (
    ConfigError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    InvalidDocumentFieldError,
)
from .parser import parse_document

__all__ = [
    "ConfigDocument",
    "ConfigError",
    "ConfigParseError",
    "InvalidConfigRootTypeError",
    "InvalidDocumentFieldError",
    "parse_document",
]

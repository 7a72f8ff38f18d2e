# src/gaeenv/core/config/document.py
"""
Documento de configuração decodificado.

Este módulo define o `ConfigDocument`, a representação imutável de um
único arquivo `app.yaml` após o parsing.

Invariantes:
    - Um documento é produzido a cada carregamento de arquivo
    - Após criado, o documento nunca é alterado
    - A ordem de `includes` é exatamente a ordem declarada no arquivo
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class ConfigDocument:
    """
    Conteúdo de um documento de configuração.

    Campos:
        - variables: mapa nome → valor (`env_variables` do arquivo)
        - includes: caminhos relativos declarados em `includes`, na ordem listada
    """

    variables: Mapping[str, str] = field(default_factory=dict)
    includes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # congela as coleções recebidas (dataclass frozen exige object.__setattr__)
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))
        object.__setattr__(self, "includes", tuple(self.includes))

    @property
    def is_empty(self) -> bool:
        return not self.variables and not self.includes

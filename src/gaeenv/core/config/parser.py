# src/gaeenv/core/config/parser.py
"""
Parser canônico de documentos `app.yaml` do gaeenv.

Este módulo é responsável por decodificar o conteúdo bruto (bytes) de um
arquivo de configuração em um `ConfigDocument`.

Formato suportado (v1):

    env_variables:
      KEY1: value1
      KEY2: value2
    includes:
      - relative/path/to/other.yaml

Responsabilidades do módulo:
    - Decodificar bytes UTF-8 e interpretar YAML
    - Validar requisitos estruturais mínimos (tipo raiz, tipos dos campos)
    - Preservar o texto literal dos valores escalares

Princípios fundamentais:
    - O parser é uma função pura: bytes → ConfigDocument
    - Nenhuma heurística implícita é aplicada
    - Documentos malformados são sempre rejeitados com `ConfigParseError`

Invariantes:
    - Documentos vazios são interpretados como documentos sem variáveis
      e sem includes
    - Chaves de topo desconhecidas (ex.: `runtime`, `handlers`) são ignoradas
    - Todos os valores de `env_variables` retornados são strings

Limites explícitos:
    - Não lê arquivos do disco
    - Não resolve caminhos de includes
    - Não expande referências entre variáveis

Este módulo existe para isolar o formato textual do documento
do motor de resolução.
"""

from typing import Any, Dict, List

import yaml  # PyYAML

from .document import ConfigDocument
from .errors import (
    ConfigParseError,
    InvalidConfigRootTypeError,
    InvalidDocumentFieldError,
)

VARIABLES_KEY = "env_variables"
INCLUDES_KEY = "includes"

# tags implícitos preservados: null ("", ~, null) e merge (<<)
_KEPT_IMPLICIT_TAGS = frozenset({"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"})


class LiteralScalarLoader(yaml.SafeLoader):
    """
    SafeLoader que mantém escalares simples como o texto escrito no arquivo.

    Os resolvers implícitos de bool, int, float e timestamp do YAML 1.1 são
    removidos: `3.10`, `0755`, `yes` e `0x1F` chegam ao documento exatamente
    como foram digitados. Apenas null e a chave de merge continuam implícitos.
    """


LiteralScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_IMPLICIT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _scalar_to_str(key: str, value: Any) -> str:
    """
    Converte um valor escalar do documento para a string exportada.

    Política de conversão (v1):
        - str   → sem alteração (texto literal do arquivo)
        - None  → "" (string vazia)
        - bool  → "true" / "false" (apenas com tag explícita, ex.: `!!bool yes`)
        - int / float / datas com tag explícita → `str(value)`
        - list / dict → erro estrutural

    Raises:
        InvalidDocumentFieldError: Se o valor não for escalar.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (dict, list, tuple, set)):
        raise InvalidDocumentFieldError(
            f"Variável '{key}' deve ser escalar, recebido: {type(value).__name__}"
        )
    return str(value)


def _parse_variables(raw: Any) -> Dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise InvalidDocumentFieldError(
            f"'{VARIABLES_KEY}' deve ser dict, recebido: {type(raw).__name__}"
        )

    variables: Dict[str, str] = {}
    for key, value in raw.items():
        name = _scalar_to_str("<chave>", key)
        variables[name] = _scalar_to_str(name, value)
    return variables


def _parse_includes(raw: Any) -> List[str]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise InvalidDocumentFieldError(
            f"'{INCLUDES_KEY}' deve ser list, recebido: {type(raw).__name__}"
        )

    includes: List[str] = []
    for item in raw:
        if not isinstance(item, str) or not item:
            raise InvalidDocumentFieldError(
                f"Entradas de '{INCLUDES_KEY}' devem ser caminhos não vazios, "
                f"recebido: {item!r}"
            )
        includes.append(item)
    return includes


def parse_document(content: bytes) -> ConfigDocument:
    """
    Decodifica o conteúdo bruto de um arquivo em um `ConfigDocument`.

    Decisões arquiteturais:
        - O conteúdo é sempre tratado como UTF-8
        - `LiteralScalarLoader` (derivado de SafeLoader) impede construção de
          objetos arbitrários e preserva o texto literal dos escalares
        - `env_variables` e `includes` ausentes ou nulos equivalem a vazios

    Args:
        content (bytes): Conteúdo bruto do arquivo.

    Returns:
        ConfigDocument: Documento decodificado e imutável.

    Raises:
        ConfigParseError: Se o conteúdo não for UTF-8 ou YAML válido.
        InvalidConfigRootTypeError: Se a raiz não for um dicionário.
        InvalidDocumentFieldError: Se `env_variables` ou `includes` forem inválidos.
    """
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Conteúdo não é UTF-8 válido: {e}") from e

    try:
        data = yaml.load(text, Loader=LiteralScalarLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"YAML inválido: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Documento raiz deve ser dict, recebido: {type(data).__name__}"
        )

    return ConfigDocument(
        variables=_parse_variables(data.get(VARIABLES_KEY)),
        includes=tuple(_parse_includes(data.get(INCLUDES_KEY))),
    )

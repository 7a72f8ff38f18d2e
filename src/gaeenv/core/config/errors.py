# src/gaeenv/core/config/errors.py
"""
Exceções canônicas da camada de parsing de documentos do gaeenv.

Este módulo define a hierarquia oficial de exceções levantadas durante a
decodificação de um documento de configuração (`app.yaml`) em um
`ConfigDocument`.

As exceções aqui definidas representam **documentos malformados**, e não
falhas de I/O ou de resolução de includes.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Mensagens de erro são claras e direcionadas ao usuário
    - O parser nunca tenta corrigir um documento inválido

Invariantes:
    - Todas as exceções de parsing herdam de `ConfigParseError`
    - `ConfigParseError` herda de `ConfigError`

Limites explícitos:
    - Não representa arquivo inexistente ou ilegível
    - Não representa inclusão duplicada
    - Não decide se a execução continua ou aborta
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados a documentos de configuração.

    Esta hierarquia permite:
        - captura genérica de erros de documento
        - distinção clara entre documento malformado e falha de resolução
    """


class ConfigParseError(ConfigError):
    """
    Exceção levantada quando o conteúdo de um documento não pode ser
    decodificado.

    Cobre:
        - bytes que não são UTF-8 válido
        - sintaxe YAML inválida
        - qualquer violação estrutural detectada pelo parser
    """


class InvalidConfigRootTypeError(ConfigParseError):
    """
    Exceção levantada quando o conteúdo raiz do documento não é um
    dicionário (`dict`).

    Exemplo inválido:
        - just
        - a
        - list

    Limites explícitos:
        - Não tenta normalizar ou encapsular estruturas inválidas
    """


class InvalidDocumentFieldError(ConfigParseError):
    """
    Exceção levantada quando `env_variables` ou `includes` possuem um
    formato incompatível.

    Formatos aceitos:
        - env_variables: mapa de nome → valor escalar
        - includes: lista de caminhos (strings)

    Decisões arquiteturais:
        - Valores aninhados (listas, mapas) em `env_variables` são rejeitados
        - Não existe coerção de listas para strings
    """

# src/gaeenv/__init__.py
"""
gaeenv — exporta as `env_variables` de uma árvore de `app.yaml` para scripts.

Este pacote raiz define o namespace público do gaeenv: um resolvedor
determinístico que expande `includes` recursivamente e produz linhas
`export NAME="VALUE"` prontas para `source` em scripts de startup.

Arquitetura em alto nível:
    - core.config     → parsing de documentos
    - core.resolution → travessia de includes, merge e política de erro
    - export          → renderização das linhas `export`
    - cli             → ponto de entrada de linha de comando

Limites explícitos:
    - Não valida valores de variáveis
    - Não expande referências entre variáveis
    - Não suporta includes remotos
"""

from .core.resolution import ErrorPolicy, Resolver, ResolutionContext, RunResult, resolve_environment
from .export import render_exports

__version__ = "0.1.0"

__all__ = [
    "ErrorPolicy",
    "ResolutionContext",
    "Resolver",
    "RunResult",
    "__version__",
    "render_exports",
    "resolve_environment",
]

# src/gaeenv/settings.py
"""
Configuração de uma execução do gaeenv.

`ResolverSettings` concentra as opções de uma run, já resolvidas a partir
de flags da CLI ou de variáveis de ambiente.

Invariantes:
    - As opções são imutáveis durante a run
    - Nenhuma opção é lida de estado global fora do ponto de entrada
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONFIG_PATH = "app.yaml"

# Variáveis de ambiente aceitas pela CLI como alternativa às flags.
ENV_CONFIG = "GAEENV_CONFIG"
ENV_SILENT = "GAEENV_SILENT"
ENV_FORCE = "GAEENV_FORCE"


@dataclass(frozen=True)
class ResolverSettings:
    """
    Opções de uma run.

    Campos:
        - config_path: documento raiz a resolver
        - silent: suprime diagnósticos de erro
        - force: continua após falhas em vez de abortar
        - verbose: emite o log de eventos estruturado em stderr
    """

    config_path: str = DEFAULT_CONFIG_PATH
    silent: bool = False
    force: bool = False
    verbose: bool = False

# tests/conftest.py
"""
Fixtures compartilhados para testes do gaeenv.

Este módulo define fixtures reutilizáveis que fornecem:
- árvores de documentos `app.yaml` escritas em diretório temporário
- contexto de resolução determinístico (ResolutionContext)
- console rich capturável para inspecionar diagnósticos

Decisões arquiteturais:
    - Documentos são gerados com `yaml.safe_dump` a partir de dicts simples
    - Cada teste recebe seu próprio diretório (`tmp_path`)
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture escreve fora de `tmp_path`
    - Nenhuma fixture depende de variáveis de ambiente
    - Nenhuma fixture executa a CLI

Este módulo existe como infraestrutura de teste e não
como validação funcional do resolvedor.
"""

import io
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import pytest
import yaml


def make_document(
    variables: Optional[Dict[str, str]] = None,
    includes: Optional[List[str]] = None,
) -> str:
    """Serializa um documento `app.yaml` (env_variables + includes)."""
    data: Dict[str, object] = {}
    if variables is not None:
        data["env_variables"] = dict(variables)
    if includes is not None:
        data["includes"] = list(includes)
    return yaml.safe_dump(data, sort_keys=False)


@pytest.fixture
def write_tree(tmp_path: Path):
    """
    Fixture factory que escreve uma árvore de documentos em `tmp_path`.

    Recebe um dict `caminho relativo → conteúdo`, em que o conteúdo pode ser:
        - str: escrito literalmente (permite documentos malformados)
        - dict: {"variables": {...}, "includes": [...]} serializado em YAML

    Returns:
        Callable: função que escreve a árvore e retorna `tmp_path`.
    """

    def _write(files: Dict[str, object]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, dict):
                content = make_document(
                    variables=content.get("variables"),
                    includes=content.get("includes"),
                )
            target.write_text(str(content), encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def err_console():
    """
    Console rich que escreve em memória.

    O conteúdo capturado é acessível via `err_console.file.getvalue()`.
    """
    from rich.console import Console

    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def dummy_ctx():
    """
    ResolutionContext determinístico para testes.

    `run_id` e `created_at` são fixos para garantir reprodutibilidade.
    """
    from gaeenv.core.resolution.context import ResolutionContext

    return ResolutionContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
    )

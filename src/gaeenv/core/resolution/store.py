# src/gaeenv/core/resolution/store.py
"""
Armazenamento das variáveis mescladas de uma run.

Política de merge (v1):
    - `put` sobrescreve incondicionalmente: o último escritor vence
    - Não existe remoção: o store só cresce ou sobrescreve durante a run
    - A precedência pai > filho e irmão posterior > irmão anterior é
      consequência da ordem de escrita definida pelo Resolver
"""

from __future__ import annotations

from typing import Dict, Iterator, Mapping, Optional


class VariableStore:
    """Mapa nome → valor compartilhado por toda a travessia."""

    def __init__(self) -> None:
        self._vars: Dict[str, str] = {}

    def put(self, key: str, value: str) -> None:
        self._vars[key] = value

    def put_all(self, variables: Mapping[str, str]) -> None:
        for key, value in variables.items():
            self.put(key, value)

    def get(self, key: str) -> Optional[str]:
        return self._vars.get(key)

    def snapshot(self) -> Dict[str, str]:
        """Retorna uma cópia independente do conteúdo atual."""
        return dict(self._vars)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

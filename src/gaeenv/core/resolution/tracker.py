# src/gaeenv/core/resolution/tracker.py
"""
Registro de inclusões de uma run.

O `InclusionTracker` mantém o InclusionRecord: o mapa caminho normalizado →
origem (arquivo cujo `includes` provocou o carregamento).

Invariantes:
    - Um caminho aparece no registro no máximo uma vez por run
    - O registro cresce monotonicamente e nunca encolhe
    - A primeira origem registrada para um caminho nunca é sobrescrita

Limites explícitos:
    - Não realiza I/O
    - Não distingue ciclo de diamante: qualquer nova referência é duplicada
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple


class InclusionTracker:
    """Bookkeeping puro dos arquivos visitados e de quem os referenciou."""

    def __init__(self) -> None:
        self._record: Dict[str, str] = {}

    def register(self, origin: str, path: str) -> Tuple[bool, Optional[str]]:
        """
        Registra `path` como carregado a partir de `origin`.

        A verificação e a inserção formam uma única operação: se o caminho já
        estiver presente, o registro permanece inalterado.

        Returns:
            Tuple[bool, Optional[str]]: `(True, origem_anterior)` se o caminho
            já havia sido registrado; `(False, None)` caso contrário.
        """
        if path in self._record:
            return True, self._record[path]
        self._record[path] = origin
        return False, None

    def origin_of(self, path: str) -> Optional[str]:
        return self._record.get(path)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._record)

    def __contains__(self, path: object) -> bool:
        return path in self._record

    def __len__(self) -> int:
        return len(self._record)

# src/gaeenv/core/resolution/resolver.py
"""
Resolver canônico de includes do gaeenv.

Este módulo conduz a travessia recursiva (depth-first) da árvore de
documentos: carrega um arquivo, resolve seus includes e, por último,
mescla suas próprias variáveis.

Política de resolução (v1):
    0. Recusar cadeias além de `max_depth` (→ IncludeDepthExceeded)
    1. Registrar o caminho no InclusionTracker (duplicado → DuplicateInclusion)
    2. Ler o arquivo (ausente → IncludeNotFound; outro erro → IncludeReadFailure)
    3. Decodificar o documento (malformado → DocumentParseFailure)
    4. Resolver cada include, na ordem listada, relativo ao diretório do arquivo
    5. Mesclar as variáveis do próprio arquivo no VariableStore

Precedência resultante:
    - As variáveis de um arquivo sobrescrevem as de qualquer include seu
    - Um include listado depois sobrescreve um include listado antes

Decisões arquiteturais:
    - Cada falha é submetida à ErrorPolicy uma única vez, no frame que a detectou
    - ABORT desenrola toda a recursão com o mesmo ResolveResult, sem retry
    - CONTINUE descarta apenas a subárvore que falhou; irmãos seguem normalmente
    - Nenhuma exceção de resolução escapa do Resolver

Limites explícitos:
    - Não interpreta o formato textual (delegado ao parser)
    - Não encerra o processo
    - Não produz saída
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

from gaeenv.core.config.document import ConfigDocument
from gaeenv.core.config.errors import ConfigParseError
from gaeenv.core.config.parser import parse_document
from gaeenv.core.errors import exception_to_payload
from gaeenv.core.exceptions import (
    DocumentParseFailure,
    DuplicateInclusion,
    IncludeDepthExceeded,
    IncludeNotFound,
    IncludeReadFailure,
    ResolutionError,
)

from .context import ResolutionContext
from .policy import ErrorPolicy
from .types import ROOT_ORIGIN, PolicyOutcome, ResolveResult, ResolveStatus, RunResult

DocumentParser = Callable[[bytes], ConfigDocument]

# profundidade máxima de includes abaixo da raiz (raiz = 0)
DEFAULT_MAX_DEPTH = 256


def normalize_path(path: str) -> str:
    """Forma canônica de um caminho usada como chave do InclusionRecord."""
    return os.path.normpath(str(path))


def include_path(including_file: str, include: str) -> str:
    """Resolve um include relativo ao diretório do arquivo que o declara."""
    return normalize_path(os.path.join(os.path.dirname(including_file), include))


class Resolver:
    """Travessia recursiva de includes sobre um ResolutionContext."""

    operation = "resolve"

    def __init__(
        self,
        *,
        ctx: ResolutionContext,
        policy: ErrorPolicy,
        parser: DocumentParser = parse_document,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.ctx = ctx
        self.policy = policy
        self.parser = parser
        self.max_depth = max_depth

    # ------------------------------------------------------------------
    # Carregamento de um único arquivo (passos 0-3)
    # ------------------------------------------------------------------

    def _load(self, origin: str, path: str, depth: int = 0) -> ConfigDocument:
        if depth > self.max_depth:
            raise IncludeDepthExceeded.create(
                path=path,
                referenced_by=origin,
                max_depth=self.max_depth,
            )

        already_present, previous_origin = self.ctx.tracker.register(origin, path)
        if already_present:
            raise DuplicateInclusion.create(
                path=path,
                origin=previous_origin or "",
                referenced_by=origin,
            )

        try:
            content = Path(path).read_bytes()
        except FileNotFoundError:
            raise IncludeNotFound.create(path=path, referenced_by=origin) from None
        except OSError as e:
            raise IncludeReadFailure.create(
                path=path,
                referenced_by=origin,
                reason=e.strerror or e.__class__.__name__,
            ) from e

        try:
            document = self.parser(content)
        except ConfigParseError as e:
            raise DocumentParseFailure.create(
                path=path,
                referenced_by=origin,
                reason=str(e),
            ) from e

        self.ctx.log(
            file=path,
            level="DEBUG",
            message="file.loaded",
            origin=origin,
            variables=len(document.variables),
            includes=list(document.includes),
        )
        return document

    def _fail(self, path: str, error: ResolutionError) -> ResolveResult:
        payload = exception_to_payload(error)
        self.ctx.record_error(payload)
        self.ctx.log(file=path, level="ERROR", message="file.failed", error=payload.to_dict())

        if self.policy.handle(self.operation, error) == PolicyOutcome.ABORT:
            return ResolveResult(status=ResolveStatus.ABORTED, path=path, error=payload)
        return ResolveResult(status=ResolveStatus.SUCCESS, path=path, error=payload)

    # ------------------------------------------------------------------
    # API pública
    # ------------------------------------------------------------------

    def resolve(self, origin: str, path: str, depth: int = 0) -> ResolveResult:
        """
        Resolve `path` (e, recursivamente, seus includes) no contexto da run.

        Args:
            origin (str): Arquivo que referenciou `path` (ROOT_ORIGIN para a raiz).
            path (str): Caminho do documento a resolver.
            depth (int): Distância de `path` até a raiz da run.

        Returns:
            ResolveResult: SUCCESS, ou ABORTED se a ErrorPolicy decidiu abortar
            em qualquer ponto da subárvore.
        """
        path = normalize_path(path)

        try:
            document = self._load(origin, path, depth)
        except ResolutionError as e:
            return self._fail(path, e)

        for include in document.includes:
            child = self.resolve(path, include_path(path, include), depth + 1)
            if child.aborted:
                return child

        self.ctx.store.put_all(document.variables)
        if document.variables:
            self.ctx.log(
                file=path,
                level="DEBUG",
                message="variables.merged",
                keys=list(document.variables),
            )

        return ResolveResult(status=ResolveStatus.SUCCESS, path=path)

    def run(self, root: str) -> RunResult:
        """Resolve a árvore a partir de `root` e consolida o RunResult."""
        result = self.resolve(ROOT_ORIGIN, root)

        # run abortada não produz saída, nem para variáveis já mescladas
        variables = {} if result.aborted else self.ctx.store.snapshot()

        return RunResult(
            status=result.status,
            root=normalize_path(root),
            variables=variables,
            errors=list(self.ctx.errors),
            files=self.ctx.tracker.snapshot(),
        )


def resolve_environment(
    root: str,
    *,
    silent: bool = False,
    force: bool = False,
    policy: Optional[ErrorPolicy] = None,
    ctx: Optional[ResolutionContext] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> RunResult:
    """
    Ponto de entrada programático: resolve `root` em uma run isolada.

    Args:
        root (str): Caminho do documento raiz.
        silent (bool): Suprime diagnósticos (ignorado se `policy` for fornecida).
        force (bool): Continua após falhas (ignorado se `policy` for fornecida).
        policy (Optional[ErrorPolicy]): Política explícita.
        ctx (Optional[ResolutionContext]): Contexto explícito (novo por padrão).
        max_depth (int): Profundidade máxima de includes abaixo da raiz.

    Returns:
        RunResult: Resultado consolidado da run.
    """
    resolver = Resolver(
        ctx=ctx if ctx is not None else ResolutionContext(),
        policy=policy if policy is not None else ErrorPolicy(silent=silent, force=force),
        max_depth=max_depth,
    )
    return resolver.run(root)

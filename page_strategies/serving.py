"""
Router de requêtes de référence — décide, pour un chemin concret, entre
cache, rendu par requête, revalidation et rendu incrémental.
"""
import logging
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from .build import BuildPipeline
from .core.descriptor import PageDescriptor
from .errors import UnknownPage

log = logging.getLogger(__name__)

RenderSource = Literal["cache", "request", "incremental", "revalidated"]


class RenderResult(BaseModel):
    path: str
    template_path: str
    html: str
    source: RenderSource


class RequestRouter:
    """
    Usage:
        >>> pipeline = BuildPipeline(registry)
        >>> pipeline.build_all()
        >>> router = RequestRouter(pipeline)
        >>> router.handle("/blog/a").source
        'cache'

    Quand build state et request state sont tous deux configurés, seules les props
    de requête sont rendues : l'amalgame éventuel se fait dans le hook de requête.
    """

    def __init__(self, pipeline: BuildPipeline):
        self.pipeline = pipeline
        self.registry = pipeline.registry
        self.store = pipeline.store
        self.resolver = pipeline.resolver

    def handle(self, path: str, now: Optional[datetime] = None) -> RenderResult:
        """
        Rend la réponse d'un chemin concret.

        Raises:
            UnknownPage: aucun template, ou chemin inconnu d'un template non incrémental
        """
        page = self.registry.match(path)
        if page is None:
            raise UnknownPage(path)

        if page.uses_request_state():
            return self._render_for_request(page, path)

        artifact = self.store.get(path)
        if artifact is not None:
            if page.revalidates() and self.resolver.is_rebuild_due(page, artifact.built_at, now):
                log.info("Revalidation de %s", path)
                artifact = self.pipeline.rebuild(path)
                return self._result(page, path, artifact.html, "revalidated")
            return self._result(page, path, artifact.html, "cache")

        if self.resolver.may_render_on_demand(page, path, self.store.paths(page.path)):
            log.info("Rendu incrémental de %s", path)
            artifact = self.pipeline.build_path(
                page, path, persist=self.pipeline.settings.incremental_cache,
            )
            return self._result(page, path, artifact.html, "incremental")

        raise UnknownPage(path)

    def _render_for_request(self, page: PageDescriptor, path: str) -> RenderResult:
        known = self.resolver.concrete_paths(page)
        if path not in known and not self.resolver.may_render_on_demand(page, path, known):
            raise UnknownPage(path)
        props = page.get_request_state(path)
        return self._result(page, path, page.render(props), "request")

    @staticmethod
    def _result(page: PageDescriptor, path: str, html: str, source: RenderSource) -> RenderResult:
        return RenderResult(path=path, template_path=page.path, html=html, source=source)

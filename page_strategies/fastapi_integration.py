"""
Helpers pour intégration FastAPI.
"""
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse

from .build import BuildPipeline, BuildReport
from .config import Settings
from .core.descriptor import PageDescriptor
from .errors import UnknownPage
from .registry import PageRegistry
from .serving import RequestRouter
from .store import ArtifactStore

log = logging.getLogger(__name__)


def create_page_route(
    app: FastAPI,
    page: PageDescriptor,
    request_router: RequestRouter,
    **route_kwargs
):
    """
    Crée les routes FastAPI qui servent un template.

    La racine est toujours servie ; les sous-chemins le sont si le template
    déclare des build paths ou le rendu incrémental.

    Args:
        app: Instance FastAPI
        page: Template à servir
        request_router: Router de requêtes (cache, SSR, revalidation, incrémental)
        **route_kwargs: Arguments additionnels pour app.get()
    """
    def route(request: Request) -> HTMLResponse:
        try:
            result = request_router.handle(request.url.path)
        except UnknownPage as e:
            raise HTTPException(status_code=404, detail=str(e))
        return HTMLResponse(result.html, headers={"X-Render-Source": result.source})

    app.get(page.path, response_class=HTMLResponse, **route_kwargs)(route)
    if page.uses_build_paths() or page.uses_incremental():
        root = page.path.rstrip("/")
        app.get(root + "/{subpath:path}", response_class=HTMLResponse, **route_kwargs)(route)

    return route


class PageRouter:
    """
    Router pour gérer plusieurs templates.

    Usage:
        >>> router = PageRouter()
        >>> router.add_page(PageDescriptor.new("/"))
        >>> router.add_page(PageDescriptor.new("/blog").with_build_paths(list_posts))
        >>> router.build()
        >>> router.register(app)
    """

    def __init__(
        self,
        registry: Optional[PageRegistry] = None,
        store: Optional[ArtifactStore] = None,
        settings: Optional[Settings] = None,
    ):
        self.registry = registry or PageRegistry()
        self.pipeline = BuildPipeline(self.registry, store=store, settings=settings)
        self.requests = RequestRouter(self.pipeline)

    def add_page(self, page: PageDescriptor) -> PageDescriptor:
        """Ajoute un template au router."""
        return self.registry.add(page)

    def build(self) -> BuildReport:
        """Pré-rend tous les templates."""
        return self.pipeline.build_all()

    def register(self, app: FastAPI):
        """Enregistre toutes les routes sur l'app FastAPI (racines les plus longues d'abord)."""
        app.state.page_router = self
        for page in sorted(self.registry, key=lambda p: len(p.path), reverse=True):
            create_page_route(app, page, self.requests)
        log.info("%d template(s) monté(s)", len(self.registry))

"""
page_strategies — capacités de rendu des templates de page et résolution des stratégies.

Usage (descripteur):
    >>> from page_strategies import PageDescriptor, StrategyResolver
    >>> page = PageDescriptor.new("/blog").with_build_paths(lambda: ["/blog/a", "/blog/b"])
    >>> StrategyResolver().classify(page).tags
    [<RenderingStrategy.STATIC_MULTI_PATH: 'static_multi_path'>]

Usage (FastAPI):
    >>> from page_strategies import PageRouter, router
    >>> pages = PageRouter()
    >>> pages.add_page(page)
    >>> pages.build()
    >>> pages.register(app)
    >>> app.include_router(router)
"""

# ── core ────────────────────────────────────────────────────────────────────
from .core.descriptor import PageDescriptor, Props
from .core.durations import parse_duration
from .core.props import PropsCodec
from .errors import PageStrategyError, FeatureNotEnabled, UnknownPage
from .strategy import RenderingStrategy, StrategySet, StrategyResolver

# ── build / requêtes ────────────────────────────────────────────────────────
from .registry import PageRegistry
from .store import Artifact, ArtifactStore, MemoryArtifactStore
from .build import BuildPipeline, BuildReport
from .serving import RequestRouter, RenderResult
from .config import Settings, load_settings, configure_logging

# ── FastAPI ─────────────────────────────────────────────────────────────────
from .fastapi_integration import PageRouter, create_page_route
from .router import router

__version__ = "0.1.0"

__all__ = [
    # core
    "PageDescriptor", "Props", "parse_duration", "PropsCodec",
    "PageStrategyError", "FeatureNotEnabled", "UnknownPage",
    "RenderingStrategy", "StrategySet", "StrategyResolver",
    # build / requêtes
    "PageRegistry", "Artifact", "ArtifactStore", "MemoryArtifactStore",
    "BuildPipeline", "BuildReport", "RequestRouter", "RenderResult",
    "Settings", "load_settings", "configure_logging",
    # FastAPI
    "PageRouter", "create_page_route", "router",
]

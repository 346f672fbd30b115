"""
Pipeline de build de référence — pilote chaque template selon ses stratégies.

Pour chaque template :
1. classe la page (StrategyResolver)
2. énumère les chemins concrets (racine seule ou build paths)
3. obtient les props de build si le template en déclare
4. rend et stocke le résultat, indexé par chemin concret
"""
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .config import Settings, load_settings
from .core.descriptor import PageDescriptor
from .core.props import PropsCodec
from .errors import UnknownPage
from .registry import PageRegistry
from .store import Artifact, ArtifactStore, MemoryArtifactStore
from .strategy import RenderingStrategy, StrategyResolver, StrategySet

log = logging.getLogger(__name__)


class BuildReport(BaseModel):
    """Résultat d'un build complet."""
    built: List[str] = Field(default_factory=list)
    # Templates rendus uniquement à la requête (request state sans build state)
    deferred: List[str] = Field(default_factory=list)
    # Racine du template → message d'erreur
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def _encode_props(props) -> Optional[str]:
    if props is None:
        return None
    if not isinstance(props, BaseModel):
        raise TypeError(
            f"Les props doivent être un modèle Pydantic, reçu {type(props).__name__}"
        )
    return PropsCodec(type(props)).encode(props)


class BuildPipeline:
    """
    Usage:
        >>> pipeline = BuildPipeline(registry)
        >>> report = pipeline.build_all()
        >>> pipeline.store.get("/blog/a").html
    """

    def __init__(
        self,
        registry: PageRegistry,
        store: Optional[ArtifactStore] = None,
        settings: Optional[Settings] = None,
        resolver: Optional[StrategyResolver] = None,
    ):
        self.registry = registry
        self.store = store if store is not None else MemoryArtifactStore()
        self.settings = settings or load_settings()
        self.resolver = resolver or StrategyResolver()

    def build_all(self) -> BuildReport:
        """Construit tous les templates enregistrés."""
        report = BuildReport()
        for page in self.registry:
            strategies = self.resolver.classify(page)
            log.info("Build %s — %s", page.path, ", ".join(s.value for s in strategies.tags))

            if self._is_request_only(page, strategies):
                report.deferred.append(page.path)
                continue

            try:
                artifacts = self.build_template(page)
            except Exception as e:
                log.error("Build échoué pour %s : %s", page.path, e)
                report.errors[page.path] = str(e)
                if self.settings.fail_fast:
                    raise
                continue
            report.built.extend(a.path for a in artifacts)

        log.info("Build terminé — %d page(s), %d erreur(s)", len(report.built), len(report.errors))
        return report

    def build_template(self, page: PageDescriptor) -> List[Artifact]:
        """
        Rend chaque chemin concret d'un template, puis les stocke tous.

        Si un seul rendu échoue, rien n'est stocké : le store reste cohérent
        avec le BuildReport.
        """
        artifacts = [
            self.build_path(page, path, persist=False)
            for path in self.resolver.concrete_paths(page)
        ]
        for artifact in artifacts:
            self.store.put(artifact)
        return artifacts

    def build_path(self, page: PageDescriptor, path: str, persist: bool = True) -> Artifact:
        """
        Rend un chemin concret avec les props de build (si configurées).

        Args:
            page: template propriétaire du chemin
            path: chemin concret
            persist: stocker le résultat dans le store

        Returns:
            Artifact rendu
        """
        props = page.get_build_state(path) if page.uses_build_state() else None
        artifact = Artifact(
            path=path,
            template_path=page.path,
            html=page.render(props),
            props_json=_encode_props(props),
        )
        if persist:
            self.store.put(artifact)
        log.debug("Rendu %s (template %s)", path, page.path)
        return artifact

    def rebuild(self, path: str) -> Artifact:
        """Reconstruit et stocke un chemin concret (revalidation)."""
        page = self.registry.match(path)
        if page is None:
            raise UnknownPage(path)
        return self.build_path(page, path)

    @staticmethod
    def _is_request_only(page: PageDescriptor, strategies: StrategySet) -> bool:
        return (
            strategies.has(RenderingStrategy.REQUEST_RENDERED)
            and not page.uses_build_state()
        )

"""
StrategyResolver — classe un PageDescriptor en stratégies de rendu.

Les stratégies sont des drapeaux orthogonaux, pas un enum unique : une page peut être
à la fois multi-path, incrémentale et revalidée. Le build et le router consultent le
même StrategySet pour piloter la page sans dupliquer la décision.
"""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

from .core.descriptor import PageDescriptor

log = logging.getLogger(__name__)


# ── ENUMS ──────────────────────────────────────────────────────────────

class RenderingStrategy(str, Enum):
    STATIC_BASIC            = "static_basic"
    STATIC_MULTI_PATH       = "static_multi_path"
    STATIC_WITH_BUILD_STATE = "static_with_build_state"
    INCREMENTAL             = "incremental"
    REVALIDATING            = "revalidating"
    REQUEST_RENDERED        = "request_rendered"


class StrategySet(BaseModel):
    """Ensemble des stratégies actives d'une page (un booléen par stratégie)."""

    model_config = ConfigDict(frozen=True)

    static_basic: bool = False
    static_multi_path: bool = False
    static_with_build_state: bool = False
    incremental: bool = False
    revalidating: bool = False
    request_rendered: bool = False

    @property
    def tags(self) -> List[RenderingStrategy]:
        """Stratégies actives, dans l'ordre d'évaluation du resolver."""
        return [s for s in RenderingStrategy if getattr(self, s.value)]

    def has(self, strategy: RenderingStrategy) -> bool:
        return getattr(self, RenderingStrategy(strategy).value)


# ── Chemins ────────────────────────────────────────────────────────────

def path_is_under(root: str, path: str) -> bool:
    """`/blog` couvre `/blog` et `/blog/a`, pas `/blogroll`."""
    if path == root:
        return True
    prefix = root if root.endswith("/") else root + "/"
    return path.startswith(prefix)


def _as_utc(moment: datetime) -> datetime:
    """Une date naïve est interprétée comme UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


# ── Resolver ───────────────────────────────────────────────────────────

class StrategyResolver:
    """
    Logique pure au-dessus des prédicats d'introspection du descripteur.

    Usage:
        >>> resolver = StrategyResolver()
        >>> strategies = resolver.classify(page)
        >>> if strategies.has(RenderingStrategy.INCREMENTAL):
        ...     ...
    """

    def classify(self, page: PageDescriptor) -> StrategySet:
        """
        Classe la page. Ordre d'évaluation : is_basic → build paths/build state
        → incremental → revalidates → request state.

        STATIC_BASIC ne peut pas coexister avec une autre stratégie : is_basic()
        est la négation de tous les autres prédicats.
        """
        if page.is_basic():
            return StrategySet(static_basic=True)

        revalidates = page.revalidates()
        return StrategySet(
            static_multi_path=(
                page.uses_build_paths()
                and not page.uses_build_state()
                and not page.uses_request_state()
                and not revalidates
            ),
            static_with_build_state=page.uses_build_state(),
            incremental=page.uses_incremental(),
            revalidating=revalidates,
            request_rendered=page.uses_request_state(),
        )

    def concrete_paths(self, page: PageDescriptor) -> List[str]:
        """Chemins à pré-rendre : la racine seule sans hook build paths, sinon la sortie du hook."""
        if page.uses_build_paths():
            return page.get_build_paths()
        return [page.path]

    def is_rebuild_due(
        self,
        page: PageDescriptor,
        last_built_at: datetime,
        now: Optional[datetime] = None,
    ) -> bool:
        """
        Décide si une page déjà construite doit être reconstruite.

        - intervalle seul : vrai une fois l'intervalle écoulé depuis le dernier build
        - prédicat seul : le prédicat décide
        - les deux : le prédicat n'est consulté qu'une fois l'intervalle écoulé
        - aucun : jamais
        """
        if not page.revalidates():
            return False

        if page.revalidate_after is not None:
            now = _as_utc(now or datetime.now(timezone.utc))
            if now - _as_utc(last_built_at) < page.revalidate_after:
                return False
            if page.revalidate_check is None:
                return True

        due = page.should_revalidate()
        log.debug("Revalidation %s : prédicat=%s", page.path, due)
        return due

    def may_render_on_demand(
        self,
        page: PageDescriptor,
        path: str,
        known_paths: Iterable[str] = (),
    ) -> bool:
        """
        Un chemin inconnu au build peut-il être rendu à la première requête ?

        `incremental` sans hook build paths équivaut à un hook qui retourne [] :
        tout sous-chemin de la racine est éligible.
        """
        if not page.uses_incremental():
            return False
        if not path_is_under(page.path, path):
            return False
        return path not in set(known_paths)

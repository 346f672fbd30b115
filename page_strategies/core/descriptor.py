"""
PageDescriptor — un template de page et ses capacités de rendu.

Si aucune logique de rendu n'est fournie, la page est pré-rendue au build, sans état.
Chaque hook est un champ callable ; le descripteur est un modèle Pydantic gelé et
chaque appel `with_*` retourne une nouvelle copie (dernier appel gagnant, champ par champ).

Usage:
    >>> page = (
    ...     PageDescriptor[Post].new("/blog")
    ...     .with_build_paths(lambda: ["/blog/a", "/blog/b"])
    ...     .with_build_state(load_post)
    ...     .with_revalidate_after("1h")
    ... )
"""
from datetime import timedelta
from typing import Any, Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import FeatureNotEnabled
from .durations import DurationLike, parse_duration

Props = TypeVar("Props", bound=BaseModel)

TemplateFn = Callable[[Optional[Any]], str]
BuildPathsFn = Callable[[], List[str]]
StateFn = Callable[[str], Any]
RevalidateCheckFn = Callable[[], bool]


def _empty_template(props: Optional[Any] = None) -> str:
    return ""


class PageDescriptor(BaseModel, Generic[Props]):
    """
    Définition d'un template de page.

    Le descripteur est gelé : une fois publié (registry, build, router),
    toute affectation de champ lève une ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Racine du template ; les build paths sont insérés dessous")
    template: TemplateFn = Field(default=_empty_template, description="Rend la page à partir de props optionnelles")
    # Équivalent de `get_static_paths` (NextJS)
    build_paths: Optional[BuildPathsFn] = None
    # Nouveaux chemins rendus à la première requête puis mis en cache
    incremental: bool = False
    # Équivalent de `get_static_props` (NextJS), appelé pour chaque sous-chemin
    build_state: Optional[StateFn] = None
    # Équivalent de `get_server_side_props` (NextJS), appelé à chaque requête
    request_state: Optional[StateFn] = None
    # ISR : si revalidate_after est défini, n'est consulté qu'après l'intervalle
    revalidate_check: Optional[RevalidateCheckFn] = None
    revalidate_after: Optional[timedelta] = None

    @field_validator("revalidate_after", mode="before")
    @classmethod
    def _parse_revalidate_after(cls, v):
        if v is None:
            return v
        return parse_duration(v)

    # ── Construction ────────────────────────────────────────────────────────

    @classmethod
    def new(cls, path: str) -> "PageDescriptor[Props]":
        """Crée un descripteur sans capacité, avec un template qui rend une chaîne vide."""
        return cls(path=path)

    def _with(self, **changes) -> "PageDescriptor[Props]":
        # Revalide la copie entière : un hook non callable ou une durée illisible échoue ici
        return type(self)(**{**dict(self), **changes})

    def with_template(self, fn: TemplateFn) -> "PageDescriptor[Props]":
        return self._with(template=fn)

    def with_build_paths(self, fn: BuildPathsFn) -> "PageDescriptor[Props]":
        return self._with(build_paths=fn)

    def with_incremental(self, enabled: bool = True) -> "PageDescriptor[Props]":
        return self._with(incremental=enabled)

    def with_build_state(self, fn: StateFn) -> "PageDescriptor[Props]":
        return self._with(build_state=fn)

    def with_request_state(self, fn: StateFn) -> "PageDescriptor[Props]":
        return self._with(request_state=fn)

    def with_revalidate_check(self, fn: RevalidateCheckFn) -> "PageDescriptor[Props]":
        return self._with(revalidate_check=fn)

    def with_revalidate_after(self, duration: DurationLike) -> "PageDescriptor[Props]":
        """
        Définit l'intervalle de revalidation.

        Args:
            duration: timedelta, secondes, ou chaîne "1h", "1w2d"...

        Raises:
            ValidationError: durée illisible
        """
        return self._with(revalidate_after=duration)

    # ── Exécution des hooks ─────────────────────────────────────────────────

    def render(self, props: Optional[Props] = None) -> str:
        """Exécute le template (build ou requête). Ne consulte aucune autre capacité."""
        return self.template(props)

    def get_build_paths(self) -> List[str]:
        """Chemins concrets à pré-rendre au build."""
        if self.build_paths is None:
            raise FeatureNotEnabled(self.path, "build_paths")
        return list(self.build_paths())

    def get_build_state(self, path: str) -> Props:
        """
        État initial d'une page au build.

        Args:
            path: chemin complet, la racine ou l'un de ceux de `get_build_paths()`
        """
        if self.build_state is None:
            raise FeatureNotEnabled(self.path, "build_state")
        return self.build_state(path)

    def get_request_state(self, path: str) -> Props:
        """État d'une page pour une requête donnée (SSR)."""
        if self.request_state is None:
            raise FeatureNotEnabled(self.path, "request_state")
        return self.request_state(path)

    def should_revalidate(self) -> bool:
        """Exécute le prédicat de revalidation."""
        if self.revalidate_check is None:
            raise FeatureNotEnabled(self.path, "revalidate_check")
        return bool(self.revalidate_check())

    # ── Caractéristiques de rendu ───────────────────────────────────────────

    def revalidates(self) -> bool:
        return self.revalidate_check is not None or self.revalidate_after is not None

    def uses_incremental(self) -> bool:
        return self.incremental

    def uses_build_paths(self) -> bool:
        return self.build_paths is not None

    def uses_request_state(self) -> bool:
        return self.request_state is not None

    def uses_build_state(self) -> bool:
        return self.build_state is not None

    def is_basic(self) -> bool:
        """Aucune logique de rendu : la page est générée statiquement, sans props."""
        return not (
            self.uses_build_paths()
            or self.uses_build_state()
            or self.uses_request_state()
            or self.revalidates()
            or self.uses_incremental()
        )

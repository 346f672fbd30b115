"""
Erreurs du core page_strategies.
"""


class PageStrategyError(Exception):
    """Erreur de base du package."""


class FeatureNotEnabled(PageStrategyError):
    """
    Levée par un accesseur de capacité quand le hook correspondant n'a jamais été configuré.

    L'appelant doit vérifier le prédicat `uses_*` avant d'appeler l'accesseur :
    si l'erreur remonte malgré tout, c'est un défaut de logique côté appelant,
    fatal pour la page ou la requête en cours (pas de retry).
    """

    def __init__(self, path: str, feature: str):
        self.path = path
        self.feature = feature
        super().__init__(
            f"la fonctionnalité '{feature}' n'est pas activée pour la page '{path}'"
        )


class UnknownPage(PageStrategyError):
    """Aucun template ne sert ce chemin (ou le template refuse le rendu à la demande)."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Page inconnue : {path!r}")

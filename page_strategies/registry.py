"""
Registry des templates de page — racine → PageDescriptor.
"""
import logging
from typing import Dict, Iterator, Optional

from .core.descriptor import PageDescriptor
from .strategy import path_is_under

log = logging.getLogger(__name__)


class PageRegistry:
    """
    Ensemble des templates enregistrés pour l'application.

    Usage:
        >>> registry = PageRegistry()
        >>> registry.add(PageDescriptor.new("/"))
        >>> registry.add(PageDescriptor.new("/blog").with_incremental())
        >>> registry.match("/blog/hello").path
        '/blog'
    """

    def __init__(self):
        self._pages: Dict[str, PageDescriptor] = {}

    def add(self, page: PageDescriptor) -> PageDescriptor:
        """Enregistre un template. Une racine déjà prise lève ValueError."""
        if page.path in self._pages:
            raise ValueError(f"Template déjà enregistré pour {page.path!r}")
        self._pages[page.path] = page
        log.debug("Template enregistré : %s", page.path)
        return page

    def get(self, root: str) -> Optional[PageDescriptor]:
        return self._pages.get(root)

    def match(self, path: str) -> Optional[PageDescriptor]:
        """Template dont la racine est le plus long préfixe (par segment) du chemin."""
        candidates = [p for root, p in self._pages.items() if path_is_under(root, path)]
        if not candidates:
            return None
        return max(candidates, key=lambda p: len(p.path))

    def __iter__(self) -> Iterator[PageDescriptor]:
        return iter(list(self._pages.values()))

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, root: str) -> bool:
        return root in self._pages

"""
Stockage des pages pré-rendues — protocol + implémentation mémoire.
Le format de stockage réel (disque, CDN) reste à la charge de l'hébergeur.
"""
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Artifact(BaseModel):
    """Rendu d'un chemin concret."""
    path: str
    template_path: str
    html: str
    props_json: Optional[str] = Field(default=None, description="Props sérialisées (PropsCodec), None si rendu sans état")
    built_at: datetime = Field(default_factory=_utcnow)


@runtime_checkable
class ArtifactStore(Protocol):
    def get(self, path: str) -> Optional[Artifact]: ...
    def put(self, artifact: Artifact) -> None: ...
    def paths(self, template_path: Optional[str] = None) -> List[str]: ...


class MemoryArtifactStore:
    """Store en mémoire, sûr en accès concurrent."""

    def __init__(self):
        self._artifacts: Dict[str, Artifact] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Artifact]:
        with self._lock:
            return self._artifacts.get(path)

    def put(self, artifact: Artifact) -> None:
        with self._lock:
            self._artifacts[artifact.path] = artifact

    def paths(self, template_path: Optional[str] = None) -> List[str]:
        """Chemins stockés, filtrés par template si demandé."""
        with self._lock:
            return sorted(
                a.path for a in self._artifacts.values()
                if template_path is None or a.template_path == template_path
            )

    def clear(self) -> None:
        with self._lock:
            self._artifacts.clear()

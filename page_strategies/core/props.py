"""
Sérialisation des props — encode/décode un modèle Pydantic vers/depuis JSON.
Le core ne fixe aucun format : le codec est injecté là où il sert (store, build).
"""
from typing import Generic, Optional, Type

from .descriptor import Props


class PropsCodec(Generic[Props]):
    """
    Codec JSON basé sur le modèle Pydantic des props.

    Usage:
        >>> codec = PropsCodec(Post)
        >>> text = codec.encode(Post(title="Hello"))
        >>> codec.decode(text).title
        'Hello'
    """

    def __init__(self, model: Type[Props]):
        self.model = model

    def encode(self, props: Optional[Props]) -> Optional[str]:
        if props is None:
            return None
        return props.model_dump_json()

    def decode(self, text: Optional[str]) -> Optional[Props]:
        if text is None:
            return None
        return self.model.model_validate_json(text)

"""
Registry des blocs : type_id → classe de bloc.
"""
from typing import Dict, Iterator, Optional, Tuple, Type

from .base import Block


class BlockRegistry:

    def __init__(self):
        self._classes: Dict[str, Type[Block]] = {}

    def register(self, block_cls: Type[Block], type_id: Optional[str] = None) -> Type[Block]:
        """Enregistre (ou remplace) une classe de bloc sous son type_id."""
        type_id = type_id or block_cls.type_id
        if not type_id:
            raise ValueError(f"type_id manquant pour {block_cls.__name__}")
        self._classes[type_id] = block_cls
        return block_cls

    def get(self, type_id: str) -> Optional[Type[Block]]:
        return self._classes.get(type_id)

    def items(self) -> Iterator[Tuple[str, Type[Block]]]:
        return iter(list(self._classes.items()))

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._classes

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._classes))

    def __len__(self) -> int:
        return len(self._classes)


def default_registry() -> BlockRegistry:
    """Registry rempli avec tous les blocs livrés par le plugin."""
    from . import BLOCK_CLASSES

    registry = BlockRegistry()
    for block_cls in BLOCK_CLASSES:
        registry.register(block_cls)
    return registry

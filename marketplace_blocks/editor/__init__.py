"""Editor : découverte, enregistrement et rendu des blocs."""
from .bridge import BlockDescriptor, Editor, prepare_options, sanitize_slug
from .errors import UnsupportedOperation
from .registrar import MemoryRegistrar, Registrar

__all__ = [
    "BlockDescriptor",
    "Editor",
    "prepare_options",
    "sanitize_slug",
    "UnsupportedOperation",
    "MemoryRegistrar",
    "Registrar",
]

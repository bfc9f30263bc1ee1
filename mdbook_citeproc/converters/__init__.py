"""Converters: each turns one chapter's markdown into new markdown."""

from mdbook_citeproc.converters.base import DocumentConverter
from mdbook_citeproc.converters.pandoc import PandocConverter

__all__ = ["DocumentConverter", "PandocConverter"]

REGISTRY: dict[str, type[DocumentConverter]] = {
    "pandoc": PandocConverter,
}


def get_converter(name: str) -> type[DocumentConverter]:
    """Return converter class for the given name. Raises KeyError if unknown."""
    if name not in REGISTRY:
        raise KeyError(f"Unknown converter: {name}. Available: {list(REGISTRY)}")
    return REGISTRY[name]

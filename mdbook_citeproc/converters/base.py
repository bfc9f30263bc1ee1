"""Abstract interface for the external converter that rewrites chapter text."""

from abc import ABC, abstractmethod


class DocumentConverter(ABC):
    """Interface that each converter must implement."""

    @abstractmethod
    def convert(self, text: str) -> str:
        """
        Convert one chapter's markdown and return the new markdown.

        - One blocking round trip per call; nothing is cached between calls
        - Raise a ConversionError subclass when the converter cannot be run
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Converter identifier (e.g. 'pandoc')."""
        ...

"""The mdbook preprocessor: settings from book.toml, then every chapter through the converter."""

import logging
from abc import ABC, abstractmethod

from mdbook_citeproc.book import count_chapters, for_each_chapter
from mdbook_citeproc.config import get_pandoc_executable
from mdbook_citeproc.converters import DocumentConverter, get_converter
from mdbook_citeproc.models import Book, Chapter, PandocSettings, PreprocessorContext
from mdbook_citeproc.settings import load_settings, preprocessor_table

log = logging.getLogger(__name__)

PREPROCESSOR_NAME = "citeproc"
UNSUPPORTED_RENDERER = "not-supported"


class Preprocessor(ABC):
    """Interface mdbook expects from a preprocessor."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the [preprocessor.<name>] table in book.toml."""
        ...

    @abstractmethod
    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Return the processed book."""
        ...

    def supports_renderer(self, renderer: str) -> bool:
        return True


class CiteprocPreprocessor(Preprocessor):
    """Rewrites every chapter with pandoc (and citeproc, when citations are transpiled)."""

    def __init__(self, executable: str | None = None, converter: str = "pandoc"):
        self._executable = executable
        self._converter_name = converter

    @property
    def name(self) -> str:
        return PREPROCESSOR_NAME

    def load_settings(self, ctx: PreprocessorContext) -> PandocSettings:
        return load_settings(preprocessor_table(ctx.config, self.name), self.name)

    def make_converter(self, settings: PandocSettings) -> DocumentConverter:
        converter_cls = get_converter(self._converter_name)
        return converter_cls(settings, executable=get_pandoc_executable(self._executable))

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        settings = self.load_settings(ctx)
        return convert_chapters(book, self.make_converter(settings))

    def supports_renderer(self, renderer: str) -> bool:
        return renderer != UNSUPPORTED_RENDERER


def convert_chapters(book: Book, converter: DocumentConverter) -> Book:
    """Replace each chapter's content with the converter's output, one chapter at a time."""

    def _convert(chapter: Chapter) -> None:
        log.debug("converting chapter: %s", chapter.name)
        chapter.content = converter.convert(chapter.content)

    for_each_chapter(book, _convert)
    log.info("%s: converted %d chapters", converter.name, count_chapters(book))
    return book

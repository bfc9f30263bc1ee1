"""
Public API: run the conversion from code, without the mdbook stdin/stdout protocol.

    from mdbook_citeproc import convert_book
    book = convert_book(book, {"footnotes": "transpile"})
"""

from typing import Any, Mapping

from mdbook_citeproc.config import get_pandoc_executable
from mdbook_citeproc.converters import get_converter
from mdbook_citeproc.models import Book
from mdbook_citeproc.preprocessor import convert_chapters
from mdbook_citeproc.settings import load_settings


def convert_book(
    book: Book | Mapping[str, Any],
    table: Mapping[str, Any] | None,
    *,
    executable: str | None = None,
    converter: str = "pandoc",
) -> Book:
    """
    Convert every chapter of a book (library entry point).

    Args:
        book: A Book, or its mdbook JSON form as a dict.
        table: The [preprocessor.citeproc] table as a dict. None raises ConfigMissing.
        executable: pandoc executable; default from $MDBOOK_CITEPROC_PANDOC or 'pandoc'.
        converter: Converter name ('pandoc' default).

    Returns:
        The same Book with each chapter's content replaced.

    Raises:
        ConfigError for bad settings, ConversionError if pandoc cannot be run.
    """
    if not isinstance(book, Book):
        book = Book.model_validate(book)
    settings = load_settings(table)
    converter_cls = get_converter(converter)
    return convert_chapters(book, converter_cls(settings, executable=get_pandoc_executable(executable)))

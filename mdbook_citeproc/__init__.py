"""
mdbook-citeproc: an mdbook preprocessor that runs every chapter through pandoc (and citeproc).

Use as a library:

    from mdbook_citeproc import convert_book
    book = convert_book(book, {"citations": "transpile", "bibliography": "refs.bib",
                               "bibliography-style": "apa.csl"})

Or let mdbook run it, from book.toml:

    [preprocessor.citeproc]
    command = "mdbook-citeproc"
    footnotes = "preserve"
    citations = "transpile"
    bibliography = "refs.bib"
    bibliography-style = "apa.csl"
"""

from mdbook_citeproc.api import convert_book
from mdbook_citeproc.errors import CiteprocError
from mdbook_citeproc.models import Book, PandocSettings, PreprocessorContext

__all__ = [
    "convert_book",
    "Book",
    "CiteprocError",
    "PandocSettings",
    "PreprocessorContext",
]

"""Walking the book tree. Only chapters are handed to callers; separators and part titles are left alone."""

from typing import Callable, Iterable

from mdbook_citeproc.models import Book, BookItem, Chapter, ChapterItem


def for_each_mut(items: Iterable[BookItem], func: Callable[[BookItem], None]) -> None:
    """
    Depth-first walk in mdbook's own order: a chapter's sub-items are visited
    before the chapter itself.
    """
    for item in items:
        if isinstance(item, ChapterItem):
            for_each_mut(item.chapter.sub_items, func)
        func(item)


def for_each_chapter(book: Book, func: Callable[[Chapter], None]) -> None:
    """Call func on every chapter of the book, nested ones included."""

    def _visit(item: BookItem) -> None:
        if isinstance(item, ChapterItem):
            func(item.chapter)

    for_each_mut(book.sections, _visit)


def count_chapters(book: Book) -> int:
    chapters = []
    for_each_chapter(book, chapters.append)
    return len(chapters)

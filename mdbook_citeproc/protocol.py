"""
mdbook's preprocessor protocol: `[context, book]` JSON on stdin, the book as JSON on stdout.
"""

import logging
from typing import IO

import semver
from pydantic import TypeAdapter, ValidationError

from mdbook_citeproc.errors import HostProtocolError
from mdbook_citeproc.models import Book, PreprocessorContext

log = logging.getLogger(__name__)

# mdbook release this preprocessor is written against; any 0.4.x from here on is compatible.
MDBOOK_VERSION = "0.4.40"
VERSION_REQ: tuple[str, ...] = (f">={MDBOOK_VERSION}", "<0.5.0")

_PAYLOAD = TypeAdapter(tuple[PreprocessorContext, Book])


def parse_input(stream: IO[str] | IO[bytes]) -> tuple[PreprocessorContext, Book]:
    """Read and validate the payload mdbook writes to our stdin."""
    raw = stream.read()
    try:
        ctx, book = _PAYLOAD.validate_json(raw)
    except ValidationError as e:
        raise HostProtocolError(f"Unable to parse the input: {e}") from e
    return ctx, book


def parse_version(version: str) -> semver.Version:
    try:
        return semver.Version.parse(version)
    except (TypeError, ValueError) as e:
        raise HostProtocolError(f"Invalid mdbook version {version!r}: {e}") from e


def version_matches(version: str) -> bool:
    """True if `version` satisfies VERSION_REQ. Raises HostProtocolError if it is not semver."""
    parsed = parse_version(version)
    return all(parsed.match(expr) for expr in VERSION_REQ)


def check_version(ctx: PreprocessorContext, name: str) -> bool:
    """Warn (never fail) when mdbook is outside the supported range."""
    if version_matches(ctx.mdbook_version):
        return True
    log.warning(
        "The %s plugin was built against version %s of mdbook, "
        "but we're being called from version %s",
        name,
        MDBOOK_VERSION,
        ctx.mdbook_version,
    )
    return False


def write_output(book: Book, stream: IO[str]) -> None:
    """Serialize the processed book for mdbook."""
    stream.write(book.model_dump_json(by_alias=True))
    stream.flush()

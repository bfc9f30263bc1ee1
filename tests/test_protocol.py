import io
import json
import logging

from conftest import book_json, chapter, context_json

import pytest

from mdbook_citeproc.errors import HostProtocolError
from mdbook_citeproc.models import ChapterItem
from mdbook_citeproc.protocol import (
    MDBOOK_VERSION,
    check_version,
    parse_input,
    version_matches,
    write_output,
)


def payload(table=None, version=MDBOOK_VERSION, book=None):
    book = book or book_json(chapter("Intro", "hello", number=[1]))
    return io.StringIO(json.dumps([context_json(table, version), book]))


def test_parse_input():
    ctx, book = parse_input(payload({"emoji": "preserve"}))
    assert ctx.mdbook_version == MDBOOK_VERSION
    assert ctx.renderer == "html"
    assert ctx.config["preprocessor"]["citeproc"] == {"emoji": "preserve"}
    assert isinstance(book.sections[0], ChapterItem)
    assert book.sections[0].chapter.number == [1]


def test_parse_input_accepts_bytes():
    ctx, _ = parse_input(io.BytesIO(payload().getvalue().encode("utf-8")))
    assert ctx.root == "/tmp/book"


@pytest.mark.parametrize("raw", [
    "",
    "not json",
    "{}",
    "[]",
    '[{"root": "/"}]',
    '[{"root": "/", "config": {}, "renderer": "html"}, {"sections": []}]',
    '[{"mdbook_version": "0.4.40"}, {"sections": ["Chapter"]}]',
])
def test_parse_input_rejects_malformed_payload(raw):
    with pytest.raises(HostProtocolError):
        parse_input(io.StringIO(raw))


def test_write_output_round_trips_non_chapter_items():
    sections = [
        chapter("Intro", "hello", number=[1], extra_field={"kept": True}),
        "Separator",
        {"PartTitle": "Part One"},
        chapter("Draft", "", sub_items=[chapter("Sub", "s", number=[2, 1])], path=None, source_path=None),
    ]
    _, book = parse_input(payload(book=book_json(*sections)))
    out = io.StringIO()
    write_output(book, out)
    data = json.loads(out.getvalue())

    assert data["__non_exhaustive"] is None
    assert data["sections"][1] == "Separator"
    assert data["sections"][2] == {"PartTitle": "Part One"}
    assert data["sections"][0] == sections[0]
    assert data["sections"][3] == sections[3]


@pytest.mark.parametrize("version,expected", [
    ("0.4.40", True),
    ("0.4.52", True),
    ("0.4.39", False),
    ("0.3.7", False),
    ("0.5.0", False),
    ("1.0.0", False),
])
def test_version_matches(version, expected):
    assert version_matches(version) is expected


@pytest.mark.parametrize("version", ["", "latest", "0.4", "0.4.x"])
def test_malformed_version_is_a_protocol_error(version):
    with pytest.raises(HostProtocolError):
        version_matches(version)


def test_check_version_warns_but_does_not_fail(caplog):
    caplog.set_level(logging.WARNING)
    ctx, _ = parse_input(payload(version="0.3.7"))
    assert check_version(ctx, "citeproc") is False
    assert "built against version 0.4.40 of mdbook" in caplog.text
    assert "called from version 0.3.7" in caplog.text


def test_check_version_quiet_when_compatible(caplog):
    caplog.set_level(logging.WARNING)
    ctx, _ = parse_input(payload())
    assert check_version(ctx, "citeproc") is True
    assert caplog.text == ""

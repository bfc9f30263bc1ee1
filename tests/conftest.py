import logging
import os
from pathlib import Path

import pytest


def chapter(name, content, sub_items=None, number=None, **extra):
    data = {
        "name": name,
        "content": content,
        "number": number,
        "sub_items": sub_items or [],
        "path": f"{name.lower()}.md",
        "source_path": f"{name.lower()}.md",
        "parent_names": [],
    }
    data.update(extra)
    return {"Chapter": data}


def book_json(*sections):
    return {"sections": list(sections), "__non_exhaustive": None}


def context_json(table=None, version="0.4.40"):
    config = {"book": {"title": "Test book"}}
    if table is not None:
        config["preprocessor"] = {"citeproc": table}
    return {
        "root": "/tmp/book",
        "config": config,
        "renderer": "html",
        "mdbook_version": version,
    }


@pytest.fixture
def fake_pandoc(tmp_path: Path, monkeypatch):
    """Write a fake `pandoc` shell script to tmp_path/bin and put it first on PATH.

    The script appends its arguments (one per line) and a `---` separator to
    `calls.log`, then runs `body` with the chapter on stdin.
    """

    def _fake_pandoc(body: str = "tr '[:lower:]' '[:upper:]'") -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        log_file = tmp_path / "calls.log"
        exe = bin_dir / "pandoc"
        exe.write_text(
            "#!/bin/sh\n"
            f"printf '%s\\n' \"$@\" >> '{log_file}'\n"
            f"echo --- >> '{log_file}'\n"
            f"{body}\n"
        )
        exe.chmod(exe.stat().st_mode | 0o111)
        monkeypatch.setenv("PATH", str(bin_dir) + os.pathsep + os.environ.get("PATH", ""))
        monkeypatch.delenv("MDBOOK_CITEPROC_PANDOC", raising=False)
        return exe

    return _fake_pandoc


@pytest.fixture
def pandoc_calls(tmp_path: Path):
    """Return the recorded invocations as a list of argument lists."""

    def _calls() -> list[list[str]]:
        log_file = tmp_path / "calls.log"
        if not log_file.exists():
            return []
        calls, current = [], []
        for line in log_file.read_text().splitlines():
            if line == "---":
                calls.append(current)
                current = []
            else:
                current.append(line)
        return calls

    return _calls


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

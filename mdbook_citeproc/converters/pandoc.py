"""Pandoc converter: one pandoc process per chapter, markdown in on stdin, markdown out on stdout."""

import logging
import subprocess

from mdbook_citeproc.config import DEFAULT_PANDOC
from mdbook_citeproc.converters.base import DocumentConverter
from mdbook_citeproc.errors import ProcessIoFailed, ProcessSpawnFailed
from mdbook_citeproc.models import BibliographyConfig, PandocSettings

log = logging.getLogger(__name__)


def citeproc_args(bibliography: BibliographyConfig) -> list[str]:
    """Arguments that make pandoc render citations against a bibliography."""
    return [
        f"--csl={bibliography.bibliography_style}",
        f"--bibliography={bibliography.bibliography}",
        "--metadata=link-citations",
        "--metadata=link-bibliography",
        "--citeproc",
    ]


class PandocConverter(DocumentConverter):
    """Runs pandoc with the flags compiled from book.toml. Settings never change between chapters."""

    def __init__(self, settings: PandocSettings, executable: str | None = None):
        self._settings = settings
        self.executable = executable or DEFAULT_PANDOC

    @property
    def name(self) -> str:
        return "pandoc"

    @property
    def settings(self) -> PandocSettings:
        return self._settings

    def command(self) -> list[str]:
        """Full argv for one invocation."""
        flags = self._settings.flags
        cmd = [self.executable, flags.from_arg, flags.to_arg]
        if self._settings.bibliography is not None:
            cmd.extend(citeproc_args(self._settings.bibliography))
        return cmd

    def convert(self, text: str) -> str:
        cmd = self.command()
        log.debug("running: %s", " ".join(cmd))
        try:
            # Unbuffered stdin: a failed write leaves nothing behind for close() to flush.
            proc = subprocess.Popen(
                cmd, stdin=subprocess.PIPE, stdout=subprocess.PIPE, bufsize=0
            )
        except OSError as e:
            raise ProcessSpawnFailed(self.executable, e) from e

        with proc:
            if proc.stdin is None:
                proc.kill()
                raise ProcessIoFailed(self.executable, "stdin not available")
            try:
                _write_all(proc.stdin, text.encode("utf-8"))
                proc.stdin.close()
            except OSError as e:
                proc.kill()
                raise ProcessIoFailed(self.executable, e) from e
            output = proc.stdout.read()
            returncode = proc.wait()

        if returncode != 0:
            # Output is still used; pandoc's own stderr has the details.
            log.warning("%s exited with code %d", self.executable, returncode)
        return output.decode("utf-8", errors="replace")


def _write_all(stream, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = stream.write(view)
        view = view[written:]

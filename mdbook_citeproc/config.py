"""
Runtime knobs read from the environment. book.toml settings live in settings.py.

    MDBOOK_CITEPROC_PANDOC   converter executable (default: pandoc on PATH)
    MDBOOK_CITEPROC_LOG      log level name (DEBUG, INFO, WARNING, ...)
"""

import logging
import os

PANDOC_ENV_VAR = "MDBOOK_CITEPROC_PANDOC"
LOG_LEVEL_ENV_VAR = "MDBOOK_CITEPROC_LOG"
DEFAULT_PANDOC = "pandoc"
DEFAULT_LOG_LEVEL = logging.INFO


def get_pandoc_executable(override: str | None = None) -> str:
    """Executable to run for each chapter. Explicit override wins; else env; else 'pandoc'."""
    if override:
        return override
    return os.environ.get(PANDOC_ENV_VAR) or DEFAULT_PANDOC


def get_log_level(verbose: bool = False) -> int:
    """DEBUG when verbose; else the level named in the env; else INFO. Unknown names fall back to INFO."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    level = logging.getLevelName(name) if name else DEFAULT_LOG_LEVEL
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL

"""
Settings: read the preprocessor table from book.toml and turn it into pandoc arguments.

    [preprocessor.citeproc]
    footnotes = "preserve"
    citations = "transpile"
    bibliography = "refs.bib"
    bibliography-style = "apa.csl"

Every mentioned feature is always read with its extension enabled (`--from=...+name`).
On output the extension stays enabled for "preserve" (`+name`) and is disabled for
"transpile" (`-name`), so pandoc re-emits the construct in plain markdown_strict.
Features that are not mentioned produce no flags at all.
"""

import logging
from typing import Any, Mapping

from mdbook_citeproc.errors import ConfigMissing, IncompleteBibliography, InvalidFeatureValue
from mdbook_citeproc.models import (
    BibliographyConfig,
    CompiledFlags,
    FeatureMode,
    PandocSettings,
    SettingsTable,
)

log = logging.getLogger(__name__)

BASE_FORMAT = "markdown_strict"

# Flag order follows this tuple, not the order of keys in book.toml.
FEATURE_NAMES: tuple[str, ...] = (
    "backtick_code_blocks",
    "bracketed_spans",
    "citations",
    "definition_lists",
    "emoji",
    "fenced_code_attributes",
    "fenced_code_blocks",
    "fenced_divs",
    "footnotes",
    "hard_line_breaks",
    "inline_notes",
    "mark",
    "markdown_in_html_blocks",
    "link_attributes",
)

BIBLIOGRAPHY_KEY = "bibliography"
BIBLIOGRAPHY_STYLE_KEY = "bibliography-style"


def preprocessor_table(config: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    """Return `config["preprocessor"][name]`. Raises ConfigMissing if there is none."""
    preprocessors = config.get("preprocessor")
    if not isinstance(preprocessors, Mapping):
        raise ConfigMissing(name)
    table = preprocessors.get(name)
    if not isinstance(table, Mapping):
        raise ConfigMissing(name)
    return table


def parse_mode(feature: str, value: Any) -> FeatureMode:
    """Resolve one config value. Non-strings and "" mean preserve."""
    if not isinstance(value, str) or value == "":
        return FeatureMode.PRESERVE
    try:
        return FeatureMode(value)
    except ValueError:
        raise InvalidFeatureValue(feature, value) from None


def resolve_settings(table: Mapping[str, Any]) -> SettingsTable:
    """Build the feature -> mode table for the features present in `table`."""
    return {
        feature: parse_mode(feature, table[feature])
        for feature in FEATURE_NAMES
        if feature in table
    }


def compile_flags(settings: SettingsTable) -> CompiledFlags:
    """Compose the `--from` and `--to` arguments from a settings table."""
    from_arg = f"--from={BASE_FORMAT}"
    to_arg = f"--to={BASE_FORMAT}"
    for feature in FEATURE_NAMES:
        mode = settings.get(feature)
        if mode is None:
            continue
        from_arg += f"+{feature}"
        to_arg += f"-{feature}" if mode is FeatureMode.TRANSPILE else f"+{feature}"
    return CompiledFlags(from_arg=from_arg, to_arg=to_arg)


def resolve_bibliography(
    settings: SettingsTable, table: Mapping[str, Any]
) -> BibliographyConfig | None:
    """
    Only citations = "transpile" turns on citeproc; then both bibliography keys are required.
    In any other case the bibliography keys are ignored.
    """
    if settings.get("citations") is not FeatureMode.TRANSPILE:
        return None
    bibliography = table.get(BIBLIOGRAPHY_KEY)
    style = table.get(BIBLIOGRAPHY_STYLE_KEY)
    if not isinstance(bibliography, str) or not isinstance(style, str):
        raise IncompleteBibliography()
    return BibliographyConfig(bibliography=bibliography, bibliography_style=style)


def load_settings(table: Mapping[str, Any] | None, name: str = "citeproc") -> PandocSettings:
    """Resolve features, flags and bibliography for one run."""
    if table is None:
        raise ConfigMissing(name)
    features = resolve_settings(table)
    flags = compile_flags(features)
    bibliography = resolve_bibliography(features, table)
    log.debug("pandoc flags: %s %s", flags.from_arg, flags.to_arg)
    if bibliography is not None:
        log.debug(
            "citeproc enabled: bibliography=%s style=%s",
            bibliography.bibliography,
            bibliography.bibliography_style,
        )
    return PandocSettings(features=features, flags=flags, bibliography=bibliography)

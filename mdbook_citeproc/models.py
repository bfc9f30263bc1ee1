"""Data models for the mdbook payload and the resolved pandoc settings."""

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class FeatureMode(str, Enum):
    """What to do with a markdown extension on output."""

    PRESERVE = "preserve"
    TRANSPILE = "transpile"


# Feature name -> mode, only for features mentioned in book.toml.
SettingsTable = dict[str, FeatureMode]


class CompiledFlags(BaseModel):
    """The two pandoc format arguments shared by every chapter."""

    from_arg: str = Field(description="e.g. --from=markdown_strict+footnotes")
    to_arg: str = Field(description="e.g. --to=markdown_strict-footnotes")

    model_config = ConfigDict(frozen=True)


class BibliographyConfig(BaseModel):
    """Bibliography and CSL style paths, passed to pandoc verbatim."""

    bibliography: str = Field(description="Path to the bibliography file (e.g. refs.bib)")
    bibliography_style: str = Field(description="Path to the CSL style file (e.g. apa.csl)")

    model_config = ConfigDict(frozen=True)


class PandocSettings(BaseModel):
    """Everything resolved from book.toml, computed once per run."""

    features: SettingsTable = Field(default_factory=dict)
    flags: CompiledFlags
    bibliography: BibliographyConfig | None = Field(
        default=None,
        description="Only set when citations = \"transpile\"",
    )

    model_config = ConfigDict(frozen=True)


# ── mdbook payload ─────────────────────────────────────


class Chapter(BaseModel):
    """One chapter of the book. Unknown keys survive the round trip."""

    name: str = ""
    content: str = ""
    number: list[int] | None = None
    sub_items: list["BookItem"] = Field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class ChapterItem(BaseModel):
    chapter: Chapter = Field(alias="Chapter")

    model_config = ConfigDict(populate_by_name=True)


class PartTitleItem(BaseModel):
    part_title: str = Field(alias="PartTitle")

    model_config = ConfigDict(populate_by_name=True)


BookItem = Union[ChapterItem, PartTitleItem, Literal["Separator"]]

Chapter.model_rebuild()
ChapterItem.model_rebuild()


class Book(BaseModel):
    """The book as mdbook hands it to preprocessors."""

    sections: list[BookItem] = Field(default_factory=list)
    non_exhaustive: None = Field(default=None, alias="__non_exhaustive")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class PreprocessorContext(BaseModel):
    """First element of the payload: where and how mdbook is running us."""

    root: str = ""
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = ""
    mdbook_version: str

    model_config = ConfigDict(extra="allow")

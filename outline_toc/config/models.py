"""Typed dataclasses describing outline_toc configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import (
    BODY_SELECTOR,
    DEFAULT_ITEM_TEMPLATE,
    DEFAULT_PREFIX,
    DEFAULT_SUFFIX,
    HEADING_SELECTOR,
    MARKDOWN_SUFFIXES,
    MARKER_LABEL,
    TOC_SELECTOR,
)


def is_markdown_path(path: Path) -> bool:
    """Return ``True`` when ``path`` names a Markdown source."""
    return path.suffix.lower() in MARKDOWN_SUFFIXES


class TocConfigError(ValueError):
    """Raised when the TOC configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class TocMarkup:
    """Markup wrapped around and repeated for each TOC item."""

    prefix: str = DEFAULT_PREFIX
    suffix: str = DEFAULT_SUFFIX
    item: str = DEFAULT_ITEM_TEMPLATE


@dc.dataclass(slots=True)
class TocSettings:
    """Settings consumed by the numbering and rendering core.

    Attributes
    ----------
    root_section_id : str
        Identifier placed in front of every section number.
    max_toc_depth : int
        Deepest TOC depth rendered into the container markup.
    markup : TocMarkup
        Container prefix/suffix and the per-item template.
    marker_label : str
        Label shown before the section number inside each heading.
    """

    root_section_id: str = "1"
    max_toc_depth: int = 3
    markup: TocMarkup = dc.field(default_factory=TocMarkup)
    marker_label: str = MARKER_LABEL

    def __post_init__(self) -> None:
        if self.max_toc_depth < 1:
            msg = f"max_toc_depth must be at least 1, got {self.max_toc_depth}."
            raise TocConfigError(msg)


@dc.dataclass(slots=True)
class DocumentConfig:
    """A fully resolved document entry sourced from YAML config."""

    key: str
    input_path: Path
    output_path: Path
    title: str
    toc_selector: str = TOC_SELECTOR
    body_selector: str = BODY_SELECTOR
    heading_selector: str = HEADING_SELECTOR
    pygments_style: str = "monokai"
    settings: TocSettings = dc.field(default_factory=TocSettings)

    @property
    def is_markdown(self) -> bool:
        """Return ``True`` when the input needs rendering from Markdown."""
        return is_markdown_path(self.input_path)


@dc.dataclass(slots=True)
class TocSiteConfig:
    """Collection of document configs alongside shared defaults."""

    documents: dict[str, DocumentConfig]
    default_document: str | None = None

    def get_document(self, key: str | None) -> DocumentConfig:
        """Return the requested document or fall back to the configured default."""
        if key is None:
            return self._get_default_document()
        try:
            return self.documents[key]
        except KeyError as exc:
            available = ", ".join(sorted(self.documents))
            msg = f"Unknown document '{key}'. Known documents: {available}"
            raise KeyError(msg) from exc

    def _get_default_document(self) -> DocumentConfig:
        """Return the configured default document or the first defined one."""
        if self.default_document and self.default_document in self.documents:
            return self.documents[self.default_document]
        if not self.documents:  # pragma: no cover - configuration error
            msg = "No documents configured."
            raise TocConfigError(msg)
        first_key = next(iter(self.documents))
        return self.documents[first_key]


__all__ = [
    "DocumentConfig",
    "TocConfigError",
    "TocMarkup",
    "TocSettings",
    "TocSiteConfig",
    "is_markdown_path",
]

"""Shared dataclasses passed between the TOC pipeline stages."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .numbering import CounterState, parse_tag_depth

if typ.TYPE_CHECKING:
    from bs4 import Tag


@dc.dataclass(frozen=True, slots=True)
class HeadingRecord:
    """A heading as found in the document, before numbering.

    Attributes
    ----------
    tag : str
        Upper-case tag name, for example ``"H2"``.
    tag_depth : int
        Depth parsed from ``tag``.
    text : str
        Whitespace-normalized heading text.
    element_id : str
        ``id`` attribute of the heading element; may be empty.
    sequence_index : int
        Zero-based position of the heading in document order.
    """

    tag: str
    tag_depth: int
    text: str
    element_id: str
    sequence_index: int

    @classmethod
    def from_tag(
        cls, tag: str, *, text: str, element_id: str, sequence_index: int
    ) -> HeadingRecord:
        """Build a record, deriving ``tag_depth`` from ``tag``.

        Raises
        ------
        InvalidHeadingTag
            If ``tag`` is not a heading tag.
        """
        return cls(
            tag=tag.upper(),
            tag_depth=parse_tag_depth(tag),
            text=text,
            element_id=element_id,
            sequence_index=sequence_index,
        )


@dc.dataclass(slots=True)
class DocumentHeading:
    """A :class:`HeadingRecord` paired with the element it was read from."""

    record: HeadingRecord
    element: Tag


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """One numbered heading, ready to be rendered as a TOC item."""

    section_id: str
    toc_depth: int
    text: str
    element_id: str
    tag: str
    sequence_index: int


@dc.dataclass(slots=True)
class TocBuild:
    """Outcome of numbering and rendering one document's headings.

    Attributes
    ----------
    entries : list[TocEntry]
        Every numbered heading, including those filtered out of the markup.
    markup : str | None
        Rendered container markup, or ``None`` when there were no headings.
    state : CounterState | None
        Counter state after the last heading, or ``None`` when empty.
    """

    entries: list[TocEntry]
    markup: str | None
    state: CounterState | None = None

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the document had no headings."""
        return not self.entries


__all__ = ["DocumentHeading", "HeadingRecord", "TocBuild", "TocEntry"]

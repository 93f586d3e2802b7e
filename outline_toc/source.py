r"""Extract heading records from parsed HTML in document order.

Headings are located with a CSS selector (``h1,h2,h3,h4,h5,h6`` by default)
beneath a body element and returned as :class:`DocumentHeading` pairs, so the
generator can number the :class:`HeadingRecord` and annotate the matching
element.

Example
-------
>>> from bs4 import BeautifulSoup
>>> from outline_toc.source import extract_headings
>>> soup = BeautifulSoup("<h1>Intro</h1><h2 id='x'>Details</h2>", "html.parser")
>>> [(h.record.tag, h.record.element_id) for h in extract_headings(soup)]
[('H1', 'intro'), ('H2', 'x')]
"""

from __future__ import annotations

import copy
import re
import typing as typ

from ._constants import HEADING_SELECTOR, MARKER_OUTER_CLASS
from .models import DocumentHeading, HeadingRecord

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4 import Tag


def _slugify(title: str) -> str:
    """Convert heading text into a lowercase hyphen-separated slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug or "section"


def _unique_slug(base: str, used: set[str]) -> str:
    """Generate a unique slug, appending numeric suffixes when needed."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


def heading_text(element: Tag) -> str:
    """Return the whitespace-normalized text of ``element``.

    Any section marker added by an earlier run is ignored so the text is
    stable when the same document is processed twice.
    """
    clone = copy.copy(element)
    for marker in clone.select(f".{MARKER_OUTER_CLASS}"):
        marker.decompose()
    return " ".join(clone.get_text(" ").split())


def _document_root(element: Tag) -> Tag:
    """Return the outermost ancestor of ``element`` (the soup itself)."""
    root = element
    while root.parent is not None:
        root = root.parent
    return root


def extract_headings(
    body: Tag,
    selector: str = HEADING_SELECTOR,
    *,
    assign_ids: bool = True,
    reserved_ids: cabc.Iterable[str] = (),
) -> list[DocumentHeading]:
    """Return the headings beneath ``body`` in document order.

    Parameters
    ----------
    body : Tag
        Element (or whole ``BeautifulSoup`` document) to search.
    selector : str, optional
        CSS selector matching heading elements.
    assign_ids : bool, optional
        When ``True`` (default), headings without an ``id`` receive a unique
        slug derived from their text so TOC links resolve.
    reserved_ids : Iterable[str], optional
        Ids that generated slugs must avoid besides those already present
        anywhere in ``body``'s document, such as ids in TOC markup that is
        not installed yet.

    Returns
    -------
    list[DocumentHeading]
        One entry per matched element. Empty when no headings match.

    Raises
    ------
    InvalidHeadingTag
        If the selector matches an element that is not ``h1``–``h9``. No
        element is modified in that case.
    """
    elements = body.select(selector)
    root = _document_root(body)
    used_ids = {str(tag["id"]) for tag in root.select("[id]")}
    used_ids.update(reserved_ids)
    if body.has_attr("id"):
        used_ids.add(str(body["id"]))

    headings: list[DocumentHeading] = []
    generated: list[DocumentHeading] = []
    for index, element in enumerate(elements):
        text = heading_text(element)
        element_id = str(element.get("id") or "")
        is_generated = not element_id and assign_ids
        if is_generated:
            element_id = _unique_slug(_slugify(text), used_ids)
        record = HeadingRecord.from_tag(
            element.name,
            text=text,
            element_id=element_id,
            sequence_index=index,
        )
        heading = DocumentHeading(record=record, element=element)
        headings.append(heading)
        if is_generated:
            generated.append(heading)

    for heading in generated:
        heading.element["id"] = heading.record.element_id
    return headings


__all__ = ["extract_headings", "heading_text"]

"""Mark heading elements with their computed section numbers.

The marker prepended to each heading is a fixed label followed by the section
id broken into one span per dot-separated segment, so each outline depth can
be styled on its own::

    <span class="heading-section-outer">
      <span class="heading-section-prefix">Section</span>
      <span class="heading-section-id">
        <span class="sid-1">2<span class="sid-dot">.</span></span>
        <span class="sid-2">1</span>
      </span>
    </span>

(whitespace added for readability; the generated markup has none).
"""

from __future__ import annotations

import typing as typ
from html import escape

from bs4 import BeautifulSoup

from ._constants import (
    ANNOTATED_ATTRIBUTE,
    MARKER_ID_CLASS,
    MARKER_LABEL,
    MARKER_OUTER_CLASS,
    MARKER_PREFIX_CLASS,
    SEGMENT_CLASS_TEMPLATE,
    SEGMENT_DOT_CLASS,
)

if typ.TYPE_CHECKING:
    from bs4 import Tag


def per_number_markup(section_id: str) -> str:
    """Wrap each segment of ``section_id`` in a depth-indexed span.

    Examples
    --------
    >>> html = per_number_markup("2.1")
    >>> html.startswith('<span class="sid-1">2<span class="sid-dot">')
    True
    """
    segments = section_id.split(".")
    parts: list[str] = []
    for depth, segment in enumerate(segments, start=1):
        css_class = SEGMENT_CLASS_TEMPLATE.format(depth=depth)
        dot = ""
        if depth < len(segments):
            dot = f'<span class="{SEGMENT_DOT_CLASS}">.</span>'
        parts.append(f'<span class="{css_class}">{escape(segment)}{dot}</span>')
    return "".join(parts)


def section_marker_markup(section_id: str, label: str = MARKER_LABEL) -> str:
    """Return the full marker markup for ``section_id``."""
    return (
        f'<span class="{MARKER_OUTER_CLASS}">'
        f'<span class="{MARKER_PREFIX_CLASS}">{escape(label)}</span>'
        f'<span class="{MARKER_ID_CLASS}">{per_number_markup(section_id)}</span>'
        "</span>"
    )


class HeadingAnnotator:
    """Prepend section markers to heading elements, at most once each."""

    def __init__(self, label: str = MARKER_LABEL) -> None:
        """Initialize the annotator with the label shown before each number."""
        self.label = label
        # Keyed by id() but holding the element, so a key is never recycled
        # while it is tracked.
        self._annotated: dict[int, Tag] = {}

    def is_annotated(self, element: Tag) -> bool:
        """Return ``True`` if ``element`` already carries a section marker."""
        if self._annotated.get(id(element)) is element:
            return True
        return element.has_attr(ANNOTATED_ATTRIBUTE)

    def reset(self) -> None:
        """Forget the elements annotated so far, releasing their documents."""
        self._annotated.clear()

    def annotate(self, element: Tag, section_id: str) -> bool:
        """Prepend the marker for ``section_id`` to ``element``.

        Parameters
        ----------
        element : Tag
            Heading element to mutate.
        section_id : str
            Dotted section identifier computed for the heading.

        Returns
        -------
        bool
            ``True`` when the element was changed, ``False`` when it had
            already been annotated (by this annotator or an earlier run over
            the same document).
        """
        if self.is_annotated(element):
            return False
        self._annotated[id(element)] = element
        element[ANNOTATED_ATTRIBUTE] = "true"

        fragment = BeautifulSoup(
            section_marker_markup(section_id, self.label), "html.parser"
        )
        marker = fragment.find("span")
        if marker is not None:
            element.insert(0, marker.extract())
        return True


__all__ = ["HeadingAnnotator", "per_number_markup", "section_marker_markup"]

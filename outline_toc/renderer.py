"""Render numbered headings into table-of-contents markup."""

from __future__ import annotations

import typing as typ
from html import escape

from .templating import substitute

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import TocMarkup
    from .models import TocEntry


class TocRenderer:
    """Turn :class:`~outline_toc.models.TocEntry` sequences into markup."""

    def __init__(self, markup: TocMarkup, max_toc_depth: int) -> None:
        """Initialize a renderer with container markup and a depth limit.

        Parameters
        ----------
        markup : TocMarkup
            Container prefix/suffix and the item template holding any of the
            ``{link}``, ``{tag}``, ``{id}``, ``{text}``, ``{section}`` and
            ``{depth}`` placeholders.
        max_toc_depth : int
            Entries deeper than this are left out of the rendered markup.
        """
        self.markup = markup
        self.max_toc_depth = max_toc_depth

    def render(self, entries: cabc.Iterable[TocEntry]) -> str:
        """Return the container markup for every entry within the depth limit."""
        items = [
            self.render_item(entry) for entry in entries if self.includes(entry)
        ]
        return f"{self.markup.prefix}{''.join(items)}{self.markup.suffix}"

    def includes(self, entry: TocEntry) -> bool:
        """Return ``True`` when ``entry`` is shallow enough to be listed."""
        return entry.toc_depth <= self.max_toc_depth

    def render_item(self, entry: TocEntry) -> str:
        """Substitute one entry into the item template."""
        return substitute(self.markup.item, item_values(entry))


def item_values(entry: TocEntry) -> dict[str, str]:
    """Return the placeholder values for ``entry`` with text fields escaped."""
    return {
        "link": escape(f"#{entry.element_id}", quote=True),
        "tag": entry.tag,
        "id": str(entry.sequence_index),
        "text": escape(entry.text, quote=True),
        "section": entry.section_id,
        "depth": str(entry.toc_depth),
    }


def render_toc(
    entries: cabc.Iterable[TocEntry], max_toc_depth: int, markup: TocMarkup
) -> str:
    """Render ``entries`` with a one-off :class:`TocRenderer`."""
    return TocRenderer(markup, max_toc_depth).render(entries)


__all__ = ["TocRenderer", "item_values", "render_toc"]

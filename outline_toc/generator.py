"""High-level orchestration for table-of-contents generation.

This module drives a document's headings through the section numberer, the
heading annotator and the TOC renderer. :func:`build_toc` is the pure core
that turns heading records into entries and markup. :class:`TocGenerator`
applies it to a parsed HTML document: it finds the TOC and body containers,
annotates every heading, installs the rendered markup (or flags an empty
TOC), and reads and writes the documents named in a
:class:`~outline_toc.config.DocumentConfig`.

Example
-------
>>> from pathlib import Path
>>> from outline_toc.config import load_toc_config
>>> from outline_toc.generator import TocGenerator
>>> config = load_toc_config(Path("toc.yaml"))  # doctest: +SKIP
>>> TocGenerator(config.get_document("guide")).run()  # doctest: +SKIP
PosixPath('public/guide.html')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from bs4 import BeautifulSoup

from ._constants import EMPTY_TOC_CLASS, SECTION_ID_ATTRIBUTE
from .annotator import HeadingAnnotator
from .config import is_markdown_path
from .markdown_page import MarkdownPageBuilder
from .models import TocBuild, TocEntry
from .numbering import advance, initial_state
from .renderer import TocRenderer
from .source import extract_headings

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from bs4 import Tag

    from .config import DocumentConfig, TocMarkup, TocSettings
    from .models import HeadingRecord

log = logging.getLogger(__name__)


def build_toc(
    headings: cabc.Sequence[HeadingRecord], settings: TocSettings
) -> TocBuild:
    """Number ``headings`` and render the TOC markup.

    Parameters
    ----------
    headings : Sequence[HeadingRecord]
        Headings in document order.
    settings : TocSettings
        Root section id, depth limit and markup templates.

    Returns
    -------
    TocBuild
        Every numbered entry and the rendered markup. ``markup`` is ``None``
        when ``headings`` is empty.
    """
    if not headings:
        return TocBuild(entries=[], markup=None)

    state = initial_state(settings.root_section_id)
    entries: list[TocEntry] = []
    for heading in headings:
        state, number = advance(state, heading.tag_depth)
        entries.append(
            TocEntry(
                section_id=number.section_id,
                toc_depth=number.toc_depth,
                text=heading.text,
                element_id=heading.element_id,
                tag=heading.tag,
                sequence_index=heading.sequence_index,
            )
        )
    renderer = TocRenderer(settings.markup, settings.max_toc_depth)
    return TocBuild(entries=entries, markup=renderer.render(entries), state=state)


class TocGenerator:
    """Number a document's headings and install its table of contents."""

    def __init__(
        self,
        document: DocumentConfig,
        *,
        input_path: Path | None = None,
        output_path: Path | None = None,
        annotator: HeadingAnnotator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the generator with a document configuration.

        Parameters
        ----------
        document : DocumentConfig
            Selectors, settings and paths for the document.
        input_path : Path, optional
            Override for the source file; defaults to the document config.
        output_path : Path, optional
            Override for the written file; defaults to the document config.
        annotator : HeadingAnnotator, optional
            Annotator tracking which headings are already marked. A fresh one
            using the configured marker label is created when omitted.
        logger : logging.Logger, optional
            Logger receiving progress messages; defaults to the module logger.
        """
        self.document = document
        self.input_path = input_path or document.input_path
        self.output_path = output_path or document.output_path
        self.annotator = annotator or HeadingAnnotator(document.settings.marker_label)
        self.log = logger or log

    def run(self) -> Path:
        """Read the input document, apply the TOC and write the output.

        Returns
        -------
        Path
            Path of the written HTML file.

        Raises
        ------
        FileNotFoundError
            If the input document does not exist.
        """
        if not self.input_path.exists():
            msg = f"Input document '{self.input_path}' not found."
            raise FileNotFoundError(msg)
        html = self.load_html()
        soup = BeautifulSoup(html, "html.parser")
        self.apply(soup)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text(str(soup), encoding="utf-8")
        self.log.debug("wrote %s", self.output_path)
        return self.output_path

    def load_html(self) -> str:
        """Return the input as HTML, rendering Markdown sources first."""
        text = self.input_path.read_text(encoding="utf-8")
        if not is_markdown_path(self.input_path):
            return text
        builder = MarkdownPageBuilder(
            self.document.settings,
            pygments_style=self.document.pygments_style,
            toc_selector=self.document.toc_selector,
            body_selector=self.document.body_selector,
        )
        return builder.render(text, title=self.document.title)

    def apply(self, soup: BeautifulSoup) -> TocBuild | None:
        """Number, annotate and list the headings of ``soup`` in place.

        Returns
        -------
        TocBuild | None
            The build result, or ``None`` when the document has no TOC
            container (nothing is changed in that case).
        """
        container = soup.select_one(self.document.toc_selector)
        if container is None:
            self.log.info(
                "no TOC container matches %r in %s; skipping",
                self.document.toc_selector,
                self.input_path,
            )
            return None
        body = soup.select_one(self.document.body_selector) or soup
        settings = self._settings_for(container)
        headings = extract_headings(
            body,
            self.document.heading_selector,
            reserved_ids=_markup_ids(settings.markup),
        )
        build = build_toc([heading.record for heading in headings], settings)

        if build.is_empty:
            _mark_empty(container)
            self.log.info("no headings found in %s", self.input_path)
            return build

        self.annotator.reset()
        for heading, entry in zip(headings, build.entries, strict=True):
            self.annotator.annotate(heading.element, entry.section_id)
        _install_markup(container, build.markup or "")
        return build

    def outline(self) -> list[TocEntry]:
        """Return the numbered entries of the input without writing anything."""
        soup = BeautifulSoup(self.load_html(), "html.parser")
        container = soup.select_one(self.document.toc_selector)
        body = soup.select_one(self.document.body_selector) or soup
        headings = extract_headings(
            body, self.document.heading_selector, assign_ids=False
        )
        settings = self._settings_for(container)
        return build_toc([heading.record for heading in headings], settings).entries

    def _settings_for(self, container: Tag | None) -> TocSettings:
        """Return the settings, preferring the container's root section id."""
        settings = self.document.settings
        if container is None:
            return settings
        root_id = container.get(SECTION_ID_ATTRIBUTE)
        if isinstance(root_id, str) and root_id.strip():
            return dc.replace(settings, root_section_id=root_id.strip())
        return settings


def _markup_ids(markup: TocMarkup) -> set[str]:
    """Return the ids declared by the TOC prefix and suffix templates."""
    fragment = BeautifulSoup(markup.prefix + markup.suffix, "html.parser")
    return {str(tag["id"]) for tag in fragment.select("[id]")}


def _mark_empty(container: Tag) -> None:
    """Flag ``container`` as an empty TOC without touching its contents."""
    classes = list(container.get("class") or [])
    if EMPTY_TOC_CLASS not in classes:
        classes.append(EMPTY_TOC_CLASS)
    container["class"] = classes


def _install_markup(container: Tag, markup: str) -> None:
    """Replace the children of ``container`` with parsed ``markup``."""
    container.clear()
    fragment = BeautifulSoup(markup, "html.parser")
    for child in list(fragment.contents):
        container.append(child.extract())


__all__ = ["TocGenerator", "build_toc"]

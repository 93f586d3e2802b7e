"""Render Markdown sources into HTML pages that carry a TOC container.

Markdown documents listed in ``toc.yaml`` are converted with Python-Markdown
(fenced code, Pygments highlighting, tables) and wrapped in the
``toc_page.jinja`` template. The template emits an empty TOC container with
the document's root section id and a body container holding the converted
HTML, matching the default selectors, so the page then flows through the same
:class:`~outline_toc.generator.TocGenerator` pipeline as any HTML input.

>>> from outline_toc.config import TocSettings
>>> builder = MarkdownPageBuilder(TocSettings(root_section_id="3"))
>>> html = builder.render("# Intro\\nBody", title="Guide")
>>> 'data-section-id="3"' in html
True
"""

from __future__ import annotations

import datetime as dt
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from ._constants import BODY_SELECTOR, TOC_SELECTOR

if typ.TYPE_CHECKING:
    from .config import TocSettings


class MarkdownPageBuilder:
    """Render Markdown into a themed HTML page with TOC placeholders."""

    def __init__(
        self,
        settings: TocSettings,
        *,
        pygments_style: str = "monokai",
        toc_selector: str = TOC_SELECTOR,
        body_selector: str = BODY_SELECTOR,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        settings : TocSettings
            Settings of the document being rendered; the root section id is
            written onto the TOC container.
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults
            to ``"monokai"``.
        toc_selector, body_selector : str, optional
            ``#id`` selectors naming the TOC and body containers the page
            template emits.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``outline_toc/templates`` directory when ``None``.
        """
        self.settings = settings
        self.pygments_style = pygments_style
        self.toc_id = _selector_id(toc_selector)
        self.body_id = _selector_id(body_selector)
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("toc_page.jinja")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Convert Markdown into an HTML fragment."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(text)

    def render(self, markdown_text: str, *, title: str) -> str:
        """Return a complete HTML page for ``markdown_text``."""
        context = {
            "title": title,
            "body_html": self.markdown(markdown_text),
            "root_section_id": self.settings.root_section_id,
            "toc_id": self.toc_id,
            "body_id": self.body_id,
            "pygments_css": self.stylesheet,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html


def _selector_id(selector: str) -> str:
    """Return the element id named by an ``#id`` selector."""
    if not re.fullmatch(r"#[A-Za-z][\w-]*", selector.strip()):
        msg = f"Markdown pages need '#id' container selectors, got {selector!r}."
        raise ValueError(msg)
    return selector.strip()[1:]


__all__ = ["MarkdownPageBuilder"]

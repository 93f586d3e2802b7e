"""Hierarchical section numbering and table-of-contents generation.

This package numbers the headings of an HTML (or Markdown) document as an
outline (``1``, ``1.1``, ``1.1.2``), marks every heading with its section
number, and installs a rendered table of contents into the document.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_toc``: Pure numbering and rendering core.
- ``TocGenerator``: Applies the pipeline to parsed or on-disk documents.

Examples
--------
>>> from outline_toc import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .generator import TocGenerator, build_toc

__all__ = ["TocGenerator", "app", "build_toc", "main"]

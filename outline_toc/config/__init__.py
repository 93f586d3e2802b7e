"""Load and validate TOC configuration YAML for outline_toc runs.

This subpackage parses the project's ``toc.yaml`` file, merges global defaults
with per-document overrides, resolves input and output paths, and produces
typed dataclasses (:class:`TocSiteConfig`, :class:`DocumentConfig`,
:class:`TocSettings`) that the generator consumes. The primary entry point is
:func:`load_toc_config`.

Examples
--------
>>> from pathlib import Path
>>> from outline_toc.config import load_toc_config
>>> site = load_toc_config(Path("toc.yaml"))  # doctest: +SKIP
>>> document = site.get_document("guide")  # doctest: +SKIP
>>> document.settings.root_section_id  # doctest: +SKIP
'2'
"""

from .loader import load_toc_config
from .models import (
    DocumentConfig,
    TocConfigError,
    TocMarkup,
    TocSettings,
    TocSiteConfig,
    is_markdown_path,
)

__all__ = [
    "DocumentConfig",
    "TocConfigError",
    "TocMarkup",
    "TocSettings",
    "TocSiteConfig",
    "is_markdown_path",
    "load_toc_config",
]

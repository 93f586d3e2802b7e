"""Common literal values used across outline_toc.

These constants keep CSS class names, data attributes, and default markup
templates centralized so the annotator, renderer, templates, and tests import
the same values without drifting. Intended for internal use within the
outline_toc package.

Examples
--------
>>> from outline_toc import _constants
>>> _constants.SEGMENT_CLASS_TEMPLATE.format(depth=2)
'sid-2'
>>> "{section}" in _constants.DEFAULT_ITEM_TEMPLATE
True
"""

HEADING_SELECTOR = "h1,h2,h3,h4,h5,h6"
TOC_SELECTOR = "#inner-toc"
BODY_SELECTOR = "#doc-content-inner"

SECTION_ID_ATTRIBUTE = "data-section-id"
ANNOTATED_ATTRIBUTE = "data-has-section"
EMPTY_TOC_CLASS = "empty-toc"

MARKER_LABEL = "Section"
MARKER_OUTER_CLASS = "heading-section-outer"
MARKER_PREFIX_CLASS = "heading-section-prefix"
MARKER_ID_CLASS = "heading-section-id"
SEGMENT_CLASS_TEMPLATE = "sid-{depth}"
SEGMENT_DOT_CLASS = "sid-dot"

DEFAULT_PREFIX = '<ul id="article-toc" class="nav nav-pills nav-stacked nav-toc">'
MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})

DEFAULT_SUFFIX = "</ul>"
DEFAULT_ITEM_TEMPLATE = (
    '<li class="toc-item toc-level-{depth}"><a href="{link}">'
    '<span class="toc-section-id">{section}</span>{text}</a></li>'
)

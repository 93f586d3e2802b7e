"""Load TOC configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import (
    BODY_SELECTOR,
    HEADING_SELECTOR,
    MARKER_LABEL,
    TOC_SELECTOR,
)
from .helpers import (
    _build_markup,
    _coerce_depth,
    _default_title,
    _merge_markup,
    _optional_str,
    _resolve_output_path,
)
from .models import (
    DocumentConfig,
    TocConfigError,
    TocMarkup,
    TocSettings,
    TocSiteConfig,
)


def load_toc_config(path: Path) -> TocSiteConfig:
    """Load the YAML configuration describing documents and TOC options.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``toc.yaml``). Relative ``input``/``output`` paths inside it are
        resolved against the file's directory.

    Returns
    -------
    TocSiteConfig
        Parsed configuration with one :class:`DocumentConfig` per entry under
        ``documents``.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    TocConfigError
        If no documents are defined, a document has no ``input``, or a
        ``max_toc_depth`` value is not a positive integer.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from outline_toc.config import load_toc_config
    >>> config = load_toc_config(Path("toc.yaml"))  # doctest: +SKIP
    >>> config.get_document(None).settings.max_toc_depth  # doctest: +SKIP
    3
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = raw.get("defaults", {}) or {}
    base_dir = path.parent

    documents_raw = raw.get("documents") or {}
    if not documents_raw:
        msg = "No documents defined in TOC configuration."
        raise TocConfigError(msg)

    document_defaults = _DocumentDefaults(
        base_dir=base_dir,
        output_dir=base_dir / str(defaults.get("output_dir", "public")),
        toc_selector=defaults.get("toc_selector", TOC_SELECTOR),
        body_selector=defaults.get("body_selector", BODY_SELECTOR),
        heading_selector=defaults.get("heading_selector", HEADING_SELECTOR),
        root_section_id=_optional_str(defaults.get("root_section_id")) or "1",
        max_toc_depth=_coerce_depth(
            defaults.get("max_toc_depth", 3), context="defaults"
        ),
        marker_label=defaults.get("marker_label", MARKER_LABEL),
        pygments_style=defaults.get("pygments_style", "monokai"),
        markup=_build_markup(defaults.get("html")),
    )

    documents: dict[str, DocumentConfig] = {}
    for key, payload in documents_raw.items():
        match payload:
            case dict():
                documents[key] = _build_document_config(
                    key=key, payload=payload, defaults=document_defaults
                )
            case _:
                continue

    return TocSiteConfig(
        documents=documents,
        default_document=_optional_str(raw.get("default_document")),
    )


@dc.dataclass(slots=True)
class _DocumentDefaults:
    """Internal container for document default configuration values."""

    base_dir: Path
    output_dir: Path
    toc_selector: str
    body_selector: str
    heading_selector: str
    root_section_id: str
    max_toc_depth: int
    marker_label: str
    pygments_style: str
    markup: TocMarkup


def _build_document_config(
    *,
    key: str,
    payload: typ.Mapping[str, typ.Any],
    defaults: _DocumentDefaults,
) -> DocumentConfig:
    """Build a DocumentConfig for a single entry using defaults and overrides."""
    raw_input = _optional_str(payload.get("input"))
    if not raw_input:
        msg = f"Document '{key}' is missing 'input'."
        raise TocConfigError(msg)
    input_path = defaults.base_dir / raw_input
    output_path = _resolve_output_path(
        payload.get("output"), input_path, defaults.output_dir, defaults.base_dir
    )

    max_toc_depth = defaults.max_toc_depth
    if "max_toc_depth" in payload:
        max_toc_depth = _coerce_depth(
            payload["max_toc_depth"], context=f"Document '{key}'"
        )

    settings = TocSettings(
        root_section_id=_optional_str(payload.get("root_section_id"))
        or defaults.root_section_id,
        max_toc_depth=max_toc_depth,
        markup=_merge_markup(defaults.markup, payload.get("html")),
        marker_label=payload.get("marker_label", defaults.marker_label),
    )
    return DocumentConfig(
        key=key,
        input_path=input_path,
        output_path=output_path,
        title=_optional_str(payload.get("title")) or _default_title(key),
        toc_selector=payload.get("toc_selector", defaults.toc_selector),
        body_selector=payload.get("body_selector", defaults.body_selector),
        heading_selector=payload.get("heading_selector", defaults.heading_selector),
        pygments_style=payload.get("pygments_style", defaults.pygments_style),
        settings=settings,
    )


__all__ = ["load_toc_config"]

"""Utility helpers shared by the outline_toc configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import TocConfigError, TocMarkup


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_depth(value: object, *, context: str) -> int:
    """Return ``value`` as a TOC depth of at least one."""
    match value:
        case bool():
            depth = None
        case int():
            depth = value
        case str() if value.strip().isdigit():
            depth = int(value.strip())
        case _:
            depth = None
    if depth is None or depth < 1:
        msg = f"{context}: max_toc_depth must be a positive integer, got {value!r}."
        raise TocConfigError(msg)
    return depth


def _build_markup(payload: typ.Mapping[str, typ.Any] | None) -> TocMarkup:
    """Build a TocMarkup instance from the provided ``html`` mapping."""
    return _merge_markup(TocMarkup(), payload)


def _merge_markup(
    base: TocMarkup, override: typ.Mapping[str, typ.Any] | None
) -> TocMarkup:
    """Merge an override ``html`` mapping into the base TocMarkup."""
    if not override:
        return base
    return TocMarkup(
        prefix=str(override.get("prefix", base.prefix)),
        suffix=str(override.get("suffix", base.suffix)),
        item=str(override.get("item", base.item)),
    )


def _resolve_output_path(
    output: object | None, input_path: Path, output_dir: Path, base_dir: Path
) -> Path:
    """Return the explicit output path or ``output_dir/<input stem>.html``.

    Explicit relative paths are resolved against ``base_dir``.
    """
    explicit = _optional_str(output)
    if explicit:
        return base_dir / explicit
    return output_dir / f"{input_path.stem}.html"


def _default_title(key: str) -> str:
    """Derive a human-readable title from a document key."""
    return key.replace("-", " ").replace("_", " ").title()


__all__ = [
    "_build_markup",
    "_coerce_depth",
    "_default_title",
    "_merge_markup",
    "_optional_str",
    "_resolve_output_path",
]

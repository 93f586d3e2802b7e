"""Single-pass placeholder substitution for TOC item templates."""

from __future__ import annotations

import re
import typing as typ

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def substitute(template: str, values: typ.Mapping[str, object]) -> str:
    """Replace ``{name}`` placeholders in ``template`` with ``values``.

    Placeholders without a matching key are left verbatim. The template is
    scanned once, so braces appearing inside substituted values are never
    expanded in turn.

    Examples
    --------
    >>> substitute("{section} {text} {missing}", {"section": "1.2", "text": "{x}"})
    '1.2 {x} {missing}'
    """

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            return match.group(0)
        return str(values[key])

    return PLACEHOLDER_PATTERN.sub(_replace, template)


__all__ = ["PLACEHOLDER_PATTERN", "substitute"]

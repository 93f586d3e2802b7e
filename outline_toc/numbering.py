r"""Compute hierarchical section numbers for an ordered run of headings.

The numberer is a pure state machine. Each call to :func:`advance` takes the
current :class:`CounterState` and the depth of the next heading, and returns
the next state together with the :class:`SectionNumber` assigned to that
heading. Nothing is stored between runs; callers thread the state through
the headings of a single document in order.

The state holds a caller-supplied root identifier followed by a stack of
counters. The stack only ever moves by one level per heading, so a jump from
``H2`` straight to ``H4`` nests a single level deeper and a jump back from
``H4`` to ``H2`` climbs a single level.

Example
-------
>>> from outline_toc.numbering import number_headings
>>> [n.section_id for n in number_headings([1, 1, 2, 1], root_id="2")]
['2.1', '2.2', '2.2.1', '2.3']
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"^h([1-9])$", re.IGNORECASE)


class InvalidHeadingTag(ValueError):
    """Raised when a heading tag carries no parseable depth."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Cannot derive a heading depth from tag {tag!r}.")


class NumberingOperation(enum.Enum):
    """Branch taken by :func:`advance` for a single heading."""

    RESET_FORCED = "reset-forced"
    RESET_SOFT = "reset-soft"
    SAME = "same"
    DEEPER = "deeper"
    SHALLOWER = "shallower"


@dc.dataclass(frozen=True, slots=True)
class CounterState:
    """Position in the outline after the most recent heading.

    Attributes
    ----------
    root_id : str
        Caller-supplied identifier occupying the first slot of every section
        id. It is never incremented.
    counters : tuple[int, ...]
        Counter stack below the root. Never empty.
    last_tag_depth : int
        Tag depth of the most recently processed heading.
    """

    root_id: str
    counters: tuple[int, ...]
    last_tag_depth: int = 1

    @property
    def prefix(self) -> tuple[str, ...]:
        """Return the full prefix path, root identifier first."""
        return (self.root_id, *(str(counter) for counter in self.counters))


@dc.dataclass(frozen=True, slots=True)
class SectionNumber:
    """Section id and TOC depth assigned to one heading."""

    section_id: str
    toc_depth: int
    operation: NumberingOperation


def initial_state(root_id: str, root_counter: int = 0) -> CounterState:
    """Return the state that precedes the first heading of a run."""
    return CounterState(root_id=str(root_id), counters=(root_counter,))


def parse_tag_depth(tag: str) -> int:
    """Convert a heading tag such as ``"H2"`` into its depth.

    Raises
    ------
    InvalidHeadingTag
        If ``tag`` is not ``H1`` through ``H9`` (case-insensitive).
    """
    match = TAG_PATTERN.match(tag.strip()) if isinstance(tag, str) else None
    if match is None:
        raise InvalidHeadingTag(str(tag))
    return int(match.group(1))


def advance(
    state: CounterState, tag_depth: int
) -> tuple[CounterState, SectionNumber]:
    """Number the next heading and return the updated state.

    Parameters
    ----------
    state : CounterState
        State after the previous heading (or :func:`initial_state`).
    tag_depth : int
        Depth of the heading being numbered; ``1`` for ``H1``.

    Returns
    -------
    tuple[CounterState, SectionNumber]
        The state to pass to the next call and the number for this heading.

    Notes
    -----
    A depth-1 heading always collapses the stack to a single counter below
    the root. Any other heading moves the stack by at most one level,
    whatever the size of the jump between tag depths. A climb that would
    reach the root slot increments the top counter instead.
    """
    if tag_depth < 1:
        msg = f"Heading depth must be at least 1, got {tag_depth}."
        raise ValueError(msg)

    counters = list(state.counters)
    removed = counters.pop()

    if tag_depth == 1:
        if counters:
            minor = counters[0]
            operation = NumberingOperation.RESET_FORCED
        else:
            minor = removed
            operation = NumberingOperation.RESET_SOFT
        counters = [minor + 1]
    elif tag_depth == state.last_tag_depth:
        counters.append(removed + 1)
        operation = NumberingOperation.SAME
    elif tag_depth > state.last_tag_depth:
        counters.extend((removed, 1))
        operation = NumberingOperation.DEEPER
    else:
        parent = counters.pop() if counters else removed
        counters.append(parent + 1)
        operation = NumberingOperation.SHALLOWER

    next_state = CounterState(
        root_id=state.root_id,
        counters=tuple(counters),
        last_tag_depth=tag_depth,
    )
    number = SectionNumber(
        section_id=".".join(next_state.prefix),
        toc_depth=len(next_state.counters),
        operation=operation,
    )
    logger.debug(
        "depth %d after %d: %s -> %s (toc depth %d)",
        tag_depth,
        state.last_tag_depth,
        operation.value,
        number.section_id,
        number.toc_depth,
    )
    return next_state, number


def number_headings(
    depths: cabc.Iterable[int], *, root_id: str, root_counter: int = 0
) -> list[SectionNumber]:
    """Number a whole sequence of heading depths in one run."""
    state = initial_state(root_id, root_counter)
    numbers: list[SectionNumber] = []
    for depth in depths:
        state, number = advance(state, depth)
        numbers.append(number)
    return numbers


__all__ = [
    "CounterState",
    "InvalidHeadingTag",
    "NumberingOperation",
    "SectionNumber",
    "advance",
    "initial_state",
    "number_headings",
    "parse_tag_depth",
]

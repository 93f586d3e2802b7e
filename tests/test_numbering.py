"""Unit tests for the section numbering state machine.

These tests drive :func:`outline_toc.numbering.advance` through each of its
branches (top-level reset, same level, deeper, shallower), check the
documented behaviour for multi-level jumps and a deep first heading, and
verify that heading tags without a depth are rejected.

Usage
-----
Run ``pytest tests/test_numbering.py -v``. No fixtures are required.
"""

from __future__ import annotations

import logging

import pytest

from outline_toc.numbering import (
    CounterState,
    InvalidHeadingTag,
    NumberingOperation,
    advance,
    initial_state,
    number_headings,
    parse_tag_depth,
)

OUTLINE_SHAPES = [
    [1],
    [1, 1, 2, 1],
    [1, 2, 3, 4, 5, 6, 1],
    [2, 2, 3, 2, 1],
    [1, 3, 5, 3, 1, 4, 2],
    [3, 1, 6, 6, 2, 2, 4, 1, 1],
    [6, 5, 4, 3, 2, 1],
]


def test_example_outline_numbers() -> None:
    """Root ``2`` with depths 1,1,2,1 numbers as 2.1, 2.2, 2.2.1, 2.3."""
    numbers = number_headings([1, 1, 2, 1], root_id="2")
    assert [n.section_id for n in numbers] == ["2.1", "2.2", "2.2.1", "2.3"], (
        f"unexpected section ids {[n.section_id for n in numbers]!r}"
    )
    assert [n.toc_depth for n in numbers] == [1, 1, 2, 1], (
        f"unexpected toc depths {[n.toc_depth for n in numbers]!r}"
    )


def test_initial_state_holds_root_and_counter() -> None:
    """The initial prefix is the root id followed by the root counter."""
    state = initial_state("7", 4)
    assert state.prefix == ("7", "4"), f"unexpected prefix {state.prefix!r}"
    assert state.last_tag_depth == 1, "runs start against a previous depth of 1"


def test_first_heading_is_a_soft_reset() -> None:
    """The first ``H1`` reuses the removed root counter as its minor value."""
    _, number = advance(initial_state("1"), 1)
    assert number.operation is NumberingOperation.RESET_SOFT
    assert number.section_id == "1.1", f"got {number.section_id!r}"


def test_top_level_after_nesting_is_a_forced_reset() -> None:
    """An ``H1`` after nested headings increments the existing minor counter."""
    state = CounterState(root_id="1", counters=(3, 2, 5), last_tag_depth=3)
    next_state, number = advance(state, 1)
    assert number.operation is NumberingOperation.RESET_FORCED
    assert next_state.counters == (4,), f"got {next_state.counters!r}"
    assert number.section_id == "1.4"


@pytest.mark.parametrize("depths", OUTLINE_SHAPES)
def test_segment_count_tracks_toc_depth(depths: list[int]) -> None:
    """Every section id has exactly ``toc_depth + 1`` segments."""
    for number in number_headings(depths, root_id="1"):
        segments = number.section_id.split(".")
        assert len(segments) == number.toc_depth + 1, (
            f"{number.section_id!r} does not match toc depth {number.toc_depth}"
        )


@pytest.mark.parametrize("depths", OUTLINE_SHAPES)
def test_top_level_heading_collapses_stack(depths: list[int]) -> None:
    """An ``H1`` leaves exactly the root and one counter, however deep."""
    state = initial_state("1")
    for depth in depths:
        state, _ = advance(state, depth)
    state, number = advance(state, 1)
    assert len(state.prefix) == 2, f"stack {state.prefix!r} should have length 2"
    assert number.toc_depth == 1


def test_same_level_increments_top_counter() -> None:
    """Consecutive headings at one depth count up without changing depth."""
    numbers = number_headings([1, 2, 2, 2], root_id="1")
    assert [n.section_id for n in numbers] == ["1.1", "1.1.1", "1.1.2", "1.1.3"]
    assert numbers[-1].operation is NumberingOperation.SAME


def test_shallower_increments_parent() -> None:
    """Climbing one level increments the parent counter."""
    numbers = number_headings([1, 2, 3, 2], root_id="1")
    assert numbers[-1].section_id == "1.1.2", f"got {numbers[-1].section_id!r}"
    assert numbers[-1].operation is NumberingOperation.SHALLOWER


def test_deep_jump_nests_one_level() -> None:
    """``H2`` straight to ``H4`` adds a single level to the stack."""
    numbers = number_headings([1, 2, 4], root_id="1")
    assert numbers[-1].section_id == "1.1.1.1", f"got {numbers[-1].section_id!r}"
    assert numbers[-1].toc_depth == 3


def test_shallow_jump_climbs_one_level() -> None:
    """``H4`` back to ``H2`` climbs a single level, not two."""
    numbers = number_headings([1, 2, 3, 4, 2], root_id="1")
    assert [n.section_id for n in numbers][-2:] == ["1.1.1.1.1", "1.1.1.2"], (
        f"unexpected ids {[n.section_id for n in numbers]!r}"
    )


def test_deep_first_heading_nests_below_zero() -> None:
    """A first heading deeper than ``H1`` nests under the root counter."""
    numbers = number_headings([2, 2], root_id="1")
    assert [n.section_id for n in numbers] == ["1.0.1", "1.0.2"]
    assert numbers[0].operation is NumberingOperation.DEEPER


def test_climb_never_consumes_root() -> None:
    """A climb from the first level increments the counter, not the root."""
    numbers = number_headings([1, 4, 3, 2], root_id="9")
    assert [n.section_id for n in numbers] == ["9.1", "9.1.1", "9.2", "9.3"], (
        f"unexpected ids {[n.section_id for n in numbers]!r}"
    )
    assert all(n.section_id.startswith("9.") for n in numbers)


def test_advance_leaves_input_state_untouched() -> None:
    """States are immutable values; ``advance`` returns a new one."""
    state = initial_state("1")
    next_state, _ = advance(state, 1)
    assert state.counters == (0,), "input state must not be mutated"
    assert next_state is not state


def test_advance_rejects_non_positive_depth() -> None:
    """Depths below one are refused."""
    with pytest.raises(ValueError, match="at least 1"):
        advance(initial_state("1"), 0)


def test_advance_logs_each_transition(caplog: pytest.LogCaptureFixture) -> None:
    """Each transition is traced at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger="outline_toc.numbering"):
        number_headings([1, 2], root_id="1")
    messages = [record.getMessage() for record in caplog.records]
    assert any("deeper -> 1.1.1" in message for message in messages), (
        f"expected a deeper transition in {messages!r}"
    )


@pytest.mark.parametrize(
    ("tag", "expected"), [("H1", 1), ("h3", 3), ("H9", 9), (" h2 ", 2)]
)
def test_parse_tag_depth(tag: str, expected: int) -> None:
    """Heading tags map to their numeric depth."""
    assert parse_tag_depth(tag) == expected


@pytest.mark.parametrize("tag", ["DIV", "H", "H0", "H10", "Hx", ""])
def test_parse_tag_depth_rejects_malformed_tags(tag: str) -> None:
    """Tags without a single-digit depth raise ``InvalidHeadingTag``."""
    with pytest.raises(InvalidHeadingTag) as excinfo:
        parse_tag_depth(tag)
    assert excinfo.value.tag == tag

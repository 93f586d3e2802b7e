"""Unit tests for heading annotation markup and idempotence."""

from __future__ import annotations

import gc

from bs4 import BeautifulSoup

from outline_toc.annotator import (
    HeadingAnnotator,
    per_number_markup,
    section_marker_markup,
)


def _heading(html: str = '<h2 id="intro">Intro</h2>') -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_per_number_markup_wraps_each_segment() -> None:
    """Each segment gets a depth class; all but the last carry a dot span."""
    actual = per_number_markup("2.1.3")
    expected = (
        '<span class="sid-1">2<span class="sid-dot">.</span></span>'
        '<span class="sid-2">1<span class="sid-dot">.</span></span>'
        '<span class="sid-3">3</span>'
    )
    assert actual == expected, f"got {actual!r}"


def test_per_number_markup_single_segment_has_no_dot() -> None:
    """A single-segment id has no separator span."""
    assert per_number_markup("4") == '<span class="sid-1">4</span>'


def test_section_marker_markup_structure() -> None:
    """The marker nests the label and the per-number spans."""
    soup = BeautifulSoup(section_marker_markup("1.2", label="Part"), "html.parser")
    outer = soup.select_one("span.heading-section-outer")
    assert outer is not None, "expected outer marker span"
    prefix = outer.select_one(".heading-section-prefix")
    assert prefix is not None and prefix.get_text() == "Part"
    number = outer.select_one(".heading-section-id")
    assert number is not None and number.get_text() == "1.2"


def test_annotate_prepends_marker() -> None:
    """The marker becomes the first child and the heading text follows."""
    soup = _heading()
    element = soup.h2
    assert HeadingAnnotator().annotate(element, "1.1") is True
    first = element.contents[0]
    assert "heading-section-outer" in first.get("class", []), (
        f"expected marker as first child, got {first!r}"
    )
    assert element.get_text() == "Section1.1Intro"
    assert element["data-has-section"] == "true"


def test_annotate_is_idempotent_for_any_section_id() -> None:
    """Later calls on the same element leave it exactly as the first did."""
    soup = _heading()
    element = soup.h2
    annotator = HeadingAnnotator()
    annotator.annotate(element, "1.1")
    first_pass = str(soup)
    assert annotator.annotate(element, "1.1") is False
    assert annotator.annotate(element, "9.9.9") is False
    assert str(soup) == first_pass, "repeated annotation must not change markup"


def test_fresh_annotator_respects_persisted_flag() -> None:
    """A new annotator skips headings marked by an earlier run."""
    soup = _heading()
    HeadingAnnotator().annotate(soup.h2, "1.1")
    reparsed = BeautifulSoup(str(soup), "html.parser")
    second = HeadingAnnotator()
    assert second.is_annotated(reparsed.h2)
    assert second.annotate(reparsed.h2, "3.3") is False
    assert str(reparsed) == str(soup)


def test_annotate_escapes_label() -> None:
    """Labels are treated as text, not markup."""
    soup = _heading()
    HeadingAnnotator(label="<b>Sec</b>").annotate(soup.h2, "1")
    prefix = soup.select_one(".heading-section-prefix")
    assert prefix is not None and prefix.get_text() == "<b>Sec</b>"
    assert soup.find("b") is None, "label must not inject elements"


def test_reset_forgets_elements_but_keeps_persisted_flag() -> None:
    """After ``reset`` only the persisted attribute marks a heading."""
    soup = _heading('<h2 id="a">A</h2><h2 id="b">B</h2>')
    first, second = soup.select("h2")
    annotator = HeadingAnnotator()
    annotator.annotate(first, "1.1")
    annotator.reset()
    assert annotator.is_annotated(first), "persisted flag still counts"
    assert not annotator.is_annotated(second), "untouched heading is unmarked"
    assert annotator.annotate(second, "1.2") is True


def test_annotator_shared_across_documents_marks_every_heading() -> None:
    """Headings of freshly parsed documents are never mistaken for old ones."""
    annotator = HeadingAnnotator()
    html = "".join(f"<h1>Heading {idx}</h1>" for idx in range(30))
    for _ in range(20):
        soup = BeautifulSoup(html, "html.parser")
        changed = [annotator.annotate(h, "1.1") for h in soup.select("h1")]
        assert all(changed), "every fresh heading must be annotated"
        del soup
        gc.collect()

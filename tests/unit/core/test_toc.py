"""Unit tests for core/toc.py"""

import pytest

from mdview.core.toc import extract_headings, heading_text
from mdview.core.utils.slug import SlugRegistry


def test_headings_in_order_with_unique_ids():
    """Headings come back in order with suffixed duplicate ids."""
    text = "# Title\n## Setup\ntext\n## Setup\n### Setup\n"
    headings = extract_headings(text)
    assert [(h.id, h.level) for h in headings] == [
        ("title", 1), ("setup", 2), ("setup-1", 2), ("setup-2", 3),
    ]


def test_headings_inside_fences_are_skipped():
    """Heading lines inside fenced code are skipped."""
    text = "# Real\n```\n# Fake\n```\n"
    assert [h.text for h in extract_headings(text)] == ["Real"]


def test_not_a_heading_without_space():
    """A hash without a following space, or seven hashes, is not a heading."""
    assert extract_headings("#hashtag\n####### seven\n") == []


def test_closing_hashes_are_dropped():
    """Closing hash sequences are not part of the heading text."""
    assert extract_headings("## Title ##\n")[0].text == "Title"


@pytest.mark.parametrize("raw,expected", [
    ("**Bold** and [link](u)", "Bold and link"),
    ("Use `code` here", "Use code here"),
    ("<kbd>ctrl</kbd>+<kbd>c</kbd>", "ctrl+c"),
    ("~~old~~ new", "old new"),
    ("snake_case_name", "snake_case_name"),
    ("Tom &amp; Jerry", "Tom & Jerry"),
])
def test_heading_text(raw, expected):
    """heading_text strips inline formatting to the visible text."""
    assert heading_text(raw) == expected


def test_shared_registry_keeps_claiming():
    """A passed registry keeps the claimed ids for later callers."""
    registry = SlugRegistry()
    extract_headings("# Intro\n", registry)
    assert registry.claim("Intro") == "intro-1"


def test_headings_record_source_line():
    """Each entry carries the index of its source line."""
    headings = extract_headings("# One\n\ntext\n```\n# no\n```\n## Two\n")
    assert [(h.id, h.line) for h in headings] == [("one", 0), ("two", 6)]


def test_source_line_is_not_serialized():
    """The source line stays out of the dumped heading."""
    assert extract_headings("# One\n")[0].model_dump() == {"id": "one", "text": "One", "level": 1}

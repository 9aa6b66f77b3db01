"""Unit tests for core/utils/slug.py"""

import pytest

from mdview.core.utils.slug import SlugRegistry, slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-chrs"),
    ("Ünïcode Title", "ünïcode-title"),
    ("", "heading"),
    ("!!!", "heading"),
])
def test_slugify_basic(text, expected):
    """slugify converts text to a case-folded hyphenated slug."""
    assert slugify(text) == expected


def test_slugify_strips_leading_trailing_hyphens():
    """slugify strips leading/trailing hyphens from result."""
    assert not slugify("!leading").startswith("-")
    assert not slugify("trailing!").endswith("-")


def test_registry_suffixes_repeats():
    """Repeated base slugs get -1, -2 suffixes in order."""
    registry = SlugRegistry()
    assert [registry.claim("Setup") for _ in range(3)] == ["setup", "setup-1", "setup-2"]


def test_registry_skips_reserved_suffix():
    """A reserved suffixed slug is never handed out again."""
    registry = SlugRegistry()
    registry.reserve("intro-1")
    assert registry.claim("Intro") == "intro"
    assert registry.claim("Intro") == "intro-2"


def test_registry_suffix_cannot_collide_with_literal_heading():
    """A heading whose text already ends in -1 still gets a unique id."""
    registry = SlugRegistry()
    ids = [registry.claim(t) for t in ("Intro", "Intro", "Intro 1")]
    assert len(set(ids)) == 3
    assert "intro-1" in registry

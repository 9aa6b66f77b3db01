"""Unit tests for viewer/cache.py"""

import pytest

from mdview.render.assets import RenderContext
from mdview.viewer.cache import PreviewCache


def test_hit_skips_reparse_and_callback(renderer):
    """A cache hit returns the same document without calling back."""
    cache = PreviewCache(renderer)
    calls = []
    first = cache.render("# Title\n", on_headings=calls.append)
    second = cache.render("# Title\n", on_headings=calls.append)
    assert second is first
    assert len(calls) == 1
    assert (cache.hits, cache.misses) == (1, 1)


def test_context_is_part_of_key(renderer):
    """Different render contexts are cached separately."""
    cache = PreviewCache(renderer)
    cache.render("![a](a.png)\n", RenderContext(language="en"))
    doc = cache.render("![a](a.png)\n", RenderContext(language="fr"))
    assert cache.misses == 2
    assert "/docs/fr/a.png" in doc.html


def test_lru_eviction(renderer):
    """The least recently used entry is evicted first."""
    cache = PreviewCache(renderer, maxsize=2)
    for text in ("a", "b", "a", "c", "b"):
        cache.render(text)
    assert len(cache) == 2
    assert (cache.hits, cache.misses) == (1, 4)


def test_clear(renderer):
    """clear empties the cache and resets counters."""
    cache = PreviewCache(renderer)
    cache.render("x")
    cache.clear()
    assert len(cache) == 0 and cache.misses == 0


def test_invalid_maxsize():
    """A non-positive maxsize is rejected."""
    with pytest.raises(ValueError):
        PreviewCache(maxsize=0)

"""Unit tests for render/assets.py"""

import pytest

from mdview.render.assets import RenderContext, make_resolver, resolve_asset


@pytest.mark.parametrize("src", [
    "https://example.com/a.png",
    "http://example.com/a.png",
    "//cdn.example.com/a.png",
    "data:image/png;base64,AAAA",
    "/static/a.png",
    "#fragment",
    "",
])
def test_passthrough(src):
    """External, rooted, data, fragment and empty sources pass through unchanged."""
    assert resolve_asset(src, "en", "guide/intro.md") == src


@pytest.mark.parametrize("src,language,doc_path,expected", [
    ("img/a.png", "en", "guide/intro.md", "/docs/en/guide/img/a.png"),
    ("../shared/a.png", "fr", "guide/intro.md", "/docs/fr/shared/a.png"),
    ("./a.png", "en", "index.md", "/docs/en/a.png"),
    ("a.png?v=2#top", "en", "", "/docs/en/a.png?v=2#top"),
])
def test_relative_paths_resolve(src, language, doc_path, expected):
    """Relative sources resolve under base, language and document directory."""
    assert resolve_asset(src, language, doc_path) == expected


def test_empty_base_and_language():
    """Empty base and language still give a rooted path."""
    assert resolve_asset("a.png", "", "", base="") == "/a.png"


def test_make_resolver_binds_context():
    """make_resolver binds the render context."""
    resolve = make_resolver(RenderContext(doc_path="a/b/c.md", language="de", asset_base="/assets"))
    assert resolve("x.svg") == "/assets/de/a/b/x.svg"

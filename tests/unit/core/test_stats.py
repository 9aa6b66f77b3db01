"""Unit tests for core/stats.py"""

from mdview.core.stats import content_stats


def test_content_stats():
    """Counts cover words, headings, code blocks, links and images."""
    text = "# Title\n\nSome [link](u) and ![img](i.png).\n\n```py\nx\n```\n"
    stats = content_stats(text)
    assert stats.words == 9
    assert stats.characters == len(text)
    assert stats.lines == 8
    assert (stats.headings, stats.code_blocks, stats.links, stats.images) == (1, 1, 1, 1)


def test_empty_text():
    """Empty text has no words and one line."""
    stats = content_stats("")
    assert (stats.words, stats.characters, stats.lines) == (0, 0, 1)

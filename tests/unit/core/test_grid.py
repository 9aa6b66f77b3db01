"""Unit tests for core/extract/grid.py"""

from mdview.core.extract.grid import extract_grids, parse_card
from mdview.core.models import BlockKind
from mdview.core.segments import placeholder


GRID_MD = """\
Before

<div class="grid cards" markdown>

-   :material-clock-fast:{ .lg .middle } __Set up in 5 minutes__

    ---

    Install with pip.

    [:octicons-arrow-right-24: Getting started](install.md)

-   **Second card**

    Body two

-   no title here
</div>

After
"""


def test_grid_extracts_titled_cards():
    """Cards with a bold title are kept with body text and link."""
    result = extract_grids(GRID_MD)
    assert len(result.records) == 1
    cards = result.records[0].cards
    assert [c.title for c in cards] == ["Set up in 5 minutes", "Second card"]
    assert cards[0].body_text == "Install with pip."
    assert cards[0].link.text == "Getting started"
    assert cards[0].link.url == "install.md"
    assert cards[1].link is None


def test_grid_replaced_by_placeholder():
    """The whole container is replaced by one placeholder line."""
    result = extract_grids(GRID_MD)
    assert result.text == "Before\n\n" + placeholder(BlockKind.grid, 0) + "\n\nAfter\n"


def test_unclosed_grid_runs_to_eof():
    """An unclosed grid container ends at end of document."""
    result = extract_grids('<div class="grid cards" markdown>\n- **Only**\n')
    assert [c.title for c in result.records[0].cards] == ["Only"]
    assert result.text == placeholder(BlockKind.grid, 0)


def test_grid_inside_fence_is_not_extracted():
    """A grid container inside fenced code stays code."""
    text = '```html\n<div class="grid cards" markdown>\n</div>\n```\n'
    assert extract_grids(text).records == []


def test_parse_card_keeps_colons_in_body():
    """Colons in body text are not taken for icon shortcodes."""
    card = parse_card(["**Meeting**", "Starts at 10:30:45 sharp"])
    assert card.body_text == "Starts at 10:30:45 sharp"


def test_parse_card_without_title():
    """A card without a bold title is dropped."""
    assert parse_card(["plain text"]) is None


def test_indented_grid_keeps_opener_indentation():
    """An indented grid leaves its placeholder at the opener's indentation."""
    result = extract_grids('    <div class="grid cards" markdown>\n    - **A**\n    </div>\n')
    assert result.text == "    " + placeholder(BlockKind.grid, 0) + "\n"
    assert [c.title for c in result.records[0].cards] == ["A"]

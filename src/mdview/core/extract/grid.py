"""Grid-card extraction: `<div class="grid cards" markdown>` containers of card list items"""

import logging
import re

from mdview.core.fence import fence_states, split_lines
from mdview.core.models import BlockKind, Card, CardGrid, CardLink, Extraction
from mdview.core.segments import placeholder


logger = logging.getLogger(__name__)

GRID_OPEN_RE = re.compile(r'^\s*<div\s+class="grid cards"[^>]*\bmarkdown\b[^>]*>\s*$')
GRID_CLOSE_RE = re.compile(r'^\s*</div>\s*$')
CARD_START_RE = re.compile(r'^-\s+')
ICON_RE = re.compile(r':[a-zA-Z][\w-]*:(?:\{[^}]*\})?')
TITLE_RE = re.compile(r'\*\*(.+?)\*\*|__(.+?)__')
LINK_RE = re.compile(r'^\[(?::[\w-]+:\s*)?(.+?)\]\((.+?)\)$')


def _dedent_container(lines: list[str]) -> list[str]:
    """Remove the indentation shared by all non-blank container lines."""
    widths = [len(l) - len(l.lstrip(' ')) for l in lines if l.strip()]
    cut = min(widths, default=0)
    return [l[cut:] for l in lines]


def _split_cards(lines: list[str]) -> list[list[str]]:
    """Group container lines into per-card line lists, one per `-` list marker."""
    cards: list[list[str]] = []
    for line in _dedent_container(lines):
        if CARD_START_RE.match(line):
            cards.append([CARD_START_RE.sub('', line, count=1)])
        elif cards:
            cards[-1].append(line)
    return cards


def parse_card(lines: list[str]) -> Card | None:
    """Parse one card's lines; returns None for a card without a bold title."""
    title = ''
    content: list[str] = []
    link = None
    for line in lines:
        trimmed = line.strip()
        if not trimmed or trimmed == '---':
            continue

        link_match = LINK_RE.match(trimmed)
        if link_match:
            link = CardLink(text=link_match.group(1).strip(), url=link_match.group(2).strip())
            continue

        trimmed = ICON_RE.sub('', trimmed).strip()
        title_match = TITLE_RE.search(trimmed)
        if title_match and not title:
            title = (title_match.group(1) or title_match.group(2)).strip()
            rest = (trimmed[:title_match.start()] + trimmed[title_match.end():]).strip()
            if rest:
                content.append(rest)
            continue

        if trimmed:
            content.append(trimmed)

    if not title:
        return None
    return Card(title=title, body_text=' '.join(content), link=link)


def extract_grids(text: str) -> Extraction:
    """Replace every grid-card container with a placeholder at the opener's indentation.

    An unclosed grid ends at EOF.
    """
    lines = split_lines(text)
    in_fence = fence_states(lines)
    out: list[str] = []
    grids: list[CardGrid] = []
    inner: list[str] | None = None
    indent = ''

    def close() -> None:
        cards = [c for c in (parse_card(group) for group in _split_cards(inner)) if c]
        grids.append(CardGrid(cards=cards, ordinal=len(grids)))
        out.append(indent + placeholder(BlockKind.grid, grids[-1].ordinal))

    for i, line in enumerate(lines):
        if inner is not None:
            if GRID_CLOSE_RE.match(line) and not in_fence[i]:
                close()
                inner = None
            else:
                inner.append(line)
            continue
        if not in_fence[i] and GRID_OPEN_RE.match(line):
            inner = []
            indent = line[:len(line) - len(line.lstrip())]
        else:
            out.append(line)

    if inner is not None:
        close()

    logger.debug("extracted %d card grid(s)", len(grids))
    return Extraction(text='\n'.join(out), records=grids)

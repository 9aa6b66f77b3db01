"""Heading extraction for the table of contents"""

import html
import re

from mdview.core.fence import fence_states, split_lines
from mdview.core.models import HeadingEntry
from mdview.core.utils.slug import SlugRegistry


HEADING_RE = re.compile(r'^(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$')

INLINE_FORMATTING: list[tuple[re.Pattern, str]] = [
    (re.compile(r'!\[([^\]]*)\]\([^)]*\)'), r'\1'),      # images
    (re.compile(r'\[([^\]]+)\]\([^)]*\)'), r'\1'),       # links
    (re.compile(r'<[^>]+>'), ''),                        # inline html
    (re.compile(r'\*\*([^*]+)\*\*'), r'\1'),
    (re.compile(r'\*([^*]+)\*'), r'\1'),
    (re.compile(r'__([^_]+)__'), r'\1'),
    (re.compile(r'(?<!\w)_([^_]+)_(?!\w)'), r'\1'),
    (re.compile(r'`([^`]+)`'), r'\1'),
    (re.compile(r'~~([^~]+)~~'), r'\1'),
]


def heading_text(raw: str) -> str:
    """Strip inline formatting and decode entities, keeping the visible text."""
    for pattern, repl in INLINE_FORMATTING:
        raw = pattern.sub(repl, raw)
    return html.unescape(raw).strip()


def extract_headings(text: str, registry: SlugRegistry | None = None) -> list[HeadingEntry]:
    """Return ATX headings outside fences in document order with unique slug ids.

    Pass a registry to keep claiming ids from it afterwards (the renderer does,
    so headings the TOC never sees cannot collide with TOC ids).
    """
    registry = registry if registry is not None else SlugRegistry()
    lines = split_lines(text)
    entries = []
    for number, (line, in_fence) in enumerate(zip(lines, fence_states(lines))):
        if in_fence:
            continue
        m = HEADING_RE.match(line)
        if not m:
            continue
        content = heading_text(m.group(2))
        entries.append(HeadingEntry(
            id=registry.claim(content), text=content, level=len(m.group(1)), line=number,
        ))
    return entries

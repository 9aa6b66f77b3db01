"""Content statistics for a markdown source"""

import re

from pydantic import BaseModel


HEADING_LINE_RE = re.compile(r'^#{1,6}\s+')
CODE_BLOCK_RE = re.compile(r'```[\s\S]*?```')
LINK_RE = re.compile(r'(?<!!)\[([^\]]+)\]\([^)]+\)')
IMAGE_RE = re.compile(r'!\[([^\]]*)\]\([^)]+\)')


class ContentStats(BaseModel):
    words: int
    characters: int
    lines: int
    headings: int
    code_blocks: int
    links: int
    images: int


def content_stats(text: str) -> ContentStats:
    lines = text.split('\n')
    return ContentStats(
        words=len(text.split()),
        characters=len(text),
        lines=len(lines),
        headings=sum(1 for line in lines if HEADING_LINE_RE.match(line)),
        code_blocks=len(CODE_BLOCK_RE.findall(text)),
        links=len(LINK_RE.findall(text)),
        images=len(IMAGE_RE.findall(text)),
    )

"""Placeholder tokens and splitting of processed text into render segments"""

import re

from mdview.core.models import BlockKind, BlockReference, Plain


# Private-use character; stripped from raw input so prose can never form a token.
PLACEHOLDER_MARK = '\ue000'

PLACEHOLDER_RE = re.compile(
    PLACEHOLDER_MARK + r'__(' + '|'.join(k.value for k in BlockKind) + r')_(\d+)__' + PLACEHOLDER_MARK + r'\n?'
)


def placeholder(kind: BlockKind, ordinal: int) -> str:
    """Return the reserved token standing in for block `ordinal` of `kind`."""
    return f"{PLACEHOLDER_MARK}__{kind.value}_{ordinal}__{PLACEHOLDER_MARK}"


def strip_reserved(text: str) -> str:
    """Remove the reserved placeholder character from raw input."""
    return text.replace(PLACEHOLDER_MARK, '')


def split_segments(text: str) -> list:
    """Split text on placeholder tokens into Plain / BlockReference segments in document order.

    The newline ending a placeholder line belongs to the placeholder. Empty
    plain runs between adjacent tokens are omitted; whitespace-only runs are kept.
    """
    segments: list = []
    pos = 0
    for m in PLACEHOLDER_RE.finditer(text):
        if m.start() > pos:
            segments.append(Plain(text=text[pos:m.start()]))
        segments.append(BlockReference(block=BlockKind(m.group(1)), ordinal=int(m.group(2))))
        pos = m.end()
    if pos < len(text):
        segments.append(Plain(text=text[pos:]))
    return segments

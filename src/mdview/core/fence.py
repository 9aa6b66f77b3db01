"""Line classification: which lines sit inside fenced code blocks"""

import re
from typing import Iterator


FENCE_RE = re.compile(r'^`{3,}')


def is_fence_delimiter(line: str) -> bool:
    """True if the stripped line opens or closes a fence (three or more backticks)."""
    return bool(FENCE_RE.match(line.strip()))


def fence_states(lines: list[str]) -> list[bool]:
    """Return, per line, whether it is inside a fence. Delimiter lines count as inside.

    Fences do not nest: every delimiter toggles. An unterminated fence leaves
    the rest of the document inside code.
    """
    states: list[bool] = []
    inside = False
    for line in lines:
        if is_fence_delimiter(line):
            states.append(True)
            inside = not inside
        else:
            states.append(inside)
    return states


def fence_spans(lines: list[str]) -> Iterator[tuple[int, int, bool]]:
    """Yield (start, end, inside) runs of consecutive lines sharing a fence state.

    A closing delimiter followed directly by an opening one stays a single run.
    """
    states = fence_states(lines)
    start = 0
    for i in range(1, len(states) + 1):
        if i == len(states) or states[i] != states[start]:
            yield start, i, states[start]
            start = i


def split_lines(text: str) -> list[str]:
    """Split normalized text on newlines; a trailing newline yields a final empty line."""
    return text.split('\n')


def normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')

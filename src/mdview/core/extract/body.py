"""Indented block-body accumulation shared by the admonition and tab extractors"""

from enum import Enum

from mdview.core.fence import is_fence_delimiter


class State(Enum):
    outside = "Outside"
    in_block = "InBlock"
    in_block_code = "InBlockCode"


def is_blank(line: str) -> bool:
    return not line.strip()


def is_indented(line: str, unit: int = 4) -> bool:
    """True if the line starts with one indent unit (unit spaces or a tab)."""
    return line.startswith(' ' * unit) or line.startswith('\t')


def strip_indent(line: str, unit: int = 4) -> str:
    """Remove one indent unit from the start of line; other lines are returned unchanged."""
    if line.startswith(' ' * unit):
        return line[unit:]
    if line.startswith('\t'):
        return line[1:]
    return line


class IndentedBody:
    """Collects the dedented body of one block, tracking fences nested in it.

    Blank lines are held back until more content arrives, so trailing blank
    lines never become part of the body and can be returned to the outer text.
    Blank lines before the first content line are dropped.
    """

    def __init__(self, unit: int = 4):
        self.unit = unit
        self.lines: list[str] = []
        self.trailing: list[str] = []
        self.in_code = False

    @property
    def state(self) -> State:
        return State.in_block_code if self.in_code else State.in_block

    def accepts(self, line: str) -> bool:
        """True if line continues this body (always, while inside a nested fence)."""
        return self.in_code or is_blank(line) or is_indented(line, self.unit)

    def add(self, line: str) -> None:
        if is_blank(line) and not self.in_code:
            if self.lines:
                self.trailing.append(line)
            return
        self.lines.extend(self.trailing)
        self.trailing = []
        if is_fence_delimiter(line):
            self.in_code = not self.in_code
        self.lines.append(strip_indent(line, self.unit))

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)

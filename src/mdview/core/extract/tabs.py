"""Tab-group extraction: consecutive `=== "label"` headers with indented bodies"""

import logging
import re

from mdview.core.extract.body import IndentedBody, State
from mdview.core.fence import fence_states, split_lines
from mdview.core.models import BlockKind, Extraction, Tab, TabGroup
from mdview.core.segments import placeholder


logger = logging.getLogger(__name__)

TAB_RE = re.compile(r'^===(\+?)\s+"([^"]+)"\s*$')


class TabGroupExtractor:
    """Groups consecutive tab headers into one TabGroup.

    Tracks block membership and fence state together: a fence inside a tab
    body keeps every line up to its closing delimiter in that tab, whatever
    its indentation.
    """

    def __init__(self, indent_unit: int = 4):
        self.indent_unit = indent_unit

    def extract(self, text: str) -> Extraction:
        lines = split_lines(text)
        in_fence = fence_states(lines)
        out: list[str] = []
        groups: list[TabGroup] = []
        tabs: list[Tab] = []
        label: tuple[str, bool] | None = None
        body: IndentedBody | None = None

        def finish_tab() -> None:
            tabs.append(Tab(label=label[0], selected=label[1], body_text=body.text))

        def close_group() -> None:
            finish_tab()
            group = TabGroup(tabs=tabs, ordinal=len(groups))
            groups.append(group)
            out.append(placeholder(BlockKind.tabs, group.ordinal))
            out.extend(body.trailing)

        for i, line in enumerate(lines):
            state = body.state if body else State.outside
            if state is not State.outside:
                if body.accepts(line):
                    body.add(line)
                    continue
                m = TAB_RE.match(line)
                if m:
                    finish_tab()
                    label, body = (m.group(2), bool(m.group(1))), IndentedBody(self.indent_unit)
                    continue
                close_group()
                tabs, label, body = [], None, None

            m = TAB_RE.match(line) if not in_fence[i] else None
            if m:
                label, body = (m.group(2), bool(m.group(1))), IndentedBody(self.indent_unit)
            else:
                out.append(line)

        if body is not None:
            close_group()

        logger.debug("extracted %d tab group(s)", len(groups))
        return Extraction(text='\n'.join(out), records=groups)


def extract_tabs(text: str, indent_unit: int = 4) -> Extraction:
    """Replace every tab group in text with a placeholder and return the records."""
    return TabGroupExtractor(indent_unit).extract(text)

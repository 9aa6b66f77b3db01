"""Admonition extraction: `!!! kind "title"` headers with indented bodies"""

import logging
import re

from mdview.core.extract.body import IndentedBody, State
from mdview.core.fence import fence_states, split_lines
from mdview.core.models import Admonition, BlockKind, Extraction
from mdview.core.segments import placeholder


logger = logging.getLogger(__name__)

ADMONITION_RE = re.compile(r'^(!!!|\?\?\?\+?)\s+([\w-]+)(?:\s+"([^"]*)")?\s*$')

DEFAULT_TITLES: dict[str, str] = {
    'note':      'Note',
    'info':      'Info',
    'tip':       'Tip',
    'success':   'Success',
    'warning':   'Warning',
    'danger':    'Danger',
    'error':     'Error',
    'bug':       'Bug',
    'example':   'Example',
    'quote':     'Quote',
    'abstract':  'Abstract',
    'question':  'Question',
    'failure':   'Failure',
    'important': 'Important',
}


def default_title(kind: str) -> str:
    """Display title for an admonition without an explicit one."""
    return DEFAULT_TITLES.get(kind, kind.capitalize())


class AdmonitionExtractor:
    """Single pass over lines with states Outside, InBlock and InBlockCode.

    An unterminated block at end of document is closed and kept.
    """

    def __init__(self, indent_unit: int = 4):
        self.indent_unit = indent_unit

    def extract(self, text: str) -> Extraction:
        lines = split_lines(text)
        in_fence = fence_states(lines)
        out: list[str] = []
        records: list[Admonition] = []
        header = None
        body: IndentedBody | None = None

        def close() -> None:
            marker, kind, title = header.groups()
            records.append(Admonition(
                kind=kind.lower(),
                title=title,
                body_text=body.text,
                ordinal=len(records),
                collapsible=marker.startswith('???'),
                expanded=marker == '???+',
            ))
            out.append(placeholder(BlockKind.admonition, records[-1].ordinal))
            out.extend(body.trailing)

        for i, line in enumerate(lines):
            state = body.state if body else State.outside
            if state is not State.outside:
                if body.accepts(line):
                    body.add(line)
                    continue
                close()
                header, body = None, None

            m = ADMONITION_RE.match(line) if not in_fence[i] else None
            if m:
                header, body = m, IndentedBody(self.indent_unit)
            else:
                out.append(line)

        if body is not None:
            close()

        logger.debug("extracted %d admonition(s)", len(records))
        return Extraction(text='\n'.join(out), records=records)


def extract_admonitions(text: str, indent_unit: int = 4) -> Extraction:
    """Replace every admonition in text with a placeholder and return the records."""
    return AdmonitionExtractor(indent_unit).extract(text)

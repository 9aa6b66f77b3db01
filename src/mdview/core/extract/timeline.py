"""Timeline extraction: runs of `- [x] 2024-01-01: title` task-list lines"""

import logging
import re

from mdview.core.fence import fence_states, split_lines
from mdview.core.models import BlockKind, Extraction, TimelineItem, TimelineList
from mdview.core.segments import placeholder


logger = logging.getLogger(__name__)

TASK_RE = re.compile(r'^-\s*\[([ xX])\]\s*(?:(\d{4}-\d{2}-\d{2}):?\s*)?(.+)$')
CONTAINER_OPEN_RE = re.compile(r'^:::\s*timeline\s*$')
CONTAINER_CLOSE_RE = re.compile(r'^:::\s*$')


def parse_task(line: str) -> TimelineItem | None:
    """Parse one task-list line; the date prefix is optional."""
    m = TASK_RE.match(line)
    if not m:
        return None
    return TimelineItem(
        title=m.group(3).strip(),
        date=m.group(2),
        completed=m.group(1) in ('x', 'X'),
    )


def extract_timelines(text: str) -> Extraction:
    """Replace each task-list run or `:::timeline` container with one placeholder."""
    lines = split_lines(text)
    in_fence = fence_states(lines)
    out: list[str] = []
    timelines: list[TimelineList] = []
    items: list[TimelineItem] = []
    in_container = False

    def flush() -> None:
        timelines.append(TimelineList(items=items, ordinal=len(timelines)))
        out.append(placeholder(BlockKind.timeline, timelines[-1].ordinal))

    for i, line in enumerate(lines):
        if in_container:
            if CONTAINER_CLOSE_RE.match(line):
                flush()
                items, in_container = [], False
            elif item := parse_task(line.strip()):
                items.append(item)
            continue

        item = parse_task(line) if not in_fence[i] else None
        if item:
            items.append(item)
            continue
        if items:
            flush()
            items = []

        if not in_fence[i] and CONTAINER_OPEN_RE.match(line):
            in_container = True
        else:
            out.append(line)

    if items or in_container:
        flush()

    logger.debug("extracted %d timeline(s)", len(timelines))
    return Extraction(text='\n'.join(out), records=timelines)

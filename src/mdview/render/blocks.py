"""Block widget renderers and the BlockKind dispatch table.

Each widget receives its own record and a BodyRenderer; it never sees sibling
blocks or document state. Adding a block type means extending BlockRecord and
BLOCK_RENDERERS.
"""

import html
from typing import Callable, Protocol

from mdview.core.extract.admonitions import default_title
from mdview.core.models import Admonition, BlockKind, CardGrid, TabGroup, TimelineList


class BodyRenderer(Protocol):
    def block(self, text: str) -> str: ...
    def inline(self, text: str) -> str: ...


def render_admonition(record: Admonition, body: BodyRenderer) -> str:
    kind = html.escape(record.kind)
    title = html.escape(record.title if record.title is not None else default_title(record.kind))
    inner = body.block(record.body_text) if record.body_text.strip() else ''
    if record.collapsible:
        open_attr = ' open' if record.expanded else ''
        return (
            f'<details class="admonition {kind}"{open_attr}>\n'
            f'<summary class="admonition-title">{title}</summary>\n{inner}</details>\n'
        )
    return f'<div class="admonition {kind}">\n<p class="admonition-title">{title}</p>\n{inner}</div>\n'


def render_tabs(record: TabGroup, body: BodyRenderer) -> str:
    if not record.tabs:
        return ''
    active = next((i for i, tab in enumerate(record.tabs) if tab.selected), 0)
    labels, panels = [], []
    for i, tab in enumerate(record.tabs):
        state = ' active' if i == active else ''
        labels.append(
            f'<button class="tabbed-label{state}" data-tab="{i}" type="button">{html.escape(tab.label)}</button>'
        )
        hidden = '' if i == active else ' hidden'
        panels.append(f'<div class="tabbed-block{state}" data-tab="{i}"{hidden}>\n{body.block(tab.body_text)}</div>')
    return (
        f'<div class="tabbed-set" data-tabs="{record.ordinal}">\n'
        f'<div class="tabbed-labels">{"".join(labels)}</div>\n'
        f'<div class="tabbed-content">\n' + '\n'.join(panels) + '\n</div>\n</div>\n'
    )


def render_cards(record: CardGrid, body: BodyRenderer) -> str:
    if not record.cards:
        return ''
    cards = []
    for card in record.cards:
        parts = [f'<h4 class="card-title">{body.inline(card.title)}</h4>']
        if card.body_text:
            parts.append(f'<p class="card-body">{body.inline(card.body_text)}</p>')
        if card.link:
            parts.append(
                f'<a class="card-link" href="{html.escape(card.link.url)}">{html.escape(card.link.text)} →</a>'
            )
        cards.append('<div class="card">' + ''.join(parts) + '</div>')
    return '<div class="grid cards">\n' + '\n'.join(cards) + '\n</div>\n'


def render_timeline(record: TimelineList, body: BodyRenderer) -> str:
    if not record.items:
        return ''
    items = []
    for i, item in enumerate(record.items):
        status = 'completed' if item.completed else 'pending'
        marker = '✓' if item.completed else '○'
        date = f'<time class="timeline-date">{html.escape(item.date)}</time>' if item.date else ''
        items.append(
            f'<li class="timeline-item {status}" id="timeline-{record.ordinal}-{i}">'
            f'<span class="timeline-marker">{marker}</span>'
            f'<span class="timeline-title">{body.inline(item.title)}</span>{date}</li>'
        )
    return '<ol class="timeline">\n' + '\n'.join(items) + '\n</ol>\n'


BLOCK_RENDERERS: dict[BlockKind, Callable[..., str]] = {
    BlockKind.admonition: render_admonition,
    BlockKind.tabs:       render_tabs,
    BlockKind.grid:       render_cards,
    BlockKind.timeline:   render_timeline,
}

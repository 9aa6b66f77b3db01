"""Run the block extractors in their fixed order over a normalized document"""

from functools import partial
from typing import Callable

from mdview.core.extract.admonitions import extract_admonitions
from mdview.core.extract.grid import extract_grids
from mdview.core.extract.tabs import extract_tabs
from mdview.core.extract.timeline import extract_timelines
from mdview.core.models import BlockKind, Extraction


def extractor_chain(indent_unit: int = 4) -> list[tuple[BlockKind, Callable[[str], Extraction]]]:
    """Grid cards, then admonitions, then tab groups, then timelines."""
    return [
        (BlockKind.grid,       extract_grids),
        (BlockKind.admonition, partial(extract_admonitions, indent_unit=indent_unit)),
        (BlockKind.tabs,       partial(extract_tabs, indent_unit=indent_unit)),
        (BlockKind.timeline,   extract_timelines),
    ]


def extract_blocks(text: str, indent_unit: int = 4) -> tuple[str, dict[BlockKind, list]]:
    """Feed each extractor the previous one's output; return final text and records per kind."""
    records: dict[BlockKind, list] = {}
    for kind, extractor in extractor_chain(indent_unit):
        result = extractor(text)
        text = result.text
        records[kind] = result.records
    return text, records

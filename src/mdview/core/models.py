"""Block records, headings, and segment models for the preprocessing pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BlockKind(str, Enum):
    """Closed set of extracted block types; the value is embedded in placeholder tokens."""
    admonition = "ADMONITION"
    tabs = "TABS"
    grid = "GRID"
    timeline = "TIMELINE"


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Admonition(Record):
    """A callout box: `!!! kind "title"` followed by an indented body."""
    block: Literal[BlockKind.admonition] = BlockKind.admonition
    kind: str
    title: Optional[str] = None
    body_text: str = ""
    ordinal: int
    collapsible: bool = False       # ??? header
    expanded: bool = False          # ???+ header


class Tab(Record):
    label: str
    body_text: str = ""
    selected: bool = False


class TabGroup(Record):
    block: Literal[BlockKind.tabs] = BlockKind.tabs
    tabs: tuple[Tab, ...]
    ordinal: int


class CardLink(Record):
    text: str
    url: str


class Card(Record):
    title: str
    body_text: str = ""
    link: Optional[CardLink] = None


class CardGrid(Record):
    block: Literal[BlockKind.grid] = BlockKind.grid
    cards: tuple[Card, ...]
    ordinal: int


class TimelineItem(Record):
    title: str
    date: Optional[str] = None
    completed: bool = False


class TimelineList(Record):
    block: Literal[BlockKind.timeline] = BlockKind.timeline
    items: tuple[TimelineItem, ...]
    ordinal: int


BlockRecord = Annotated[
    Union[Admonition, TabGroup, CardGrid, TimelineList],
    Field(discriminator="block"),
]


class HeadingEntry(Record):
    id: str
    text: str
    level: int = Field(ge=1, le=6)
    line: Optional[int] = Field(default=None, exclude=True)   # line in the preprocessed text


class Plain(Record):
    """Standard markup handed to the markdown renderer as-is."""
    type: Literal["plain"] = "plain"
    text: str


class BlockReference(Record):
    """Pointer to an extracted block by kind and per-extractor ordinal."""
    type: Literal["block"] = "block"
    block: BlockKind
    ordinal: int


RenderSegment = Annotated[Union[Plain, BlockReference], Field(discriminator="type")]


@dataclass(frozen=True)
class Extraction:
    """Result of one extractor pass: rewritten text plus the records it emitted."""
    text:    str
    records: list


@dataclass(frozen=True)
class PreprocessedDocument:
    """Everything derived from one document before HTML rendering."""
    text:         str                          # final text, placeholders included
    records:      dict[BlockKind, list]        # per kind, indexed by ordinal
    headings:     list[HeadingEntry]
    segments:     list
    front_matter: dict[str, Any] = field(default_factory=dict)

    def record_for(self, ref: BlockReference):
        """Return the record a BlockReference points to, or None if it is missing."""
        records = self.records.get(ref.block, [])
        if 0 <= ref.ordinal < len(records) and records[ref.ordinal].ordinal == ref.ordinal:
            return records[ref.ordinal]
        return next((r for r in records if r.ordinal == ref.ordinal), None)


class RenderedDocument(BaseModel):
    html: str
    headings: list[HeadingEntry] = []
    front_matter: dict[str, Any] = {}
    segments: list[RenderSegment] = []

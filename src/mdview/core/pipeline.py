"""Preprocessing pipeline: load, extract blocks, transform inline, collect headings, split"""

import logging

from mdview.core.extract.extract import extract_blocks
from mdview.core.inline import transform_inline
from mdview.core.models import PreprocessedDocument
from mdview.core.parse import load_text
from mdview.core.segments import split_segments
from mdview.core.toc import extract_headings


logger = logging.getLogger(__name__)


def preprocess(
    raw: str,
    indent_unit: int = 4,
    dedent: bool = True,
    front_matter: bool = True,
    ) -> PreprocessedDocument:
    """Run stages 1-5 over a raw document. Never raises for document content."""
    fm, text = load_text(raw, front_matter)
    text, records = extract_blocks(text, indent_unit)
    text = transform_inline(text, indent_unit, dedent)
    headings = extract_headings(text)
    segments = split_segments(text)
    logger.debug(
        "preprocessed %d chars into %d segment(s), %d heading(s)",
        len(raw), len(segments), len(headings),
    )
    return PreprocessedDocument(
        text=text,
        records=records,
        headings=headings,
        segments=segments,
        front_matter=fm,
    )

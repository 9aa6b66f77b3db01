"""Document loading: newline normalization, reserved-character stripping, YAML front matter"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from mdview.core.fence import normalize_newlines
from mdview.core.segments import strip_reserved


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---[ \t]*\n(.*?)\n---[ \t]*(?:\n|$)', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx', '.markdown'}


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Return (front_matter, body). Invalid or non-mapping YAML leaves text untouched."""
    m = FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        fm = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as e:
        logger.warning("ignoring invalid YAML front matter: %s", e)
        return {}, text
    if not isinstance(fm, dict):
        logger.warning("ignoring front matter: expected a mapping, got %s", type(fm).__name__)
        return {}, text
    return fm, text[m.end():]


def load_text(raw: str, front_matter: bool = True) -> tuple[dict[str, Any], str]:
    """Normalize raw document text and split off front matter."""
    text = strip_reserved(normalize_newlines(raw))
    if front_matter:
        return split_front_matter(text)
    return {}, text


def read_document(path: Path) -> str:
    """Read a markdown file as UTF-8 text."""
    if path.suffix.lower() not in MD_EXTENSIONS:
        logger.info("reading %s as markdown despite its extension", path)
    return path.read_text(encoding='utf-8')

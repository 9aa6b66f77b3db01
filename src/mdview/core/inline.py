"""Inline text transformers applied after block extraction.

Each transformer is a pure str -> str function that leaves fenced code
regions byte-for-byte intact, using the fence spans from the line classifier.
"""

import html
import re
from typing import Callable

from mdview.core.fence import fence_spans, split_lines


KBD_RE = re.compile(r'\+\+(?=\S)([^+\n]+(?:\+[^+\n]+)*)(?<=\S)\+\+')
CODE_SPAN_RE = re.compile(r'(`+)(.+?)\1')

ICON_LINK_RE = re.compile(r'\[:[a-zA-Z][\w-]*:\s*([^\]]+)\]\(([^)]+)\)')
ICON_WITH_ATTRS_RE = re.compile(r':[a-zA-Z][\w-]*:\{[^}]*\}')
ARROW_ICON_RE = re.compile(r':(?:material|octicons|fontawesome)-(?:[\w-]*-)?arrow-[\w-]+:')
ICONSET_RE = re.compile(r':(?:material|octicons|fontawesome|simple)-[\w-]+:')
ATTR_LIST_RE = re.compile(r'\{\s*[.#][^}]*\}')
DIV_ALIGN_RE = re.compile(r'<div align="[^"]*">')
GRID_DIV_RE = re.compile(r'<div class="grid cards"[^>]*>')


def map_outside_fences(text: str, fn: Callable[[str], str]) -> str:
    """Apply fn to each run of lines outside fences; fence runs pass through untouched."""
    lines = split_lines(text)
    parts = []
    for start, end, inside in fence_spans(lines):
        chunk = '\n'.join(lines[start:end])
        parts.append(chunk if inside else fn(chunk))
    return '\n'.join(parts)


def _kbd(keys: str) -> str:
    return '+'.join(f'<kbd>{html.escape(k.strip())}</kbd>' for k in keys.split('+'))


def _outside_code_spans(text: str, fn: Callable[[str], str]) -> str:
    """Apply fn to the parts of text that are not inline code spans."""
    parts, pos = [], 0
    for m in CODE_SPAN_RE.finditer(text):
        parts.append(fn(text[pos:m.start()]))
        parts.append(m.group(0))
        pos = m.end()
    parts.append(fn(text[pos:]))
    return ''.join(parts)


def convert_keyboard_shortcuts(text: str) -> str:
    """Convert `++ctrl+shift+p++` notation into per-key <kbd> badges."""
    def convert(chunk: str) -> str:
        return _outside_code_spans(chunk, lambda s: KBD_RE.sub(lambda m: _kbd(m.group(1)), s))
    return map_outside_fences(text, convert)


def _clean_icons(chunk: str) -> str:
    chunk = ICON_LINK_RE.sub(r'[\1](\2)', chunk)
    chunk = ICON_WITH_ATTRS_RE.sub('', chunk)
    chunk = ARROW_ICON_RE.sub('→', chunk)
    chunk = ICONSET_RE.sub('', chunk)
    chunk = ATTR_LIST_RE.sub('', chunk)
    chunk = DIV_ALIGN_RE.sub('<div>', chunk)
    return GRID_DIV_RE.sub('', chunk)


def strip_legacy_icons(text: str) -> str:
    """Drop icon shortcodes and attribute lists; arrow icons become a → glyph."""
    return map_outside_fences(text, lambda chunk: _outside_code_spans(chunk, _clean_icons))


def dedent_non_code(text: str, indent_unit: int = 4) -> str:
    """Strip one indent unit from every line outside fenced code."""
    def dedent(chunk: str) -> str:
        prefix = ' ' * indent_unit
        return '\n'.join(line[indent_unit:] if line.startswith(prefix) else line for line in chunk.split('\n'))
    return map_outside_fences(text, dedent)


def transform_inline(text: str, indent_unit: int = 4, dedent: bool = True) -> str:
    """Run the inline transformers in pipeline order."""
    text = convert_keyboard_shortcuts(text)
    text = strip_legacy_icons(text)
    if dedent:
        text = dedent_non_code(text, indent_unit)
    return text

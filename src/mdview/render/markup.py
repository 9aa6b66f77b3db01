"""Standard-markup rendering via markdown-it-py with a shared customization table.

One MarkupRenderer is built per document render and used for every plain
segment and every block body, so headings, code and images render the same
way everywhere in the page.
"""

import html
import logging
from dataclasses import dataclass, field
from typing import Callable

from markdown_it import MarkdownIt

from mdview.core.models import HeadingEntry
from mdview.core.utils.slug import SlugRegistry, slugify
from mdview.render.highlight import PygmentsHighlighter, error_box, mermaid_container, parse_code_info


logger = logging.getLogger(__name__)

CodeHandler = Callable[[str, str], str]        # (code, fence info) -> html
DiagramHandler = Callable[[str], str]          # diagram source -> html
ImageResolver = Callable[[str], str]           # src -> resolved src

DIAGRAM_LANGUAGES = {'mermaid'}


class AnchoredHeading:
    """Heading factory: id attribute plus a trailing self-link."""

    def __init__(self, enable_anchors: bool = True):
        self.enable_anchors = enable_anchors

    def open(self, level: int, slug: str) -> str:
        id_attr = f' id="{html.escape(slug)}"' if self.enable_anchors else ''
        return f'<h{level}{id_attr}>'

    def close(self, level: int, slug: str) -> str:
        if not self.enable_anchors:
            return f'</h{level}>\n'
        return f'<a class="heading-anchor" href="#{html.escape(slug)}" aria-label="Link to this heading">#</a></h{level}>\n'


@dataclass(frozen=True)
class Components:
    """Customization table handed to every standard-markup render of one document."""
    heading: AnchoredHeading = field(default_factory=AnchoredHeading)
    code:    CodeHandler     = field(default_factory=PygmentsHighlighter)
    diagram: DiagramHandler  = mermaid_container
    image:   ImageResolver   = lambda src: src


class AnchorAssigner:
    """Assigns heading ids during rendering, consistent with the extracted TOC.

    A rendered ATX heading takes the id of the TOC entry extracted from the
    same source line. Any other heading claims a fresh id from the shared
    registry, which already holds every TOC id.
    """

    def __init__(self, headings: list[HeadingEntry]):
        self.registry = SlugRegistry()
        for entry in headings:
            self.registry.reserve(entry.id)
        self._by_line = {entry.line: entry for entry in headings if entry.line is not None}
        self.matched: list[HeadingEntry] = []

    def assign(self, text: str, line: int | None = None) -> str:
        entry = self._by_line.pop(line, None) if line is not None else None
        if entry is not None:
            self.matched.append(entry)
            return entry.id
        return self.registry.claim(text)


def _inline_text(token) -> str:
    """Visible text of an inline token, as the TOC extractor sees it."""
    if not token.children:
        return token.content
    return ''.join(c.content for c in token.children if c.type in ('text', 'code_inline', 'image'))


class MarkupRenderer:
    """markdown-it-py renderer with heading, code, diagram and image rules installed."""

    def __init__(self, components: Components | None = None, preset: str = 'gfm-like'):
        self.components = components or Components()
        self._md = MarkdownIt(preset, options_update={"linkify": False, "html": True})
        self._default_image = self._md.renderer.rules["image"]
        self._md.renderer.rules["heading_open"] = self._heading_open
        self._md.renderer.rules["heading_close"] = self._heading_close
        self._md.renderer.rules["fence"] = self._fence
        self._md.renderer.rules["image"] = self._image

    def render(self, text: str, env: dict | None = None) -> str:
        """Render block-level markup. env carries "anchors" and, for top-level text, "line_offset"."""
        return self._md.render(text, env if env is not None else {})

    def render_inline(self, text: str, env: dict | None = None) -> str:
        return self._md.renderInline(text, env if env is not None else {})

    def _heading_open(self, tokens, idx, options, env):
        token = tokens[idx]
        level = int(token.tag[1])
        text = _inline_text(tokens[idx + 1])
        anchors = env.get("anchors") if isinstance(env, dict) else None
        if anchors is None:
            slug = slugify(text)
        else:
            offset = env.get("line_offset")
            line = None
            if offset is not None and token.map and token.markup.startswith("#"):
                line = offset + token.map[0]
            slug = anchors.assign(text, line)
        token.meta["slug"] = slug
        return self.components.heading.open(level, slug)

    def _heading_close(self, tokens, idx, options, env):
        token = tokens[idx]
        # heading_open is the nearest preceding token with the same tag
        opener = next(t for t in reversed(tokens[:idx]) if t.type == 'heading_open' and t.tag == token.tag)
        return self.components.heading.close(int(token.tag[1]), opener.meta.get("slug", ''))

    def _fence(self, tokens, idx, options, env):
        token = tokens[idx]
        language, _ = parse_code_info(token.info or '')
        code = token.content
        if language in DIAGRAM_LANGUAGES:
            kind, handler = 'diagram', lambda: self.components.diagram(code)
        else:
            kind, handler = 'code', lambda: self.components.code(code, token.info or '')
        try:
            return handler()
        except Exception as e:
            logger.warning("%s rendering failed (%s): %s", kind, language or 'plain', e)
            return error_box(kind, f"Failed to render {kind}: {e}", code)

    def _image(self, tokens, idx, options, env):
        token = tokens[idx]
        src = token.attrGet("src")
        if src:
            try:
                token.attrSet("src", self.components.image(src))
            except Exception as e:
                logger.warning("asset resolution failed for %r: %s", src, e)
        return self._default_image(tokens, idx, options, env)

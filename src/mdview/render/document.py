"""Segment dispatch: render a preprocessed document to HTML in document order"""

import logging
from typing import Callable, Optional

from mdview.config import Settings
from mdview.core.inline import convert_keyboard_shortcuts, strip_legacy_icons
from mdview.core.models import BlockReference, HeadingEntry, Plain, PreprocessedDocument, RenderedDocument
from mdview.core.pipeline import preprocess
from mdview.core.segments import split_segments
from mdview.render.assets import RenderContext, make_resolver
from mdview.render.blocks import BLOCK_RENDERERS
from mdview.render.highlight import PygmentsHighlighter, mermaid_container
from mdview.render.markup import (
    AnchorAssigner, AnchoredHeading, CodeHandler, Components, DiagramHandler, ImageResolver, MarkupRenderer,
)


logger = logging.getLogger(__name__)

HeadingsCallback = Callable[[list[HeadingEntry]], None]


class _BlockBody:
    """Renders block bodies with the document's MarkupRenderer; standard markup only.

    A body may hold placeholders of blocks extracted from inside it (card
    grids); those are rendered in place through resolve.
    """

    def __init__(self, markup: MarkupRenderer, anchors: AnchorAssigner, resolve: Callable[[BlockReference], str]):
        self.markup = markup
        self.anchors = anchors
        self.resolve = resolve

    def block(self, text: str) -> str:
        parts = []
        for segment in split_segments(text):
            if isinstance(segment, BlockReference):
                parts.append(self.resolve(segment))
            elif segment.text.strip():
                prepared = strip_legacy_icons(convert_keyboard_shortcuts(segment.text))
                parts.append(self.markup.render(prepared, {"anchors": self.anchors}))
        return ''.join(parts)

    def inline(self, text: str) -> str:
        text = strip_legacy_icons(convert_keyboard_shortcuts(text))
        return self.markup.render_inline(text, {"anchors": self.anchors})


class DocumentRenderer:
    """Renders documents with one customization table per document.

    code, diagram and image override the default collaborators (Pygments,
    a Mermaid container, and context-based asset resolution).
    """

    def __init__(
        self,
        settings: Settings | None = None,
        code: Optional[CodeHandler] = None,
        diagram: Optional[DiagramHandler] = None,
        image: Optional[ImageResolver] = None,
        ):
        self.settings = settings or Settings()
        self.code = code or PygmentsHighlighter(self.settings.code_style, self.settings.line_numbers_after)
        self.diagram = diagram or mermaid_container
        self.image = image

    def components_for(self, context: RenderContext | None = None) -> Components:
        context = context or RenderContext(language=self.settings.language, asset_base=self.settings.asset_base)
        return Components(
            heading=AnchoredHeading(self.settings.enable_anchors),
            code=self.code,
            diagram=self.diagram,
            image=self.image or make_resolver(context),
        )

    def preprocess(self, raw: str) -> PreprocessedDocument:
        return preprocess(
            raw,
            indent_unit=self.settings.indent_unit,
            dedent=self.settings.dedent,
            front_matter=self.settings.front_matter,
        )

    def render(
        self,
        raw: str,
        context: RenderContext | None = None,
        on_headings: HeadingsCallback | None = None,
        ) -> RenderedDocument:
        """Full parse and render.

        The returned headings are the TOC entries that were rendered as
        headings, so every one of them has an anchor in the html. on_headings
        is invoked once with that list.
        """
        doc = self.preprocess(raw)
        anchors = AnchorAssigner(doc.headings)
        html = self.render_segments(doc, context, anchors)
        rendered_ids = {h.id for h in anchors.matched}
        headings = [h for h in doc.headings if h.id in rendered_ids]
        if len(headings) < len(doc.headings):
            logger.debug("%d TOC heading(s) not rendered as headings", len(doc.headings) - len(headings))
        if on_headings is not None:
            on_headings(list(headings))
        return RenderedDocument(
            html=html,
            headings=headings,
            front_matter=doc.front_matter,
            segments=doc.segments,
        )

    def render_segments(
        self,
        doc: PreprocessedDocument,
        context: RenderContext | None = None,
        anchors: AnchorAssigner | None = None,
        ) -> str:
        """Render every segment in order; plain segments are never merged or reordered."""
        markup = MarkupRenderer(self.components_for(context), self.settings.parser_config)
        anchors = anchors or AnchorAssigner(doc.headings)
        body = _BlockBody(markup, anchors, lambda ref: self.render_block(doc, ref, body))
        parts = []
        line = 0
        for segment in doc.segments:
            if isinstance(segment, Plain):
                if segment.text.strip():
                    parts.append(markup.render(segment.text, {"anchors": anchors, "line_offset": line}))
                line += segment.text.count('\n')
            elif isinstance(segment, BlockReference):
                parts.append(self.render_block(doc, segment, body))
                line += 1       # the placeholder line
        return ''.join(parts)

    def render_block(self, doc: PreprocessedDocument, ref: BlockReference, body: _BlockBody) -> str:
        record = doc.record_for(ref)
        if record is None:
            logger.warning("no %s record for ordinal %d", ref.block.value, ref.ordinal)
            return ''
        return BLOCK_RENDERERS[ref.block](record, body)


def render_markdown(
    raw: str,
    settings: Settings | None = None,
    context: RenderContext | None = None,
    on_headings: HeadingsCallback | None = None,
    ) -> RenderedDocument:
    """Convenience wrapper: render raw markdown with default collaborators."""
    return DocumentRenderer(settings).render(raw, context, on_headings)

"""Content-hash memoization of rendered previews"""

import logging
from collections import OrderedDict

from mdview.core.models import RenderedDocument
from mdview.core.utils.hashing import sha256
from mdview.render.assets import RenderContext
from mdview.render.document import DocumentRenderer, HeadingsCallback


logger = logging.getLogger(__name__)


class PreviewCache:
    """Bounded LRU of RenderedDocuments keyed by content and render context.

    A hit returns the stored document without re-parsing, so on_headings is
    only invoked on a miss.
    """

    def __init__(self, renderer: DocumentRenderer | None = None, maxsize: int = 32):
        if maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")
        self.renderer = renderer or DocumentRenderer()
        self.maxsize = maxsize
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[str, RenderedDocument] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def key(raw: str, context: RenderContext | None = None) -> str:
        ctx = context or RenderContext()
        return sha256(f"{ctx.doc_path}\0{ctx.language}\0{ctx.asset_base}\0{raw}")

    def render(
        self,
        raw: str,
        context: RenderContext | None = None,
        on_headings: HeadingsCallback | None = None,
        ) -> RenderedDocument:
        key = self.key(raw, context)
        if key in self._entries:
            self.hits += 1
            self._entries.move_to_end(key)
            return self._entries[key]

        self.misses += 1
        doc = self.renderer.render(raw, context, on_headings)
        self._entries[key] = doc
        if len(self._entries) > self.maxsize:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("evicted preview %s", evicted[:12])
        return doc

    def clear(self) -> None:
        self._entries.clear()
        self.hits = self.misses = 0

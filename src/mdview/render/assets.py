"""Relative asset resolution for image references"""

import logging
from dataclasses import dataclass
from typing import Callable
from urllib.parse import urljoin, urlsplit


logger = logging.getLogger(__name__)

PASSTHROUGH_PREFIXES = ('http://', 'https://', '//', 'data:', '/', '#', 'mailto:')
_RESOLVE_ORIGIN = 'https://mdview.local'


@dataclass(frozen=True)
class RenderContext:
    """Optional per-document context used only to resolve relative assets."""
    doc_path: str = ''
    language: str = 'en'
    asset_base: str = '/docs'


def resolve_asset(src: str, language: str, doc_path: str, base: str = '/docs') -> str:
    """Resolve a relative src against <base>/<language>/<doc dir>/.

    Absolute, protocol-relative, data: and root-relative references are
    returned unchanged, as is anything that cannot be resolved.
    """
    if not src or src.startswith(PASSTHROUGH_PREFIXES):
        return src
    doc_dir = doc_path.rsplit('/', 1)[0] + '/' if '/' in doc_path else ''
    prefix = '/'.join(p.strip('/') for p in (base, language, doc_dir) if p.strip('/'))
    root = f"{_RESOLVE_ORIGIN}/{prefix}/" if prefix else f"{_RESOLVE_ORIGIN}/"
    try:
        resolved = urlsplit(urljoin(root, src))
    except ValueError as e:
        logger.warning("could not resolve asset %r: %s", src, e)
        return src
    return resolved.path + (f"?{resolved.query}" if resolved.query else '') + (f"#{resolved.fragment}" if resolved.fragment else '')


def make_resolver(context: RenderContext) -> Callable[[str], str]:
    """Bind resolve_asset to a document context."""
    def resolve(src: str) -> str:
        return resolve_asset(src, context.language, context.doc_path, context.asset_base)
    return resolve

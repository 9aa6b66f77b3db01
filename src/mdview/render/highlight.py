"""Default code and diagram collaborators: Pygments highlighting and a Mermaid container"""

import html
import re

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound


LINE_SPEC_RE = re.compile(r'\{([^}]+)\}')


def parse_code_info(info: str) -> tuple[str, list[int]]:
    """Split a fence info string like 'js{1,3-5}' into ('js', [1, 3, 4, 5])."""
    first = info.strip().split(maxsplit=1)[0] if info.strip() else ''
    lines: list[int] = []
    m = LINE_SPEC_RE.search(first)
    if m:
        for part in m.group(1).split(','):
            start, _, end = part.strip().partition('-')
            if start.isdigit() and (not end or end.isdigit()):
                lines.extend(range(int(start), int(end or start) + 1))
    return LINE_SPEC_RE.sub('', first).lower(), lines


class PygmentsHighlighter:
    """Code handler: highlights with Pygments, line numbers for long blocks."""

    def __init__(self, style: str = 'default', line_numbers_after: int = 5):
        self.style = style
        self.line_numbers_after = line_numbers_after

    def __call__(self, code: str, info: str) -> str:
        language, hl_lines = parse_code_info(info)
        try:
            lexer = get_lexer_by_name(language) if language else TextLexer()
        except ClassNotFound:
            lexer = TextLexer()
        numbered = bool(self.line_numbers_after) and len(code.rstrip('\n').split('\n')) > self.line_numbers_after
        formatter = HtmlFormatter(
            style=self.style,
            cssclass='highlight',
            hl_lines=hl_lines,
            linenos='table' if numbered else False,
        )
        lang_attr = f' data-language="{html.escape(language)}"' if language else ''
        return f'<div class="code-block"{lang_attr}>{highlight(code, lexer, formatter)}</div>\n'


def mermaid_container(source: str) -> str:
    """Diagram handler: leave the source in a container for a client-side Mermaid run."""
    return f'<div class="mermaid">\n{html.escape(source)}\n</div>\n'


def error_box(kind: str, message: str, source: str) -> str:
    """Scoped failure output for one block; the source stays inspectable."""
    return (
        f'<div class="render-error" data-kind="{html.escape(kind)}">'
        f'<p class="render-error-message">{html.escape(message)}</p>'
        f'<pre><code>{html.escape(source)}</code></pre>'
        '</div>\n'
    )

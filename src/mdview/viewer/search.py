"""Search over source text and match highlighting in rendered HTML"""

import re

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString
from pydantic import BaseModel


CONTEXT_CHARS = 30
SKIP_TAGS = frozenset({'script', 'style', 'textarea'})


class SearchResult(BaseModel):
    index: int          # offset of the match in the whole text
    text: str           # matched text as written
    context: str
    line_number: int    # 1-based


def search_in_content(text: str, query: str, case_sensitive: bool = False) -> list[SearchResult]:
    """Find every occurrence of query, overlapping included, line by line."""
    if not query.strip():
        return []
    needle = query if case_sensitive else query.lower()
    results = []
    offset = 0
    for number, line in enumerate(text.split('\n'), start=1):
        haystack = line if case_sensitive else line.lower()
        found = haystack.find(needle)
        while found != -1:
            start = max(0, found - CONTEXT_CHARS)
            end = min(len(line), found + len(query) + CONTEXT_CHARS)
            context = ('...' if start > 0 else '') + line[start:end] + ('...' if end < len(line) else '')
            results.append(SearchResult(
                index=offset + found,
                text=line[found:found + len(query)],
                context=context,
                line_number=number,
            ))
            found = haystack.find(needle, found + 1)
        offset += len(line) + 1
    return results


def highlight_matches(html: str, query: str, case_sensitive: bool = False) -> str:
    """Wrap matches inside text nodes in <mark data-search-match="N">.

    Tag names, attributes, comments and script/style content are left alone;
    N counts matches in document order starting at 0.
    """
    if not query.strip():
        return html
    pattern = re.compile(re.escape(query), 0 if case_sensitive else re.IGNORECASE)
    soup = BeautifulSoup(html, "html.parser")
    count = 0
    for node in list(soup.find_all(string=True)):
        if isinstance(node, PreformattedString) or node.parent is None or node.parent.name in SKIP_TAGS:
            continue
        text = str(node)
        if not pattern.search(text):
            continue
        pieces, pos = [], 0
        for m in pattern.finditer(text):
            if m.start() > pos:
                pieces.append(NavigableString(text[pos:m.start()]))
            mark = soup.new_tag("mark", attrs={"data-search-match": str(count)})
            mark.string = m.group(0)
            pieces.append(mark)
            count += 1
            pos = m.end()
        if pos < len(text):
            pieces.append(NavigableString(text[pos:]))
        node.replace_with(*pieces)
    return str(soup)


def count_matches(html: str) -> int:
    """Number of highlighted matches in html produced by highlight_matches."""
    return len(BeautifulSoup(html, "html.parser").find_all("mark", attrs={"data-search-match": True}))

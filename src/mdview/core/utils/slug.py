"""Heading slug generation shared by the TOC extractor and the heading renderer"""

import re


def slugify(text: str) -> str:
    """Convert text to a case-folded, hyphen-separated anchor slug; empty input gives 'heading'."""
    text = text.casefold().strip()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-') or 'heading'


class SlugRegistry:
    """Hands out unique slugs within one document: repeats get -1, -2, ... suffixes."""

    def __init__(self):
        self._seen: set[str] = set()

    def __contains__(self, slug: str) -> bool:
        return slug in self._seen

    def reserve(self, slug: str) -> None:
        """Mark an already-assigned slug as taken."""
        self._seen.add(slug)

    def claim(self, text: str) -> str:
        slug = slugify(text)
        if slug in self._seen:
            counter = 1
            while f"{slug}-{counter}" in self._seen:
                counter += 1
            slug = f"{slug}-{counter}"
        self._seen.add(slug)
        return slug

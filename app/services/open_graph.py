"""Open Graph meta tag extraction."""
from typing import Optional, Sequence

from bs4 import Tag

from app.models.extraction import OpenGraphMap
from app.models.page import PageDocument

# Candidate keys per field, highest priority first
VIDEO_KEYS = ("og:video:url", "og:video", "og:video:secure_url", "og:video:url:secure")
THUMBNAIL_KEYS = ("og:image", "og:image:secure_url")
CAPTION_KEYS = ("og:description", "description")


class OpenGraphExtractor:
    """Reads every <meta> element of a page into a property map."""

    def extract(self, document: PageDocument) -> OpenGraphMap:
        """Collect ``property`` (or ``name``) to ``content`` pairs.

        Keys are lower-cased. When a key repeats, the first declaration wins.
        """
        og: OpenGraphMap = {}
        for meta in document.soup.find_all("meta"):
            if not isinstance(meta, Tag):
                continue
            key = meta.get("property") or meta.get("name")
            content = meta.get("content")
            if not isinstance(key, str) or not isinstance(content, str):
                continue
            if key and content:
                og.setdefault(key.lower(), content)
        return og


def first_present(og: OpenGraphMap, keys: Sequence[str]) -> Optional[str]:
    """Return the first non-empty value among ``keys``."""
    for key in keys:
        value = og.get(key)
        if value:
            return value
    return None

"""Best-effort caption lookup for pages without structured captions."""
import re
from typing import Optional

from bs4 import Tag

from app.models.page import PageDocument

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: Optional[str]) -> str:
    """Collapse whitespace runs to a single space and trim."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


class CaptionResolver:
    """Falls back to the description meta tag, then the first paragraph."""

    def resolve(self, document: PageDocument) -> str:
        soup = document.soup

        meta = soup.find("meta", attrs={"name": "description"})
        if isinstance(meta, Tag):
            content = meta.get("content")
            caption = collapse_whitespace(content if isinstance(content, str) else None)
            if caption:
                return caption

        paragraph = soup.find("p")
        if isinstance(paragraph, Tag):
            return collapse_whitespace(paragraph.get_text())

        return ""

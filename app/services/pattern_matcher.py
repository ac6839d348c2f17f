"""Last-resort video URL lookup in inline script payloads.

Platforms that expose nothing in meta tags or JSON-LD often still ship the
player address inside an inline JSON blob. The markers below target those
undocumented field names directly, so when a platform renames a field only
this table needs to change.
"""
import re
from typing import List, NamedTuple, Optional, Pattern, Tuple

# A JSON string body: any run of non-quote characters or escape pairs
_JSON_CHARS = r'(?:[^"\\]|\\.)'


class FallbackMarker(NamedTuple):
    platform: str
    pattern: Pattern[str]
    # Case-insensitive substring the value must contain, if any
    required: Optional[str] = None


FALLBACK_MARKERS: List[FallbackMarker] = [
    # TikTok player address, e.g. "playAddr":"https:\/\/v16.tiktokcdn.com\/...mp4?..."
    FallbackMarker(
        "tiktok",
        re.compile(rf'"playAddr"\s*:\s*"({_JSON_CHARS}*)"', re.IGNORECASE),
        ".mp4",
    ),
    # Instagram embedded media, e.g. "video_url":"https:\/\/scontent.cdninstagram.com\/..."
    FallbackMarker(
        "instagram",
        re.compile(rf'"video_url"\s*:\s*"({_JSON_CHARS}+)"', re.IGNORECASE),
    ),
]


class PatternFallbackMatcher:
    """Applies the fallback markers in order; the first match wins."""

    def __init__(self, markers: Optional[List[FallbackMarker]] = None):
        self.markers = markers if markers is not None else FALLBACK_MARKERS

    def match(self, raw_html: str) -> Optional[str]:
        marker = self.find(raw_html)
        return marker[1] if marker else None

    def find(self, raw_html: str) -> Optional[Tuple[str, str]]:
        """Return ``(platform, raw_value)`` for the first marker that matches."""
        for marker in self.markers:
            for found in marker.pattern.finditer(raw_html):
                value = found.group(1)
                if marker.required is None or marker.required in value.lower():
                    return marker.platform, value
        return None

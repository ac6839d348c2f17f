"""Removal of embedded-JSON escaping from extracted URLs."""

ESCAPED_AMPERSAND = "\\u0026"


def normalize_url(raw_url: str) -> str:
    """Resolve ``\\u0026`` to ``&`` then drop every remaining backslash.

    Idempotent: the output contains no backslashes, so a second pass is a no-op.
    """
    return raw_url.replace(ESCAPED_AMPERSAND, "&").replace("\\", "")

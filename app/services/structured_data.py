"""JSON-LD structured data scanning."""
import json
from typing import Any, Iterator, List, Optional

from bs4 import Tag

from app.models.extraction import FailureReason, StructuredDataRecord
from app.models.page import PageDocument
from app.utils.logging import CorrelatedLogger

JSON_LD_TYPE = "application/ld+json"


class StructuredDataScanner:
    """Decodes each embedded JSON-LD block into StructuredDataRecords.

    Blocks are decoded independently: a malformed block is logged and
    skipped, and scanning continues with the next one.
    """

    def scan(
        self,
        document: PageDocument,
        logger: Optional[CorrelatedLogger] = None
    ) -> Iterator[StructuredDataRecord]:
        """Yield records in document order."""
        logger = logger or CorrelatedLogger(__name__)
        for index, script in enumerate(document.soup.find_all("script", type=JSON_LD_TYPE)):
            if not isinstance(script, Tag):
                continue
            records = self.decode_block(script.get_text(), index, logger)
            if records is None:
                continue
            yield from records

    def decode_block(
        self,
        text: str,
        index: int = 0,
        logger: Optional[CorrelatedLogger] = None
    ) -> Optional[List[StructuredDataRecord]]:
        """Decode one block, returning None if it is not valid JSON."""
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            (logger or CorrelatedLogger(__name__)).warning(
                f"[{FailureReason.PARSE_ERROR.value}] Skipping malformed JSON-LD block #{index}: {str(e)}"
            )
            return None
        return [StructuredDataRecord.from_json(item) for item in _objects(data)]


def _objects(data: Any) -> Iterator[dict]:
    """Flatten a decoded JSON-LD value into its top-level objects."""
    if isinstance(data, list):
        for item in data:
            yield from _objects(item)
    elif isinstance(data, dict):
        yield data
        graph = data.get("@graph")
        if isinstance(graph, list):
            for item in graph:
                if isinstance(item, dict):
                    yield item

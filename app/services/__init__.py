"""Service layer modules for the Social Media Extractor."""
from .page_fetcher import PageFetcher
from .document_parser import DocumentParser
from .open_graph import OpenGraphExtractor
from .structured_data import StructuredDataScanner
from .pattern_matcher import PatternFallbackMatcher
from .url_normalizer import normalize_url
from .caption_resolver import CaptionResolver
from .result_assembler import ResultAssembler
from .extraction_service import ExtractionService

__all__ = [
    "PageFetcher", "DocumentParser", "OpenGraphExtractor", "StructuredDataScanner",
    "PatternFallbackMatcher", "normalize_url", "CaptionResolver", "ResultAssembler",
    "ExtractionService"
]

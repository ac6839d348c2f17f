"""Merges the extraction stages into one result."""
from typing import Optional

from app.core.exceptions import VideoNotFoundError
from app.models.extraction import ExtractionResult, ExtractionState, MediaCandidates
from app.models.page import PageDocument
from app.utils.logging import CorrelatedLogger

from .caption_resolver import CaptionResolver, collapse_whitespace
from .open_graph import CAPTION_KEYS, THUMBNAIL_KEYS, VIDEO_KEYS, OpenGraphExtractor, first_present
from .pattern_matcher import PatternFallbackMatcher
from .structured_data import StructuredDataScanner
from .url_normalizer import normalize_url


class ResultAssembler:
    """Runs the extraction stages over a parsed page in priority order.

    Stage order is Open Graph, then JSON-LD, then the inline-script fallback.
    Each field is filled by the first stage that provides it and is never
    overwritten by a later one. The winning video URL is always normalized,
    and the caption resolver only runs when no stage produced a caption.
    """

    def __init__(
        self,
        open_graph: Optional[OpenGraphExtractor] = None,
        structured_data: Optional[StructuredDataScanner] = None,
        pattern_matcher: Optional[PatternFallbackMatcher] = None,
        caption_resolver: Optional[CaptionResolver] = None,
    ):
        self.open_graph = open_graph or OpenGraphExtractor()
        self.structured_data = structured_data or StructuredDataScanner()
        self.pattern_matcher = pattern_matcher or PatternFallbackMatcher()
        self.caption_resolver = caption_resolver or CaptionResolver()

    def assemble(
        self,
        document: PageDocument,
        source_url: str,
        request_id: Optional[str] = None
    ) -> ExtractionResult:
        """Build an ExtractionResult, raising VideoNotFoundError on a miss."""
        logger = CorrelatedLogger(__name__, request_id)
        candidates = MediaCandidates()
        _transition(logger, ExtractionState.PARSED)

        og = self.open_graph.extract(document)
        candidates.fill(
            video_url=first_present(og, VIDEO_KEYS),
            thumbnail=first_present(og, THUMBNAIL_KEYS),
            caption=first_present(og, CAPTION_KEYS),
        )
        _transition(logger, ExtractionState.OG_RESOLVED, candidates)

        if not candidates.video_url or not candidates.caption:
            for record in self.structured_data.scan(document, logger):
                candidates.fill(
                    video_url=record.video,
                    caption=record.caption_text,
                    thumbnail=record.thumbnail_url,
                )
        _transition(logger, ExtractionState.STRUCTURED_RESOLVED, candidates)

        if not candidates.video_url:
            found = self.pattern_matcher.find(document.raw_html)
            if found:
                platform, raw_url = found
                logger.info(f"Video URL located via {platform} fallback marker")
                candidates.fill(video_url=raw_url)
        _transition(logger, ExtractionState.FALLBACK_RESOLVED, candidates)

        if not candidates.video_url:
            _transition(logger, ExtractionState.FAILED, candidates)
            raise VideoNotFoundError(source_url)

        video_url = normalize_url(candidates.video_url)
        _transition(logger, ExtractionState.NORMALIZED, candidates)

        caption = collapse_whitespace(candidates.caption)
        if not caption:
            caption = self.caption_resolver.resolve(document)
        _transition(logger, ExtractionState.CAPTION_RESOLVED, candidates)

        result = ExtractionResult(
            video_url=video_url,
            caption=caption,
            thumbnail=candidates.thumbnail,
            source=source_url,
        )
        _transition(logger, ExtractionState.DONE)
        return result


def _transition(
    logger: CorrelatedLogger,
    state: ExtractionState,
    candidates: Optional[MediaCandidates] = None
) -> None:
    if candidates is None:
        logger.debug(f"state={state.value}")
        return
    logger.debug(
        f"state={state.value} video={bool(candidates.video_url)} "
        f"caption={bool(candidates.caption)} thumbnail={bool(candidates.thumbnail)}"
    )

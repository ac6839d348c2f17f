"""Extraction service for social media post pages."""
from datetime import datetime
from typing import Optional

from app.core.exceptions import ExtractionFailedError, MediaExtractorBaseException
from app.models.extraction import ExtractionFailure, ExtractionResult, ExtractionState
from app.models.requests import ExtractionRequest
from app.utils.logging import CorrelatedLogger, MetricsLogger
from app.utils.validators import URLValidator

from .document_parser import DocumentParser
from .page_fetcher import PageFetcher
from .result_assembler import ResultAssembler


class ExtractionService:
    """Service for post extraction: fetch, parse, then assemble."""

    def __init__(
        self,
        fetcher: Optional[PageFetcher] = None,
        parser: Optional[DocumentParser] = None,
        assembler: Optional[ResultAssembler] = None,
    ):
        self.fetcher = fetcher or PageFetcher()
        self.parser = parser or DocumentParser()
        self.assembler = assembler or ResultAssembler()
        self.metrics = MetricsLogger()

    async def extract(
        self,
        request: ExtractionRequest,
        request_id: Optional[str] = None
    ) -> ExtractionResult:
        """Extract video URL, caption and thumbnail from a post page.

        Raises FetchError or VideoNotFoundError for the expected failures, and
        ExtractionFailedError wrapping anything else.
        """
        start_time = datetime.now()
        logger = CorrelatedLogger(__name__, request_id)
        url = request.source_url
        platform = URLValidator.get_platform_from_url(url)

        if not URLValidator.is_supported_platform(url):
            logger.info(f"No dedicated fallback marker for {url}; relying on page metadata")

        try:
            logger.debug(f"state={ExtractionState.FETCHING.value} url={url}")
            raw_html = await self.fetcher.fetch(url)
            document = self.parser.parse(raw_html)
            result = self.assembler.assemble(document, url, request_id)
        except MediaExtractorBaseException as e:
            self._log_failure(logger, request_id, url, platform, start_time, e)
            raise
        except Exception as e:
            logger.exception(f"Unexpected error extracting {url}")
            wrapped = ExtractionFailedError(url, str(e))
            self._log_failure(logger, request_id, url, platform, start_time, wrapped)
            raise wrapped from e

        logger.info(f"Successfully extracted video for: {url}")
        self.metrics.log_extraction_metrics(
            request_id=request_id or "-",
            url=url,
            platform=platform,
            success=True,
            processing_time_ms=_elapsed_ms(start_time)
        )
        return result

    def _log_failure(
        self,
        logger: CorrelatedLogger,
        request_id: Optional[str],
        url: str,
        platform: str,
        start_time: datetime,
        exc: MediaExtractorBaseException
    ) -> None:
        failure = ExtractionFailure.from_exception(exc)
        logger.error(f"Error extracting {url}: [{failure.reason.value}] {failure.message}")
        self.metrics.log_extraction_metrics(
            request_id=request_id or "-",
            url=url,
            platform=platform,
            success=False,
            processing_time_ms=_elapsed_ms(start_time),
            error_code=exc.error_code
        )


def _elapsed_ms(start_time: datetime) -> int:
    return int((datetime.now() - start_time).total_seconds() * 1000)

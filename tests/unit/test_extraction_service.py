"""Unit tests for the extraction service."""
import asyncio
import pytest
from unittest.mock import AsyncMock, Mock, patch

from app.core.exceptions import ExtractionFailedError, FetchError, VideoNotFoundError
from app.models.requests import ExtractionRequest
from app.services.extraction_service import ExtractionService
from app.services.page_fetcher import PageFetcher
from app.utils.logging import CorrelatedLogger

def _service(html=None, side_effect=None) -> ExtractionService:
    fetcher = Mock(spec=PageFetcher)
    fetcher.fetch = AsyncMock(return_value=html, side_effect=side_effect)
    return ExtractionService(fetcher=fetcher)

class TestExtractionService:
    """Test fetch, parse and assemble wiring."""

    @pytest.mark.asyncio
    async def test_extract_success(self):
        """A page with an Open Graph video yields a full result."""
        service = _service(
            '<meta property="og:video" content="https://x.test/v.mp4">'
            '<meta property="og:image" content="https://x.test/i.jpg">'
        )
        request = ExtractionRequest(source_url="https://www.tiktok.com/@u/video/1")

        result = await service.extract(request, "req_1")

        assert result.video_url == "https://x.test/v.mp4"
        assert result.thumbnail == "https://x.test/i.jpg"
        assert result.source == "https://www.tiktok.com/@u/video/1"

    @pytest.mark.asyncio
    async def test_extract_logs_metrics(self):
        """One metrics line is emitted per extraction."""
        service = _service('<meta property="og:video" content="https://x.test/v.mp4">')

        with patch.object(service.metrics, "log_extraction_metrics") as mock_metrics:
            await service.extract(ExtractionRequest(source_url="https://www.instagram.com/p/x/"), "req_2")

        mock_metrics.assert_called_once()
        kwargs = mock_metrics.call_args.kwargs
        assert kwargs["platform"] == "instagram"
        assert kwargs["success"] is True

    @pytest.mark.asyncio
    async def test_fetch_error_propagates(self):
        """Fetch errors are re-raised unchanged."""
        service = _service(side_effect=FetchError.from_status("https://x.test", 500))

        with pytest.raises(FetchError):
            await service.extract(ExtractionRequest(source_url="https://x.test"))

    @pytest.mark.asyncio
    async def test_not_found_propagates(self):
        """Extraction misses are re-raised unchanged."""
        service = _service("<html><body>nothing</body></html>")

        with patch.object(service.metrics, "log_extraction_metrics") as mock_metrics:
            with pytest.raises(VideoNotFoundError):
                await service.extract(ExtractionRequest(source_url="https://x.test"))

        assert mock_metrics.call_args.kwargs["error_code"] == "VIDEO_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_unexpected_error_wrapped(self):
        """Anything else becomes an ExtractionFailedError with the message kept."""
        service = _service(side_effect=RuntimeError("parser exploded"))

        with patch.object(CorrelatedLogger, "exception") as mock_exception:
            with pytest.raises(ExtractionFailedError) as exc_info:
                await service.extract(ExtractionRequest(source_url="https://x.test"))

        assert exc_info.value.message == "parser exploded"
        mock_exception.assert_called_once()
        assert "https://x.test" in mock_exception.call_args.args[0]

    @pytest.mark.asyncio
    async def test_concurrent_requests_are_independent(self):
        """Concurrent extractions on one service do not leak into each other."""
        pages = {
            "https://a.test": '<meta property="og:video" content="https://a.test/v.mp4">',
            "https://b.test": '<script>{"video_url":"https:\\/\\/b.test\\/v.mp4"}</script>',
        }
        fetcher = Mock(spec=PageFetcher)
        fetcher.fetch = AsyncMock(side_effect=lambda url: pages[url])
        service = ExtractionService(fetcher=fetcher)

        results = await asyncio.gather(
            service.extract(ExtractionRequest(source_url="https://a.test"), "req_a"),
            service.extract(ExtractionRequest(source_url="https://b.test"), "req_b"),
        )

        assert [r.video_url for r in results] == ["https://a.test/v.mp4", "https://b.test/v.mp4"]
        assert [r.source for r in results] == ["https://a.test", "https://b.test"]

class TestExtractionRequest:
    """Test request validation."""

    def test_strips_url(self):
        assert ExtractionRequest(source_url="  https://x.test ").source_url == "https://x.test"

    def test_rejects_blank_url(self):
        with pytest.raises(ValueError):
            ExtractionRequest(source_url="   ")

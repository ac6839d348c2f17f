"""Page retrieval service using requests."""
import asyncio
from typing import Optional

import requests

from app.core.config import settings, FetchConfig
from app.core.exceptions import FetchError
from app.utils.logging import CorrelatedLogger

class PageFetcher:
    """Retrieves the raw markup of a post page."""

    def __init__(self, timeout: Optional[int] = None, user_agent: Optional[str] = None):
        self.timeout = timeout or settings.fetch_timeout
        self.headers = FetchConfig.get_headers(user_agent or settings.fetch_user_agent)
        self.logger = CorrelatedLogger(__name__)

    async def fetch(self, url: str) -> str:
        """Fetch a page, following redirects.

        Raises FetchError on transport failures and on any non-success status.
        """
        try:
            response = await asyncio.to_thread(
                requests.get,
                url,
                headers=self.headers,
                timeout=self.timeout,
                allow_redirects=True
            )
        except requests.RequestException as e:
            self.logger.warning(f"Request to {url} failed: {str(e)}")
            raise FetchError(url, str(e))

        if not response.ok:
            self.logger.warning(f"Fetch of {url} returned status {response.status_code}")
            raise FetchError.from_status(url, response.status_code)

        return response.text

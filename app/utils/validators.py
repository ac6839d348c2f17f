"""URL validation utilities."""
from typing import Optional
from urllib.parse import urlparse
from app.core.config import PlatformConfig
from app.core.exceptions import MissingURLError

class URLValidator:
    """URL validation utilities for post pages."""

    @staticmethod
    def require_url(url: Optional[str]) -> str:
        """Return the stripped URL or raise if it is absent or blank."""
        if url is None or not url.strip():
            raise MissingURLError()
        return url.strip()

    @staticmethod
    def is_supported_platform(url: str) -> bool:
        """Check whether the URL belongs to a platform with a dedicated fallback marker."""
        return URLValidator.get_platform_from_url(url) != "unknown"

    @staticmethod
    def get_platform_from_url(url: str) -> str:
        """Extract platform name from URL."""
        try:
            domain = urlparse(url).netloc.lower().split(":")[0]
        except ValueError:
            return "unknown"

        for platform in PlatformConfig.SUPPORTED_PLATFORMS:
            for platform_domain in PlatformConfig.get_platform_domains(platform):
                if domain == platform_domain or domain.endswith("." + platform_domain):
                    return platform
        return "unknown"

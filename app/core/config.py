"""
Configuration management for the Social Media Extractor.
Centralizes environment variable handling and application settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # API Configuration
        self.api_title = "Social Media Extractor"
        self.api_description = "A service for extracting direct video URLs, captions and thumbnails from public social media post pages"
        self.api_version = "1.0.0"
        self.debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"
        self.port = int(os.getenv("PORT", "3000"))

        # CORS
        self.allowed_origins = [
            origin.strip()
            for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        # Page fetching
        self.fetch_timeout = int(os.getenv("FETCH_TIMEOUT", "30"))  # seconds
        self.fetch_user_agent = os.getenv(
            "FETCH_USER_AGENT", "Mozilla/5.0 (compatible; Downloader/1.0)"
        )

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

class PlatformConfig:
    """Platform-specific configurations."""

    SUPPORTED_PLATFORMS = {
        "tiktok": {
            "domains": ["tiktok.com", "www.tiktok.com", "vm.tiktok.com", "vt.tiktok.com", "m.tiktok.com"],
            "features": ["open_graph", "json_ld", "play_addr_fallback"],
            "url_patterns": [
                "https://www.tiktok.com/@{username}/video/{video_id}",
                "https://vm.tiktok.com/{short_id}",
                "https://vt.tiktok.com/{short_id}"
            ]
        },
        "instagram": {
            "domains": ["instagram.com", "www.instagram.com", "m.instagram.com"],
            "features": ["open_graph", "json_ld", "video_url_fallback"],
            "url_patterns": [
                "https://www.instagram.com/p/{shortcode}/",
                "https://www.instagram.com/reel/{shortcode}/"
            ]
        }
    }

    @classmethod
    def get_platform_domains(cls, platform: str) -> List[str]:
        """Get supported domains for a platform."""
        return cls.SUPPORTED_PLATFORMS.get(platform, {}).get("domains", [])

    @classmethod
    def get_platform_features(cls, platform: str) -> List[str]:
        """Get supported features for a platform."""
        return cls.SUPPORTED_PLATFORMS.get(platform, {}).get("features", [])

class FetchConfig:
    """Configuration for page retrieval."""

    BASE_HEADERS = {
        'Accept': 'text/html,application/xhtml+xml,application/xml',
    }

    @classmethod
    def get_headers(cls, user_agent: str) -> dict:
        """Get request headers with a browser-like User-Agent."""
        headers = cls.BASE_HEADERS.copy()
        headers.update({
            'User-Agent': user_agent
        })
        return headers

# Create global settings instance
settings = Settings()

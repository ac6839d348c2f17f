"""Unit tests for the inline-script fallback markers."""
import time

from app.services.pattern_matcher import PatternFallbackMatcher

class TestPatternFallbackMatcher:
    """Test fallback marker matching on raw markup."""

    def test_tiktok_play_addr(self):
        """playAddr values ending in a media extension are found."""
        raw = '<script>{"video":{"playAddr":"https:\\/\\/v16.tiktokcdn.test\\/a.mp4?x=1\\u0026y=2","cover":"c"}}</script>'

        assert PatternFallbackMatcher().find(raw) == (
            "tiktok", "https:\\/\\/v16.tiktokcdn.test\\/a.mp4?x=1\\u0026y=2"
        )

    def test_play_addr_without_media_extension_ignored(self):
        """playAddr values that are not mp4 do not match."""
        raw = '{"playAddr":"https://cdn.test/stream.m3u8"}'

        assert PatternFallbackMatcher().match(raw) is None

    def test_play_addr_does_not_cross_closing_quote(self):
        """A later .mp4 elsewhere in the page is not pulled into the match."""
        raw = '{"playAddr":"https://cdn.test/stream.m3u8","other":"https://cdn.test/x.mp4"}'

        assert PatternFallbackMatcher().match(raw) is None

    def test_skips_non_mp4_play_addr(self):
        """A later mp4 playAddr is used when an earlier one is a stream."""
        raw = '{"playAddr":"https://cdn.test/s.m3u8"} {"playAddr":"https://cdn.test/v.MP4?a=1"}'

        assert PatternFallbackMatcher().match(raw) == "https://cdn.test/v.MP4?a=1"

    def test_unterminated_play_addr_is_linear(self):
        """A long value with no closing quote fails fast."""
        raw = '"playAddr":"' + "a.mp4\\x" * 20000

        start = time.perf_counter()
        assert PatternFallbackMatcher().match(raw) is None
        assert time.perf_counter() - start < 2.0

    def test_instagram_video_url(self):
        """video_url values are found."""
        raw = '{"is_video":true,"video_url":"https:\\/\\/scontent.test\\/v.mp4?a=1\\u0026b=2"}'

        assert PatternFallbackMatcher().find(raw) == (
            "instagram", "https:\\/\\/scontent.test\\/v.mp4?a=1\\u0026b=2"
        )

    def test_stops_at_first_unescaped_quote(self):
        """Escaped quotes stay inside the value."""
        raw = '{"video_url":"https://x.test/a\\"b.mp4","next":"z"}'

        assert PatternFallbackMatcher().match(raw) == 'https://x.test/a\\"b.mp4'

    def test_first_marker_wins(self):
        """The TikTok marker is tried before the Instagram one."""
        raw = '{"video_url":"https://ig.test/v.mp4"} {"playAddr":"https://tt.test/v.mp4"}'

        assert PatternFallbackMatcher().match(raw) == "https://tt.test/v.mp4"

    def test_no_match(self):
        """Pages without markers yield nothing."""
        assert PatternFallbackMatcher().match("<html><body>plain</body></html>") is None

    def test_custom_markers(self):
        """An empty marker table never matches."""
        assert PatternFallbackMatcher(markers=[]).match('{"playAddr":"https://x.test/a.mp4"}') is None

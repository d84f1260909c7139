"""Tests for M3U content classification."""

from __future__ import annotations

from burgtv.infrastructure.validation.m3u_content import analyze_m3u_content


class TestValidPlaylists:
    def test_basic_playlist(self, basic_playlist: str) -> None:
        verdict = analyze_m3u_content(basic_playlist)
        assert verdict.is_valid is True
        assert verdict.channel_count == 2
        assert verdict.format == "M3U"
        assert verdict.error is None

    def test_tvg_attribute_marks_extended(self, basic_playlist: str) -> None:
        content = basic_playlist.replace(
            "#EXTINF:-1,Channel1", '#EXTINF:-1 tvg-id="1",Channel1'
        )
        verdict = analyze_m3u_content(content)
        assert verdict.is_valid is True
        assert verdict.format == "M3U Extended"

    def test_extended_playlist(self, extended_playlist: str) -> None:
        verdict = analyze_m3u_content(extended_playlist)
        assert verdict.channel_count == 2
        assert verdict.format == "M3U Extended"

    def test_channel_count_is_min_of_entries_and_urls(self) -> None:
        content = (
            "#EXTM3U\n"
            "#EXTINF:-1,A\nhttp://x/a\n"
            "#EXTINF:-1,B\nhttp://x/b\n"
            "#EXTINF:-1,C\n"  # truncated sample: URL line missing
        )
        assert analyze_m3u_content(content).channel_count == 2

    def test_crlf_and_blank_lines(self) -> None:
        content = "\r\n#EXTM3U\r\n\r\n#EXTINF:-1,A\r\n  https://x/a  \r\n"
        verdict = analyze_m3u_content(content)
        assert verdict.is_valid is True
        assert verdict.channel_count == 1

    def test_header_with_attributes(self) -> None:
        content = '#EXTM3U url-tvg="http://epg"\n#EXTINF:-1,A\nhttp://x/a\n'
        assert analyze_m3u_content(content).is_valid is True

    def test_non_http_urls_not_counted(self) -> None:
        content = (
            "#EXTM3U\n"
            "#EXTINF:-1,A\nrtmp://x/a\n"
            "#EXTINF:-1,B\nhttp://x/b\n"
        )
        assert analyze_m3u_content(content).channel_count == 1


class TestInvalidPlaylists:
    def test_empty(self) -> None:
        verdict = analyze_m3u_content("")
        assert verdict.is_valid is False
        assert verdict.error == "Empty content"

    def test_whitespace_only(self) -> None:
        assert analyze_m3u_content(" \n\t\n ").error == "Empty content"

    def test_not_a_playlist(self) -> None:
        verdict = analyze_m3u_content("not a playlist")
        assert verdict.is_valid is False
        assert "Missing #EXTM3U header" in verdict.error

    def test_html_page(self) -> None:
        verdict = analyze_m3u_content("<html><body>#EXTM3U</body></html>")
        assert verdict.error == "Missing #EXTM3U header"

    def test_header_only(self) -> None:
        verdict = analyze_m3u_content("#EXTM3U\n")
        assert verdict.is_valid is False
        assert "No channels found" in verdict.error

    def test_entries_without_urls(self) -> None:
        verdict = analyze_m3u_content("#EXTM3U\n#EXTINF:-1,A\n/local/path.ts\n")
        assert verdict.is_valid is False
        assert verdict.error == "No valid URLs found in playlist"

    def test_urls_without_entries(self) -> None:
        verdict = analyze_m3u_content("#EXTM3U\nhttp://x/a\n")
        assert verdict.error == "No channels found in playlist"

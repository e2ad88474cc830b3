import itertools
from unittest.mock import MagicMock

from webapp_logs.log_streamer import LogStreamer, iter_lines


class TestIterLines:
    def test_splits_lines_across_chunks(self):
        chunks = [b"<publish", b"Data>\n<publishProfile />\n</pub", b"lishData>"]
        assert list(iter_lines(chunks)) == ["<publishData>", "<publishProfile />", "</publishData>"]

    def test_crlf_split_between_chunks(self):
        assert list(iter_lines([b"first\r", b"\nsecond\r\n"])) == ["first", "second"]

    def test_multibyte_character_split_between_chunks(self):
        encoded = "café\n".encode("utf-8")
        assert list(iter_lines([encoded[:4], encoded[4:]])) == ["café"]

    def test_empty_stream(self):
        assert list(iter_lines([])) == []

    def test_blank_lines_are_kept(self):
        assert list(iter_lines([b"a\n\nb\n"])) == ["a", "", "b"]

    def test_form_feed_is_not_a_line_break(self):
        assert list(iter_lines([b"page\x0cbreak\n"])) == ["page\x0cbreak"]

    def test_unicode_line_separator_is_not_a_line_break(self):
        assert list(iter_lines(["a\u2028b\n".encode("utf-8")])) == ["a\u2028b"]

    def test_next_line_character_across_chunks(self):
        chunks = ["x\u0085".encode("utf-8"), b"y\n"]
        assert list(iter_lines(chunks)) == ["x\x85y"]

    def test_lone_carriage_return_breaks_lines(self):
        assert list(iter_lines([b"a\rb\r", b"c"])) == ["a", "b", "c"]

    def test_trailing_carriage_return_at_end_of_stream(self):
        assert list(iter_lines([b"a\r"])) == ["a"]
        assert list(iter_lines([b"a\r\r"])) == ["a", ""]


class TestLogStreamer:
    def test_logs_until_stream_ends(self, logged):
        on_start = MagicMock()

        count = LogStreamer(timeout=120).stream(["one", "two", "three"], on_start=on_start)

        assert count == 3
        assert logged == ["one", "two", "three"]
        on_start.assert_called_once_with()

    def test_on_start_fires_even_for_empty_stream(self, logged):
        on_start = MagicMock()

        assert LogStreamer().stream([], on_start=on_start) == 0
        assert logged == []
        on_start.assert_called_once_with()

    def test_stops_at_timeout_on_endless_stream(self, logged):
        # Every clock read advances ten seconds
        clock = itertools.count(0, 10).__next__
        streamer = LogStreamer(timeout=120, clock=clock)

        count = streamer.stream(itertools.repeat("tick"))

        assert count == 11
        assert logged == ["tick"] * 11

    def test_clock_starts_after_first_line(self):
        events = []

        def lines():
            events.append("first line read")
            yield "line"

        def clock():
            events.append("clock")
            return 0

        LogStreamer(clock=clock).stream(lines(), on_start=lambda: events.append("started"))

        assert events[:3] == ["first line read", "clock", "started"]

    def test_stream_profile_decodes_and_closes(self, logged):
        chunks = MagicMock()
        chunks.__iter__.return_value = iter([b"<publishData>\n", b"</publishData>"])

        count = LogStreamer().stream_profile(chunks)

        assert count == 2
        assert logged == ["<publishData>", "</publishData>"]
        chunks.close.assert_called_once_with()

    def test_stream_profile_without_close(self, logged):
        assert LogStreamer().stream_profile([b"only line"]) == 1
        assert logged == ["only line"]

"""Tests for debug callback plumbing."""
from groqchat.debug import DebugReporter, LogLevel


class TestLogLevel:
    """Tests for LogLevel parsing and ordering."""

    def test_parse_is_case_insensitive(self):
        assert LogLevel.parse("warning") is LogLevel.WARNING
        assert LogLevel.parse("ERROR") is LogLevel.ERROR

    def test_unknown_level_is_debug(self):
        assert LogLevel.parse("verbose") is LogLevel.DEBUG

    def test_ordering(self):
        assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARNING < LogLevel.ERROR


class TestDebugReporter:
    """Tests for the debug callback mixin."""

    def test_silent_without_callback(self):
        DebugReporter()._debug("info", "Test", "nobody listening")

    def test_forwards_to_callback(self):
        received = []
        reporter = DebugReporter()
        reporter.set_debug_callback(lambda *args: received.append(args))

        reporter._debug("error", "Store", "disk full")

        assert received == [("error", "Store", "disk full")]

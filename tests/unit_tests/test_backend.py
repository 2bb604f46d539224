"""
Backend and transport unit tests.
"""

from __future__ import annotations

import re

import pytest

from nodecg_logger import create_logger_factory
from nodecg_logger.backend import Backend
from nodecg_logger.levels import METHOD_LEVELS, SEVERITIES
from nodecg_logger.transports import ConsoleTransport, FileTransport


class TestTransportGate:
    """Per-transport enabled/level evaluation"""

    @pytest.mark.parametrize("threshold", METHOD_LEVELS)
    @pytest.mark.parametrize("level", METHOD_LEVELS)
    def test_accepts_iff_at_least_as_severe(self, threshold, level) -> None:
        transport = ConsoleTransport("c", level=threshold)
        assert transport.accepts(level) is (SEVERITIES[level] <= SEVERITIES[threshold])

    def test_silent_accepts_nothing(self) -> None:
        transport = ConsoleTransport("c", level="trace", silent=True)
        assert not any(transport.accepts(level) for level in METHOD_LEVELS)

    @pytest.mark.parametrize("threshold", ["_infinite", "verbose", ""])
    def test_unknown_threshold_accepts_nothing(self, threshold) -> None:
        transport = ConsoleTransport("c", level=threshold)
        assert not any(transport.accepts(level) for level in METHOD_LEVELS)


class TestBackend:
    """Dispatching to transports"""

    def test_routes_by_level_to_streams(self, stdout, stderr) -> None:
        backend = Backend([ConsoleTransport("c", level="trace", stream=stdout, error_stream=stderr, colorize=False)])
        backend.debug("[n]", "one")
        backend.warn("[n]", "two")
        backend.error("[n]", {"k": 1})

        assert stdout.lines == ["debug: [n] one"]
        assert stderr.lines == ["warn: [n] two", 'error: [n] {"k":1}']

    def test_below_threshold_writes_nothing(self, stdout, stderr) -> None:
        backend = Backend([ConsoleTransport("c", level="error", stream=stdout, error_stream=stderr)])
        backend.trace("x")
        backend.info("x")
        backend.warn("x")
        assert stdout.writes == []
        assert stderr.writes == []

    def test_one_call_can_reach_several_transports(self, stdout, tmp_path) -> None:
        path = tmp_path / "both.log"
        backend = Backend(
            [
                ConsoleTransport("c", level="info", stream=stdout, colorize=False),
                FileTransport("f", filename=str(path), level="info"),
            ]
        )
        backend.info("[n]", "hello")
        backend.close()

        assert stdout.lines == ["info: [n] hello"]
        assert re.fullmatch(r"\S+ - info: \[n\] hello\n", path.read_text(encoding="utf-8"))

    def test_transports_are_addressable_by_name(self) -> None:
        console = ConsoleTransport("nodecgConsole")
        backend = Backend([console])
        assert backend.transports["nodecgConsole"] is console

    def test_tty_streams_are_colorized(self, stdout) -> None:
        stdout.isatty = lambda: True
        backend = Backend([ConsoleTransport("c", level="info", stream=stdout)])
        backend.info("hi")
        assert stdout.lines == ["\033[37minfo\033[0m: hi"]


class TestFileTransport:
    """Lazy opening and filename changes"""

    def test_file_is_not_created_until_first_write(self, tmp_path) -> None:
        path = tmp_path / "lazy.log"
        FileTransport("f", filename=str(path))
        assert not path.exists()

    def test_changing_filename_reopens(self, tmp_path) -> None:
        first, second = tmp_path / "a.log", tmp_path / "b.log"
        transport = FileTransport("f", filename=str(first), level="trace")
        backend = Backend([transport])

        backend.info("one")
        transport.filename = str(second)
        backend.info("two")
        backend.close()

        assert first.read_text(encoding="utf-8").endswith("info: one\n")
        assert second.read_text(encoding="utf-8").endswith("info: two\n")

    def test_missing_directory_propagates(self, tmp_path) -> None:
        transport = FileTransport("f", filename=str(tmp_path / "missing" / "x.log"))
        backend = Backend([transport])
        with pytest.raises(FileNotFoundError):
            backend.error("boom")


class TestColors:
    """Color associations are scoped to a transport"""

    def test_add_colors_only_affects_this_backend(self, stdout, stderr) -> None:
        custom = Backend([ConsoleTransport("c", level="info", stream=stdout, colorize=True)])
        plain = Backend([ConsoleTransport("c", level="info", stream=stderr, colorize=True)])
        custom.add_colors({"info": "magenta"})

        custom.info("a")
        plain.info("b")

        assert stdout.lines == ["\033[35minfo\033[0m: a"]
        assert stderr.lines == ["\033[37minfo\033[0m: b"]

    def test_factories_do_not_share_colors(self, stdout, stderr) -> None:
        first = create_logger_factory({"console": {"enabled": True}}, stdout=stdout, colorize=True)
        second = create_logger_factory({"console": {"enabled": True}}, stdout=stderr, colorize=True)
        first.backend.add_colors({"info": "blue"})

        first("one").info("x")
        second("two").info("y")

        assert stdout.lines == ["\033[34minfo\033[0m: [one] x"]
        assert stderr.lines == ["\033[37minfo\033[0m: [two] y"]

"""Tests for destination handlers."""

import io

import pytest
from colorama import Fore, Style

from picolog import ConsoleHandler, FileHandler, Logger, LogLevel, StreamHandler


class FlushCounter(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


class BrokenStream:
    def write(self, data):
        raise OSError("disk full")

    def flush(self):
        pass


class TTYStream(io.StringIO):
    def isatty(self):
        return True


def test_stream_handler_flushes_every_line():
    stream = FlushCounter()
    handler = StreamHandler(stream)
    handler.emit("one", LogLevel.INFO)
    handler.emit("two", LogLevel.INFO)
    assert stream.getvalue() == "one\ntwo\n"
    assert stream.flushes == 2


def test_write_errors_are_ignored():
    log = Logger(LogLevel.INFO, "broken", StreamHandler(BrokenStream()))
    log.info("lost")


def test_closed_stream_is_ignored():
    stream = io.StringIO()
    handler = StreamHandler(stream)
    stream.close()
    handler.emit("lost", LogLevel.INFO)


def test_write_errors_raise_when_requested():
    handler = StreamHandler(BrokenStream(), raise_errors=True)
    with pytest.raises(OSError, match="disk full"):
        handler.emit("lost", LogLevel.INFO)


def test_console_handler_plain_when_not_a_tty():
    stream = io.StringIO()
    handler = ConsoleHandler(stream)
    assert handler.colorize is False
    handler.emit("plain", LogLevel.ERR)
    assert stream.getvalue() == "plain\n"


def test_console_handler_colors_tty_by_default():
    stream = TTYStream()
    handler = ConsoleHandler(stream)
    assert handler.colorize is True
    handler.emit("warn", LogLevel.WARNING)
    assert stream.getvalue() == f"{Fore.YELLOW}warn{Style.RESET_ALL}\n"


def test_console_handler_forced_color():
    stream = io.StringIO()
    ConsoleHandler(stream, colorize=True).emit("bad", LogLevel.ERR)
    assert stream.getvalue() == f"{Fore.RED}bad{Style.RESET_ALL}\n"


def test_console_handler_defaults_to_stderr(capsys):
    ConsoleHandler().emit("to stderr", LogLevel.INFO)
    captured = capsys.readouterr()
    assert captured.err == "to stderr\n"
    assert captured.out == ""


def test_file_handler_creates_parents_and_appends(tmp_path):
    path = tmp_path / "logs" / "app.log"
    log = Logger(LogLevel.INFO, "file", FileHandler(path))
    log.info("first")
    log.sublogger("sub").info("second")
    # flushed per message, readable before close
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("[file] ") and lines[0].endswith(" first")
    assert lines[1].startswith("[file][sub] ") and lines[1].endswith(" second")
    log.close()

    again = FileHandler(path)
    again.emit("third", LogLevel.INFO)
    again.close()
    assert path.read_text(encoding="utf-8").splitlines()[-1] == "third"


def test_file_handler_after_close_is_ignored(tmp_path):
    handler = FileHandler(tmp_path / "closed.log")
    handler.close()
    handler.emit("lost", LogLevel.INFO)
    assert (tmp_path / "closed.log").read_text() == ""

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

import colorama
from colorama import Fore, Style

from .levels import LogLevel

colorama.just_fix_windows_console()

RESET = Style.RESET_ALL
LEVEL_COLORS = {
    LogLevel.EMERG: Style.BRIGHT + Fore.WHITE + colorama.Back.RED,
    LogLevel.ALERT: Style.BRIGHT + Fore.RED,
    LogLevel.CRIT: Style.BRIGHT + Fore.RED,
    LogLevel.ERR: Fore.RED,
    LogLevel.WARNING: Fore.YELLOW,
    LogLevel.NOTICE: Fore.GREEN,
    LogLevel.INFO: Fore.GREEN,
    LogLevel.DEBUG: Fore.CYAN,
}

class Handler:
    """Destination for rendered log lines.

    Write failures are ignored unless ``raise_errors`` is set.
    """

    def __init__(self, raise_errors: bool = False):
        self.raise_errors = raise_errors

    def emit(self, record: str, level: LogLevel):
        raise NotImplementedError

    def handle_error(self, exc: Exception):
        if self.raise_errors:
            raise exc

    def close(self):
        pass

class StreamHandler(Handler):
    def __init__(self, stream: TextIO, raise_errors: bool = False):
        super().__init__(raise_errors)
        self.stream = stream

    def format(self, record: str, level: LogLevel) -> str:
        return record

    def emit(self, record: str, level: LogLevel):
        try:
            self.stream.write(self.format(record, level) + "\n")
            self.stream.flush()
        except (OSError, ValueError) as e:
            self.handle_error(e)

class ConsoleHandler(StreamHandler):
    def __init__(self, stream: Optional[TextIO] = None, colorize: Optional[bool] = None, raise_errors: bool = False):
        super().__init__(stream if stream is not None else sys.stderr, raise_errors)
        if colorize is None:
            isatty = getattr(self.stream, "isatty", None)
            colorize = bool(isatty and isatty())
        self.colorize = colorize

    def format(self, record: str, level: LogLevel) -> str:
        if not self.colorize:
            return record
        color = LEVEL_COLORS.get(level, "")
        return f"{color}{record}{RESET}"

class FileHandler(StreamHandler):
    def __init__(self, path: Union[str, Path], mode: str = "a", raise_errors: bool = False):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(open(self.path, mode, encoding="utf-8"), raise_errors)

    def close(self):
        self.stream.close()

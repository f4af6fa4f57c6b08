import inspect
import os
import sys
import traceback
from datetime import datetime
from typing import List, Mapping, Optional, TextIO, Union

from .formats import LogFormat, TIME_FORMAT
from .handlers import ConsoleHandler, Handler, StreamHandler
from .levels import LogLevel, coerce_level

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def _render(msg, args) -> str:
    if not args:
        return str(msg)
    # a lone mapping feeds %(name)s placeholders
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    return msg % args


def _caller() -> str:
    """Return ``file.py:LINE`` for the first frame outside picolog."""
    frame = inspect.currentframe()
    while frame is not None:
        filename = frame.f_code.co_filename
        if os.path.dirname(os.path.abspath(filename)) != _PACKAGE_DIR:
            return f"{os.path.basename(filename)}:{frame.f_lineno}"
        frame = frame.f_back
    return "???:0"


class Logger:
    """A leveled logger writing ``[prefix] <timestamp> message`` lines.

    A logger can be a sublogger of another logger and have any number of
    subloggers itself. Subloggers share the parent's destination and take
    its threshold at creation time.
    """

    def __init__(
        self,
        level: Union[LogLevel, str, int],
        prefix: str,
        dest: Optional[Union[Handler, TextIO]] = None,
    ):
        self.level = coerce_level(level)
        self.prefix = prefix
        if dest is None:
            self.handler = ConsoleHandler()
        elif isinstance(dest, Handler):
            self.handler = dest
        else:
            self.handler = StreamHandler(dest)
        self.subloggers: List["Logger"] = []

    def __repr__(self) -> str:
        return f"<Logger [{self.prefix}] level={self.level}>"

    @property
    def rendered_prefix(self) -> str:
        return f"[{self.prefix}] "

    def sublogger(self, prefix: str) -> "Logger":
        sub = Logger(self.level, f"{self.prefix}][{prefix}", self.handler)
        self.subloggers.append(sub)
        return sub

    def enabled_for(self, level: Union[LogLevel, str, int]) -> bool:
        return coerce_level(level) <= self.level

    def _format(self, message: str) -> str:
        now = datetime.now().strftime(TIME_FORMAT)
        if self.level == LogLevel.DEBUG:
            return LogFormat.DEBUG.format(prefix=self.prefix, time=now, caller=_caller(), message=message)
        return LogFormat.DEFAULT.format(prefix=self.prefix, time=now, message=message)

    def log(self, level: Union[LogLevel, str, int], msg, *args):
        level = coerce_level(level)
        if level > self.level:
            return
        message = _render(msg, args)
        self.handler.emit(self._format(message), level)

    def emerg(self, msg, *args):
        self.log(LogLevel.EMERG, msg, *args)

    def alert(self, msg, *args):
        self.log(LogLevel.ALERT, msg, *args)

    def crit(self, msg, *args):
        self.log(LogLevel.CRIT, msg, *args)

    def error(self, msg, *args):
        self.log(LogLevel.ERR, msg, *args)

    def warning(self, msg, *args):
        self.log(LogLevel.WARNING, msg, *args)

    def notice(self, msg, *args):
        self.log(LogLevel.NOTICE, msg, *args)

    def info(self, msg, *args):
        self.log(LogLevel.INFO, msg, *args)

    def debug(self, msg, *args):
        self.log(LogLevel.DEBUG, msg, *args)

    def fatal(self, msg, *args):
        """Log at ERR, then exit with status 1."""
        self.log(LogLevel.ERR, msg, *args)
        sys.exit(1)

    def exception(self, msg, *args, exc_info=None):
        """Log at ERR with the current (or given) traceback appended."""
        if not self.enabled_for(LogLevel.ERR):
            return
        if isinstance(exc_info, BaseException):
            exc = (type(exc_info), exc_info, exc_info.__traceback__)
        elif isinstance(exc_info, tuple):
            exc = exc_info
        else:
            exc = sys.exc_info()
        message = _render(msg, args)
        if exc[0] is not None:
            message = f"{message}\n" + "".join(traceback.format_exception(*exc)).rstrip("\n")
        self.log(LogLevel.ERR, message)

    def close(self):
        self.handler.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type:
            self.exception(str(exc), exc_info=(exc_type, exc, tb))
        return False


def default_logger() -> Logger:
    """A logger at DEBUG with prefix "default", writing to stderr."""
    return Logger(LogLevel.DEBUG, "default", ConsoleHandler(sys.stderr))


_default: Optional[Logger] = None


def get_default_logger() -> Logger:
    global _default
    if _default is None:
        _default = default_logger()
    return _default


def log(level, msg, *args):
    get_default_logger().log(level, msg, *args)

def emerg(msg, *args):
    get_default_logger().emerg(msg, *args)

def alert(msg, *args):
    get_default_logger().alert(msg, *args)

def crit(msg, *args):
    get_default_logger().crit(msg, *args)

def error(msg, *args):
    get_default_logger().error(msg, *args)

def warning(msg, *args):
    get_default_logger().warning(msg, *args)

def notice(msg, *args):
    get_default_logger().notice(msg, *args)

def info(msg, *args):
    get_default_logger().info(msg, *args)

def debug(msg, *args):
    get_default_logger().debug(msg, *args)

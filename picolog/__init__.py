"""Tiny leveled logging with syslog levels and nested subloggers."""
from .levels import LogLevel, parse_log_level, coerce_level
from .exceptions import PicologError, InvalidLogLevelError, ConfigError
from .handlers import Handler, StreamHandler, ConsoleHandler, FileHandler
from .formats import LogFormat, TIME_FORMAT
from .logger import (
    Logger,
    default_logger,
    get_default_logger,
    log,
    emerg,
    alert,
    crit,
    error,
    warning,
    notice,
    info,
    debug,
)
from .config import LoggerConfig, logger_from_env
from .version import __version__

__all__ = [
    "Logger",
    "LogLevel",
    "LogFormat",
    "TIME_FORMAT",
    "parse_log_level",
    "coerce_level",
    "PicologError",
    "InvalidLogLevelError",
    "ConfigError",
    "Handler",
    "StreamHandler",
    "ConsoleHandler",
    "FileHandler",
    "LoggerConfig",
    "logger_from_env",
    "default_logger",
    "get_default_logger",
    "log",
    "emerg",
    "alert",
    "crit",
    "error",
    "warning",
    "notice",
    "info",
    "debug",
]

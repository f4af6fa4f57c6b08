"""
Environment-driven configuration for picolog.

    PICOLOG_LEVEL   syslog level name (default: info)
    PICOLOG_PREFIX  display prefix (default: default)
    PICOLOG_DEST    stderr, stdout or a file path (default: stderr)
    PICOLOG_COLOR   auto, or a boolean such as 1/0, true/false (default: auto)
"""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigError
from .handlers import ConsoleHandler, FileHandler, Handler
from .levels import LogLevel, coerce_level
from .logger import Logger

# Configuration constants
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_PREFIX = "default"
DEFAULT_DEST = "stderr"
ENV_PREFIX = "PICOLOG_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_color(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in ("", "auto"):
        return None
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"Invalid color setting: {value!r} (expected auto or a boolean)")


@dataclass
class LoggerConfig:
    level: LogLevel = DEFAULT_LEVEL
    prefix: str = DEFAULT_PREFIX
    dest: str = DEFAULT_DEST
    color: Optional[bool] = None

    def __post_init__(self):
        self.level = coerce_level(self.level)
        if not self.dest:
            raise ConfigError("Destination must not be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, var_prefix: str = ENV_PREFIX) -> "LoggerConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            var_prefix: Prefix of the variable names

        Returns:
            LoggerConfig with unset values left at their defaults
        """
        env = os.environ if environ is None else environ
        return cls(
            level=env.get(f"{var_prefix}LEVEL", str(DEFAULT_LEVEL)),
            prefix=env.get(f"{var_prefix}PREFIX", DEFAULT_PREFIX),
            dest=env.get(f"{var_prefix}DEST", DEFAULT_DEST),
            color=_parse_color(env.get(f"{var_prefix}COLOR")),
        )

    def make_handler(self) -> Handler:
        dest = self.dest.lower()
        if dest == "stderr":
            return ConsoleHandler(sys.stderr, colorize=self.color)
        if dest == "stdout":
            return ConsoleHandler(sys.stdout, colorize=self.color)
        return FileHandler(self.dest)

    def build(self) -> Logger:
        return Logger(self.level, self.prefix, self.make_handler())


def logger_from_env(environ: Optional[Mapping[str, str]] = None, var_prefix: str = ENV_PREFIX) -> Logger:
    return LoggerConfig.from_env(environ, var_prefix).build()

from enum import IntEnum
from typing import Union

from .exceptions import InvalidLogLevelError


class LogLevel(IntEnum):
    """The usual syslog levels, from EMERG (most severe) to DEBUG.

    A logger emits a message when the message level is numerically less
    than or equal to its own threshold.
    """

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, level: str) -> "LogLevel":
        """Parse a syslog level name. Not case-sensitive."""
        if not isinstance(level, str):
            raise InvalidLogLevelError(f"Invalid log level: {level!r}")
        name = level.lower()
        for member in cls:
            if str(member) == name:
                return member
        raise InvalidLogLevelError(f"Invalid log level: {name}")


def parse_log_level(level: str) -> LogLevel:
    return LogLevel.parse(level)


def coerce_level(value: Union[LogLevel, str, int]) -> LogLevel:
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, str):
        return LogLevel.parse(value)
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return LogLevel(value)
        except ValueError:
            raise InvalidLogLevelError(f"Invalid log level: {value}") from None
    raise InvalidLogLevelError(f"Invalid log level: {value!r}")

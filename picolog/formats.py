TIME_FORMAT = "%m/%d/%Y %H:%M:%S"

DEFAULT_FORMAT = "[{prefix}] {time} {message}"

# Used when the logger threshold is DEBUG; {caller} is "file.py:LINE".
DEBUG_FORMAT = "[{prefix}] {time} {caller}: {message}"

class LogFormat:
    DEFAULT = DEFAULT_FORMAT
    DEBUG = DEBUG_FORMAT

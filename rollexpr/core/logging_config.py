"""
Logging configuration for rollexpr.

Log records go to stderr so that stdout carries nothing but roll results.
Level names are colored with colorama when stderr is a terminal.
"""

import logging
import sys
from typing import Optional, Union

from colorama import Back, Fore, Style, just_fix_windows_console

just_fix_windows_console()

DEFAULT_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

LEVEL_COLORS = {
    'DEBUG': Fore.CYAN,
    'INFO': Fore.GREEN,
    'WARNING': Fore.YELLOW,
    'ERROR': Fore.RED,
    'CRITICAL': Fore.RED + Back.WHITE + Style.BRIGHT,
}

# Third-party loggers that are noisy below WARNING
QUIET_LOGGERS = ('werkzeug',)


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name of each record."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        # Format a copy; other handlers see the same record
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"
        return super().format(colored)


def resolve_level(level: Union[str, int]) -> int:
    """
    Turn a level name such as "debug" into its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level}")
    return value


def setup_logging(
    level: Union[str, int] = 'WARNING',
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    use_colors: Optional[bool] = None
) -> logging.Logger:
    """
    Configure the root logger for rollexpr.

    Args:
        level: Console logging level, by name or number
        log_file: Optional file that receives every record at DEBUG and above
        format_string: Optional custom format string
        use_colors: Color level names; None colors only when stderr is a terminal

    Returns:
        Configured root logger
    """
    numeric_level = resolve_level(level)
    format_string = format_string or DEFAULT_FORMAT
    if use_colors is None:
        use_colors = sys.stderr.isatty()

    root = logging.getLogger()
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    console.setFormatter(formatter_class(format_string))
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(format_string))
        root.addHandler(file_handler)
        root.setLevel(logging.DEBUG)
    else:
        root.setLevel(numeric_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (usually called with __name__)."""
    return logging.getLogger(name)


__all__ = ['ColoredFormatter', 'resolve_level', 'setup_logging', 'get_logger']

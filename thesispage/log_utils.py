from __future__ import annotations

import logging
import os
import sys
from typing import Optional


# Define custom log levels for enhanced workflow visibility
STEP_LEVEL = 25  # Between INFO (20) and WARNING (30)
SUCCESS_LEVEL = 22  # Between INFO (20) and STEP (25)

# Register custom levels with the logging module
logging.addLevelName(STEP_LEVEL, "STEP")
logging.addLevelName(SUCCESS_LEVEL, "SUCCESS")


class LogSource:
    """
    Constants for input sources to ensure consistent naming and coloring.
    """
    FILE = "File"
    HTTP = "HTTP"
    SYSTEM = "System"


class LogCategory:
    """
    Constants for log categories, one per pipeline stage.
    """
    LOAD = "LOAD"
    SORT = "SORT"
    RENDER = "RENDER"
    FETCH = "FETCH"
    SAVE = "SAVE"
    ERROR = "ERROR"
    PLAN = "PLAN"


class ColoredFormatter(logging.Formatter):
    """
    Custom formatter that adds ANSI color codes to log messages for terminal output,
    making different log levels, sources, and categories easily distinguishable.
    """

    # ANSI Color Codes
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD_CYAN = "\033[1;36m"
    BOLD_GREEN = "\033[1;32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BOLD_RED = "\033[1;31m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    GREEN = "\033[32m"
    DARK_GRAY = "\033[90m"
    BOLD_BLUE = "\033[1;34m"
    RESET = "\033[0m"

    # Level colors
    LEVEL_COLORS = {
        "DEBUG": CYAN,
        "INFO": WHITE,
        "STEP": BOLD_CYAN,
        "SUCCESS": BOLD_GREEN,
        "WARNING": YELLOW,
        "ERROR": RED,
        "CRITICAL": BOLD_RED,
    }

    SOURCE_COLORS = {
        LogSource.FILE: BLUE,
        LogSource.HTTP: CYAN,
        LogSource.SYSTEM: WHITE,
    }

    CATEGORY_COLORS = {
        LogCategory.LOAD: BOLD_BLUE,
        LogCategory.SORT: YELLOW,
        LogCategory.RENDER: MAGENTA,
        LogCategory.FETCH: CYAN,
        LogCategory.SAVE: GREEN,
        LogCategory.ERROR: RED,
        LogCategory.PLAN: DARK_GRAY,
    }

    def __init__(self, fmt: str, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record, prefixing the message with its source and category
        tags and coloring them when the stream is a terminal.
        """
        original_msg = record.msg
        original_levelname = record.levelname

        source = getattr(record, "source", None)
        category = getattr(record, "category", None)

        parts = []
        if source:
            color = self.SOURCE_COLORS.get(source) if self.use_color else None
            parts.append(f"{color}[{source}]{self.RESET}" if color else f"[{source}]")
        if category:
            color = self.CATEGORY_COLORS.get(category) if self.use_color else None
            parts.append(f"{color}[{category}]{self.RESET}" if color else f"[{category}]")
        if parts:
            record.msg = f"{' '.join(parts)} {record.msg}"

        if self.use_color and record.levelname in self.LEVEL_COLORS:
            record.levelname = f"{self.LEVEL_COLORS[record.levelname]}{record.levelname}{self.RESET}"

        formatted = super().format(record)

        # Restore original values so other handlers see the plain record
        record.msg = original_msg
        record.levelname = original_levelname

        return formatted


class CategoryAdapter(logging.LoggerAdapter):
    """
    Adapter that adds source and category support to log messages.
    """

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra", {})

        source = kwargs.pop("source", None)
        if source:
            extra["source"] = source

        category = kwargs.pop("category", None)
        if category:
            extra["category"] = category

        kwargs["extra"] = extra
        return msg, kwargs


class Logger:
    """
    Project logger built on the standard logging module with colors, custom
    levels (STEP, SUCCESS), categories, and optional file mirroring.

    Console output goes to stderr because stdout carries the rendered HTML.
    """

    LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self):
        self._logger = logging.getLogger("ThesisPage")
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self._logger.handlers.clear()

        self._console_handler = logging.StreamHandler(sys.stderr)
        self._console_handler.setLevel(logging.INFO)

        console_formatter = ColoredFormatter(self.LOG_FORMAT, use_color=sys.stderr.isatty())
        console_formatter.datefmt = self.DATE_FORMAT
        self._console_handler.setFormatter(console_formatter)
        self._logger.addHandler(self._console_handler)

        self._file_handler: Optional[logging.FileHandler] = None
        self._log_file_path: Optional[str] = None

        self._adapter = CategoryAdapter(self._logger, {})

    def set_quiet(self, quiet: bool = True):
        """
        Limit console output to errors, or restore the default INFO threshold.
        """
        self._console_handler.setLevel(logging.ERROR if quiet else logging.INFO)

    def set_log_file(self, path: str):
        """
        Start mirroring all log messages, including DEBUG, to the specified file.
        """
        parent_dir = os.path.dirname(path)
        if parent_dir:
            try:
                os.makedirs(parent_dir, exist_ok=True)
            except OSError:
                pass

        self.close()
        try:
            handler = logging.FileHandler(path, mode="w", encoding="utf-8")
        except OSError as e:
            self._logger.error(f"Failed to open log file {path}: {e}")
            return

        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(self.LOG_FORMAT, datefmt=self.DATE_FORMAT))
        self._logger.addHandler(handler)
        self._file_handler = handler
        self._log_file_path = path

    def close(self):
        """
        Stop logging to file.
        """
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None
            self._log_file_path = None

    def step(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        """
        Log a top-level workflow step.
        """
        self._adapter.log(STEP_LEVEL, msg, source=source, category=category)

    def debug(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        self._adapter.debug(msg, source=source, category=category)

    def info(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        self._adapter.info(msg, source=source, category=category)

    def warn(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        self._adapter.warning(msg, source=source, category=category)

    def error(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        self._adapter.error(msg, source=source, category=category)

    def success(self, msg: str, *, source: Optional[str] = None, category: Optional[str] = None):
        """
        Log successful operations.
        """
        self._adapter.log(SUCCESS_LEVEL, msg, source=source, category=category)

    @property
    def log_file_path(self) -> Optional[str]:
        return self._log_file_path


# Global logger instance
logger = Logger()

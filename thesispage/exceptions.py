from __future__ import annotations

import requests

__all__ = [
    "ThesisPageError",
    "InputNotFoundError",
    "ParseError",
    "CapacityExceededError",
    "FetchError",
    "HTTP_ERRORS",
    "TIMEOUT_ERRORS",
    "DECODE_ERRORS",
    "FILE_IO_ERRORS",
    "FILE_READ_ERRORS",
    "FILE_WRITE_ERRORS",
    "INPUT_ERRORS",
]


class ThesisPageError(Exception):
    """
    Base class for every error raised by this package.
    """


class InputNotFoundError(ThesisPageError, FileNotFoundError):
    """
    Raised when the input record file cannot be opened.
    """
    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class ParseError(ThesisPageError, ValueError):
    """
    Raised when the input text cannot be turned into records.
    """


class CapacityExceededError(ParseError):
    """
    Raised when an input holds more records than the configured limit allows.
    """
    def __init__(self, limit: int):
        super().__init__(f"Too many entries, limit is {limit} (raise --max-records)")
        self.limit = limit


class FetchError(ThesisPageError):
    """
    Raised when a record file given as a URL cannot be downloaded.
    """
    def __init__(self, url: str, reason: Exception):
        super().__init__(f"Could not fetch {url}: {reason}")
        self.url = url
        self.reason = reason


# errors raised by requests when an HTTP request fails or a URL cannot be reached
HTTP_ERRORS = (requests.exceptions.RequestException,)

# errors that signal an operation has taken too long and hit a timeout
TIMEOUT_ERRORS = (TimeoutError, requests.exceptions.Timeout)

# errors that occur when converting bytes into text using a specific encoding
DECODE_ERRORS = (UnicodeDecodeError, UnicodeError)

# file system operation errors when opening the input file
# Note: FileNotFoundError is a subclass of OSError, so both are included for clarity
FILE_IO_ERRORS = (FileNotFoundError, OSError)

# combined file read errors including I/O failures and encoding issues
FILE_READ_ERRORS = FILE_IO_ERRORS + DECODE_ERRORS

# file write operation errors including permissions, disk full, and encoding issues
FILE_WRITE_ERRORS = (OSError, UnicodeEncodeError)

# everything the command line treats as a fatal failure to load the input
INPUT_ERRORS = (ThesisPageError,) + FILE_READ_ERRORS

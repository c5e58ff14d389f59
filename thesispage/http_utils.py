from __future__ import annotations

from typing import Dict

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import (
    HTTP_TIMEOUT_DEFAULT,
    HTTP_BACKOFF_INITIAL,
    HTTP_MAX_RETRIES,
    HTTP_RETRY_STATUS_CODES,
)
from .exceptions import DECODE_ERRORS, HTTP_ERRORS, FetchError

DEFAULT_TEXT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (ThesisPage Client)",
    "Accept": "text/plain,*/*;q=0.8",
}

# Global session for connection pooling
_SESSION = requests.Session()

# Configure retries
_RETRY_STRATEGY = Retry(
    total=HTTP_MAX_RETRIES,
    backoff_factor=HTTP_BACKOFF_INITIAL,
    status_forcelist=HTTP_RETRY_STATUS_CODES,
    allowed_methods=["GET"]
)
_ADAPTER = HTTPAdapter(max_retries=_RETRY_STRATEGY)
_SESSION.mount("https://", _ADAPTER)
_SESSION.mount("http://", _ADAPTER)


def is_url(path: str) -> bool:
    """
    Tell whether an input argument names a remote file rather than a local path.
    """
    return path.lower().startswith(("http://", "https://"))


def http_fetch_bytes(url: str, headers: Dict[str, str], timeout: float) -> bytes:
    """
    Perform an HTTP GET request on the shared session, which retries transient
    failures with exponential backoff, and return the response body as raw
    bytes. Any request failure is raised as FetchError.
    """
    try:
        resp = _SESSION.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
        return resp.content
    except HTTP_ERRORS as e:
        raise FetchError(url, e) from e


def decode_text(raw: bytes) -> str:
    """
    Choose a suitable decoding by inspecting byte order marks, trying UTF-8
    first, and falling back to Latin-1 when needed.
    """
    if raw.startswith(b"\xef\xbb\xbf"):
        return raw.decode("utf-8-sig")
    if raw.startswith(b"\xff\xfe"):
        try:
            return raw.decode("utf-16le")
        except DECODE_ERRORS:
            pass
    if raw.startswith(b"\xfe\xff"):
        try:
            return raw.decode("utf-16be")
        except DECODE_ERRORS:
            pass
    # no BOM - try UTF-8, fall back to Latin-1
    try:
        return raw.decode("utf-8")
    except DECODE_ERRORS:
        return raw.decode("latin-1", errors="replace")


def http_get_text(url: str, timeout: float = HTTP_TIMEOUT_DEFAULT) -> str:
    """
    Download a plain-text record file and return it decoded.
    """
    raw = http_fetch_bytes(url, DEFAULT_TEXT_HEADERS.copy(), timeout)
    return decode_text(raw)

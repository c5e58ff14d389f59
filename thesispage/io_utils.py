from __future__ import annotations

import io
import os
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .config import DEFAULT_INPUT, FIELD_COUNT, MAX_RECORDS
from .exceptions import CapacityExceededError, InputNotFoundError
from .http_utils import decode_text, http_get_text, is_url
from .log_utils import logger, LogSource, LogCategory
from .models import Thesis


class LoaderState(NamedTuple):
    """
    Position of the loader inside the record currently being read: the index
    of the next field slot (0 = author ... 6 = url) and the lines already
    assigned to earlier slots.
    """
    slot: int = 0
    fields: Tuple[str, ...] = ()


INITIAL_STATE = LoaderState()


def _strip_terminator(line: str) -> str:
    """
    Remove a trailing "\\n" or "\\r\\n" and nothing else, so leading and
    trailing spaces inside a field survive untouched. Lines are split on LF
    only, so a stray "\\r" inside a field stays part of that field.
    """
    return line.rstrip("\r\n")


def advance(state: LoaderState, line: str) -> Tuple[LoaderState, Optional[Thesis]]:
    """
    Feed one physical line to the loader and return the next state together
    with the record completed by this line, if any.

    Blank lines are skipped only while no record is in progress. Inside a
    record an empty line is an empty field and still moves the slot forward.
    """
    text = _strip_terminator(line)
    if state.slot == 0 and not text:
        return state, None

    fields = state.fields + (text,)
    if state.slot == FIELD_COUNT - 1:
        return INITIAL_STATE, Thesis(*fields)
    return LoaderState(state.slot + 1, fields), None


def parse_lines(lines: Iterable[str], max_records: Optional[int] = MAX_RECORDS) -> List[Thesis]:
    """
    Turn line-oriented text into records in file order.

    A trailing record that stops before its url line is dropped rather than
    reported as an error. When max_records is set, holding more records than
    that raises CapacityExceededError.
    """
    theses: List[Thesis] = []
    state = INITIAL_STATE
    for line in lines:
        state, thesis = advance(state, line)
        if thesis is None:
            continue
        theses.append(thesis)
        if max_records is not None and len(theses) > max_records:
            raise CapacityExceededError(max_records)

    if state.slot:
        logger.warn(
            f"Dropped incomplete trailing record ({state.slot} of {FIELD_COUNT} lines)",
            category=LogCategory.LOAD,
        )
    return theses


def parse_text(text: str, max_records: Optional[int] = MAX_RECORDS) -> List[Thesis]:
    """
    Parse a whole document held in memory, such as a downloaded record file.
    """
    return parse_lines(io.StringIO(text, newline="\n"), max_records=max_records)


def read_theses(path: str = DEFAULT_INPUT, max_records: Optional[int] = MAX_RECORDS) -> List[Thesis]:
    """
    Load thesis records from a local text file or from an http(s) URL.

    Local files are read as bytes and decoded the same way as downloads
    (BOM, then UTF-8, then Latin-1), so a stray non-UTF-8 byte does not abort
    the run. The file is closed before parsing starts.
    """
    if is_url(path):
        logger.info(f"Downloading {path}", category=LogCategory.FETCH, source=LogSource.HTTP)
        theses = parse_text(http_get_text(path), max_records=max_records)
    else:
        try:
            f = open(path, "rb")
        except OSError as e:
            raise InputNotFoundError(path) from e
        with f:
            raw = f.read()
        theses = parse_text(decode_text(raw), max_records=max_records)

    logger.info(f"Loaded {len(theses)} record(s) from {path}", category=LogCategory.LOAD,
                source=LogSource.HTTP if is_url(path) else LogSource.FILE)
    return theses


def write_output(path: str, lines: Iterable[str], makedirs: bool = True) -> None:
    """
    Write rendered lines to a file, optionally creating parent directories.
    """
    if makedirs:
        parent_dir = os.path.dirname(path)
        if parent_dir:
            os.makedirs(parent_dir, exist_ok=True)

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.writelines(lines)

import inspect
import logging

from thesispage import exceptions
from thesispage.log_utils import ColoredFormatter, logger


def test_exception_definitions():
    """
    Test that error groups are tuples of exception classes and that the
    project errors sit where the command line expects them.
    """
    for name in exceptions.__all__:
        value = getattr(exceptions, name)
        if isinstance(value, tuple):
            assert all(issubclass(e, BaseException) for e in value), f"{name} holds a non-exception"

    assert issubclass(exceptions.InputNotFoundError, FileNotFoundError)
    assert issubclass(exceptions.CapacityExceededError, exceptions.ParseError)
    for cls in (exceptions.InputNotFoundError, exceptions.ParseError, exceptions.FetchError):
        assert issubclass(cls, exceptions.INPUT_ERRORS), f"{cls.__name__} not in INPUT_ERRORS"


def test_error_messages():
    assert str(exceptions.InputNotFoundError("theses.txt")) == "File not found: theses.txt"
    assert "5" in str(exceptions.CapacityExceededError(5))


def test_log_file_mirroring(tmp_path):
    """
    Messages are mirrored to the log file with their category tags stripped.
    """
    log_path = tmp_path / "run.log"
    logger.set_log_file(str(log_path))
    try:
        logger.info("Loaded 3 record(s)", category="LOAD")
        logger.success("Saved: out.html", category="SAVE")
        assert logger.log_file_path == str(log_path)
    finally:
        logger.close()

    content = log_path.read_text(encoding="utf-8")
    assert "Loaded 3 record(s)" in content
    assert "SUCCESS" in content
    assert logger.log_file_path is None


def test_colored_formatter_restores_record():
    fmt = ColoredFormatter("%(levelname)s %(message)s", use_color=True)
    record = logging.LogRecord("ThesisPage", logging.ERROR, __file__, 1, "boom", None, None)
    record.category = "ERROR"
    out = fmt.format(record)

    assert "[ERROR]" in out and "boom" in out
    assert record.msg == "boom"
    assert record.levelname == "ERROR"


def test_logger_tags_are_keyword_only():
    """
    Every logging method takes source and category by keyword only.
    """
    for name in ("step", "debug", "info", "warn", "error", "success"):
        params = inspect.signature(getattr(logger, name)).parameters
        for tag in ("source", "category"):
            assert params[tag].kind is inspect.Parameter.KEYWORD_ONLY, f"{name}({tag}) is not keyword-only"

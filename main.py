from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from thesispage.config import DEFAULT_INPUT, DEFAULT_ORDER, MAX_RECORDS
from thesispage.exceptions import FILE_WRITE_ERRORS, INPUT_ERRORS, ParseError
from thesispage.io_utils import read_theses, write_output
from thesispage.log_utils import logger, LogCategory, LogSource
from thesispage.ordering import POLICIES, get_policy, sort_theses
from thesispage.rendering import count_degrees, render_html


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thesispage",
        description="Render a thesis/dissertation list as an HTML fragment for a web page.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"record file path or http(s) URL (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "--order",
        choices=sorted(POLICIES),
        default=DEFAULT_ORDER,
        help="sort by author then year, or by most recent year then author",
    )
    parser.add_argument("-o", "--output", help="write the fragment to this file instead of stdout")
    parser.add_argument(
        "--max-records",
        type=_positive_int,
        default=MAX_RECORDS,
        help="fail when the input holds more than this many records",
    )
    parser.add_argument("--log-file", help="mirror log messages to this file")
    parser.add_argument("-q", "--quiet", action="store_true", help="only log errors")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Load the record file, sort it, and write the rendered fragment.

    Returns an exit code suitable for use as a command-line entry point:
    0 on success and 1 when the input cannot be read, parsed, or the output
    cannot be written. Nothing is written to stdout on failure.
    """
    args = _build_parser().parse_args(argv)

    logger.set_quiet(args.quiet)
    if args.log_file:
        logger.set_log_file(args.log_file)

    try:
        policy = get_policy(args.order)
        logger.step(f"Rendering {args.input} (order: {policy.name})", category=LogCategory.PLAN)

        try:
            theses = read_theses(args.input, max_records=args.max_records)
        except ParseError as e:
            logger.error(str(e), category=LogCategory.ERROR)
            logger.error("Failed to parse input text file.", category=LogCategory.ERROR)
            return 1
        except INPUT_ERRORS as e:
            logger.error(str(e), category=LogCategory.ERROR)
            return 1

        ordered = sort_theses(theses, policy)
        logger.info(f"Sorted {len(ordered)} record(s) by {policy.name}", category=LogCategory.SORT)

        lines = render_html(ordered, policy)
        counts = count_degrees(ordered)
        logger.info(
            f"Rendered {counts.total} item(s) ({counts.ms} MS | {counts.phd} PhD)",
            category=LogCategory.RENDER,
        )

        if args.output:
            try:
                write_output(args.output, lines)
            except FILE_WRITE_ERRORS as e:
                logger.error(f"Cannot write output '{args.output}': {e}", category=LogCategory.ERROR)
                return 1
            logger.success(f"Saved: {args.output}", category=LogCategory.SAVE, source=LogSource.FILE)
        else:
            sys.stdout.writelines(lines)
            sys.stdout.flush()

        return 0
    finally:
        logger.close()


if __name__ == "__main__":
    raise SystemExit(main())

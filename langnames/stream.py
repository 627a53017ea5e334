#!/usr/bin/env python3
"""
langnames/stream.py - streaming variant of langnames.main
Run:
  printf 'en\nfr\n' | python -m langnames.stream

Reads one tag per line from stdin and answers each line as soon as it is read,
so a caller can keep the pipe open and interleave writes and reads.
Invalid tags get a row with the error in the last column instead of stopping
the stream. Exit status is 1 if any line held an invalid tag.
"""
import sys
from typing import Iterable, Optional, TextIO

from langnames.logger import get_logger, event
from langnames.locales.constants import STREAM_HEADER
from langnames.locales.resolver import resolve_tag
from langnames.utils.tsv import ensure_utf8, format_row

logger = get_logger("langnames.stream")


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def stream_names(lines: Iterable[str], out: TextIO) -> bool:
    """
    Answer each line of ``lines`` on ``out``, flushing after every row.

    Returns True if every line held a valid tag (including when there were none).
    """
    out.write(STREAM_HEADER + "\n")
    out.flush()

    had_errors = False
    for line_num, line in enumerate(lines, start=1):
        record = resolve_tag(_strip_terminator(line))
        out.write(format_row(record, with_error_column=True) + "\n")
        out.flush()

        if record.ok:
            event(logger, "resolved", line=line_num, tag=record.tag)
        else:
            logger.error("Invalid language tag on line %d: %s", line_num, record.tag)
            had_errors = True

    return not had_errors


def main(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    stdin = ensure_utf8(stdin or sys.stdin)
    stdout = ensure_utf8(stdout or sys.stdout)

    if not stream_names(stdin, stdout):
        logger.warning("Warning: Some language tags were invalid.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

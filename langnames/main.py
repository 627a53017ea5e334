#!/usr/bin/env python3
"""
langnames/main.py - print display names for the language tags given as arguments
Run:
  python -m langnames.main en fr pt-br
  language-names en fr pt-br > "Language names.tsv"

Every argument is treated as a tag; there are no options.
Exit status is 1 when no tags are given or any tag is invalid.
"""
import sys
from typing import List, Optional, TextIO

from langnames.logger import get_logger, event
from langnames.locales.constants import BATCH_HEADER, USAGE
from langnames.locales.resolver import resolve_tags
from langnames.utils.tsv import ensure_utf8, format_row

logger = get_logger("langnames.main")


def write_names(tags: List[str], out: TextIO) -> bool:
    """Write the header and one row per valid tag. Returns True if every tag resolved."""
    print(BATCH_HEADER, file=out)

    had_errors = False
    for record in resolve_tags(tags):
        if not record.ok:
            logger.error("Invalid language tag: %s", record.tag)
            had_errors = True
            continue
        print(format_row(record), file=out)
        event(logger, "resolved", tag=record.tag, english=record.english_name)

    return not had_errors


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    tags = sys.argv[1:] if argv is None else list(argv)
    out = ensure_utf8(out or sys.stdout)

    if not tags:
        for line in USAGE:
            logger.error(line)
        return 1

    if not write_names(tags, out):
        logger.warning("Warning: Some language tags were invalid. Output is incomplete.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

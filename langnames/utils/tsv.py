# langnames/utils/tsv.py
# ============================================================
# Tab-separated name tables
# Writes the rows emitted by both entry points and reads them back
# ============================================================

import os
from typing import Dict, Iterable, Iterator, List, Tuple

from langnames.logger import get_logger

logger = get_logger("langnames.tsv")


class LanguageNamesFileError(ValueError):
    """Raised once per file, listing every malformed row found."""

    def __init__(self, source, errors: List[str]):
        self.source = source
        self.errors = errors
        super().__init__("\n".join(errors))


def format_row(record, with_error_column: bool = False) -> str:
    """
    Serialize a LanguageTagRecord without the line terminator.

    Batch rows have three columns. Streaming rows always have four: the names
    are left empty for an invalid tag and the last column carries its message.
    """
    english = record.english_name or ""
    localized = record.localized_name or ""
    if not with_error_column:
        return f"{record.tag}\t{english}\t{localized}"
    return f"{record.tag}\t{english}\t{localized}\t{record.error_message or ''}"


def ensure_utf8(stream):
    """Switch a text stream to UTF-8 in place when it supports reconfigure()."""
    encoding = (getattr(stream, "encoding", None) or "utf-8").lower().replace("-", "")
    if encoding != "utf8" and hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8")
    return stream


def _is_blank(line: str) -> bool:
    return not line.strip()


def _is_comment(line: str) -> bool:
    return line.lstrip().startswith("#")


def iter_tsv(lines: Iterable[str], skip_blank: bool = True, skip_comments: bool = True) -> Iterator[Tuple[int, List[str]]]:
    """Yield ``(line_number, cells)``; line numbers count skipped lines too."""
    for line_num, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if skip_blank and _is_blank(line):
            continue
        if skip_comments and _is_comment(line):
            continue
        yield line_num, line.split("\t")


def read_language_names(source) -> Dict[str, Tuple[str, str]]:
    """
    Load a names table written by ``language-names`` or ``language-names-stream``.

    ``source`` is a path or an open text stream. Returns
    ``{tag: (english_name, localized_name)}``. After the first bad row the
    remaining rows are only checked, so the raised error lists all of them.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, "r", encoding="utf-8") as f:
            return _read_language_names(f, os.fspath(source))
    return _read_language_names(source, getattr(source, "name", "<stream>"))


def _read_language_names(lines, name) -> Dict[str, Tuple[str, str]]:
    result: Dict[str, Tuple[str, str]] = {}
    errors: List[str] = []

    for line_num, cells in iter_tsv(lines):
        if len(cells) < 3:
            errors.append(f"{name} line {line_num}: Row does not have at least three columns.")
            continue
        if len(cells) > 3 and cells[3]:
            errors.append(f"{name} line {line_num}: Language tag {cells[0]!r} was not resolved: {cells[3]}")
            continue

        if errors:
            continue

        tag, english, localized = cells[:3]
        result[tag] = (english, localized)

    if errors:
        logger.error("%d malformed row(s) in %s", len(errors), name)
        raise LanguageNamesFileError(name, errors)

    logger.info("Loaded %d language names from %s", len(result), name)
    return result

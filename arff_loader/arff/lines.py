from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO, Any

from .constants import COMMENT_SYMBOL
from .errors import KeywordsNotFoundError, MissingKeywordError

"""Line source and section scanning helpers.

The line source hands out one raw line at a time with the line terminator
removed (nothing else is trimmed) and owns the text stream it reads from: the
stream is closed when the lines run out, when ``close()`` is called, or when
the source is used as a context manager and the block exits.
"""

__all__ = [
    "LineSource",
    "read_till_found",
    "is_whitespace_only",
    "is_comment_line",
    "line_starts_with",
    "remove_keyword",
]

logger = logging.getLogger(__name__)


class LineSource:
    """Forward-only iterator over the lines of a text stream.

    Not restartable and not safe to share between consumers: every ``next()``
    advances the same underlying stream cursor.
    """

    def __init__(self, stream: IO[str], name: str = "<stream>") -> None:
        self.name = name
        self.line_number = 0  # 直近に返した行番号 (1始まり, 未読なら 0)
        self._stream: IO[str] | None = stream

    @classmethod
    def open(cls, path: Path | str, encoding: str = "utf-8") -> LineSource:
        path = Path(path)
        return cls(path.open("r", encoding=encoding), name=str(path))

    @classmethod
    def from_text(cls, text: str, name: str = "<memory>") -> LineSource:
        return cls(io.StringIO(text), name=name)

    @property
    def closed(self) -> bool:
        return self._stream is None

    def __iter__(self) -> LineSource:
        return self

    def __next__(self) -> str:
        if self._stream is None:
            raise StopIteration
        raw = self._stream.readline()
        if raw == "":
            self.close()
            raise StopIteration
        self.line_number += 1
        return raw.rstrip("\r\n")

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
            logger.debug("closed %s after %d lines", self.name, self.line_number)

    def __enter__(self) -> LineSource:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def is_whitespace_only(line: str) -> bool:
    return line.strip() == ""


def line_starts_with(line: str, prefix: str, case_insensitive: bool = True) -> bool:
    if case_insensitive:
        return line.lower().startswith(prefix.lower())
    return line.startswith(prefix)


def is_comment_line(line: str) -> bool:
    return line_starts_with(line, COMMENT_SYMBOL, case_insensitive=False)


def remove_keyword(line: str, keyword: str) -> str:
    """Remove ``keyword`` from the start of ``line``.

    Raises:
        MissingKeywordError: If the line does not start with the keyword
            (compared case-insensitively).
    """
    if not line_starts_with(line, keyword):
        raise MissingKeywordError(line, keyword)
    return line[len(keyword):]


def read_till_found(
    lines: Iterator[str],
    keywords: Iterable[str],
    search_comments: bool = False,
    case_insensitive: bool = True,
) -> str:
    """Read lines until one containing any of ``keywords`` is found.

    Blank lines are always skipped; comment lines are skipped unless
    ``search_comments`` is set.

    Args:
        lines: The line iterator, advanced in place.
        keywords: Keywords to search for.
        search_comments: Whether comment lines should be searched as well.
        case_insensitive: Whether to ignore case when matching.

    Returns:
        The first matching line, untouched.

    Raises:
        KeywordsNotFoundError: If the lines run out first.
    """
    keywords = list(keywords)
    searched = [k.lower() for k in keywords] if case_insensitive else keywords
    for line in lines:
        if is_whitespace_only(line):
            continue
        if not search_comments and is_comment_line(line):
            continue
        haystack = line.lower() if case_insensitive else line
        if any(word in haystack for word in searched):
            return line
    raise KeywordsNotFoundError(keywords)

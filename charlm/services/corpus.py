"""
Corpus reading: a sequential, read-once character stream over a text file.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Union

from charlm.config import settings

PathLike = Union[str, Path]


class CharReader:
    """
    Reads a text file one character at a time.

    Supports both the explicit `is_empty()` / `read_char()` protocol and
    plain iteration. Decoding is done with the configured corpus encoding.
    """

    def __init__(self, path: PathLike, encoding: Optional[str] = None):
        self.path = Path(path)
        self.encoding = encoding or settings.CORPUS_ENCODING
        self._fh = self.path.open("r", encoding=self.encoding, newline="")
        try:
            self._lookahead = self._fh.read(1)
        except UnicodeDecodeError:
            self._fh.close()
            raise

    def is_empty(self) -> bool:
        return self._lookahead == ""

    def read_char(self) -> str:
        """Return the next character; raises EOFError when the stream is exhausted."""
        if self.is_empty():
            raise EOFError(f"no more characters in {self.path}")
        ch = self._lookahead
        self._lookahead = self._fh.read(1)
        return ch

    def close(self):
        self._fh.close()

    def __iter__(self) -> Iterator[str]:
        while not self.is_empty():
            yield self.read_char()

    def __enter__(self) -> "CharReader":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def read_chars(path: PathLike, encoding: Optional[str] = None) -> Iterator[str]:
    """Yield the characters of a corpus file, closing it once exhausted."""
    with CharReader(path, encoding=encoding) as reader:
        yield from reader

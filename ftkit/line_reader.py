"""Reading a source one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
import sys
from typing import AnyStr, Iterator, List, Optional, Protocol, Union

DEFAULT_BUFFER_SIZE = 42


class _Readable(Protocol):
    def read(self, size: int) -> Union[bytes, str]: ...


Source = Union[int, _Readable]


class LineReader:
    """Yield successive lines from a file descriptor or a readable object.

    Data is pulled ``buffer_size`` units at a time and kept between calls,
    so each line is returned with its trailing newline, and the last line
    may have none. A file descriptor yields ``bytes``; a file-like object
    yields whatever its ``read`` returns.
    """

    def __init__(self, source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError(f"invalid file descriptor: {source}")
        elif not callable(getattr(source, "read", None)):
            raise TypeError(
                f"expected a file descriptor or an object with read(), got {type(source).__name__}"
            )
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._source = source
        self._buffer_size = buffer_size
        self._stash: Optional[Union[bytes, str]] = None

    def _read_chunk(self) -> Union[bytes, str]:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    @staticmethod
    def _has_newline(stash: Optional[AnyStr]) -> bool:
        if stash is None:
            return False
        newline = b"\n" if isinstance(stash, bytes) else "\n"
        return newline in stash

    def read_line(self) -> Optional[Union[bytes, str]]:
        """Return the next line, or ``None`` once the source is exhausted.

        A failed read discards any buffered data and re-raises the error.
        """
        end_of_input = False
        while not end_of_input and not self._has_newline(self._stash):
            try:
                chunk = self._read_chunk()
            except OSError:
                self._stash = None
                raise
            if not chunk:
                end_of_input = True
            elif self._stash is None:
                self._stash = chunk
            else:
                self._stash += chunk

        stash = self._stash
        if not stash:
            self._stash = None
            return None
        newline = b"\n" if isinstance(stash, bytes) else "\n"
        cut = stash.find(newline)
        end = len(stash) if cut < 0 else cut + 1
        line, rest = stash[:end], stash[end:]
        self._stash = rest or None
        return line

    def __iter__(self) -> Iterator[Union[bytes, str]]:
        """Yield lines until the source is exhausted."""
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def main(argv: Optional[List[str]] = None) -> int:
    """Print every line of the named file, each followed by an extra newline."""
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "line_reader"
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(f"Usage: {prog} <file_path>\n")
        return 1

    try:
        fd = os.open(args[0], os.O_RDONLY)
    except OSError as exc:
        sys.stderr.write(f"Error opening file: {exc.strerror}\n")
        return 1

    try:
        out = getattr(sys.stdout, "buffer", None)
        for line in LineReader(fd):
            if out is not None:
                sys.stdout.flush()
                out.write(line + b"\n")
                out.flush()
            else:
                sys.stdout.write(line.decode("utf-8", errors="replace") + "\n")
    finally:
        os.close(fd)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Backward line scanner.

Reads a random-access source in chunks from a starting offset toward the
beginning, returning lines newest first:

    scanner = BackScanner(b"Line1\\nLine2\\nLine3", 17)
    for line, pos in scanner:
        print(pos, line)

prints ``12 Line3``, ``6 Line2`` and ``0 Line1``.
"""

from typing import Any, Iterator, Optional, Tuple

from .config import settings
from .errors import BufferSizeExceeded, EndOfSource, ShortReadError
from .models.options import ScannerOptions
from .sources import ReadAtSource, as_source
from .utils.logger import get_app_logger


NEWLINE = 0x0A
CARRIAGE_RETURN = 0x0D


class BackScanner:
    """Returns the lines preceding a start offset, most recent first.

    Not safe for concurrent use; create one scanner per thread.
    """

    def __init__(
        self,
        source: Any,
        pos: int,
        options: Optional[ScannerOptions] = None
    ):
        """
        Initialize the scanner.

        Args:
            source: ReadAtSource, bytes-like object, mmap or seekable binary file
            pos: Start offset; bytes at or after it are never read
            options: Scanner options, built from settings when omitted

        Raises:
            ValueError: If pos is negative
            TypeError: If the source cannot be adapted
        """
        if pos < 0:
            raise ValueError(f"Start offset must be non-negative, got {pos}")

        self.source: ReadAtSource = as_source(source)
        if options is None:
            options = ScannerOptions.from_settings(settings)
        self._options = options
        self._pos = pos
        self._buf = bytearray()
        # Valid bytes are _buf[:_end]; emitted lines are cut off by moving _end
        self._end = 0
        self._err: Optional[Exception] = None
        self.logger = get_app_logger()

    @property
    def options(self) -> ScannerOptions:
        return self._options

    @property
    def cursor(self) -> int:
        """Absolute offset of the first byte pulled into the buffer."""
        return self._pos

    @property
    def buffered(self) -> int:
        """Number of fetched bytes not yet returned as lines."""
        return self._end

    def _read_more(self) -> None:
        """Prepend the chunk preceding the cursor to the buffer."""
        if self._pos == 0:
            self.logger.debug("Reached start of source")
            raise EndOfSource()

        size = min(self._options.chunk_size, self._pos)
        self._pos -= size

        required = size + self._end
        if required > self._options.max_buffer_size:
            self.logger.warning(
                f"Line at offset {self._pos} exceeds max buffer size "
                f"({required} > {self._options.max_buffer_size} bytes)"
            )
            raise BufferSizeExceeded(self._options.max_buffer_size, required)

        try:
            data = self.source.read_at(self._pos, size)
        except Exception as e:
            self.logger.error(f"Failed to read {size} bytes at offset {self._pos}: {e}")
            raise

        if len(data) < size:
            self.logger.error(f"Short read at offset {self._pos}: {len(data)} of {size} bytes")
            raise ShortReadError(self._pos, size, len(data))

        self.logger.debug(f"Fetched {size} bytes at offset {self._pos}")

        # A fresh buffer keeps previously returned views untouched
        buf = bytearray(data)
        buf += memoryview(self._buf)[:self._end]
        self._buf = buf
        self._end = len(buf)

    def _locate(self) -> Tuple[int, int, int]:
        """
        Find the next line, fetching chunks until one is complete.

        Nothing is consumed: the caller commits with _consume().

        Returns:
            Tuple of (line start index in buffer, buffer end after the line, absolute position)
        """
        if self._err is not None:
            raise self._err.with_traceback(None)

        while True:
            line_start = self._buf.rfind(NEWLINE, 0, self._end)
            if line_start >= 0:
                return line_start + 1, line_start, self._pos + line_start + 1

            try:
                self._read_more()
            except EndOfSource as e:
                if self._end > 0:
                    # Earliest line in the source; always reported at 0
                    return 0, 0, 0
                self._err = e
                raise
            except Exception as e:
                self._err = e
                raise

    def _consume(self, start: int, new_end: int) -> None:
        self._end = new_end
        if start == 0:
            self._err = EndOfSource()

    def line_bytes(self) -> Tuple[memoryview, int]:
        """
        Return the next line and the absolute offset where it starts.

        The line is a view into the internal buffer: it is only valid until
        the next call. Use line() or bytes(view) to keep it.

        Returns:
            Tuple of (line view without line ending, absolute start offset)

        Raises:
            EndOfSource: No more lines
            BufferSizeExceeded: A line is longer than max_buffer_size
            ShortReadError: The source ended before the requested offset
        """
        start, new_end, pos = self._locate()
        line = self._drop_cr(start, self._end)
        self._consume(start, new_end)
        return line, pos

    def line(self) -> Tuple[str, int]:
        """
        Return the next line as an owned string and its absolute offset.

        Same as line_bytes(), decoded with the configured encoding. If
        decoding fails the line stays buffered, so the next call returns
        the same line again.
        """
        start, new_end, pos = self._locate()
        text = str(self._drop_cr(start, self._end), self._options.encoding, self._options.errors)
        self._consume(start, new_end)
        return text, pos

    def _drop_cr(self, start: int, end: int) -> memoryview:
        if end > start and self._buf[end - 1] == CARRIAGE_RETURN:
            end -= 1
        return memoryview(self._buf)[start:end]

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        """Yield (line, pos) pairs until the start of the source."""
        while True:
            try:
                yield self.line()
            except EndOfSource:
                return

    def iter_bytes(self) -> Iterator[Tuple[bytes, int]]:
        """Yield (line bytes copy, pos) pairs until the start of the source."""
        while True:
            try:
                line, pos = self.line_bytes()
            except EndOfSource:
                return
            yield bytes(line), pos

    def close(self) -> None:
        """Close the underlying source if it supports closing."""
        close = getattr(self.source, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "BackScanner":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

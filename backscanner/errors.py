"""Exceptions raised by the back-scanner."""


class BackScannerError(Exception):
    """Base class for all back-scanner errors."""


class EndOfSource(BackScannerError, EOFError):
    """No more lines: the start of the source has been reached."""

    def __init__(self, message: str = "end of source"):
        super().__init__(message)


class BufferSizeExceeded(BackScannerError):
    """A single unterminated line grew past the configured buffer cap."""

    def __init__(self, max_buffer_size: int, required: int):
        self.max_buffer_size = max_buffer_size
        self.required = required
        super().__init__(
            f"Line exceeds max buffer size: {required} > {max_buffer_size} bytes"
        )


class ShortReadError(BackScannerError, OSError):
    """The source delivered fewer bytes than requested."""

    def __init__(self, offset: int, expected: int, received: int):
        self.offset = offset
        self.expected = expected
        self.received = received
        super().__init__(
            f"Short read at offset {offset}: expected {expected} bytes, got {received}"
        )

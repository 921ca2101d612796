"""Read lines backward from a random-access source."""

from .errors import BackScannerError, BufferSizeExceeded, EndOfSource, ShortReadError
from .models.options import ScannerOptions
from .scanner import BackScanner
from .sources import BytesSource, FileSource, ReadAtSource, as_source
from .utils.tail import find_last, read_last_n_lines

__version__ = "0.1.0"

__all__ = [
    "BackScanner",
    "ScannerOptions",
    "ReadAtSource",
    "BytesSource",
    "FileSource",
    "as_source",
    "BackScannerError",
    "EndOfSource",
    "BufferSizeExceeded",
    "ShortReadError",
    "read_last_n_lines",
    "find_last",
]

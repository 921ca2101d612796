"""Random-access byte sources the scanner reads from."""

import io
import mmap
import os
from typing import Any, BinaryIO, Protocol, Union, runtime_checkable


BytesLike = Union[bytes, bytearray, memoryview, mmap.mmap]


@runtime_checkable
class ReadAtSource(Protocol):
    """Protocol for random-access byte providers."""

    def read_at(self, offset: int, size: int) -> bytes:
        """Return up to `size` bytes starting at absolute `offset`.

        Fewer bytes than requested means the source ended early.
        """
        ...


class BytesSource:
    """Source over an in-memory buffer (bytes, bytearray, memoryview or mmap)."""

    def __init__(self, data: BytesLike):
        self.data = data

    def __len__(self) -> int:
        return len(self.data)

    def read_at(self, offset: int, size: int) -> bytes:
        return bytes(self.data[offset:offset + size])

    def close(self) -> None:
        """Close the wrapped object if it can be closed."""
        close = getattr(self.data, "close", None)
        if close is not None:
            close()


class FileSource:
    """Source over a seekable binary file object."""

    def __init__(self, fileobj: BinaryIO):
        """
        Wrap an open binary file.

        Args:
            fileobj: Seekable file object opened in binary mode

        Raises:
            TypeError: If the file is opened in text mode
        """
        if isinstance(fileobj, io.TextIOBase):
            raise TypeError("FileSource requires a binary file object, got a text file")
        self.fileobj = fileobj

    def size(self) -> int:
        """Return the current end offset of the file."""
        return self.fileobj.seek(0, os.SEEK_END)

    def read_at(self, offset: int, size: int) -> bytes:
        self.fileobj.seek(offset)
        chunks = []
        remaining = size
        # Raw files may return less than asked for; keep reading until EOF
        while remaining > 0:
            chunk = self.fileobj.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        self.fileobj.close()


def as_source(obj: Any) -> ReadAtSource:
    """
    Adapt an object to the ReadAtSource protocol.

    Args:
        obj: A ReadAtSource, a bytes-like object or mmap, or a seekable binary file

    Returns:
        An object exposing read_at()

    Raises:
        TypeError: If the object cannot be read at random offsets
    """
    if isinstance(obj, ReadAtSource):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview, mmap.mmap)):
        return BytesSource(obj)
    if hasattr(obj, "seek") and hasattr(obj, "read"):
        return FileSource(obj)
    raise TypeError(f"Unsupported source type: {type(obj).__name__}")

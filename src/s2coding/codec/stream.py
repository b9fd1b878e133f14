"""Byte-level stream adapters.

The codecs in this package read and write one byte at a time through any object
satisfying ``ByteSource`` or ``ByteSink``. ``ByteReader`` and ``ByteWriter`` are
the adapters shipped with the package: they wrap an in-memory buffer or a binary
file object. The codecs never open or close a stream; that belongs to the caller.

Transport errors from a wrapped file (``OSError``) propagate unchanged.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from ..exceptions import EndOfStreamError


@runtime_checkable
class ByteSource(Protocol):
    """Sequential single-byte reader."""

    def read_byte(self) -> int:
        """Return the next byte (0-255).

        Raises:
            EndOfStreamError: If the source is exhausted
        """
        ...


@runtime_checkable
class ByteSink(Protocol):
    """Sequential single-byte writer."""

    def write_byte(self, value: int) -> None:
        """Append one byte (0-255)."""
        ...


class ByteWriter:
    """Appends bytes to an in-memory buffer or a binary file.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_byte(0x96)
        >>> writer.write_bytes(b"\\x01")
        >>> writer.to_bytes()
        b'\\x96\\x01'
    """

    def __init__(self, fileobj: BinaryIO | None = None) -> None:
        """Initialize a writer.

        Args:
            fileobj: Binary file to write through to, or None to buffer in memory
        """
        self._fileobj = fileobj
        self._buffer = bytearray()
        self._count = 0

    def write_byte(self, value: int) -> None:
        """Write a single byte.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value is not a byte
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"write_byte requires a value in 0-255, got {value}")

        if self._fileobj is not None:
            self._fileobj.write(bytes((value,)))
        else:
            self._buffer.append(value)
        self._count += 1

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes.

        Args:
            data: Bytes to write
        """
        for byte in data:
            self.write_byte(byte)

    def byte_length(self) -> int:
        """Return the number of bytes written so far."""
        return self._count

    def to_bytes(self) -> bytes:
        """Return the buffered bytes.

        Raises:
            ValueError: If the writer wraps a file object
        """
        if self._fileobj is not None:
            raise ValueError("to_bytes() is only available for in-memory writers")
        return bytes(self._buffer)


class ByteReader:
    """Reads bytes sequentially from an in-memory buffer or a binary file.

    Consumed bytes cannot be re-read.

    Example:
        >>> reader = ByteReader(b"\\x96\\x01")
        >>> reader.read_byte()
        150
        >>> reader.bytes_remaining()
        1
    """

    def __init__(self, source: bytes | bytearray | memoryview | BinaryIO, offset: int = 0) -> None:
        """Initialize a reader.

        Args:
            source: Byte buffer or binary file object to read from
            offset: Starting position in an in-memory buffer
        """
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._data: bytes | None = bytes(source)
            self._fileobj: BinaryIO | None = None
        else:
            self._data = None
            self._fileobj = source
            if offset:
                raise ValueError("offset is only supported for in-memory buffers")
        if offset < 0:
            raise ValueError(f"offset must be non-negative, got {offset}")
        self._position = offset

    def read_byte(self) -> int:
        """Read a single byte.

        Returns:
            Byte value (0-255)

        Raises:
            EndOfStreamError: If no more bytes are available
        """
        if self._data is not None:
            if self._position >= len(self._data):
                raise EndOfStreamError("Attempted to read past end of byte buffer")
            value = self._data[self._position]
        else:
            assert self._fileobj is not None
            chunk = self._fileobj.read(1)
            if not chunk:
                raise EndOfStreamError("Attempted to read past end of byte stream")
            value = chunk[0]

        self._position += 1
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        An in-memory reader checks the length up front and consumes nothing on
        failure; a file reader fails at the first missing byte.

        Args:
            num_bytes: Number of bytes to read

        Raises:
            EndOfStreamError: If not enough bytes are available
        """
        remaining = self.bytes_remaining()
        if remaining is not None and num_bytes > remaining:
            raise EndOfStreamError(f"Not enough bytes: need {num_bytes}, have {remaining}")

        return bytes(self.read_byte() for _ in range(num_bytes))

    def bytes_remaining(self) -> int | None:
        """Return the number of unread bytes, or None for file-backed readers."""
        if self._data is None:
            return None
        return max(len(self._data) - self._position, 0)

    def position(self) -> int:
        """Return the number of bytes consumed (plus the starting offset)."""
        return self._position

#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import io
from abc import ABC, abstractmethod
from typing import BinaryIO, Union

from overrides import override

from formpart.const import END_OF_DATA
from formpart.errors import OutOfBoundsError

BytesLike = Union[bytes, bytearray, memoryview]


class ByteSource(ABC):
    """
    Random access, read-only byte source of known length.

    Reads are positioned: each call names its own offset, so any number of
    readers can share one source without sharing a cursor.
    """

    @property
    @abstractmethod
    def length(self) -> int:
        """Total number of bytes in the source."""

    @abstractmethod
    def read_at(self, offset: int, size: int) -> bytes:
        """
        Read up to size bytes starting at an absolute offset.

        Args:
            offset (int): Absolute offset to start reading from
            size (int): Maximum number of bytes to read

        Returns:
            bytes: Data read, empty once the offset reaches the end of the source

        Raises:
            OutOfBoundsError: If offset is outside of [0, length]
        """

    def read_byte_at(self, offset: int) -> int:
        """
        Read one byte at an absolute offset.

        Args:
            offset (int): Absolute offset

        Returns:
            int: Byte value, -1 at the end of the source
        """
        data = self.read_at(offset, 1)
        return data[0] if data else END_OF_DATA

    def _check_offset(self, offset: int) -> None:
        if offset < 0 or offset > self.length:
            raise OutOfBoundsError(offset, 0, self.length)

    def __len__(self) -> int:
        return self.length


class BufferSource(ByteSource):
    """
    Byte source over an in-memory buffer.

    Slices are taken through a memoryview, so nothing is copied until the
    requested bytes are returned.

    Args:
        data (BytesLike): Buffer to read from. It must not be modified while in use.
    """

    def __init__(self, data: BytesLike):
        self._view = memoryview(data).cast("B")

    @property
    def length(self) -> int:
        return len(self._view)

    @override
    def read_at(self, offset: int, size: int) -> bytes:
        self._check_offset(offset)
        if size <= 0:
            return b""
        return self._view[offset : offset + size].tobytes()

    @override
    def read_byte_at(self, offset: int) -> int:
        self._check_offset(offset)
        if offset == len(self._view):
            return END_OF_DATA
        return self._view[offset]


class StreamSource(ByteSource):
    """
    Byte source over a seekable binary stream.

    The stream is repositioned before every read, so callers never depend on where
    the stream cursor was left by a previous read.

    Args:
        stream (BinaryIO): Readable, seekable binary stream, owned by this source
            for the duration of the scan
    """

    def __init__(self, stream: BinaryIO):
        if not stream.seekable():
            raise ValueError("StreamSource requires a seekable stream")
        self._stream = stream
        self._length = stream.seek(0, io.SEEK_END)

    @property
    def length(self) -> int:
        return self._length

    @override
    def read_at(self, offset: int, size: int) -> bytes:
        self._check_offset(offset)
        if size <= 0:
            return b""
        self._stream.seek(offset, io.SEEK_SET)
        return self._stream.read(size)


def as_source(data: Union[ByteSource, BytesLike, BinaryIO]) -> ByteSource:
    """
    Wrap supported inputs in a ByteSource.

    Args:
        data (Union[ByteSource, BytesLike, BinaryIO]): Existing source, in-memory
            buffer or seekable binary stream

    Returns:
        ByteSource: Source over the given data

    Raises:
        TypeError: If the input cannot be used as a byte source
    """
    if isinstance(data, ByteSource):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return BufferSource(data)
    if hasattr(data, "read") and hasattr(data, "seek"):
        return StreamSource(data)
    raise TypeError(f"Unsupported byte source type: {type(data).__name__}")

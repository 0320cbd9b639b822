#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import io
from io import BufferedIOBase
from typing import Optional

from overrides import override

from formpart.const import END_OF_DATA
from formpart.errors import (
    OutOfBoundsError,
    StartRepositionedError,
    UnsupportedOperationError,
)
from formpart.multipart.byte_source import ByteSource


class WindowedView(BufferedIOBase):
    """
    A read-only, seekable file-like window over the range [start, end) of a shared
    byte source, extending `BufferedIOBase`.

    The view never copies the underlying data ahead of a read. It keeps its own
    absolute position and reads through `ByteSource.read_at`, so several views over
    the same source can be read in any order, including interleaved.

    Positions reported by `tell()` and accepted by `seek()` are relative to `start`.
    `start` can be moved forward once with `reposition_start()`, which is how part
    headers are dropped from the window without copying the body.

    Args:
        source (ByteSource): Shared source to read from
        start (int): Absolute start offset of the window
        end (int): Absolute end offset of the window (exclusive)

    Raises:
        OutOfBoundsError: If the range does not fit in the source or end < start
    """

    def __init__(self, source: ByteSource, start: int, end: int):
        super().__init__()
        if start < 0 or start > source.length:
            raise OutOfBoundsError(start, 0, source.length)
        if end < start or end > source.length:
            raise OutOfBoundsError(end, start, source.length)
        self._source = source
        self._start = start
        self._end = end
        self._position = start
        self._repositioned = False

    @property
    def source(self) -> ByteSource:
        """The shared source this view reads from."""
        return self._source

    @property
    def start(self) -> int:
        """Absolute start offset of the window."""
        return self._start

    @property
    def end(self) -> int:
        """Absolute end offset of the window (exclusive)."""
        return self._end

    @property
    def position(self) -> int:
        """Absolute offset of the next read."""
        return self._position

    def __len__(self) -> int:
        return self._end - self._start

    def __repr__(self) -> str:
        return (
            f"WindowedView(start={self._start}, end={self._end}, "
            f"position={self._position})"
        )

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed file.")

    def _advance(self, bytes_read: int) -> None:
        # An empty read before the window end means the source is exhausted
        if bytes_read <= 0:
            self._position = self._end
        else:
            self._position += bytes_read

    @override
    def readable(self) -> bool:
        """Return whether the view is readable."""
        return not self.closed

    @override
    def seekable(self) -> bool:
        """Return whether the view supports seeking."""
        return not self.closed

    @override
    def writable(self) -> bool:
        """Return False as the view is read-only."""
        return False

    @override
    def read(self, size: Optional[int] = -1) -> bytes:
        """
        Read up to size bytes from the window.

        Args:
            size (int, optional): Number of bytes to read. If omitted, None or
                negative, reads until the end of the window. Defaults to -1.

        Returns:
            bytes: Data read, empty once the window is exhausted

        Raises:
            ValueError: I/O operation on a closed view.
        """
        self._check_open()
        remaining = self._end - self._position
        count = remaining if size is None or size < 0 else min(size, remaining)
        if count <= 0:
            return b""
        data = self._source.read_at(self._position, count)
        self._advance(len(data))
        return data

    @override
    def read1(self, size: Optional[int] = -1) -> bytes:
        """Same as `read()`, the view has no raw layer beneath it."""
        return self.read(size)

    @override
    def readinto(self, buffer) -> int:
        """
        Read bytes into a pre-allocated writable buffer.

        Args:
            buffer: Writable bytes-like object

        Returns:
            int: Number of bytes read, 0 once the window is exhausted
        """
        target = memoryview(buffer).cast("B")
        data = self.read(len(target))
        target[: len(data)] = data
        return len(data)

    @override
    def readinto1(self, buffer) -> int:
        return self.readinto(buffer)

    def read_byte(self) -> int:
        """
        Read a single byte.

        Returns:
            int: Byte value, or END_OF_DATA (-1) at the end of the window
        """
        self._check_open()
        if self._position >= self._end:
            return END_OF_DATA
        value = self._source.read_byte_at(self._position)
        self._advance(0 if value == END_OF_DATA else 1)
        return value

    @override
    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """
        Move to a position in the window.

        Args:
            offset (int): Offset relative to whence
            whence (int): io.SEEK_SET (window start), io.SEEK_CUR (current position)
                or io.SEEK_END (window end). Defaults to io.SEEK_SET.

        Returns:
            int: New position relative to the window start

        Raises:
            OutOfBoundsError: If the new position falls before the window start or
                after its end
            ValueError: If whence is invalid or the view is closed
        """
        self._check_open()
        if whence == io.SEEK_SET:
            target = self._start + offset
        elif whence == io.SEEK_CUR:
            target = self._position + offset
        elif whence == io.SEEK_END:
            target = self._end + offset
        else:
            raise ValueError(f"Invalid whence ({whence})")

        if target < self._start or target > self._end:
            raise OutOfBoundsError(target - self._start, 0, len(self))

        self._position = target
        return self._position - self._start

    @override
    def tell(self) -> int:
        """Return the current position relative to the window start."""
        self._check_open()
        return self._position - self._start

    def reposition_start(self) -> None:
        """
        Move the window start to the current position, dropping what was read.
        This can only be done once per view.

        Raises:
            StartRepositionedError: If the start was already moved
        """
        if self._repositioned:
            raise StartRepositionedError(self._start)
        self._start = self._position
        self._repositioned = True

    def getvalue(self) -> bytes:
        """
        Return a copy of the whole window without moving the position.

        Returns:
            bytes: Data in [start, end)
        """
        return self._source.read_at(self._start, len(self))

    @override
    def write(self, buffer) -> int:  # pylint: disable=unused-argument
        raise UnsupportedOperationError("write")

    @override
    def truncate(self, pos: Optional[int] = None) -> int:  # pylint: disable=unused-argument
        raise UnsupportedOperationError("truncate")

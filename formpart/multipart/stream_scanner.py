#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from typing import List

from formpart.const import (
    BOUNDARY_PRECEDING_LEN,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_PARTS,
    END_OF_DATA,
    LF,
    NOT_FOUND,
)
from formpart.multipart.boundary_templates import BoundaryTemplates
from formpart.multipart.byte_source import ByteSource
from formpart.multipart.match_buffer import MatchBuffer
from formpart.multipart.windowed_view import WindowedView
from formpart.utils import get_logger

logger = get_logger(__name__)


class StreamScanner:
    """
    Splits a multipart body into one `WindowedView` per part by scanning it for
    boundary lines.

    The source is read sequentially, one byte at a time from chunks of `chunk_size`
    bytes, and every byte goes through a `MatchBuffer`. The buffer is reset on each
    line feed and whenever it fills up without matching, so a boundary is only
    recognized when it starts a line. The position right after a matching boundary
    line marks the start of the next part.

    Each part ends `len(templates) + 2` bytes before the end of the following
    boundary line, which drops the boundary line and the CRLF in front of it. When
    the source runs out before another boundary is found, the same amount is taken
    off the end of the source instead.

    Args:
        source (ByteSource): Source holding the complete multipart body
        templates (BoundaryTemplates): Boundary templates for the body
        max_parts (int, optional): Stop after this many parts. Defaults to 1000.
        chunk_size (int, optional): Bytes fetched per source read. Defaults to 32KiB.

    Notes:
        This class is not thread-safe. Each scan session should use its own instance.
    """

    def __init__(
        self,
        source: ByteSource,
        templates: BoundaryTemplates,
        max_parts: int = DEFAULT_MAX_PARTS,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self._source = source
        self._templates = templates
        self._max_parts = max_parts
        self._chunk_size = chunk_size
        self._match_buffer = MatchBuffer(templates)

        self._position = 0
        self._chunk = b""
        self._chunk_index = 0
        self._closing_found = False
        self._truncated = False

    @property
    def position(self) -> int:
        """Absolute offset of the next byte the scanner will read."""
        return self._position

    @property
    def truncated(self) -> bool:
        """True if the last scan stopped at the part limit."""
        return self._truncated

    @property
    def closing_found(self) -> bool:
        """True if the last scan reached the terminator boundary."""
        return self._closing_found

    def _rewind(self) -> None:
        self._position = 0
        self._chunk = b""
        self._chunk_index = 0
        self._closing_found = False
        self._truncated = False

    def _read_byte(self) -> int:
        if self._chunk_index >= len(self._chunk):
            self._chunk = self._source.read_at(self._position, self._chunk_size)
            self._chunk_index = 0
            if not self._chunk:
                return END_OF_DATA
        value = self._chunk[self._chunk_index]
        self._chunk_index += 1
        self._position += 1
        return value

    def next_boundary_position(self) -> int:
        """
        Advance past the next boundary line.

        Returns:
            int: Absolute offset right after the boundary line, NOT_FOUND (-1) if the
                source was exhausted first
        """
        buffer = self._match_buffer
        buffer.reset()
        while True:
            value = self._read_byte()
            if value == END_OF_DATA:
                return NOT_FOUND

            buffer.insert(value)

            if buffer.is_full and (buffer.is_separator or buffer.is_closing):
                self._closing_found = buffer.is_closing
                return self._position

            if value == LF or buffer.is_full:
                buffer.reset()

    def _end_of_part(self, start: int, boundary_end: int) -> int:
        if self._position == self._source.length:
            if boundary_end == NOT_FOUND:
                logger.warning(
                    "No boundary after offset %d, part runs to the end of the body",
                    start,
                )
            # Missing or unterminated trailing boundary
            end = self._position - (len(self._templates) + BOUNDARY_PRECEDING_LEN)
        else:
            end = boundary_end - (len(self._templates) + BOUNDARY_PRECEDING_LEN)

        if end < start:
            logger.warning(
                "Part starting at offset %d ends at %d, treating it as empty", start, end
            )
            return start
        return end

    def scan(self) -> List[WindowedView]:
        """
        Scan the whole source and return a view per part, in order.

        Returns:
            List[WindowedView]: Views over each part, headers included
        """
        self._rewind()
        views = []

        boundary_start = self.next_boundary_position()
        while boundary_start != NOT_FOUND and not self._closing_found:
            if len(views) >= self._max_parts:
                self._truncated = True
                logger.warning(
                    "Stopped scanning after %d parts at offset %d",
                    self._max_parts,
                    boundary_start,
                )
                break

            boundary_end = self.next_boundary_position()
            end = self._end_of_part(boundary_start, boundary_end)
            logger.debug("Found part at [%d, %d)", boundary_start, end)
            views.append(WindowedView(self._source, boundary_start, end))

            boundary_start = boundary_end

        return views

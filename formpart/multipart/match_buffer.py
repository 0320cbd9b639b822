#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from formpart.multipart.boundary_templates import BoundaryTemplates


class MatchBuffer:
    """
    Fixed-capacity window over the most recently read bytes, compared against the
    separator and terminator boundary templates.

    Args:
        templates (BoundaryTemplates): Templates to match against

    Notes:
        `reset()` only rewinds the write cursor. Stale bytes stay in place but are
        never compared, since comparisons only happen once the buffer is full.
        This class is not thread-safe.
    """

    def __init__(self, templates: BoundaryTemplates):
        self._separator = templates.separator
        self._terminator = templates.terminator
        self._buffer = bytearray(len(templates))
        self._position = 0

    def insert(self, value: int) -> None:
        """
        Write a byte at the cursor and advance it.

        Args:
            value (int): Byte value to insert

        Raises:
            IndexError: If the buffer is already full and was not reset
        """
        self._buffer[self._position] = value
        self._position += 1

    def reset(self) -> None:
        """Rewind the cursor so that following inserts overwrite from the start."""
        self._position = 0

    @property
    def is_full(self) -> bool:
        """True when the buffer holds as many bytes as the templates."""
        return self._position == len(self._buffer)

    @property
    def is_separator(self) -> bool:
        """True when the buffer equals the separator template."""
        return self._buffer == self._separator

    @property
    def is_closing(self) -> bool:
        """True when the buffer equals the terminator template."""
        return self._buffer == self._terminator

    @property
    def position(self) -> int:
        """Current write cursor."""
        return self._position

    def __len__(self) -> int:
        return len(self._buffer)

#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from formpart.const import MULTIPART_MARKER, UTF_ENCODING, WIN_LINE_END
from formpart.errors import EmptyBoundaryError


class BoundaryTemplates:
    """
    Byte templates derived from a multipart boundary token.

    The separator template (`--token` + CRLF) marks the start of every part and the
    terminator template (`--token--`) closes the body. Both are the same length, so
    either fits a single `MatchBuffer`.

    Args:
        boundary (str): Boundary token, as found in the Content-Type header
    """

    def __init__(self, boundary: str):
        if not boundary:
            raise EmptyBoundaryError()
        self._boundary = boundary
        token = MULTIPART_MARKER + boundary.encode(UTF_ENCODING)
        self._separator = token + WIN_LINE_END
        self._terminator = token + MULTIPART_MARKER

    @property
    def boundary(self) -> str:
        """The boundary token the templates were built from."""
        return self._boundary

    @property
    def separator(self) -> bytes:
        """Template of a boundary line between parts."""
        return self._separator

    @property
    def terminator(self) -> bytes:
        """Template of the closing boundary line."""
        return self._terminator

    def __len__(self) -> int:
        return len(self._separator)

    def __repr__(self) -> str:
        return f"BoundaryTemplates(boundary={self._boundary!r})"

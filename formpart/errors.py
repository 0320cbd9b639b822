#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import io


class MultipartError(Exception):
    """
    Base class for errors raised while decoding multipart/form-data content
    """


class NotMultipartError(MultipartError):
    """
    Raised when the headers do not describe a multipart/form-data body with a boundary
    """

    def __init__(self, message: str = "Content is not multipart/form-data"):
        super().__init__(message)


class EmptyBoundaryError(MultipartError):
    """
    Raised when a multipart boundary token is empty
    """

    def __init__(self):
        super().__init__("Multipart boundary may not be empty")


class OutOfBoundsError(MultipartError):
    """
    Raised when a seek or read position falls outside of the allowed range
    """

    def __init__(self, position: int, lower: int, upper: int):
        self.position = position
        self.lower = lower
        self.upper = upper
        super().__init__(f"Position {position} is outside of range [{lower}, {upper}]")


class StartRepositionedError(MultipartError):
    """
    Raised when the start of a view that was already repositioned is moved again
    """

    def __init__(self, start: int):
        self.start = start
        super().__init__(f"View start was already moved to offset {start}")


# pylint: disable=too-many-ancestors
class UnsupportedOperationError(MultipartError, io.UnsupportedOperation):
    """
    Raised when a write or resize is attempted on a read-only view
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation '{operation}' is not supported on a read-only view")

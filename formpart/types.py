#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from typing import Dict, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from formpart.const import META_CONTENT_TYPE, META_FILENAME, META_NAME
from formpart.multipart.windowed_view import WindowedView


class Part(BaseModel):
    """
    One multipart/form-data part: metadata taken from its headers and a view over its body.

    Args:
        name (str): Value of the Content-Disposition `name` parameter, empty if absent.
        filename (str): Value of the Content-Disposition `filename` (or `filename*`)
            parameter, percent-decoded when tagged `utf-8''`. Empty if absent.
        content_type (Optional[str]): Value of the part Content-Type header, None if absent.
        headers_complete (bool): False if the part ended before the blank line that
            separates headers from the body.
        body (WindowedView): Read-only view over the body bytes. Views over the same
            source do not share a cursor.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = ""
    filename: str = ""
    content_type: Optional[str] = None
    headers_complete: bool = True
    body: WindowedView

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes of the body from its current position."""
        return self.body.read(size)

    def metadata(self) -> Dict[str, Optional[str]]:
        """
        Metadata of the part keyed by header or parameter name.

        Returns:
            Dict[str, Optional[str]]: "Content-Type", "name" and "filename" values
        """
        return {
            META_CONTENT_TYPE: self.content_type,
            META_NAME: self.name,
            META_FILENAME: self.filename,
        }


class ScanResult(BaseModel):
    """
    Parts found in one multipart body, in the order they appear.

    Args:
        parts (List[Part]): Parts in discovery order
        truncated (bool): True if the scan stopped because it reached the part limit
            while more boundaries could follow
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    parts: List[Part] = Field(default_factory=list)
    truncated: bool = False

    def __len__(self) -> int:
        return len(self.parts)

    # Iterate over parts rather than model fields
    def __iter__(self) -> Iterator[Part]:  # type: ignore[override]
        return iter(self.parts)

    def __getitem__(self, index: int) -> Part:
        return self.parts[index]

    def names(self) -> List[str]:
        """Names of all parts in order."""
        return [part.name for part in self.parts]


class PartPayload(BaseModel):
    """
    A fully read part of an HTTP response body.

    Args:
        data (bytes): Body of the part
        metadata (Dict[str, Optional[str]]): "Content-Type", "name" and "filename" of the part
    """

    data: bytes = b""
    metadata: Dict[str, Optional[str]] = Field(default_factory=dict)

    def unpack(self) -> Tuple[List[str], List[Optional[str]], bytes]:
        """
        Split the payload into metadata keys, metadata values and data.

        Returns:
            Tuple[List[str], List[Optional[str]], bytes]: Keys, values (same order) and data
        """
        return list(self.metadata.keys()), list(self.metadata.values()), self.data


class MultipartResponse(BaseModel):
    """
    HTTP response with its multipart/form-data body split into parts.

    Args:
        version (str): HTTP protocol version, e.g. "1.1"
        status_code (int): HTTP status code
        reason (str): Reason phrase sent with the status code
        headers (List[Tuple[str, str]]): Response headers in order
        is_success (bool): True if the status code is below 400
        content (Optional[str]): Text of the part named "content" (configurable), if present
        parts (List[PartPayload]): All other parts, in order
        truncated (bool): True if the part limit stopped the scan early
    """

    version: str
    status_code: int
    reason: str = ""
    headers: List[Tuple[str, str]] = Field(default_factory=list)
    is_success: bool
    content: Optional[str] = None
    parts: List[PartPayload] = Field(default_factory=list)
    truncated: bool = False

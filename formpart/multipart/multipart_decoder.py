#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from typing import BinaryIO, Optional, Union

from formpart.config import ScanConfig
from formpart.multipart.boundary_extractor import BoundaryExtractor
from formpart.multipart.boundary_templates import BoundaryTemplates
from formpart.multipart.byte_source import ByteSource, BytesLike, as_source
from formpart.multipart.part_header_parser import PartHeaderParser
from formpart.multipart.stream_scanner import StreamScanner
from formpart.types import ScanResult
from formpart.utils import HeaderPairs, get_logger

logger = get_logger(__name__)

SourceLike = Union[ByteSource, BytesLike, BinaryIO]


class MultipartDecoder:
    """
    A decoder for complete multipart/form-data bodies.

    Finds the boundary token in the request or response headers, splits the body
    into parts and parses each part's headers. Part bodies are views over the input,
    nothing is copied while decoding.

    Every call to `decode` builds its own templates, scanner and header parser, so one
    decoder can be shared between independent inputs.

    Args:
        config (ScanConfig, optional): Scan settings. Defaults to `ScanConfig.default()`.

    Example:
        >>> decoder = MultipartDecoder()
        >>> result = decoder.decode_with_headers(request_headers, body)
        >>> for part in result.parts:
        ...     print(part.name, part.filename, part.content_type, part.read())
    """

    def __init__(self, config: Optional[ScanConfig] = None):
        self.config = config or ScanConfig.default()
        self._extractor = BoundaryExtractor()

    def extract_boundary(self, headers: HeaderPairs) -> str:
        """
        Extract the boundary token from a header collection.

        Args:
            headers (HeaderPairs): Mapping or ordered (key, value) pairs of headers

        Returns:
            str: Boundary token

        Raises:
            NotMultipartError: If the headers do not describe a multipart/form-data body
        """
        return self._extractor.extract(headers)

    def decode(self, source: SourceLike, boundary: str) -> ScanResult:
        """
        Split a multipart body into parts.

        Args:
            source (SourceLike): Complete body as bytes-like, seekable binary stream
                or ByteSource
            boundary (str): Boundary token

        Returns:
            ScanResult: Parts in order of appearance

        Raises:
            EmptyBoundaryError: If the boundary is empty
            OutOfBoundsError: If the source is shorter than it reports
        """
        templates = BoundaryTemplates(boundary)
        byte_source = as_source(source)
        scanner = StreamScanner(
            byte_source,
            templates,
            max_parts=self.config.max_parts,
            chunk_size=self.config.chunk_size,
        )
        header_parser = PartHeaderParser(self.config.header_encoding)

        parts = [header_parser.parse(view) for view in scanner.scan()]
        logger.debug(
            "Decoded %d parts from %d bytes (truncated=%s)",
            len(parts),
            byte_source.length,
            scanner.truncated,
        )
        return ScanResult(parts=parts, truncated=scanner.truncated)

    def decode_with_headers(self, headers: HeaderPairs, source: SourceLike) -> ScanResult:
        """
        Extract the boundary from headers, then decode the body.

        Args:
            headers (HeaderPairs): Headers that came with the body
            source (SourceLike): Complete body

        Returns:
            ScanResult: Parts in order of appearance

        Raises:
            NotMultipartError: If the headers do not describe a multipart/form-data body
        """
        return self.decode(source, self.extract_boundary(headers))


def extract_boundary(headers: HeaderPairs) -> str:
    """
    Extract the multipart/form-data boundary token from a header collection.

    Args:
        headers (HeaderPairs): Mapping or ordered (key, value) pairs of headers

    Returns:
        str: Boundary token, quotes kept as sent

    Raises:
        NotMultipartError: If the headers do not describe a multipart/form-data body
    """
    return BoundaryExtractor().extract(headers)


def get_parts(
    source: SourceLike, boundary: str, config: Optional[ScanConfig] = None
) -> ScanResult:
    """
    Split a multipart body into parts.

    Args:
        source (SourceLike): Complete body
        boundary (str): Boundary token
        config (ScanConfig, optional): Scan settings

    Returns:
        ScanResult: Parts in order of appearance
    """
    return MultipartDecoder(config).decode(source, boundary)

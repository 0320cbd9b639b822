#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from re import compile as compile_regex, IGNORECASE

from formpart.const import CONTENT_TYPE_BOUNDARY_REGEX, HEADER_CONTENT_TYPE
from formpart.errors import NotMultipartError
from formpart.utils import HeaderPairs, find_header, get_logger

logger = get_logger(__name__)


# pylint: disable=too-few-public-methods
class BoundaryExtractor:
    """
    Locates the multipart/form-data boundary token in a collection of headers.

    Only the first "Content-Type" header (matched case-insensitively) is consulted.
    The token is returned exactly as captured, quotes included.
    """

    def __init__(self):
        self._pattern = compile_regex(CONTENT_TYPE_BOUNDARY_REGEX, IGNORECASE)

    def extract(self, headers: HeaderPairs) -> str:
        """
        Extract the boundary token from the Content-Type header.

        Args:
            headers (HeaderPairs): Mapping or ordered (key, value) pairs of headers

        Returns:
            str: Boundary token

        Raises:
            NotMultipartError: If there is no Content-Type header or it does not
                describe multipart/form-data with a boundary
        """
        content_type = find_header(headers, HEADER_CONTENT_TYPE)
        if content_type is None:
            raise NotMultipartError("No Content-Type header found")

        match = self._pattern.match(content_type)
        if match is None:
            raise NotMultipartError(
                f"Content-Type '{content_type}' is not multipart/form-data with a boundary"
            )

        boundary = match.group(1)
        logger.debug("Found multipart boundary %s", boundary)
        return boundary

#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import os
import warnings
from dataclasses import dataclass

from formpart.const import (
    DEFAULT_CONTENT_PART_NAME,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_PARTS,
    FORMPART_MAX_PARTS,
    UTF_ENCODING,
)


@dataclass
class ScanConfig:
    """
    Configuration for a multipart scan session.

    Attributes:
        max_parts (int): Maximum number of parts collected from one body. The scan stops
            and marks its result as truncated when this many parts have been found.
            Defaults to 1000.
        header_encoding (str): Encoding used to decode part header lines. Defaults to "utf-8".
        content_part_name (str): Name of the part treated as the textual payload of an
            HTTP response by `decode_response`. Defaults to "content".
        chunk_size (int): Number of bytes fetched from the source per read while
            searching for boundaries. Defaults to 32KiB.

    Example:
        scan_config = ScanConfig(
            max_parts=50,  # stop after 50 parts
        )
    """

    max_parts: int = DEFAULT_MAX_PARTS
    header_encoding: str = UTF_ENCODING
    content_part_name: str = DEFAULT_CONTENT_PART_NAME
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        if self.max_parts < 1:
            raise ValueError(f"max_parts must be positive, got {self.max_parts}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")

    @staticmethod
    def default() -> "ScanConfig":
        """
        Returns the default scan config, with the part cap taken from the
        'FORMPART_MAX_PARTS' environment variable when it is set.

        Returns:
            ScanConfig: Default configuration
        """
        return ScanConfig(max_parts=_max_parts_from_env())


def _max_parts_from_env() -> int:
    env_value = os.environ.get(FORMPART_MAX_PARTS)
    if not env_value:
        return DEFAULT_MAX_PARTS
    try:
        parsed = int(env_value)
        if parsed < 1:
            raise ValueError(parsed)
        return parsed
    except (ValueError, TypeError):
        warnings.warn(
            f"Invalid value for {FORMPART_MAX_PARTS}='{env_value}'. "
            f"Using default of {DEFAULT_MAX_PARTS} parts."
        )
        return DEFAULT_MAX_PARTS

"""
Import client-accessible components here to provide consistent imports via `from formpart import *`

Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
"""

import logging

# Decoding entry points
from formpart.multipart.multipart_decoder import (
    MultipartDecoder,
    extract_boundary,
    get_parts,
)
from formpart.response import decode_response

# Core components
from formpart.multipart.boundary_extractor import BoundaryExtractor
from formpart.multipart.boundary_templates import BoundaryTemplates
from formpart.multipart.byte_source import (
    ByteSource,
    BufferSource,
    StreamSource,
    as_source,
)
from formpart.multipart.match_buffer import MatchBuffer
from formpart.multipart.part_header_parser import PartHeaderParser
from formpart.multipart.stream_scanner import StreamScanner
from formpart.multipart.windowed_view import WindowedView

# Config objects, types and errors
from formpart.config import ScanConfig
from formpart.types import Part, ScanResult, PartPayload, MultipartResponse
from formpart.errors import (
    MultipartError,
    NotMultipartError,
    EmptyBoundaryError,
    OutOfBoundsError,
    StartRepositionedError,
    UnsupportedOperationError,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")

__version__ = "0.1.0"

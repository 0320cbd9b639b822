#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from typing import List, Optional

from requests.models import Response

from formpart.config import ScanConfig
from formpart.const import DEFAULT_HTTP_VERSION, HTTP_VERSIONS, UTF_ENCODING
from formpart.errors import NotMultipartError
from formpart.multipart.multipart_decoder import MultipartDecoder
from formpart.types import MultipartResponse, PartPayload
from formpart.utils import get_logger

logger = get_logger(__name__)


def _http_version(response: Response) -> str:
    raw_version = getattr(response.raw, "version", None)
    return HTTP_VERSIONS.get(raw_version, DEFAULT_HTTP_VERSION)


def decode_response(
    response: Response, config: Optional[ScanConfig] = None
) -> MultipartResponse:
    """
    Deconstruct an HTTP response and split its multipart/form-data body into parts.

    The part named after `config.content_part_name` ("content" by default, compared
    case-insensitively) is returned as text in `content`. Every other part is read
    fully into a `PartPayload`. A response without a multipart/form-data boundary
    yields no parts rather than an error.

    Args:
        response (Response): Completed HTTP response
        config (ScanConfig, optional): Scan settings. Defaults to `ScanConfig.default()`.

    Returns:
        MultipartResponse: Status fields, headers and decoded parts
    """
    decoder = MultipartDecoder(config)
    content_part_name = decoder.config.content_part_name.lower()
    content = None
    payloads: List[PartPayload] = []
    truncated = False

    try:
        boundary = decoder.extract_boundary(response.headers)
    except NotMultipartError as err:
        logger.debug("Response from %s has no multipart body: %s", response.url, err)
        boundary = None

    if boundary is not None:
        result = decoder.decode(response.content, boundary)
        truncated = result.truncated
        for part in result.parts:
            if part.name.lower() == content_part_name:
                content = part.read().decode(UTF_ENCODING, errors="replace")
            else:
                payloads.append(PartPayload(data=part.read(), metadata=part.metadata()))

    return MultipartResponse(
        version=_http_version(response),
        status_code=response.status_code,
        reason=response.reason or "",
        headers=list(response.headers.items()),
        is_success=response.ok,
        content=content,
        parts=payloads,
        truncated=truncated,
    )

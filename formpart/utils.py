#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import logging
from typing import Iterable, Mapping, Optional, Tuple, Union

from formpart.const import DEFAULT_LOG_FORMAT

HeaderPairs = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def get_logger(name: str, log_format: str = DEFAULT_LOG_FORMAT):
    """
    Create or retrieve a logger with the specified configuration.

    Args:
        name (str): The name of the logger.
        log_format (str, optional): Logging format.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def iter_header_pairs(headers: HeaderPairs) -> Iterable[Tuple[str, str]]:
    """
    Iterate over header key/value pairs in their original order.

    Args:
        headers (HeaderPairs): Mapping (e.g. requests' CaseInsensitiveDict) or
            iterable of (key, value) pairs

    Returns:
        Iterable[Tuple[str, str]]: Header pairs
    """
    if isinstance(headers, Mapping):
        return headers.items()
    return headers


def find_header(headers: HeaderPairs, key: str) -> Optional[str]:
    """
    Return the value of the first header whose key matches case-insensitively.

    Args:
        headers (HeaderPairs): Header collection to search
        key (str): Header name

    Returns:
        Optional[str]: Header value, None if no header matches
    """
    lowered = key.lower()
    for header_key, value in iter_header_pairs(headers):
        if header_key.lower() == lowered:
            return value
    return None

#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

from re import compile as compile_regex, IGNORECASE
from typing import Optional
from urllib.parse import unquote

from formpart.const import (
    CR,
    DISPOSITION_FILENAME_REGEX,
    DISPOSITION_NAME_REGEX,
    END_OF_DATA,
    HEADER_CONTENT_DISPOSITION,
    HEADER_CONTENT_TYPE,
    LF,
    UTF8_FILENAME_PREFIX,
    UTF_ENCODING,
)
from formpart.multipart.windowed_view import WindowedView
from formpart.types import Part
from formpart.utils import get_logger

logger = get_logger(__name__)


class PartHeaderParser:
    """
    Reads the header block at the start of a part view and turns the view into a `Part`.

    Header lines are read up to the first empty line. Content-Disposition provides
    `name` and `filename`; a filename tagged `utf-8''` (as sent in `filename*=`) is
    percent-decoded, other filenames are kept as they are. Content-Type provides the
    content type, taken as the last space separated token of the line.

    Once the headers are consumed the view start is moved past them, so the view
    only covers the body.

    Args:
        encoding (str, optional): Encoding of header lines. Defaults to "utf-8".
    """

    def __init__(self, encoding: str = UTF_ENCODING):
        self.encoding = encoding
        self._name_pattern = compile_regex(DISPOSITION_NAME_REGEX, IGNORECASE)
        self._filename_pattern = compile_regex(DISPOSITION_FILENAME_REGEX, IGNORECASE)

    def parse(self, view: WindowedView) -> Part:
        """
        Consume the headers of a part and build the part.

        Args:
            view (WindowedView): View over the part, positioned at its first header line

        Returns:
            Part: Part with its header metadata and a view over the body only
        """
        name, filename, content_type = "", "", None
        headers_complete = True

        while True:
            line = self.read_line(view)
            if line is None:
                headers_complete = False
                logger.warning(
                    "Part at offset %d ended inside its headers", view.start
                )
                break
            if not line:
                break

            lowered = line.lower()
            if lowered.startswith(HEADER_CONTENT_DISPOSITION.lower()):
                name = self._match_group(self._name_pattern, line)
                filename = self.decode_filename(
                    self._match_group(self._filename_pattern, line)
                )
            if lowered.startswith(HEADER_CONTENT_TYPE.lower()):
                content_type = line.split(" ")[-1].strip()

        view.reposition_start()
        logger.debug(
            "Parsed part name=%s filename=%s content_type=%s size=%d",
            name,
            filename,
            content_type,
            len(view),
        )
        return Part(
            name=name,
            filename=filename,
            content_type=content_type,
            headers_complete=headers_complete,
            body=view,
        )

    def read_line(self, view: WindowedView) -> Optional[str]:
        """
        Read one line from the view, without its line feed and surrounding carriage returns.

        Args:
            view (WindowedView): View to read from

        Returns:
            Optional[str]: Decoded line, None if the view ended before a line feed
        """
        line = bytearray()
        while True:
            value = view.read_byte()
            if value == END_OF_DATA:
                return None
            if value == LF:
                break
            line.append(value)
        return line.decode(self.encoding, errors="replace").strip(CR)

    @staticmethod
    def decode_filename(filename: str) -> str:
        """
        Percent-decode a filename tagged with a `utf-8''` prefix.

        Args:
            filename (str): Raw filename parameter value

        Returns:
            str: Decoded filename, or the input unchanged if it has no such prefix
        """
        if filename.lower().startswith(UTF8_FILENAME_PREFIX):
            return unquote(filename[len(UTF8_FILENAME_PREFIX) :], encoding=UTF_ENCODING)
        return filename

    @staticmethod
    def _match_group(pattern, line: str) -> str:
        match = pattern.search(line)
        return match.group(1) if match else ""

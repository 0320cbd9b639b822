#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

# Standard Header Keys
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_DISPOSITION = "Content-Disposition"

# Metadata keys exposed for an unpacked part
META_CONTENT_TYPE = HEADER_CONTENT_TYPE
META_NAME = "name"
META_FILENAME = "filename"

# Multipart
MULTIPART_MARKER = b"--"
WIN_LINE_END = b"\r\n"
LF = ord("\n")
CR = "\r"
# CRLF that precedes every boundary line
BOUNDARY_PRECEDING_LEN = len(WIN_LINE_END)
CONTENT_TYPE_BOUNDARY_REGEX = r"^multipart/form-data;\s*boundary=(.*)$"
DISPOSITION_NAME_REGEX = r'name="?([^"]*)'
DISPOSITION_FILENAME_REGEX = r'filename\*?="?([^";]*)'
UTF8_FILENAME_PREFIX = "utf-8''"

# Returned by single byte reads past the end of a window or source
END_OF_DATA = -1
# Returned by boundary searches that exhaust the source
NOT_FOUND = -1

# Defaults
DEFAULT_MAX_PARTS = 1000
DEFAULT_CHUNK_SIZE = 32768
DEFAULT_CONTENT_PART_NAME = "content"

# ENCODING
UTF_ENCODING = "utf-8"

# Environment Variables
FORMPART_MAX_PARTS = "FORMPART_MAX_PARTS"

# HTTP versions as reported by urllib3 (http.client)
HTTP_VERSIONS = {9: "0.9", 10: "1.0", 11: "1.1", 20: "2.0"}
DEFAULT_HTTP_VERSION = "1.1"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

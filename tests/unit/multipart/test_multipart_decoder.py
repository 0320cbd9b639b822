#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import io
import unittest
from unittest.mock import patch

from formpart.config import ScanConfig
from formpart.errors import EmptyBoundaryError, NotMultipartError
from formpart.multipart.multipart_decoder import (
    MultipartDecoder,
    extract_boundary,
    get_parts,
)
from formpart.types import ScanResult
from tests.const import SCENARIO_BODY
from tests.utils import build_multipart_body, cases


class TestMultipartDecoder(unittest.TestCase):
    def setUp(self):
        self.decoder = MultipartDecoder(ScanConfig())

    def test_default_config(self):
        with patch.dict("os.environ", {}, clear=True):
            decoder = MultipartDecoder()
        self.assertEqual(1000, decoder.config.max_parts)

    def _assert_scenario(self, result: ScanResult):
        self.assertEqual(2, len(result))
        self.assertFalse(result.truncated)
        content, file_part = result.parts
        self.assertEqual(["content", "file"], [part.name for part in result])
        self.assertIs(file_part, result[-1])

        self.assertEqual("content", content.name)
        self.assertEqual("", content.filename)
        self.assertIsNone(content.content_type)
        self.assertEqual(b'{"a":1}', content.read())

        self.assertEqual("file", file_part.name)
        self.assertEqual("x.txt", file_part.filename)
        self.assertEqual("text/plain", file_part.content_type)
        self.assertEqual(b"hello", file_part.read())

    def test_decode_scenario(self):
        self._assert_scenario(self.decoder.decode(SCENARIO_BODY, "BOUND"))

    @cases(
        SCENARIO_BODY,
        bytearray(SCENARIO_BODY),
        memoryview(SCENARIO_BODY),
    )
    def test_decode_buffers(self, body):
        self._assert_scenario(self.decoder.decode(body, "BOUND"))

    def test_decode_stream(self):
        self._assert_scenario(self.decoder.decode(io.BytesIO(SCENARIO_BODY), "BOUND"))

    def test_decode_with_headers(self):
        headers = [("Content-Type", "multipart/form-data; boundary=BOUND")]
        self._assert_scenario(self.decoder.decode_with_headers(headers, SCENARIO_BODY))

    def test_decode_with_headers_not_multipart(self):
        with self.assertRaises(NotMultipartError):
            self.decoder.decode_with_headers([("Content-Type", "text/plain")], b"")

    def test_decode_empty_boundary(self):
        with self.assertRaises(EmptyBoundaryError):
            self.decoder.decode(SCENARIO_BODY, "")

    def test_round_trip(self):
        fields = [
            ("text", b"plain value", None, None),
            ("empty", b"", None, None),
            ("binary", bytes(range(256)) * 4, "blob.bin", "application/octet-stream"),
            ("crlf", b"line one\r\nline two\r\n", "lines.txt", "text/plain"),
            ("dashes", b"--not-a-boundary--\r\n--", None, None),
        ]
        body = build_multipart_body("----WebKitFormBoundary7MA4YWxkTrZu0gW", fields)
        result = self.decoder.decode(body, "----WebKitFormBoundary7MA4YWxkTrZu0gW")

        self.assertEqual([field[0] for field in fields], result.names())
        for part, (_, data, filename, content_type) in zip(result.parts, fields):
            self.assertEqual(data, part.read())
            self.assertEqual(filename or "", part.filename)
            self.assertEqual(content_type, part.content_type)

    def test_parts_read_in_any_order(self):
        fields = [(f"f{i}", f"data-{i}".encode() * 10, None, None) for i in range(5)]
        result = self.decoder.decode(build_multipart_body("b0und", fields), "b0und")
        for part, (_, data, _, _) in reversed(list(zip(result.parts, fields))):
            self.assertEqual(data[:5], part.read(5))
        for part, (_, data, _, _) in zip(result.parts, fields):
            self.assertEqual(data[5:], part.read())

    def test_bodies_not_copied(self):
        body = build_multipart_body("b", [("a", b"x" * 100, None, None)])
        result = self.decoder.decode(body, "b")
        view = result.parts[0].body
        self.assertEqual(body.index(b"x"), view.start)
        self.assertEqual(body.index(b"x") + 100, view.end)

    def test_part_cap_from_config(self):
        body = b"--B\r\n\r\nx\r\n" * 20
        decoder = MultipartDecoder(ScanConfig(max_parts=5))
        result = decoder.decode(body, "B")
        self.assertEqual(5, len(result))
        self.assertTrue(result.truncated)
        self.assertEqual([b"x"] * 5, [part.read() for part in result.parts])

    def test_default_part_cap(self):
        result = self.decoder.decode(b"--B\r\n\r\nx\r\n" * 1200, "B")
        self.assertEqual(1000, len(result))
        self.assertTrue(result.truncated)

    def test_quoted_boundary_kept(self):
        headers = [("Content-Type", 'multipart/form-data; boundary="BOUND"')]
        result = self.decoder.decode_with_headers(headers, SCENARIO_BODY)
        self.assertEqual(0, len(result))


class TestModuleFunctions(unittest.TestCase):
    def test_extract_boundary(self):
        headers = [("Content-Type", "multipart/form-data; boundary=XYZ")]
        self.assertEqual("XYZ", extract_boundary(headers))

    def test_extract_boundary_not_multipart(self):
        with self.assertRaises(NotMultipartError):
            extract_boundary([("Content-Type", "text/plain")])

    def test_get_parts(self):
        result = get_parts(SCENARIO_BODY, "BOUND", ScanConfig())
        self.assertEqual(["content", "file"], result.names())

#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import unittest

from pydantic import ValidationError

from formpart.multipart.byte_source import BufferSource
from formpart.multipart.windowed_view import WindowedView
from formpart.types import Part, PartPayload, ScanResult


class TestPart(unittest.TestCase):
    def setUp(self):
        source = BufferSource(b"headerbody")
        self.view = WindowedView(source, 6, 10)

    def test_defaults(self):
        part = Part(body=self.view)
        self.assertEqual("", part.name)
        self.assertEqual("", part.filename)
        self.assertIsNone(part.content_type)
        self.assertTrue(part.headers_complete)
        self.assertEqual(b"body", part.read())

    def test_frozen(self):
        part = Part(name="a", body=self.view)
        with self.assertRaises(ValidationError):
            part.name = "b"

    def test_body_must_be_view(self):
        with self.assertRaises(ValidationError):
            Part(body=b"body")

    def test_metadata(self):
        part = Part(name="a", filename="a.txt", content_type="text/plain", body=self.view)
        self.assertEqual(
            {"Content-Type": "text/plain", "name": "a", "filename": "a.txt"},
            part.metadata(),
        )


class TestScanResult(unittest.TestCase):
    def test_empty(self):
        result = ScanResult()
        self.assertEqual(0, len(result))
        self.assertFalse(result.truncated)
        self.assertEqual([], result.names())

    def setUp(self):
        view = WindowedView(BufferSource(b""), 0, 0)
        self.result = ScanResult(
            parts=[Part(name="a", body=view), Part(name="b", body=view)]
        )

    def test_names(self):
        self.assertEqual(2, len(self.result))
        self.assertEqual(["a", "b"], self.result.names())

    def test_iter(self):
        parts = list(self.result)
        self.assertTrue(all(isinstance(part, Part) for part in parts))
        self.assertEqual(["a", "b"], [part.name for part in self.result])

    def test_getitem(self):
        self.assertEqual("a", self.result[0].name)
        self.assertEqual("b", self.result[1].name)
        self.assertEqual("b", self.result[-1].name)
        self.assertEqual(["b"], [part.name for part in self.result[1:]])
        with self.assertRaises(IndexError):
            self.result[2]  # pylint: disable=pointless-statement

    def test_iter_empty(self):
        self.assertEqual([], list(ScanResult()))


class TestPartPayload(unittest.TestCase):
    def test_unpack(self):
        payload = PartPayload(
            data=b"bytes",
            metadata={"Content-Type": "image/png", "name": "img", "filename": "a.png"},
        )
        keys, values, data = payload.unpack()
        self.assertEqual(["Content-Type", "name", "filename"], keys)
        self.assertEqual(["image/png", "img", "a.png"], values)
        self.assertEqual(b"bytes", data)

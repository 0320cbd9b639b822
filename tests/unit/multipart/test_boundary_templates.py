#
# Copyright (c) 2025, NVIDIA CORPORATION. All rights reserved.
#

import unittest

from formpart.errors import EmptyBoundaryError
from formpart.multipart.boundary_templates import BoundaryTemplates
from tests.utils import cases


class TestBoundaryTemplates(unittest.TestCase):
    def test_templates(self):
        templates = BoundaryTemplates("BOUND")
        self.assertEqual(b"--BOUND\r\n", templates.separator)
        self.assertEqual(b"--BOUND--", templates.terminator)
        self.assertEqual("BOUND", templates.boundary)

    @cases("x", "BOUND", "----WebKitFormBoundary7MA4YWxkTrZu0gW")
    def test_templates_same_length(self, boundary):
        templates = BoundaryTemplates(boundary)
        self.assertEqual(len(templates.separator), len(templates.terminator))
        self.assertEqual(len(boundary) + 4, len(templates))

    def test_templates_differ_in_last_two_bytes(self):
        templates = BoundaryTemplates("BOUND")
        self.assertEqual(templates.separator[:-2], templates.terminator[:-2])
        self.assertNotEqual(templates.separator[-2:], templates.terminator[-2:])

    def test_empty_boundary(self):
        with self.assertRaises(EmptyBoundaryError):
            BoundaryTemplates("")

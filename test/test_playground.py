#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 PaulioRandall"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from playground import decode_delimiter, parse_args


class TestPlayground(unittest.TestCase):
    def test_playground_decode_delimiter(self):
        self.assertEqual("\n", decode_delimiter("\\n"))
        self.assertEqual("\t|", decode_delimiter("\\t|"))
        self.assertEqual(", ", decode_delimiter(", "))

    def test_playground_parse_args(self):
        args = vars(parse_args(["-d", "\\n", "a", "b"]))
        self.assertEqual({"things": ["a", "b"], "delimiter": "\n"}, args)

    def test_playground_parse_args_defaults(self):
        args = vars(parse_args([]))
        self.assertEqual({"things": [], "delimiter": None}, args)

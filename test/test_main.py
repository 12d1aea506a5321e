#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 PaulioRandall"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from contextlib import redirect_stdout
from io import StringIO
from cookies import main, StartupError
from cookies.constants import APP_INTRO


class TestMain(unittest.TestCase):
    def _run(self, things=None, delimiter=None):
        output = StringIO()

        with redirect_stdout(output):
            stack = main({"things": things, "delimiter": delimiter})

        return stack, output.getvalue()

    def test_main_defaults(self):
        stack, output = self._run()
        lines = output.splitlines()
        self.assertTrue(lines[0].startswith(APP_INTRO))
        self.assertEqual(
            [
                "",
                "All work and no play makes Jack a dull boy,",
                "All play and no work makes Jack a mere toy.",
                "",
                "Thing 3",
                "Thing 2",
                "Thing 1",
                "",
                "Thing 3 exists: True",
                "",
                "Thing 2",
                "Thing 1",
                "",
                "Empty: True"
            ],
            lines[1:]
        )
        self.assertTrue(stack.empty())

    def test_main_custom(self):
        stack, output = self._run(["a", "b"], ",")
        self.assertIn("\nb,a\n", output)
        self.assertIn("\nb exists: True\n", output)
        self.assertTrue(output.endswith("Empty: True\n"))
        self.assertEqual(0, stack.size)

    def test_main_no_things(self):
        self.assertRaises(StartupError, main, {"things": [], "delimiter": None})

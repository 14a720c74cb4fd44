from __future__ import annotations

import sys
import unittest
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from doppelganger import DoppelgangerError
from doppelganger.path_data import PathData


class PathDataTests(unittest.TestCase):
    def test_empty_buffer(self) -> None:
        data = PathData()
        self.assertFalse(data)
        self.assertEqual(len(data), 0)
        self.assertEqual(data.compile(), "")

    def test_commands_accumulate_in_order(self) -> None:
        data = PathData()
        data.append("M", 10, 10).append("l", 5, -5).append("Z")
        self.assertTrue(data)
        self.assertEqual(len(data), 3)
        self.assertEqual(data.compile(), "M 10 10 l 5 -5 Z")
        self.assertEqual(str(data), "M 10 10 l 5 -5 Z")

    def test_numbers_use_fixed_formatting(self) -> None:
        data = PathData().append("C", 1.0, 2.5, 1 / 3, 4, 5, 6.0)
        self.assertEqual(data.compile(), "C 1 2.5 0.333 4 5 6")

    def test_clear(self) -> None:
        data = PathData().append("H", 3)
        data.clear()
        self.assertFalse(data)
        self.assertEqual(data.compile(), "")

    def test_rejects_unknown_command_and_bad_arity(self) -> None:
        data = PathData()
        with self.assertRaises(DoppelgangerError) as ctx:
            data.append("X", 1, 2)
        self.assertEqual(ctx.exception.code, "E_PATH_COMMAND")
        with self.assertRaises(DoppelgangerError) as ctx:
            data.append("L", 1)
        self.assertEqual(ctx.exception.code, "E_PATH_COMMAND")
        self.assertIn("takes 2 arguments", str(ctx.exception))
        self.assertFalse(data)


if __name__ == "__main__":
    unittest.main()

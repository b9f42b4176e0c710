"""Tests for raw and human-readable size labels."""

from __future__ import annotations

import unittest

from lsgrid.render.sizes import format_size, human_size


class HumanSizeTests(unittest.TestCase):
    def test_plain_bytes_print_as_integers(self) -> None:
        self.assertEqual(human_size(0), "0B")
        self.assertEqual(human_size(5), "5B")
        self.assertEqual(human_size(10), "10B")
        self.assertEqual(human_size(1023), "1023B")

    def test_larger_units_use_one_decimal(self) -> None:
        self.assertEqual(human_size(1024), "1.0K")
        self.assertEqual(human_size(2560), "2.5K")
        self.assertEqual(human_size(1024 * 1024), "1.0M")
        self.assertEqual(human_size(3 * 1024**3 // 2), "1.5G")

    def test_units_cap_at_terabytes(self) -> None:
        self.assertEqual(human_size(3 * 1024**4), "3.0T")
        self.assertEqual(human_size(1024**5), "1024.0T")


class FormatSizeTests(unittest.TestCase):
    def test_raw_mode_prints_byte_count(self) -> None:
        self.assertEqual(format_size(123456, human_readable=False), "123456")

    def test_human_mode_delegates_to_human_size(self) -> None:
        self.assertEqual(format_size(123456, human_readable=True), "120.6K")


if __name__ == "__main__":
    unittest.main()

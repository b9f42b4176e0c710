"""CLI argument parsing and end-to-end listing behavior tests.

Runs ``lsgrid.cli.main`` against temporary directories and checks what lands
on stdout, stderr and in the exit status.
"""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lsgrid import cli
from lsgrid.listing import SortMode
from lsgrid.ui_theme import DEFAULT_THEME, OCEAN_THEME


class _CliTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        self.config_path = self.root / "config" / "config.json"
        config_patch = mock.patch("lsgrid.config.CONFIG_PATH", self.config_path)
        config_patch.start()
        self.addCleanup(config_patch.stop)
        self.listing = self.root / "listing"
        self.listing.mkdir()

    def make_scenario(self) -> None:
        (self.listing / "b.txt").write_bytes(b"x" * 5)
        (self.listing / ".hidden").write_bytes(b"x")
        (self.listing / "a.txt").write_bytes(b"x" * 10)

    def run_cli(self, *argv: str) -> tuple[str, str, object]:
        """Return ``(stdout, stderr, exit_code)``; ``exit_code`` is ``None`` on success."""
        stdout = io.StringIO()
        stderr = io.StringIO()
        code: object = None
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", stderr):
            try:
                cli.main(list(argv))
            except SystemExit as exc:
                code = exc.code
        return stdout.getvalue(), stderr.getvalue(), code


class CliListingScenarioTests(_CliTestCase):
    def test_default_lists_visible_entries_by_name(self) -> None:
        self.make_scenario()
        stdout, stderr, code = self.run_cli(str(self.listing), "--max-cols", "80")
        self.assertIsNone(code)
        self.assertEqual(stdout, "a.txt  b.txt\n")
        self.assertEqual(stderr, "")

    def test_all_flag_includes_dotfiles(self) -> None:
        self.make_scenario()
        stdout, _stderr, code = self.run_cli("-a", str(self.listing))
        self.assertIsNone(code)
        self.assertEqual(stdout.split(), [".hidden", "a.txt", "b.txt"])

    def test_sort_size_lists_largest_first(self) -> None:
        self.make_scenario()
        stdout, _stderr, _code = self.run_cli("-S", str(self.listing), "--max-cols", "80")
        self.assertEqual(stdout, "a.txt  b.txt\n")

    def test_reverse_size_lists_smallest_first(self) -> None:
        self.make_scenario()
        stdout, _stderr, _code = self.run_cli("-Sr", str(self.listing), "--max-cols", "80")
        self.assertEqual(stdout, "b.txt  a.txt\n")

    def test_reverse_name_sort(self) -> None:
        self.make_scenario()
        stdout, _stderr, _code = self.run_cli("--reverse", str(self.listing), "--max-cols", "80")
        self.assertEqual(stdout, "b.txt  a.txt\n")

    def test_human_readable_sizes_annotate_each_entry(self) -> None:
        self.make_scenario()
        stdout, _stderr, _code = self.run_cli("-s", "-h", str(self.listing), "--max-cols", "80")
        self.assertEqual(stdout, "10B a.txt   5B b.txt\n")

    def test_raw_sizes(self) -> None:
        self.make_scenario()
        stdout, _stderr, _code = self.run_cli("--sizes", str(self.listing), "--max-cols", "1")
        self.assertEqual(stdout, "10 a.txt\n 5 b.txt\n")

    def test_comma_separated_listing(self) -> None:
        self.make_scenario()
        stdout, _stderr, _code = self.run_cli("-m", str(self.listing))
        self.assertEqual(stdout, "a.txt, b.txt\n")

    def test_directories_get_trailing_slash(self) -> None:
        (self.listing / "docs").mkdir()
        (self.listing / "a.txt").write_text("hi", encoding="utf-8")
        stdout, _stderr, _code = self.run_cli(str(self.listing), "--max-cols", "80")
        self.assertEqual(stdout, "a.txt  docs/\n")

    def test_undecodable_name_writes_cleanly_to_strict_utf8_stdout(self) -> None:
        (self.listing / "a.txt").write_text("hi", encoding="utf-8")
        try:
            with open(os.path.join(os.fsencode(self.listing), b"bad\xff.txt"), "wb"):
                pass
        except OSError:
            self.skipTest("filesystem rejects non-UTF-8 names")

        stdout = io.TextIOWrapper(io.BytesIO(), encoding="utf-8", errors="strict")
        with mock.patch("sys.stdout", stdout), mock.patch("sys.stderr", io.StringIO()):
            cli.main([str(self.listing), "--max-cols", "80"])
        stdout.flush()

        written = stdout.buffer.getvalue().decode("utf-8")
        self.assertEqual(written.split(), ["a.txt", "bad\ufffd.txt"])

    def test_empty_directory_prints_nothing(self) -> None:
        stdout, stderr, code = self.run_cli(str(self.listing))
        self.assertIsNone(code)
        self.assertEqual(stdout, "")
        self.assertEqual(stderr, "")

    def test_repeated_runs_are_byte_identical(self) -> None:
        self.make_scenario()
        first = self.run_cli("-a", "-s", "-t", str(self.listing), "--max-cols", "30")
        second = self.run_cli("-a", "-s", "-t", str(self.listing), "--max-cols", "30")
        self.assertEqual(first, second)

    def test_defaults_to_current_working_directory(self) -> None:
        self.make_scenario()
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.listing)
            with mock.patch.object(sys, "argv", ["lsgrid", "--max-cols", "80"]):
                stdout = io.StringIO()
                with mock.patch("sys.stdout", stdout):
                    cli.main()
        finally:
            os.chdir(previous_cwd)
        self.assertEqual(stdout.getvalue(), "a.txt  b.txt\n")


class CliSortPrecedenceTests(_CliTestCase):
    def setUp(self) -> None:
        super().setUp()
        big_old = self.listing / "big_old.bin"
        small_new = self.listing / "small_new.bin"
        big_old.write_bytes(b"x" * 100)
        small_new.write_bytes(b"x")
        os.utime(big_old, ns=(1_000_000_000, 1_000_000_000))
        os.utime(small_new, ns=(2_000_000_000, 2_000_000_000))

    def test_last_sort_flag_wins(self) -> None:
        by_time, _stderr, _code = self.run_cli("-S", "-t", str(self.listing))
        by_size, _stderr, _code = self.run_cli("-t", "-S", str(self.listing))
        self.assertEqual(by_time.split(), ["small_new.bin", "big_old.bin"])
        self.assertEqual(by_size.split(), ["big_old.bin", "small_new.bin"])

    def test_reverse_mtime_lists_oldest_first(self) -> None:
        stdout, _stderr, _code = self.run_cli("--sort-mtime", "-r", str(self.listing))
        self.assertEqual(stdout.split(), ["big_old.bin", "small_new.bin"])

    def test_parse_options_records_last_sort_mode(self) -> None:
        self.assertIs(cli.parse_options(["-St"]).sort_mode, SortMode.MTIME)
        self.assertIs(cli.parse_options(["-tS"]).sort_mode, SortMode.SIZE)
        self.assertIs(cli.parse_options([]).sort_mode, SortMode.NAME)


class CliColorTests(_CliTestCase):
    def test_non_tty_output_is_plain(self) -> None:
        self.make_scenario()
        stdout, _stderr, _code = self.run_cli(str(self.listing))
        self.assertNotIn("\033[", stdout)

    def test_forced_color_emits_kind_colors(self) -> None:
        (self.listing / "docs").mkdir()
        stdout, _stderr, _code = self.run_cli("--color", str(self.listing))
        self.assertEqual(stdout, f"{DEFAULT_THEME.directory}docs/{DEFAULT_THEME.reset}\n")

    def test_configured_theme_is_used_when_flag_absent(self) -> None:
        (self.listing / "docs").mkdir()
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text('{"theme": "ocean"}', encoding="utf-8")
        stdout, _stderr, _code = self.run_cli("--color", str(self.listing))
        self.assertIn(OCEAN_THEME.directory, stdout)

    def test_theme_flag_overrides_config(self) -> None:
        (self.listing / "docs").mkdir()
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text('{"theme": "ocean"}', encoding="utf-8")
        stdout, _stderr, _code = self.run_cli("--color", "--theme", "default", str(self.listing))
        self.assertIn(DEFAULT_THEME.directory, stdout)


class CliErrorTests(_CliTestCase):
    def test_missing_path_exits_non_zero_with_message_on_stderr(self) -> None:
        missing = self.root / "nope"
        stdout, _stderr, code = self.run_cli(str(missing))
        self.assertEqual(stdout, "")
        self.assertIsInstance(code, str)
        self.assertIn("Path not found", str(code))
        self.assertIn(str(missing), str(code))

    def test_conflicting_color_flags_are_usage_errors(self) -> None:
        stdout, stderr, code = self.run_cli("--color", "--no-color", str(self.listing))
        self.assertEqual(code, 2)
        self.assertEqual(stdout, "")
        self.assertIn("--color and --no-color cannot be combined", stderr)

    def test_unknown_flag_is_a_usage_error(self) -> None:
        _stdout, stderr, code = self.run_cli("--long", str(self.listing))
        self.assertEqual(code, 2)
        self.assertIn("unrecognized arguments", stderr)

    def test_non_positive_max_cols_is_rejected(self) -> None:
        _stdout, stderr, code = self.run_cli("--max-cols", "0", str(self.listing))
        self.assertEqual(code, 2)
        self.assertIn("value must be >= 1", stderr)


class CliHelpTests(_CliTestCase):
    def test_help_prints_usage_and_exits_cleanly(self) -> None:
        stdout, _stderr, code = self.run_cli("--help")
        flowed = " ".join(stdout.split())
        self.assertEqual(code, 0)
        self.assertIn("lsgrid - list directory contents", flowed)
        self.assertIn("-h, --human", stdout)
        self.assertIn("-S, --sort-size", stdout)
        self.assertIn("the one specified last wins", flowed)

    def test_short_h_means_human_not_help(self) -> None:
        options = cli.parse_options(["-h"])
        self.assertTrue(options.human_readable)
        self.assertFalse(options.show_sizes)


if __name__ == "__main__":
    unittest.main()

"""CLI listing mode and argument validation."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from linkhint import cli, config
from linkhint.model import Variant, Viewport
from linkhint.surface import SourceLocation


class CliListTests(unittest.TestCase):
    def _run(self, text: str, *args: str) -> str:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.txt"
            path.write_text(text, encoding="utf-8")
            out = io.StringIO()
            with mock.patch("sys.stdout", out):
                cli.main([str(path), "--list", *args])
        return out.getvalue()

    def test_lists_org_links_in_visible_lines(self) -> None:
        text = "* Heading\nSee [[https://a.example][A]]\n[[Other]] below\n"

        output = self._run(text, "--lines", "2")

        self.assertEqual(output, f"{text.index('[[https')}\thttps://a.example\n")

    def test_lists_addresses(self) -> None:
        text = "mail ann@example.org\n"

        output = self._run(text, "--variant", "address", "--lines", "5")

        self.assertEqual(output, "5\tmailto:ann@example.org\n")

    def test_lists_compilation_locations(self) -> None:
        text = "make: warning\nsrc/x.c:3:1: error: oops\n"

        output = self._run(text, "--variant", "compilation", "--lines", "5")

        self.assertEqual(output, f"{text.index('src/x.c')}\tsrc/x.c:3\n")

    def test_start_line_shifts_viewport(self) -> None:
        text = "[[one]]\n[[two]]\n"

        output = self._run(text, "--start", "1", "--lines", "1")

        self.assertEqual(output, "8\ttwo\n")

    def test_missing_file_exits(self) -> None:
        with self.assertRaises(SystemExit):
            cli.main(["/nonexistent/linkhint-doc.txt", "--list"])

    def test_save_keys_persists_alphabet(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.txt"
            path.write_text("[[x]]\n", encoding="utf-8")
            config_path = Path(tmp) / "config.json"
            with mock.patch("linkhint.config.CONFIG_PATH", config_path):
                with mock.patch("sys.stdout", io.StringIO()):
                    cli.main([str(path), "--list", "--keys", "jkl", "--save-keys"])
                self.assertEqual(config.load_hint_settings().keys, "jkl")

    def test_save_keys_without_keys_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.txt"
            path.write_text("[[x]]\n", encoding="utf-8")
            with mock.patch("linkhint.config.CONFIG_PATH", Path(tmp) / "config.json"):
                with self.assertRaises(SystemExit):
                    cli.main([str(path), "--list", "--save-keys"])
                self.assertFalse((Path(tmp) / "config.json").exists())

    def test_non_utf8_file_is_read_as_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.txt"
            path.write_bytes("caf\u00e9 [[x]]\n".encode("latin-1"))
            self.assertEqual(cli.read_text(path), "caf\u00e9 [[x]]\n")

    def test_invalid_keys_exit(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.txt"
            path.write_text("[[x]]\n", encoding="utf-8")
            with self.assertRaises(SystemExit):
                cli.main([str(path), "--list", "--keys", "a"])


class CliActivationTests(unittest.TestCase):
    def test_org_activation_records_target(self) -> None:
        buffer = cli.build_buffer("x [[target][T]] y", Variant.ORG)
        targets: list[object] = []
        primitives = cli.build_primitives(buffer, Viewport(0, len(buffer)), targets)

        primitives.open_at(2)

        self.assertEqual(targets, ["target"])

    def test_compilation_activation_records_location(self) -> None:
        buffer = cli.build_buffer("a.py:4: boom\n", Variant.COMPILATION)
        targets: list[object] = []
        primitives = cli.build_primitives(buffer, Viewport(0, len(buffer)), targets)

        primitives.activate_at(1)

        self.assertEqual(targets, [SourceLocation("a.py", 4)])


if __name__ == "__main__":
    unittest.main()

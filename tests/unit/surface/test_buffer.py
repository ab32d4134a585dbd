"""Unit tests for the reference buffer host and its markup scanners."""

from __future__ import annotations

import unittest

from linkhint.model import Viewport
from linkhint.surface import (
    Buffer,
    BufferSurface,
    SourceLocation,
    address_at,
    goto_address,
    mark_compilation_errors,
)


class BufferPropertyTests(unittest.TestCase):
    def test_later_property_wins_on_overlap(self) -> None:
        buffer = Buffer("abcdefghij")
        buffer.put_property(0, 6, "face", "bold")
        buffer.put_property(3, 8, "face", "italic")

        self.assertEqual(buffer.get_property(2, "face"), "bold")
        self.assertEqual(buffer.get_property(4, "face"), "italic")
        self.assertIsNone(buffer.get_property(9, "face"))

    def test_next_property_change_respects_limit(self) -> None:
        buffer = Buffer("." * 30)
        buffer.put_property(10, 20, "button", "b")

        self.assertEqual(buffer.next_property_change(0, "button"), 10)
        self.assertEqual(buffer.next_property_change(10, "button"), 20)
        self.assertIsNone(buffer.next_property_change(0, "button", limit=10))
        self.assertIsNone(buffer.next_property_change(20, "button"))

    def test_equal_adjacent_values_merge_into_one_run(self) -> None:
        buffer = Buffer("." * 30)
        buffer.put_property(5, 10, "button", "same")
        buffer.put_property(10, 15, "button", "same")

        self.assertEqual(buffer.run_starts("button"), [5])
        self.assertEqual(buffer.next_property_change(5, "button"), 15)

    def test_rejects_ranges_outside_text(self) -> None:
        buffer = Buffer("abc")
        with self.assertRaises(ValueError):
            buffer.put_property(2, 5, "button", "x")

    def test_overlays_enumerate_newest_first(self) -> None:
        buffer = Buffer("." * 20)
        first = buffer.make_overlay(1, 3, kind="a")
        second = buffer.make_overlay(5, 7, kind="b")
        buffer.make_overlay(15, 18, kind="c")

        self.assertEqual(buffer.overlays_in(0, 10), [second, first])

    def test_line_range_covers_whole_lines(self) -> None:
        buffer = Buffer("one\ntwo\nthree\n")

        self.assertEqual(buffer.line_range(1, 1), Viewport(4, 8))
        self.assertEqual(buffer.line_range(1, 10), Viewport(4, 14))
        self.assertEqual(buffer.line_range(9, 2), Viewport(14, 14))


class BufferSurfaceNavigationTests(unittest.TestCase):
    def test_reference_navigation_wraps_but_buttons_do_not(self) -> None:
        buffer = Buffer("." * 30)
        buffer.put_property(4, 6, "info-ref", "A")
        buffer.put_property(20, 22, "info-ref", "B")
        buffer.put_property(4, 6, "button", "A")
        buffer.put_property(20, 22, "button", "B")
        surface = BufferSurface(buffer)

        self.assertEqual(surface.next_reference(4), 20)
        self.assertEqual(surface.next_reference(20), 4)
        self.assertEqual(surface.next_button(4), 20)
        self.assertIsNone(surface.next_button(20))

    def test_follow_nearest_only_inside_reference(self) -> None:
        buffer = Buffer("." * 30)
        buffer.put_property(4, 6, "info-ref", "Top")
        visited: list[str] = []
        primitives = BufferSurface(buffer).primitives(goto_node=visited.append)

        self.assertFalse(primitives.follow_nearest(3))
        self.assertTrue(primitives.follow_nearest(5))
        self.assertEqual(visited, ["Top"])

    def test_activation_primitives_absent_unless_supplied(self) -> None:
        primitives = BufferSurface(Buffer("abc")).primitives()

        self.assertIsNone(primitives.follow_nearest)
        self.assertIsNone(primitives.activate_at)
        self.assertIsNone(primitives.open_at)


class MarkupTests(unittest.TestCase):
    def test_goto_address_marks_urls_and_mail(self) -> None:
        text = "Write to ann@example.org or see https://example.org/docs."
        buffer = Buffer(text)

        self.assertEqual(goto_address(buffer), 2)
        self.assertEqual(address_at(buffer, text.index("ann") + 1), "mailto:ann@example.org")
        self.assertEqual(address_at(buffer, text.index("https") + 1), "https://example.org/docs")
        self.assertIsNone(address_at(buffer, 0))

    def test_compilation_locations(self) -> None:
        text = "src/a.py:12:4: error: bad\nnote: here\nlib/b.c:7: warning: unused\n"
        buffer = Buffer(text)

        self.assertEqual(mark_compilation_errors(buffer), 2)
        self.assertEqual(buffer.run_starts("help-echo"), [0, text.index("lib/b.c")])
        self.assertEqual(buffer.get_property(1, "compilation-location"), SourceLocation("src/a.py", 12, 4))
        self.assertEqual(
            buffer.get_property(text.index("lib/b.c") + 1, "compilation-location"),
            SourceLocation("lib/b.c", 7),
        )


if __name__ == "__main__":
    unittest.main()

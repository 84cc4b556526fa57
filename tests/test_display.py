import io
import unittest
from collections import namedtuple
from dataclasses import dataclass

from utilkit import LongTuple, show, render, field_count


@dataclass
class Soil:
    depth: float
    layers: int


Pair = namedtuple("Pair", "a b")


class Slotted:
    __slots__ = ("x",)

    def __init__(self, x):
        self.x = x


class Plain:
    def __init__(self):
        self.k = 1


class TestFieldCount(unittest.TestCase):
    def test_field_count(self):
        self.assertEqual(field_count(Soil(1.0, 2)), 2)
        self.assertEqual(field_count(Pair(1, 2)), 2)
        self.assertEqual(field_count(Slotted(1)), 1)
        self.assertEqual(field_count(Plain()), 1)
        self.assertEqual(field_count(3), 0)
        self.assertEqual(field_count("abc"), 0)


class TestRender(unittest.TestCase):
    def test_render_lines(self):
        lt = LongTuple.of(Soil(1.0, 2), 3, Slotted(0), chunk_size=2)
        self.assertEqual(
            render(lt),
            "LongTuple:\n"
            "  1  ↓ Soil: with 2 parameters\n"
            "  2  ↓ int: with 0 parameters\n"
            "  3  ↓ Slotted: with 1 parameter\n",
        )
        self.assertEqual(str(lt), render(lt).rstrip("\n"))

    def test_two_digit_indices_lose_a_space(self):
        lines = render(LongTuple.from_values(range(11), 4)).splitlines()
        self.assertEqual(lines[9], "  9  ↓ int: with 0 parameters")
        self.assertEqual(lines[10], "  10 ↓ int: with 0 parameters")

    def test_show_writes_colored_output(self):
        buf = io.StringIO()
        show(LongTuple.of(1, chunk_size=1), file=buf, color=True)
        s = buf.getvalue()
        self.assertTrue(s.startswith("\033[1mLongTuple\033[0m\033[33m:\033[0m\n"))
        self.assertIn("\033[96m with 0\033[0m", s)


if __name__ == "__main__":
    unittest.main()

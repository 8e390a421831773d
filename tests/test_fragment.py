import unittest
import sys
import os

# Add parent directory to path to allow importing modules from root
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from layout_engine.geometry import GeometricZone
from layout_engine.page_model import TextFragment
from layout_engine.types import TypeMismatchError


def frag(top, left, width, height, text='x', font_size=10.0, width_of_space=3.0):
    return TextFragment(
        top=top, left=left, width=width, height=height,
        font='Helvetica', font_size=font_size, text=text,
        width_of_space=width_of_space,
    )


class TestShouldMerge(unittest.TestCase):
    # font_size 10 on both sides -> tolerance 2.5

    def test_adjacent_on_same_line(self):
        self.assertTrue(frag(0, 0, 5, 10).should_merge(frag(0, 6, 5, 10)))

    def test_same_line_but_too_far(self):
        # vertical overlap alone is not enough
        self.assertFalse(frag(0, 0, 5, 10).should_merge(frag(0, 9, 5, 10)))

    def test_one_zero_height_and_close(self):
        self.assertTrue(frag(0, 0, 5, 10).should_merge(frag(20, 6, 5, 0)))
        self.assertTrue(frag(20, 0, 5, 0).should_merge(frag(0, 6, 5, 10)))

    def test_one_zero_height_but_too_far(self):
        self.assertFalse(frag(0, 0, 5, 10).should_merge(frag(20, 10, 5, 0)))

    def test_both_zero_height(self):
        self.assertFalse(frag(0, 0, 5, 0).should_merge(frag(0, 6, 5, 0)))

    def test_different_lines(self):
        self.assertFalse(frag(0, 0, 5, 10).should_merge(frag(20, 6, 5, 10)))

    def test_tolerance_uses_average_font_size(self):
        # (10 + 30) / 2 * 0.25 = 5
        a = frag(0, 0, 5, 10, font_size=10)
        self.assertTrue(a.should_merge(frag(0, 9, 5, 10, font_size=30)))
        self.assertFalse(a.should_merge(frag(0, 9, 5, 10, font_size=10)))

    def test_rejects_non_fragment(self):
        with self.assertRaises(TypeMismatchError):
            frag(0, 0, 5, 10).should_merge(GeometricZone(0, 6, 5, 10))


class TestShouldAddSpace(unittest.TestCase):
    def test_gap_of_one_space(self):
        f1 = frag(0, 0, 5, 10, width_of_space=3)
        self.assertTrue(f1.should_add_space(frag(0, 8, 5, 10)))

    def test_gap_bounds_inclusive(self):
        f1 = frag(0, 0, 5, 10, width_of_space=3)
        # upper bound 3 + 2.5 = 5.5
        self.assertTrue(f1.should_add_space(frag(0, 10.5, 5, 10)))
        self.assertFalse(f1.should_add_space(frag(0, 11, 5, 10)))

    def test_gap_too_small(self):
        f1 = frag(0, 0, 5, 10, width_of_space=3)
        self.assertFalse(f1.should_add_space(frag(0, 7, 5, 10)))

    def test_requires_vertical_overlap(self):
        f1 = frag(0, 0, 5, 10, width_of_space=3)
        self.assertFalse(f1.should_add_space(frag(20, 8, 5, 10)))

    def test_rejects_non_fragment(self):
        with self.assertRaises(TypeError):
            frag(0, 0, 5, 10).should_add_space(GeometricZone(0, 8, 5, 10))


class TestFragmentMerge(unittest.TestCase):
    def test_prepends_text_starting_above_in_same_column(self):
        a = frag(5, 10, 5, 10, text='lo')
        b = frag(0, 10, 5, 10, text='rol')
        a.merge(b)
        self.assertEqual(a.text, 'rollo')
        self.assertEqual((a.top, a.left, a.width, a.height), (0, 10, 5, 15))

    def test_appends_text_to_the_right(self):
        a = frag(0, 0, 5, 10, text='He')
        a.merge(frag(0, 5, 5, 10, text='llo'))
        self.assertEqual(a.text, 'Hello')
        self.assertEqual((a.left, a.width), (0, 10))

    def test_appends_when_other_is_below(self):
        a = frag(0, 10, 5, 10, text='x')
        a.merge(frag(3, 12, 5, 10, text='2'))
        self.assertEqual(a.text, 'x2')

    def test_other_is_not_modified(self):
        a = frag(0, 0, 5, 10, text='a')
        b = frag(0, 5, 5, 10, text='b')
        a.merge(b)
        self.assertEqual((b.text, b.left, b.width), ('b', 5, 5))

    def test_rejects_non_fragment(self):
        a = frag(0, 0, 5, 10, text='a')
        with self.assertRaises(TypeMismatchError):
            a.merge(GeometricZone(0, 5, 5, 10))
        self.assertEqual(a.text, 'a')
        self.assertEqual(a.width, 5)

    def test_projection_hides_working_fields(self):
        d = frag(1, 2, 3, 4, text='abc').to_dict()
        self.assertEqual(d, {'top': 1, 'left': 2, 'width': 3, 'height': 4,
                             'font': 'Helvetica', 'text': 'abc'})


if __name__ == "__main__":
    unittest.main()

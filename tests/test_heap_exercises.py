import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_heap import BinaryHeap, Priority
from heap_exercises import (
    combine_heaps,
    find_nth_smallest,
    is_min_heap,
    is_min_heap_array,
    is_valid_heap,
    min_heap_extraction_steps,
)


class TestFindNthSmallest(unittest.TestCase):

    def test_each_position_matches_sorted_order(self):
        values = [3, 10, 18, 5, 21, 100]
        for nth, expected in enumerate(sorted(values)):
            self.assertEqual(find_nth_smallest(values, nth), expected)

    def test_third_smallest(self):
        self.assertEqual(find_nth_smallest([3, 10, 18, 5, 21, 100], 2), 10)

    def test_position_that_heap_array_gets_wrong(self):
        # min build-heap leaves [1, 4, 2, 9, 5, 3]; index 2 holds 2, not 3
        values = [9, 4, 3, 1, 5, 2]
        self.assertEqual(BinaryHeap(values, Priority.MIN).elements[2], 2)
        self.assertEqual(find_nth_smallest(values, 2), 3)

    def test_out_of_range_returns_none(self):
        self.assertIsNone(find_nth_smallest([1, 2, 3], 3))
        self.assertIsNone(find_nth_smallest([1, 2, 3], -1))
        self.assertIsNone(find_nth_smallest([], 0))

    def test_input_is_not_modified(self):
        values = [7, 2, 9, 4]
        find_nth_smallest(values, 1)
        self.assertEqual(values, [7, 2, 9, 4])

    def test_with_duplicates(self):
        self.assertEqual(find_nth_smallest([5, 1, 5, 1, 3], 1), 1)
        self.assertEqual(find_nth_smallest([5, 1, 5, 1, 3], 2), 3)


class TestCombineHeaps(unittest.TestCase):

    def test_combined_heap_holds_all_elements(self):
        a = BinaryHeap([1, 9, 4], Priority.MIN)
        b = BinaryHeap([8, 2, 6, 0], Priority.MIN)
        combined = combine_heaps(a, b)
        self.assertIs(combined.priority, Priority.MIN)
        self.assertEqual(combined.size(), 7)
        self.assertEqual(list(combined), [0, 1, 2, 4, 6, 8, 9])

    def test_inputs_are_not_modified(self):
        a = BinaryHeap([1, 9, 4])
        b = BinaryHeap([8, 2])
        before_a, before_b = a.elements, b.elements
        combine_heaps(a, b)
        self.assertEqual(a.elements, before_a)
        self.assertEqual(b.elements, before_b)

    def test_combine_with_empty_heap(self):
        a = BinaryHeap([3, 1, 2])
        combined = combine_heaps(a, BinaryHeap())
        self.assertEqual(list(combined), [3, 2, 1])

    def test_mismatched_priorities_raise(self):
        with self.assertRaises(ValueError):
            combine_heaps(BinaryHeap([1], Priority.MAX), BinaryHeap([2], Priority.MIN))


class TestIsMinHeap(unittest.TestCase):

    def test_min_heap(self):
        self.assertTrue(is_min_heap(BinaryHeap([3, 2, 1], Priority.MIN)))

    def test_max_heap(self):
        self.assertFalse(is_min_heap(BinaryHeap([1, 2, 3])))

    def test_checks_ordering_only(self):
        self.assertTrue(is_min_heap(BinaryHeap(priority=Priority.MIN)))


class TestIsValidHeap(unittest.TestCase):

    def test_empty_and_single_are_valid(self):
        self.assertTrue(is_min_heap_array([]))
        self.assertTrue(is_min_heap_array([42]))

    def test_valid_min_heap_array(self):
        self.assertTrue(is_min_heap_array([1, 3, 2, 7, 4, 5]))
        self.assertTrue(is_min_heap_array([1, 1, 1, 1]))

    def test_left_child_violation(self):
        self.assertFalse(is_min_heap_array([2, 1, 3]))

    def test_right_child_violation(self):
        self.assertFalse(is_min_heap_array([2, 3, 1]))

    def test_deep_violation(self):
        self.assertFalse(is_min_heap_array([1, 3, 2, 7, 4, 5, 6, 0]))

    def test_max_ordering(self):
        self.assertTrue(is_valid_heap([9, 7, 8, 1, 2], Priority.MAX))
        self.assertFalse(is_valid_heap([9, 7, 8, 1, 10], Priority.MAX))
        self.assertTrue(is_valid_heap([9, 7, 8], "max"))

    def test_sorted_ascending_is_min_heap_not_max_heap(self):
        values = list(range(10))
        self.assertTrue(is_valid_heap(values, Priority.MIN))
        self.assertFalse(is_valid_heap(values, Priority.MAX))

    def test_unknown_priority_raises(self):
        with self.assertRaises(ValueError):
            is_valid_heap([1, 2], "sideways")


class TestMinHeapExtractionSteps(unittest.TestCase):

    def test_steps_accumulate_sorted_prefixes(self):
        steps = min_heap_extraction_steps([3, 10, 18, 5, 21, 100])
        self.assertEqual(len(steps), 6)
        self.assertEqual(steps[0], [3])
        self.assertEqual(steps[2], [3, 5, 10])
        self.assertEqual(steps[-1], [3, 5, 10, 18, 21, 100])

    def test_empty_input_has_no_steps(self):
        self.assertEqual(min_heap_extraction_steps([]), [])


if __name__ == "__main__":
    unittest.main()

"""
Algorithms built on top of BinaryHeap: order statistics, heap union and
heap-property checks for plain lists.
"""

from typing import List, Optional, Sequence, TypeVar, Union

from binary_heap import BinaryHeap, Priority

T = TypeVar('T')


def find_nth_smallest(elements: Sequence[T], nth: int) -> Optional[T]:
    """Return the nth smallest element (0-based), or None if out of range.

    Only the root of a freshly built heap is guaranteed to be in sorted
    position, so the answer comes from removing the root nth + 1 times.
    """
    if nth < 0 or nth >= len(elements):
        return None
    heap: BinaryHeap[T] = BinaryHeap(elements, Priority.MIN)
    value = None
    for _ in range(nth + 1):
        value = heap.remove()
    return value


def combine_heaps(a: BinaryHeap[T], b: BinaryHeap[T]) -> BinaryHeap[T]:
    """Build a new heap holding the elements of both heaps.

    Neither input is modified.
    """
    if a.priority is not b.priority:
        raise ValueError(
            f"cannot combine a {a.priority.value}-heap with a {b.priority.value}-heap"
        )
    return BinaryHeap(a.elements + b.elements, a.priority)


def is_min_heap(heap: BinaryHeap[T]) -> bool:
    return heap.priority is Priority.MIN


def is_valid_heap(elements: Sequence[T], priority: Union[Priority, str] = Priority.MIN) -> bool:
    """Check that no child outranks its parent. O(n)."""
    priority = Priority(priority)
    size = len(elements)
    for index in range(size // 2 - 1, -1, -1):
        parent = elements[index]
        for child in (2 * index + 1, 2 * index + 2):
            if child >= size:
                continue
            if priority is Priority.MIN and elements[child] < parent:
                return False
            if priority is Priority.MAX and elements[child] > parent:
                return False
    return True


def is_min_heap_array(elements: Sequence[T]) -> bool:
    return is_valid_heap(elements, Priority.MIN)


def min_heap_extraction_steps(elements: Sequence[T]) -> List[List[T]]:
    """Snapshot of the extracted values after each removal from a min-heap.

    >>> min_heap_extraction_steps([3, 10, 5])
    [[3], [3, 5], [3, 5, 10]]
    """
    heap: BinaryHeap[T] = BinaryHeap(elements, Priority.MIN)
    extracted: List[T] = []
    steps: List[List[T]] = []
    while not heap.is_empty():
        extracted.append(heap.remove())
        steps.append(list(extracted))
    return steps

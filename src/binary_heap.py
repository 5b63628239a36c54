from enum import Enum
from typing import TypeVar, Generic, Iterable, List, Iterator, Optional, Union

T = TypeVar('T')


class Priority(Enum):
    """Ordering of a heap: largest value first or smallest value first."""
    MAX = "max"
    MIN = "min"


class BinaryHeap(Generic[T]):
    """Array-backed binary heap with a max or min ordering.

    The tree lives in a list: the children of ``i`` are ``2i + 1`` and
    ``2i + 2``, its parent is ``(i - 1) // 2``. Elements only need to support
    ``<``, ``>`` and ``==``.

    Empty-heap queries and out-of-range positions return ``None`` (or ``-1``
    for ``index_of``) rather than raising.
    """

    def __init__(
        self,
        elements: Optional[Iterable[T]] = None,
        priority: Union[Priority, str] = Priority.MAX,
    ) -> None:
        self._priority = Priority(priority)
        self._data: List[T] = list(elements) if elements is not None else []
        self._build_heap()

    @staticmethod
    def from_array(arr: Iterable[T], priority: Union[Priority, str] = Priority.MAX) -> 'BinaryHeap[T]':
        """Build a heap from an array.

        Note: Creates a shallow copy of the input array.
        """
        return BinaryHeap(arr, priority)

    @property
    def priority(self) -> Priority:
        return self._priority

    @property
    def elements(self) -> List[T]:
        """Copy of the backing list in heap (array) order."""
        return list(self._data)

    def insert(self, value: T) -> None:
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def remove(self) -> Optional[T]:
        """Remove and return the root, or None if the heap is empty."""
        if not self._data:
            return None
        self._swap(0, len(self._data) - 1)
        value = self._data.pop()
        if self._data:
            self._sift_down(0)
        return value

    def remove_at(self, index: int) -> Optional[T]:
        """Remove and return the element at ``index``.

        Negative indices are out of range. Returns None and leaves the heap
        untouched when ``index`` is not in ``[0, size() - 1]``.
        """
        last = len(self._data) - 1
        if index < 0 or index > last:
            return None
        if index == last:
            return self._data.pop()
        self._swap(index, last)
        value = self._data.pop()
        # the moved element may belong above or below its new slot
        self._sift_down(index)
        self._sift_up(index)
        return value

    def merge(self, other: Iterable[T]) -> None:
        """Add every element of ``other`` and rebuild the heap in O(n)."""
        self._data.extend(other)
        self._build_heap()

    def peek(self) -> Optional[T]:
        return self._data[0] if self._data else None

    def index_of(self, value: T, index: int = 0) -> int:
        """Return the position of ``value`` in the subtree rooted at ``index``.

        Subtrees whose root has lower priority than ``value`` are skipped,
        since nothing below them can match. Returns -1 when not found.
        """
        if index < 0 or index >= len(self._data):
            return -1
        if self._first_has_higher_priority(value, self._data[index]):
            return -1
        if value == self._data[index]:
            return index
        left = self.index_of(value, 2 * index + 1)
        if left != -1:
            return left
        return self.index_of(value, 2 * index + 2)

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        self._data.clear()

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(priority=self._priority)
        clone._data = self._data.copy()
        return clone

    def _build_heap(self) -> None:
        for i in range(len(self._data) // 2 - 1, -1, -1):
            self._sift_down(i)

    def _first_has_higher_priority(self, a: T, b: T) -> bool:
        if self._priority is Priority.MAX:
            return a > b
        return a < b

    def _higher_priority(self, index_a: int, index_b: int) -> int:
        """Index of the element with higher priority; ties go to ``index_b``.

        An index past the end never wins.
        """
        size = len(self._data)
        if index_a >= size:
            return index_b
        if index_b >= size:
            return index_a
        if self._first_has_higher_priority(self._data[index_a], self._data[index_b]):
            return index_a
        return index_b

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._higher_priority(index, parent) != index:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        while True:
            chosen = self._higher_priority(2 * index + 1, index)
            chosen = self._higher_priority(2 * index + 2, chosen)
            if chosen == index:
                break
            self._swap(index, chosen)
            index = chosen

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __contains__(self, value: object) -> bool:
        return self.index_of(value) != -1

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data})"

    def __str__(self) -> str:
        return f"BinaryHeap(priority={self._priority.value}, size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.remove()

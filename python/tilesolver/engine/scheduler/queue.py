"""Binary min-heap used as the open set of the search."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from tilesolver.errors import EmptySchedulerError

K = TypeVar("K")


class MinPriorityQueue(Generic[K]):
    """Unbounded min-priority queue over a 1-indexed array heap.

    Keys are ordered by their natural ``<`` or, when *key* is given, by
    ``key(k)``.  Slot 0 of the backing list is never used.  Storage doubles
    when full and halves once usage drops to a quarter of capacity.

    Example::

        pq = MinPriorityQueue[int]()
        for x in (5, 1, 3):
            pq.enqueue(x)
        pq.dequeue()   # -> 1
        list(pq)       # -> [3, 5], pq itself still holds both keys
    """

    def __init__(
        self,
        capacity: int = 1,
        key: Callable[[K], Any] | None = None,
        *,
        check_invariants: bool = False,
    ) -> None:
        self._pq: list[K | None] = [None] * (max(capacity, 1) + 1)
        self._n = 0
        self._key = key
        self._check = check_invariants

    @classmethod
    def from_keys(
        cls,
        keys: Iterable[K],
        key: Callable[[K], Any] | None = None,
        *,
        check_invariants: bool = False,
    ) -> MinPriorityQueue[K]:
        """Build a heap from *keys* in linear time."""
        items = list(keys)
        pq = cls(len(items), key, check_invariants=check_invariants)
        pq._pq[1 : len(items) + 1] = items
        pq._n = len(items)
        for k in range(pq._n // 2, 0, -1):
            pq._down_heap(k)
        if pq._check:
            assert pq._is_min_heap()
        return pq

    # -- queries --------------------------------------------------------------

    def is_empty(self) -> bool:
        return self._n == 0

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    @property
    def capacity(self) -> int:
        return len(self._pq) - 1

    # -- mutation -------------------------------------------------------------

    def enqueue(self, x: K) -> None:
        if self._n == len(self._pq) - 1:
            self._resize(2 * len(self._pq))

        self._n += 1
        self._pq[self._n] = x
        self._up_heap(self._n)
        if self._check:
            assert self._is_min_heap()

    def dequeue(self) -> K:
        """Remove and return the smallest key.

        Raises :class:`EmptySchedulerError` if the queue is empty.
        """
        if self.is_empty():
            raise EmptySchedulerError("Priority queue is empty")

        smallest = self._pq[1]
        self._swap(1, self._n)
        self._n -= 1
        self._down_heap(1)
        self._pq[self._n + 1] = None

        if self._n > 0 and self._n == (len(self._pq) - 1) // 4:
            self._resize(len(self._pq) // 2)

        if self._check:
            assert self._is_min_heap()
        return smallest  # type: ignore[return-value]

    # -- iteration ------------------------------------------------------------

    def __iter__(self) -> Iterator[K]:
        """Yield keys in ascending order without modifying the queue."""
        copy: MinPriorityQueue[K] = MinPriorityQueue(self._n, self._key)
        for i in range(1, self._n + 1):
            copy.enqueue(self._pq[i])  # type: ignore[arg-type]
        while not copy.is_empty():
            yield copy.dequeue()

    def __repr__(self) -> str:
        return f"MinPriorityQueue(size={self._n}, capacity={self.capacity})"

    # -- helpers --------------------------------------------------------------

    def _resize(self, cap: int) -> None:
        assert cap > self._n
        temp: list[K | None] = [None] * cap
        temp[1 : self._n + 1] = self._pq[1 : self._n + 1]
        self._pq = temp

    def _up_heap(self, k: int) -> None:
        while k > 1 and self._greater(k // 2, k):
            self._swap(k, k // 2)
            k //= 2

    def _down_heap(self, k: int) -> None:
        n = self._n
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._swap(k, j)
            k = j

    def _greater(self, i: int, j: int) -> bool:
        a, b = self._pq[i], self._pq[j]
        if self._key is None:
            return b < a  # type: ignore[operator]
        return self._key(b) < self._key(a)

    def _swap(self, i: int, j: int) -> None:
        self._pq[i], self._pq[j] = self._pq[j], self._pq[i]

    def _is_min_heap(self, k: int = 1) -> bool:
        # Iterative to stay clear of the recursion limit on large heaps.
        stack = [k]
        while stack:
            k = stack.pop()
            if k > self._n:
                continue
            left, right = 2 * k, 2 * k + 1
            if left <= self._n and self._greater(k, left):
                return False
            if right <= self._n and self._greater(k, right):
                return False
            stack.extend((left, right))
        return True

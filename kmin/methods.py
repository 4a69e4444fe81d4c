"""Selection methods for the k smallest values of a vector."""

from __future__ import annotations

from enum import IntEnum

from kmin.routines import quick_sort


class Method(IntEnum):
    """The available methods; ``LIMITS`` compares the other three."""

    LIMITS = 0
    LINEAR = 1
    QUICKSORT = 2
    HEAP = 3


def _check_k(values: list[float], k: int) -> None:
    if not 0 <= k <= len(values):
        raise ValueError(f"k must be between 0 and {len(values)}, got {k}")


def min_heapify(heap: list[float], size: int, node: int) -> None:
    """Sift ``node`` down within the first ``size`` items of a min-heap."""
    while True:
        left = 2 * node + 1
        right = left + 1
        smallest = node
        if left < size and heap[left] < heap[node]:
            smallest = left
        if right < size and heap[right] < heap[smallest]:
            smallest = right
        if smallest == node:
            return
        heap[node], heap[smallest] = heap[smallest], heap[node]
        node = smallest


def build_min_heap(heap: list[float]) -> None:
    """Rearrange ``heap`` in place into a min-heap."""
    size = len(heap)
    for node in reversed(range((size + 1) // 2)):
        min_heapify(heap, size, node)


def extract_min(heap: list[float], size: int) -> float:
    """Remove and return the minimum of a heap made of the first ``size`` items."""
    if size <= 0:
        raise IndexError("extract from an empty heap")
    minimum = heap[0]
    heap[0] = heap[size - 1]
    min_heapify(heap, size - 1, 0)
    return minimum


def linear_selection(values: list[float], k: int) -> list[float]:
    """Find each i-th smallest by a linear scan, moving it to position i.

    ``values`` is reordered in place; the ``k`` smallest are returned in order.
    """
    _check_k(values, k)
    for i in range(k):
        index = min(range(i, len(values)), key=values.__getitem__)
        values[i], values[index] = values[index], values[i]
    return values[:k]


def quicksort_selection(values: list[float], k: int) -> list[float]:
    """Sort ``values`` in place and return its first ``k`` items."""
    _check_k(values, k)
    quick_sort(values)
    return values[:k]


def heap_selection(values: list[float], k: int) -> list[float]:
    """Extract the ``k`` smallest from a min-heap built over ``values``.

    ``values`` is reordered in place, with the answer stored at its end.
    """
    _check_k(values, k)
    size = len(values)
    build_min_heap(values)
    smallest = [extract_min(values, size - i) for i in range(k)]
    values[size - k:] = smallest
    return list(smallest)


_SELECTIONS = {
    Method.LINEAR: linear_selection,
    Method.QUICKSORT: quicksort_selection,
    Method.HEAP: heap_selection,
}


def run_method(method: Method | int, values: list[float], k: int) -> list[float]:
    """Run a selection method on ``values``, returning the ``k`` smallest in order."""
    chosen = Method(method)
    if chosen not in _SELECTIONS:
        raise ValueError(f"method {int(chosen)} does not select values")
    return _SELECTIONS[chosen](values, k)
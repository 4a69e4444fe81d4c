"""Support routines: reference sorting, answer checking, timing and output."""

from __future__ import annotations

import heapq
import struct
import sys
import time
from collections.abc import Iterable, Sequence

TOLERANCE = 1e-5
OUTPUT_FILE = "kmin.out"


def quick_sort(values: list[float]) -> None:
    """Sort ``values`` in place in ascending order."""
    values.sort()


def heap_select(values: Iterable[float], k: int) -> list[float]:
    """Return the ``k`` smallest values in ascending order, leaving the input untouched."""
    return heapq.nsmallest(k, values)


def _format_vector(values: Sequence[float]) -> str:
    return " ".join(f"{value:.2f}" for value in values)


def is_correct_answer(values: Sequence[float], k: int, result: Sequence[float]) -> bool:
    """Check that the first ``k`` items of ``result`` are the ``k`` smallest of ``values``.

    The order of ``result`` does not matter. On a wrong answer, the given and the
    expected answers are reported on standard error.
    """
    expected = heap_select(values, k)
    given = list(result)[:k]
    answer = sorted(given)

    correct = len(answer) == k
    if correct:
        for i, (want, got) in enumerate(zip(expected, answer)):
            if abs(want - got) >= TOLERANCE:
                print(
                    f"i = {i}, k = {k}, vi = {want:f}, ri = {given[i]:f}, ai = {got:f}",
                    file=sys.stderr,
                )
                correct = False
                break
    if correct:
        return True

    print("Resposta incorreta detectada", file=sys.stderr)
    print("Resposta do seu algoritmo:", file=sys.stderr)
    print(_format_vector(given), file=sys.stderr)
    print("Resposta esperada:", file=sys.stderr)
    print(_format_vector(expected), file=sys.stderr)
    return False


class Stopwatch:
    """Measures the wall-clock time between consecutive laps.

    The first lap has no meaningful previous mark and returns a huge value.
    """

    def __init__(self) -> None:
        self._last = -1e9

    def lap(self) -> float:
        """Return the seconds elapsed since the previous lap and start a new one."""
        now = time.time()
        elapsed = now - self._last
        self._last = now
        return elapsed


def kmin_to_file(result: Sequence[float], path: str = OUTPUT_FILE) -> None:
    """Write ``result`` as raw native doubles to ``path``."""
    values = list(result)
    with open(path, "wb") as output:
        output.write(struct.pack(f"@{len(values)}d", *values))
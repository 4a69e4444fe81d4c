"""Search for the ranges of k in which each selection method is the fastest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from kmin.methods import Method, run_method
from kmin.routines import Stopwatch

# Largest value of ``k * n`` for which the linear method is actually run.
MAX_LINEAR = 0x12A05F200
# Time reported for the linear method when ``k * n`` is larger than that.
MAX_LINEAR_TIME = 3.6e3

_SELECTING = (Method.LINEAR, Method.QUICKSORT, Method.HEAP)


class Timer(Protocol):
    """Anything that reports the seconds elapsed since its previous lap."""

    def lap(self) -> float: ...


class SolutionNotFoundError(Exception):
    """No method is the fastest for the smallest values of k."""

    def __init__(self, message: str = "não foi possível encontrar solução") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Limits:
    """Methods ordered by the range of k where each is fastest.

    ``methods[0]`` wins on ``[0, k1]``, ``methods[1]`` on ``[k1, k2]`` and
    ``methods[2]`` on ``[k2, n]``.
    """

    methods: tuple[Method, Method, Method]
    k1: int
    k2: int


def time_method(
    values: list[float], k: int, method: Method | int, timer: Optional[Timer] = None
) -> float:
    """Return the seconds a method takes on a copy of ``values``."""
    chosen = Method(method)
    if chosen is Method.LINEAR and k * len(values) >= MAX_LINEAR:
        return MAX_LINEAR_TIME
    clock = timer if timer is not None else Stopwatch()
    copy = list(values)
    clock.lap()
    run_method(chosen, copy, k)
    return clock.lap()


def next_false_position(a: int, ya: float, b: int, yb: float) -> int:
    """Next k of the false position method, truncated to an integer."""
    xn = (yb * a - ya * b) / (yb - ya)
    return int(xn)


def false_position(
    values: list[float], first: Method | int, second: Method | int, timer: Optional[Timer] = None
) -> int:
    """Find the k where the faster of two methods changes.

    The magnitude is that k; the result is negative when ``first`` is the
    faster one below it and positive when ``second`` is.
    """
    clock = timer if timer is not None else Stopwatch()
    m1, m2 = Method(first), Method(second)

    def difference(k: int) -> float:
        return time_method(values, k, m1, clock) - time_method(values, k, m2, clock)

    ka, kb = 1, len(values)
    fa = difference(ka)
    fb = difference(kb)

    sign = -1 if fb > 0.0 else 1
    if fa * fb >= 0:
        return sign

    while True:
        kp = next_false_position(ka, fa, kb, fb)
        if kp <= ka or kp >= kb:
            return sign * kp
        fp = difference(kp)
        if fp == 0.0:
            return sign * kp
        if fp * fa > 0.0:
            ka, fa = kp, fp
        else:
            kb, fb = kp, fp


def next_method(method: Method | int) -> Method:
    """Cycle through the selecting methods: 1 -> 2 -> 3 -> 1."""
    return Method(int(method) % 3 + 1)


def find_limits(values: list[float], timer: Optional[Timer] = None) -> Limits:
    """Compare the three methods pairwise and order them by their best range of k."""
    if not values:
        return Limits((Method.LINEAR, Method.QUICKSORT, Method.HEAP), 0, 0)

    clock = timer if timer is not None else Stopwatch()
    crossing: dict[tuple[Method, Method], int] = {}
    for position, m1 in enumerate(_SELECTING):
        crossing[m1, m1] = 0
        for m2 in _SELECTING[position + 1:]:
            answer = false_position(values, m1, m2, clock)
            crossing[m1, m2] = answer
            crossing[m2, m1] = -answer

    for m1 in _SELECTING:
        m2 = next_method(m1)
        m3 = next_method(m2)
        if crossing[m1, m2] <= 0 and crossing[m1, m3] <= 0:
            if crossing[m2, m3] <= 0:
                return Limits((m1, m2, m3), crossing[m2, m1], crossing[m3, m2])
            return Limits((m1, m3, m2), crossing[m2, m1], crossing[m2, m3])
    raise SolutionNotFoundError()


def format_limits(limits: Limits, n: int) -> str:
    """Render the table of methods and the ranges of k where each is best."""
    width = len(str(n)) if n > 0 else 0
    bounds = (0, limits.k1, limits.k2, n)
    lines = [f"Vetor de tamanho  {n}", "", "Método    Intervalo Eficiente"]
    for method, low, high in zip(limits.methods, bounds, bounds[1:]):
        lines.append(
            f"     {int(method)}    {str(low).rjust(width)} até {str(high).rjust(width)}"
        )
    return "\n".join(lines) + "\n"
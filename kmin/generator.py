"""Generator of random test vectors for the k smallest problem."""

from __future__ import annotations

import os
import random
import re
import sys
from collections.abc import Iterator

PROG = "gen"
RAND_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _parse_long(text: str) -> tuple[int, str]:
    """Parse a leading base-10 integer, returning it and the unparsed rest."""
    match = _INTEGER.match(text)
    if match is None:
        return 0, text
    return int(match.group(1)), text[match.end():]


def parse_count(text: str) -> int:
    """Parse the number of values to generate."""
    number, rest = _parse_long(text)
    if number <= LLONG_MIN or number >= LLONG_MAX:
        raise OverflowError("numerical result out of range")
    if number < 0 or rest:
        raise ValueError("invalid argument")
    return number


def _reseed(rng: random.Random) -> int:
    rng.seed(os.urandom(16))
    return 100 + int.from_bytes(os.urandom(2), "little")


def random_values(count: int, rng: random.Random | None = None) -> Iterator[float]:
    """Yield ``count`` random values in ``[-RAND_MAX, RAND_MAX]``.

    Without an explicit generator, a private one is used and reseeded from the
    system entropy source every few hundred values.
    """
    reseeding = rng is None
    generator = rng if rng is not None else random.Random()
    remaining = 1
    for _ in range(count):
        if reseeding:
            remaining -= 1
            if remaining == 0:
                remaining = _reseed(generator)
        scale = 2 * generator.random() - 1
        yield generator.randint(0, RAND_MAX) * scale


def main(argv: list[str] | None = None) -> int:
    """Print a count followed by that many random values, one per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(f"{PROG}: missing argument", file=sys.stderr)
        return 1
    try:
        count = parse_count(args[0])
    except (ValueError, OverflowError) as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    out = sys.stdout
    out.write(f"{count}\n")
    for value in random_values(count):
        out.write(f"{value:f}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
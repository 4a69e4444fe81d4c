"""Command line for the k smallest problem: run one method or compare them all."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from kmin.limits import SolutionNotFoundError, find_limits, format_limits
from kmin.methods import Method, run_method
from kmin.routines import Stopwatch, kmin_to_file

PROG = "kmin"
SIZE_MAX = 2**64 - 1

_SIZE = re.compile(r"\s*([+-]?)(\d+)")
_DIGITS = re.compile(r"\d+")


class InvalidInputError(ValueError):
    """The input file does not hold a valid vector."""

    def __init__(self, message: str = "entrada inválida") -> None:
        super().__init__(message)


class _UsageError(ValueError):
    """Wrong number of arguments; the message is shown as it is."""


@dataclass
class Arguments:
    """Validated command line: the method, the vector and k."""

    method: Method
    values: list[float]
    k: int


def _parse_float(word: str) -> float:
    if "_" in word:
        raise InvalidInputError()
    try:
        return float(word)
    except ValueError:
        raise InvalidInputError() from None


def read_array(path: str) -> list[float]:
    """Read a vector file: its size first, then that many numbers."""
    with open(path, encoding="utf-8") as stream:
        words = stream.read().split()
    if not words:
        raise InvalidInputError()

    size_text = words[0].lstrip("+")
    if not _DIGITS.fullmatch(size_text):
        raise InvalidInputError()
    size = int(size_text)

    numbers = words[1:size + 1]
    if len(numbers) < size:
        raise InvalidInputError()
    return [_parse_float(word) for word in numbers]


def _parse_k(text: str) -> int:
    match = _SIZE.match(text)
    if match is None:
        raise ValueError("valor de k inválido")
    value = min(int(match.group(2)), SIZE_MAX)
    if match.group(1) == "-":
        value = -value % (SIZE_MAX + 1)
    return value


def parse_args(argv: list[str]) -> Arguments:
    """Validate ``<arq> <metodo> [<k>]`` and load the vector."""
    if len(argv) != 3:
        if len(argv) == 2 and not argv[1].startswith("0"):
            raise _UsageError("Uso Método 0: ./kmin <arq> 0")
        if len(argv) != 2:
            raise _UsageError("Uso geral: ./kmin <arq> <metodo> <k>")

    code = argv[1]
    if len(code) != 1 or code not in "0123":
        raise ValueError("método inválido")
    method = Method(int(code))

    k = _parse_k(argv[2]) if len(argv) == 3 else 0

    values = read_array(argv[0])
    if len(values) < k:
        k = len(values)
        print(f"{PROG}: k maior que vetor, assumindo k = {k}", file=sys.stderr)

    return Arguments(method=method, values=values, k=k)


def main(argv: list[str] | None = None) -> int:
    """Run the chosen method, printing its time and writing ``kmin.out``."""
    args_list = sys.argv[1:] if argv is None else list(argv)
    try:
        args = parse_args(args_list)
    except _UsageError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{PROG}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return 1

    if args.method is Method.LIMITS:
        try:
            limits = find_limits(args.values)
        except SolutionNotFoundError as exc:
            print(f"{PROG}: {exc}", file=sys.stderr)
            return 1
        sys.stdout.write(format_limits(limits, len(args.values)))
        return 0

    timer = Stopwatch()
    timer.lap()
    result = run_method(args.method, args.values, args.k)
    elapsed = timer.lap()

    print(f"{elapsed:.6f}")
    try:
        kmin_to_file(result)
    except OSError as exc:
        print(f"{PROG}: {exc.strerror or exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
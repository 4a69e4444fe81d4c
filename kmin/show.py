"""Viewer for binary vectors of doubles, such as ``kmin.out``."""

from __future__ import annotations

import re
import struct
import sys
from collections.abc import Iterable, Iterator
from typing import BinaryIO

PROG = "show"
DEFAULT_INPUT = "kmin.out"
INT_MAX = 2**31 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1

_DOUBLE = struct.Struct("@d")
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

USAGE = """\
Leitura do vetor de saída, normalmente 'kmin.out'

Uso: {prog} [-p PREC] [-s [SEP]] [entrada ...]

Opções:
  -h          Mensagem de ajuda.
  -p PREC     Precisão dos valores. (PADRÃO: 2)
  -s [SEP]    Muda o separador de valores.
              (PADRÃO: quebra de linha)
              (SEM ARGUMENTO: espaço)
"""


def parse_precision(text: str) -> int:
    """Parse the number of decimal places to show."""
    match = _INTEGER.match(text)
    number, rest = (int(match.group(1)), text[match.end():]) if match else (0, text)
    if number <= LLONG_MIN or number >= LLONG_MAX:
        raise OverflowError("numerical result out of range")
    if number < 0 or number > INT_MAX:
        raise ValueError("invalid precision range -- 'p'")
    if rest:
        raise ValueError("invalid argument -- 'p'")
    return number


def read_doubles(stream: BinaryIO) -> Iterator[float]:
    """Yield native doubles from a binary stream, ignoring a trailing partial one."""
    while True:
        chunk = stream.read(_DOUBLE.size)
        if len(chunk) < _DOUBLE.size:
            return
        yield _DOUBLE.unpack(chunk)[0]


def format_values(values: Iterable[float], separator: str, precision: int) -> str:
    """Render the values joined by ``separator``, or ``(empty)`` when there are none."""
    texts = [f"{value:.{precision}f}" for value in values]
    if not texts:
        return "(empty)\n"
    return separator.join(texts) + "\n"


def _show(path: str | None, separator: str, precision: int) -> int:
    try:
        if path is None:
            text = format_values(read_doubles(sys.stdin.buffer), separator, precision)
        else:
            with open(path, "rb") as stream:
                text = format_values(read_doubles(stream), separator, precision)
    except OSError as exc:
        print(f"{PROG}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Show each input file (``-`` is standard input), or ``kmin.out`` by default."""
    args = sys.argv[1:] if argv is None else list(argv)
    separator = "\n"
    precision = 2
    operands: list[str] = []

    position = 0
    options_done = False
    while position < len(args):
        arg = args[position]
        position += 1
        if options_done or arg == "-" or not arg.startswith("-"):
            operands.append(arg)
            continue
        if arg == "--":
            options_done = True
            continue

        for index, option in enumerate(arg[1:], start=1):
            rest = arg[index + 1:]
            if option == "h":
                sys.stdout.write(USAGE.format(prog=PROG))
                return 0
            if option == "p":
                if rest:
                    value = rest
                elif position < len(args):
                    value = args[position]
                    position += 1
                else:
                    print(f"{PROG}: option requires an argument -- 'p'", file=sys.stderr)
                    return 1
                try:
                    precision = parse_precision(value)
                except (ValueError, OverflowError) as exc:
                    print(f"{PROG}: {exc}", file=sys.stderr)
                    return 1
                break
            if option == "s":
                separator = rest or " "
                break
            print(f"{PROG}: invalid option -- '{option}'", file=sys.stderr)
            return 1

    if not operands:
        return _show(DEFAULT_INPUT, separator, precision)
    for operand in operands:
        status = _show(None if operand == "-" else operand, separator, precision)
        if status != 0:
            return status
    return 0


if __name__ == "__main__":
    sys.exit(main())
# kmin

Find the `k` smallest values of an array of doubles. There are three
methods, and you can compare their running times:

| Method | Strategy |
|-------:|----------|
| 1 | Repeated linear search for each of the `k` smallest |
| 2 | Sort the whole array with quicksort |
| 3 | Build a min-heap and extract the minimum `k` times |

Method `0` compares the other three. For each pair of methods, it uses the
false position method to find the `k` where one method overtakes the other.
It then prints the ranges of `k` in which each method is the fastest.

Messages from the commands are in Portuguese.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Input format

The input is a text file. The first number is the count `n`. The `n`
values follow it, separated by whitespace:

```
5
3.5
-1.25
7
0
2
```

## Commands

### `kmin`

```
kmin <file> <method> <k>
kmin <file> 0
```

With method 1, 2 or 3, the command prints the running time in seconds with
six decimal places. It writes the `k` smallest values, in ascending order,
to `kmin.out` as raw native doubles. If `k` is larger than the array, the
command uses the array's length as `k` and prints a warning on standard
error.

With method 0, the command prints a table of the three methods. Each row
gives the range of `k` in which that method is the fastest. For example:

```
Vetor de tamanho  1000

Método    Intervalo Eficiente
     1       0 até   12
     3      12 até  480
     2     480 até 1000
```

The numbers depend on the machine and on the data.

### `kmin-gen`

```
kmin-gen <count>
```

Prints `count` and then that many random doubles, one per line. The output
can be used directly as input for `kmin`:

```
kmin-gen 100000 > data.txt
kmin data.txt 3 50
```

### `kmin-show`

```
kmin-show [-p PREC] [-s [SEP]] [input ...]
```

Reads files of raw native doubles and prints their values. It prints
`(empty)` for a file that holds no values. With no input given, it reads
`kmin.out`. An input of `-` reads standard input.

- `-p PREC`: number of decimal places (default 2)
- `-s [SEP]`: separator between values. The default is a newline. With no
  argument, the separator is a space.
- `-h`: help

## Library use

```python
from kmin.methods import Method, run_method
from kmin.routines import is_correct_answer

values = [5.0, 1.0, 4.0, 2.0, 3.0]
smallest = run_method(Method.HEAP, list(values), 3)
assert smallest == [1.0, 2.0, 3.0]
assert is_correct_answer(values, 3, smallest)
```

The selection functions reorder the list they are given in place. Pass a
copy if you need to keep the original.

- `kmin.methods`: `linear_selection`, `quicksort_selection` and
  `heap_selection`, together with the heap helpers `build_min_heap`,
  `min_heapify` and `extract_min`.
- `kmin.routines`: `quick_sort` and `heap_select`, `is_correct_answer`,
  the `Stopwatch` lap timer, and `kmin_to_file`, which writes doubles to a
  binary file.
- `kmin.limits`: `find_limits` runs the comparison behind method 0 and
  returns a `Limits` value. It raises `SolutionNotFoundError` if no method
  is the fastest for small `k`. `format_limits` renders a `Limits` value as
  the table shown above.
- `kmin.show`: `read_doubles` and `format_values` read and render binary
  vectors.
- `kmin.generator`: `random_values` yields random doubles. You can pass it
  your own `random.Random`.
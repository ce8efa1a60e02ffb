# starpatterns

This package holds the classic console patterns that people use to practise
nested loops. It has square and triangle grids of stars, number triangles,
pyramids and diamonds, binary triangles, letter pyramids, hollow squares and
a square of concentric numbers.

Each pattern is a function `patternN(n)` in `starpatterns.patterns`. The
argument `n` sets the size of the pattern. Each function returns the pattern
as a string with one line per row, and every row ends with a newline. A size
of zero or less gives back an empty string.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

The `starpatterns` command prints the square of concentric numbers, which is
`pattern22`. You can give the size as an argument:

```
$ starpatterns 3
33333
32223
32123
32223
33333
```

If you leave out the argument, the command reads the size from standard
input. It takes the first whitespace-separated token there:

```
$ echo 2 | starpatterns
222
212
222
```

Empty input gives no output. So does input whose first token is not an
integer. An argument that is not an integer is reported as a usage error.

The command prints only `pattern22`. To get any other pattern, call its
function from Python.

## Library use

```python
from starpatterns.patterns import pattern7, pattern21alt

print(pattern7(3), end="")
#   *
#  ***
# *****

print(pattern21alt(4), end="")
# ****
# *  *
# *  *
# ****
```

### The patterns

| Function | Shape |
|---|---|
| `pattern1` | solid square of `* ` |
| `pattern2` | right triangle of `* ` |
| `pattern3` | rows counting `1 2 … i` |
| `pattern4` | row `i` repeats `i` |
| `pattern5` | inverted triangle of `* ` |
| `pattern6` | inverted number triangle |
| `pattern7` | centred pyramid |
| `pattern8` | inverted centred pyramid |
| `pattern9` | diamond (`pattern7` then `pattern8`) |
| `pattern10` | sideways arrow of `* ` |
| `pattern11` | triangle of alternating 1s and 0s |
| `pattern12` | two mirrored number triangles with a narrowing gap (`n + 1` rows) |
| `pattern13` | Floyd's triangle |
| `pattern14` | letter triangle `A B …` |
| `pattern15` | inverted letter triangle (first row has `n` letters) |
| `pattern16` | row `i` repeats the `i`-th letter |
| `pattern17`, `pattern17alt` | letter pyramid `A`, `ABA`, `ABCBA`, … |
| `pattern18` | letters that end at the `n`-th letter and grow to the left each row |
| `pattern19` | block of stars with a hollow diamond cut out |
| `pattern20` | butterfly of stars |
| `pattern21`, `pattern21alt` | hollow square |
| `pattern22` | square of concentric numbers, `2n - 1` wide |
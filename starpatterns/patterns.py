"""Text patterns built from stars, digits and letters.

Every ``patternN`` function takes a size ``n`` and returns the rendered
pattern as a string in which each row ends with a newline. A size of zero
or less gives an empty string.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def _render(rows: Iterable[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


def pattern1(n: int) -> str:
    """A square of ``n`` by ``n`` stars."""
    return _render("* " * n for _ in range(n))


def pattern2(n: int) -> str:
    """A right triangle of stars that grows by one per row."""
    return _render("* " * (i + 1) for i in range(n))


def pattern3(n: int) -> str:
    """Rows counting up from 1 to the row number."""
    return _render(
        "".join(f"{j} " for j in range(1, i + 2)) for i in range(n)
    )


def pattern4(n: int) -> str:
    """Row ``i`` repeats the number ``i`` exactly ``i`` times."""
    return _render(f"{i} " * i for i in range(1, n + 1))


def pattern5(n: int) -> str:
    """An inverted right triangle of stars."""
    return _render("* " * (n - i + 1) for i in range(1, n + 1))


def pattern6(n: int) -> str:
    """Rows counting up from 1, one number shorter each row."""
    return _render(
        "".join(f"{j} " for j in range(1, n - i + 2)) for i in range(1, n + 1)
    )


def pattern7(n: int) -> str:
    """A centred pyramid of stars."""
    return _render(" " * (n - i - 1) + "*" * (2 * i + 1) for i in range(n))


def pattern8(n: int) -> str:
    """An inverted centred pyramid of stars."""
    return _render(" " * i + "*" * (2 * n - (2 * i + 1)) for i in range(n))


def pattern9(n: int) -> str:
    """A diamond: the pyramid followed by the inverted pyramid."""
    return pattern7(n) + pattern8(n)


def pattern10(n: int) -> str:
    """A sideways triangle of stars pointing right."""
    tail = _render("* " * (n - i - 1) for i in range(n - 1))
    return pattern2(n) + tail


def pattern11(n: int) -> str:
    """A triangle of alternating ones and zeros."""

    def row(i: int) -> str:
        start = 1 if i % 2 == 0 else 0
        return "".join(str((start + j) % 2 == 1 and 1 or 0) for j in range(i + 1))

    return _render(row(i) for i in range(n))


def pattern12(n: int) -> str:
    """Two number triangles mirrored around a gap that narrows."""

    def row(i: int) -> str:
        left = "".join(str(j) for j in range(1, i + 1))
        right = "".join(str(j) for j in range(i, 0, -1))
        return left + " " * (2 * (n - i)) + right

    return _render(row(i) for i in range(n + 1))


def pattern13(n: int) -> str:
    """Floyd's triangle: consecutive numbers filling a right triangle."""

    def rows() -> Iterable[str]:
        start = 1
        for i in range(n):
            yield "".join(f"{start + j} " for j in range(i + 1))
            start += i + 1

    return _render(rows())


def pattern14(n: int) -> str:
    """Rows of letters from A up to the row's letter."""
    return _render(
        "".join(f"{_letter(k)} " for k in range(i + 1)) for i in range(n)
    )


def pattern15(n: int) -> str:
    """Rows of letters from A, one letter shorter each row."""
    return _render(
        "".join(f"{_letter(k)} " for k in range(n - i + 1))
        for i in range(1, n + 1)
    )


def pattern16(n: int) -> str:
    """Row ``i`` repeats the ``i``-th letter ``i`` times."""
    return _render(_letter(i) * (i + 1) for i in range(n))


def pattern17(n: int) -> str:
    """A centred pyramid of letters that rise to the middle and fall back."""

    def row(i: int) -> str:
        rising = "".join(_letter(k) for k in range(i + 1))
        falling = "".join(_letter(k) for k in range(i - 1, -1, -1))
        return " " * (n - i - 1) + rising + falling

    return _render(row(i) for i in range(n))


def pattern17alt(n: int) -> str:
    """The letter pyramid, built by walking a letter up then down."""

    def letters(i: int) -> Iterable[str]:
        breakpoint_ = (2 * i + 1) // 2
        offset = 0
        for j in range(1, 2 * i + 2):
            yield _letter(offset)
            offset += 1 if j <= breakpoint_ else -1

    return _render(" " * (n - i - 1) + "".join(letters(i)) for i in range(n))


def pattern18(n: int) -> str:
    """Rows of letters ending at the ``n``-th letter, growing leftwards."""
    return _render(
        "".join(_letter(k) for k in range(n - 1 - i, n)) for i in range(n)
    )


def pattern19(n: int) -> str:
    """A hollow diamond cut out of a block of stars."""

    def rows() -> Iterable[str]:
        half = n // 2
        for i in range(half):
            stars = "*" * ((n - 2 * i) // 2)
            yield stars + " " * (2 * i) + stars
        for i in range(half, 0, -1):
            stars = "*" * ((n - 2 * i) // 2 + 1)
            yield stars + " " * (2 * (i - 1)) + stars

    return _render(rows())


def pattern20(n: int) -> str:
    """A butterfly of stars: two triangles meeting in the middle row."""

    def row(i: int) -> str:
        stars = i if i <= (n + 1) // 2 else n + 1 - i
        return "*" * stars + " " * (n + 1 - 2 * stars) + "*" * stars

    return _render(row(i) for i in range(1, n + 1))


def pattern21(n: int) -> str:
    """A hollow square outlined in stars."""

    def row(i: int) -> str:
        if i in (0, n - 1):
            return "*" * n
        return "*" + " " * (n - 2) + "*"

    return _render(row(i) for i in range(n))


def pattern21alt(n: int) -> str:
    """A hollow square, deciding each cell by whether it is on the border."""

    def cell(i: int, j: int) -> str:
        return "*" if i in (0, n - 1) or j in (0, n - 1) else " "

    return _render("".join(cell(i, j) for j in range(n)) for i in range(n))


def pattern22(n: int) -> str:
    """Concentric squares of numbers falling from ``n`` at the edge to 1."""
    size = 2 * n - 1
    last = 2 * n - 2

    def row(i: int) -> str:
        return "".join(
            str(n - min(i, j, last - j, last - i)) for j in range(size)
        )

    return _render(row(i) for i in range(size))


def _read_size(stream) -> int:
    tokens = stream.read().split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Print the concentric number square for a size given or read from stdin."""
    parser = argparse.ArgumentParser(
        prog="starpatterns",
        description="Print the concentric number square of the given size.",
    )
    parser.add_argument(
        "size",
        nargs="?",
        type=int,
        help="size of the square; read from standard input when omitted",
    )
    args = parser.parse_args(argv)
    size = args.size if args.size is not None else _read_size(sys.stdin)
    sys.stdout.write(pattern22(size))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
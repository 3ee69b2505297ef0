"""Text patterns drawn with asterisks and digits."""

from __future__ import annotations

__all__ = [
    "heart",
    "left_triangle",
    "right_triangle",
    "full_pyramid",
    "inverted_left_triangle",
    "number_pyramid",
]


def _join(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def heart() -> str:
    """Return a fixed heart shape, three rows of lobes over a ten-row point."""
    upper = [
        " " * (2 - i) + "*" * (2 * i + 5) + " " * (5 - 2 * i) + "*" * (2 * i + 5)
        for i in range(3)
    ]
    lower = [" " * i + "*" * (19 - 2 * i) for i in range(10)]
    return _join(upper + lower)


def left_triangle() -> str:
    """Return a left-aligned triangle of nine rows, one to nine stars wide."""
    return _join(["*" * i for i in range(1, 10)])


def right_triangle() -> str:
    """Return a right-aligned triangle of nine rows, one to nine stars wide."""
    return _join([" " * (9 - i) + "*" * i for i in range(1, 10)])


def full_pyramid(rows: int) -> str:
    """Return a centred pyramid of ``rows`` rows; row ``i`` has ``2i - 1`` stars."""
    return _join(
        ["  " * (rows - i) + "* " * (2 * i - 1) for i in range(1, rows + 1)]
    )


def inverted_left_triangle(rows: int) -> str:
    """Return a left triangle standing on its point, widest row first."""
    return _join(["* " * i for i in range(rows, 0, -1)])


def number_pyramid(rows: int) -> str:
    """Return a pyramid whose row ``i`` counts up from ``i`` to ``2i - 1`` and back."""
    lines = []
    for i in range(1, rows + 1):
        rising = range(i, 2 * i)
        falling = range(2 * i - 2, i - 1, -1)
        digits = "".join(f"{n} " for n in (*rising, *falling))
        lines.append("  " * (rows - i) + digits)
    return _join(lines)
"""Two-dimensional matrix traversal, search and text input/output."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def search_sorted_matrix(matrix: Matrix, key: int) -> tuple[int, int] | None:
    """Find ``key`` in a row- and column-sorted matrix; return (row, col) or None."""
    rows, cols = _shape(matrix)
    row, col = 0, cols - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == key:
            return row, col
        if value > key:
            col -= 1
        else:
            row += 1
    return None


def spiral_order(matrix: Matrix) -> list[int]:
    """Return the elements clockwise from the top-left corner, spiralling inward."""
    rows, cols = _shape(matrix)
    out: list[int] = []
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        out.extend(matrix[top][left : right + 1])
        out.extend(matrix[row][right] for row in range(top + 1, bottom + 1))
        if top != bottom:
            out.extend(matrix[bottom][col] for col in range(right - 1, left - 1, -1))
        if left != right:
            out.extend(matrix[row][left] for row in range(bottom - 1, top, -1))
        top += 1
        bottom -= 1
        left += 1
        right -= 1
    return out


def wave_order(matrix: Matrix) -> list[int]:
    """Return columns from last to first, alternating downward and upward."""
    _, cols = _shape(matrix)
    out: list[int] = []
    for count, col in enumerate(range(cols - 1, -1, -1)):
        column = [row[col] for row in matrix]
        out.extend(column if count % 2 == 0 else reversed(column))
    return out


def format_matrix(matrix: Matrix) -> str:
    """Render the matrix one row per line, values separated by spaces."""
    return "".join(" ".join(str(value) for value in row) + "\n" for row in matrix)


def parse_matrix(text: str, rows: int, cols: int) -> list[list[int]]:
    """Read ``rows`` x ``cols`` whitespace-separated integers in row order."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    tokens = text.split()
    needed = rows * cols
    if len(tokens) < needed:
        raise ValueError(f"expected {needed} values, got {len(tokens)}")
    numbers = [int(token) for token in tokens[:needed]]
    return [numbers[row * cols : (row + 1) * cols] for row in range(rows)]
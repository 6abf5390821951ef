"""Route cipher: a grid read in an anticlockwise spiral from the top-left corner."""

from collections.abc import Iterator


def _check(text: str, rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ValueError(f"grid must have positive dimensions: {rows}x{cols}")
    if len(text) < rows * cols:
        raise ValueError(
            f"text has {len(text)} characters, a {rows}x{cols} grid needs {rows * cols}"
        )


def _spiral(rows: int, cols: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    while top <= bottom and left <= right:
        for i in range(top, bottom + 1):
            yield i, left
        left += 1
        for j in range(left, right + 1):
            yield bottom, j
        bottom -= 1
        if left <= right:
            for i in range(bottom, top - 1, -1):
                yield i, right
            right -= 1
        if top <= bottom:
            for j in range(right, left - 1, -1):
                yield top, j
            top += 1


def encrypt(text: str, rows: int, cols: int) -> str:
    """Fill the grid row by row and read it down, right, up and left in a spiral.

    Only the first rows*cols characters are used.
    """
    _check(text, rows, cols)
    return "".join(text[r * cols + c] for r, c in _spiral(rows, cols))


def decrypt(cipher: str, rows: int, cols: int) -> str:
    """Lay the text along the spiral and read the grid row by row."""
    _check(cipher, rows, cols)
    cells = [""] * (rows * cols)
    for ch, (r, c) in zip(cipher, _spiral(rows, cols)):
        cells[r * cols + c] = ch
    return "".join(cells)
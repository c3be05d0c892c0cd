import math
from typing import List, Tuple

from transposition.key import Key

# Fills grid cells past the end of the text
PAD_CHAR = " "


def grid_shape(length: int, key: Key) -> Tuple[int, int]:
    """Rows and columns of the grid used for a text of `length` characters."""
    cols = key.length
    return math.ceil(length / cols), cols


class TranspositionCodec:
    """
    Columnar transposition over a flat grid buffer.

    The grid has one column per key digit and as many rows as needed to
    hold the text; cell (row, col) lives at index row * cols + col.
    Encryption writes rows and reads columns in key order, decryption
    does the opposite. Pad cells are kept on both sides, so the output
    is always rows * cols characters long.
    """

    description = "Columnar transposition with a numeric permutation key."

    def _blank_grid(self, rows: int, cols: int) -> List[str]:
        return [PAD_CHAR] * (rows * cols)

    def _fill_rows(self, grid: List[str], text: str):
        for i, char in enumerate(text):
            grid[i] = char

    def _read_columns(self, grid: List[str], rows: int, cols: int, key: Key) -> str:
        result = []
        for col in key.digits:
            for row in range(rows):
                result.append(grid[row * cols + col])
        return "".join(result)

    def _fill_columns(self, grid: List[str], data: str, rows: int, cols: int, key: Key):
        index = 0
        for col in key.digits:
            for row in range(rows):
                if index >= len(data):
                    return
                grid[row * cols + col] = data[index]
                index += 1

    def encrypt(self, text: str, key: Key) -> str:
        rows, cols = grid_shape(len(text), key)
        grid = self._blank_grid(rows, cols)
        self._fill_rows(grid, text)
        return self._read_columns(grid, rows, cols, key)

    def decrypt(self, data: str, key: Key) -> str:
        rows, cols = grid_shape(len(data), key)
        grid = self._blank_grid(rows, cols)
        self._fill_columns(grid, data, rows, cols, key)
        # Row-major order is the buffer order
        return "".join(grid)


_codec = TranspositionCodec()


def encrypt(text: str, key: Key) -> str:
    return _codec.encrypt(text, key)


def decrypt(data: str, key: Key) -> str:
    return _codec.decrypt(data, key)

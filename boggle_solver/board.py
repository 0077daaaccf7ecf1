from typing import Iterable, Self


class BoardFormatError(ValueError):
    """A board file doesn't have a letter where one is required."""


class Board:
    """A rows x columns grid of lowercase letters, stored row-major.

    Cells can be addressed either as (row, col) or by their flattened index,
    row * columns + col.
    """

    rows: int
    columns: int
    _cells: list[str]

    def __init__(self, rows: int, columns: int, letters: Iterable[str]):
        if rows < 1 or columns < 1:
            raise ValueError(f"Invalid board dimensions: {rows}x{columns}")
        cells = [let.lower() for let in letters]
        if len(cells) != rows * columns:
            raise ValueError(
                f"Expected {rows * columns} letters for a {rows}x{columns} board, got {len(cells)}"
            )
        for let in cells:
            assert len(let) == 1 and "a" <= let <= "z", let
        self.rows = rows
        self.columns = columns
        self._cells = cells

    @classmethod
    def from_lines(cls, lines: Iterable[str], rows: int, columns: int) -> Self:
        """Parse a board, one row per line. Whitespace within a line is ignored."""
        letters = []
        it = iter(lines)
        for r in range(rows):
            line = next(it, None)
            if line is None:
                raise BoardFormatError(f"Expected {rows} rows, only found {r}")
            line = "".join(line.split())
            for c in range(columns):
                if c >= len(line):
                    raise BoardFormatError(
                        f"Row {r} has {len(line)} letters, expected {columns}"
                    )
                let = line[c]
                low = let.lower()
                if len(low) != 1 or not ("a" <= low <= "z"):
                    raise BoardFormatError(f"Invalid letter {let!r} at row {r}, column {c}")
                letters.append(low)
        return cls(rows, columns, letters)

    @classmethod
    def load(cls, path: str, rows: int, columns: int) -> Self:
        with open(path) as f:
            return cls.from_lines(f, rows, columns)

    @classmethod
    def from_string(cls, bd: str, rows: int, columns: int) -> Self:
        """Compact row-major form, e.g. "cats" for a 2x2 board."""
        if len(bd) != rows * columns:
            raise BoardFormatError(f"Expected {rows * columns} letters, got {len(bd)}")
        return cls.from_lines(
            [bd[r * columns : (r + 1) * columns] for r in range(rows)], rows, columns
        )

    def cell_count(self):
        return self.rows * self.columns

    def letter_at(self, row: int, col: int) -> str:
        return self._cells[self.position_to_index(row, col)]

    def letter_at_index(self, i: int) -> str:
        if not (0 <= i < len(self._cells)):
            raise IndexError(f"Cell {i} is out of bounds")
        return self._cells[i]

    def index_to_position(self, i: int) -> tuple[int, int]:
        if not (0 <= i < len(self._cells)):
            raise IndexError(f"Cell {i} is out of bounds")
        return (i // self.columns, i % self.columns)

    def position_to_index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise IndexError(f"({row}, {col}) is out of bounds")
        return row * self.columns + col

    def as_string(self):
        return "".join(self._cells)

    def __str__(self):
        return "\n".join(
            " ".join(self._cells[r * self.columns : (r + 1) * self.columns])
            for r in range(self.rows)
        )

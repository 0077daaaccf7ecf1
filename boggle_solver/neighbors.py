import functools


class AdjacencyMatrix:
    """Cell-by-cell adjacency table for a rows x columns board.

    Cells are adjacent if they're within one row and one column of each other.
    A cell is never adjacent to itself.
    """

    num_vertices: int
    _neighbors: list[list[int]]
    _matrix: list[list[bool]]

    def __init__(self, rows: int, columns: int):
        assert rows > 0 and columns > 0
        self.num_vertices = n = rows * columns
        self._matrix = [[False] * n for _ in range(n)]
        for i in range(n):
            ri, ci = divmod(i, columns)
            for j in range(i + 1, n):
                rj, cj = divmod(j, columns)
                if abs(ri - rj) <= 1 and abs(ci - cj) <= 1:
                    self._matrix[i][j] = self._matrix[j][i] = True
        self._neighbors = [
            [j for j, adj in enumerate(row) if adj] for row in self._matrix
        ]

    def are_adjacent(self, i: int, j: int) -> bool:
        assert 0 <= i < self.num_vertices and 0 <= j < self.num_vertices, (i, j)
        return self._matrix[i][j]

    def neighbors(self, i: int) -> list[int]:
        """Cells adjacent to i, in increasing order."""
        assert 0 <= i < self.num_vertices, i
        return self._neighbors[i]


@functools.cache
def get_adjacency(rows: int, columns: int) -> AdjacencyMatrix:
    return AdjacencyMatrix(rows, columns)

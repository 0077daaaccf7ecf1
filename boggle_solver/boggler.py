from boggle_solver.board import Board
from boggle_solver.neighbors import AdjacencyMatrix, get_adjacency
from boggle_solver.trie import Trie


class Boggler:
    """Finds every dictionary word that can be traced on a board.

    Words are traced along adjacent cells (including diagonals) and may not
    use the same cell twice. If repeat_letters is False, a word also may not
    contain the same letter twice, even from different cells.
    """

    _trie: Trie
    _board: Board
    _adj: AdjacencyMatrix
    _used: list[bool]
    _seq: list[int]

    def __init__(self, trie: Trie, repeat_letters=True):
        self._trie = trie
        self.repeat_letters = repeat_letters
        assert not self._trie.is_word("")

    def _set_board(self, board: Board):
        self._board = board
        self._adj = get_adjacency(board.rows, board.columns)
        assert self._adj.num_vertices == board.cell_count()
        self._used = [False] * board.cell_count()
        self._seq = []
        self._found: dict[str, list[int]] = {}

    def find_paths(self, board: Board) -> dict[str, list[int]]:
        """Map each word on the board to the first path of cells that spells it."""
        self._set_board(board)
        for i in range(0, board.cell_count()):
            self.explore("", i)
        assert not any(self._used)
        return self._found

    def search(self, board: Board) -> set[str]:
        return set(self.find_paths(board))

    def explore(self, word: str, i: int):
        let = self._board.letter_at_index(i)
        if not self.repeat_letters and let in word:
            return
        word += let
        self._used[i] = True
        self._seq.append(i)

        if word not in self._found and self._trie.is_word(word):
            self._found[word] = [*self._seq]

        if self._trie.has_words_with_prefix(word):
            for idx in self._adj.neighbors(i):
                if not self._used[idx]:
                    self.explore(word, idx)

        self._seq.pop()
        self._used[i] = False


def search(board: Board, trie: Trie, repeat_letters=True) -> set[str]:
    return Boggler(trie, repeat_letters).search(board)

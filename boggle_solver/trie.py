import sys
from typing import Iterable, Iterator, Self

LETTER_A = ord("a")


class TrieNode:
    """One letter of some prefix in the dictionary."""

    letter: str
    _children: list[Self | None]
    _is_word: bool

    def __init__(self, letter: str = ""):
        self.letter = letter
        self._is_word = False
        self._children = [None] * 26

    def descend(self, i: int):
        return self._children[i]

    def is_word(self):
        return self._is_word

    def has_children(self):
        return any(c is not None for c in self._children)

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_child(self, i: int) -> Self:
        child = self._children[i]
        if child is None:
            child = TrieNode(chr(i + LETTER_A))
            self._children[i] = child
        return child

    def children(self) -> Iterator[tuple[int, Self]]:
        for i, child in enumerate(self._children):
            if child:
                yield i, child


def is_dictionary_word(word: str):
    if word == "":
        return False
    for let in word:
        if let < "a" or let > "z":
            return False
    return True


class Trie:
    """Prefix tree over lowercase a-z words.

    Both queries walk at most len(s) nodes, regardless of how many words
    have been loaded.
    """

    root: TrieNode

    def __init__(self):
        self.root = TrieNode()

    def add_word(self, word: str) -> TrieNode:
        word = word.lower()
        if not is_dictionary_word(word):
            raise ValueError(f"Not a dictionary word: {word!r}")
        node = self.root
        for let in word:
            node = node.add_child(ord(let) - LETTER_A)
        node.set_is_word()
        return node

    def find_node(self, s: str) -> TrieNode | None:
        node = self.root
        for let in s.lower():
            c = ord(let) - LETTER_A
            if c < 0 or c >= 26:
                return None
            node = node.descend(c)
            if node is None:
                return None
        return node

    def is_word(self, s: str) -> bool:
        node = self.find_node(s)
        return node is not None and node.is_word()

    def has_words_with_prefix(self, s: str) -> bool:
        """Does some longer word start with s?"""
        node = self.find_node(s)
        return node is not None and node.has_children()

    def load_dictionary(self, path: str) -> bool:
        """Add every word in a one-word-per-line file.

        Returns False if the file can't be read, in which case the trie is
        left untouched.
        """
        try:
            with open(path) as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError):
            return False

        num_skipped = 0
        for line in lines:
            word = line.strip().lower()
            if word == "":
                continue
            if not is_dictionary_word(word):
                num_skipped += 1
                continue
            self.add_word(word)
        if num_skipped:
            sys.stderr.write(f"{path}: skipped {num_skipped} non-alphabetic lines\n")
        return True

    def size(self):
        return sum(1 for _ in self.words())

    def num_nodes(self):
        def count(node: TrieNode):
            return 1 + sum(count(child) for _, child in node.children())

        return count(self.root)

    def words(self) -> Iterator[str]:
        """All words in the trie, in alphabetical order."""
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word():
                yield prefix
            for _, child in reversed([*node.children()]):
                stack.append((child, prefix + child.letter))

    @staticmethod
    def reverse_lookup(root: TrieNode, node: TrieNode):
        return reverse_lookup(root, node)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> "Trie":
        trie = Trie()
        for word in words:
            trie.add_word(word)
        return trie

    @staticmethod
    def create_from_file(path: str) -> "Trie":
        trie = Trie()
        if not trie.load_dictionary(path):
            raise OSError(f"Unable to read dictionary {path}")
        return trie


def reverse_lookup(root: TrieNode, node: TrieNode):
    if root is node:
        return ""
    for _, child in root.children():
        child_result = reverse_lookup(child, node)
        if child_result is not None:
            return child.letter + child_result
    return None

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

logger = logging.getLogger("letterboxed")

# Entries containing any of these are skipped when building the dictionary.
FILTERED_CHARS = "1234567890-'.!@#$%^&*()"

EXPLORE_RESET = ".reset"
EXPLORE_VALID = ".valid"
EXPLORE_LIMIT = 10


class DictionaryLoadError(RuntimeError):
    """The word source could not be read."""


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False

    def sorted_children(self) -> list[str]:
        return sorted(self.children)


@dataclass
class ExploreResult:
    """Outcome of one step of interactive trie exploration."""

    prefix: str
    error: str | None = None
    children: list[str] = field(default_factory=list)
    words: list[str] = field(default_factory=list)
    total: int = 0
    reset: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str):
        node = self.root
        for ch in word.upper():
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True

    def find(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def is_valid(self, word: str) -> bool:
        node = self.find(word.upper())
        return node is not None and node.is_word

    def size(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += node.is_word
            stack.extend(node.children.values())
        return count

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Every complete word strictly below ``prefix``, in trie order.

        Children are visited in ascending letter order and a word is listed
        before any of its extensions. The prefix itself is never included.
        """
        prefix = prefix.upper()
        node = self.find(prefix)
        if node is None:
            return []
        return [prefix + w for w in _completions(node)]

    def explore(self, token: str, current: str) -> ExploreResult:
        if token == EXPLORE_RESET:
            return ExploreResult(prefix="", reset=True)

        if token == EXPLORE_VALID:
            words = self.words_with_prefix(current)
            return ExploreResult(
                prefix=current,
                words=words[:EXPLORE_LIMIT],
                total=len(words),
            )

        new_prefix = (current + token).upper()
        node = self.root
        for ch in new_prefix:
            node = node.children.get(ch)
            if node is None:
                return ExploreResult(
                    prefix=current,
                    error=f"{new_prefix} ({ch}) is not in the dictionary, try again",
                )

        if not node.children:
            logger.debug("Dead end at %s, resetting", new_prefix)
            return ExploreResult(prefix="", reset=True, words=[new_prefix], total=1)

        words = self.words_with_prefix(new_prefix)
        return ExploreResult(
            prefix=new_prefix,
            children=node.sorted_children(),
            words=words[:EXPLORE_LIMIT],
            total=len(words),
        )


def _completions(node: TrieNode) -> list[str]:
    acc = []
    for ch in node.sorted_children():
        child = node.children[ch]
        # A terminal node may still have children ("CAT" -> "CATS").
        if not child.children or child.is_word:
            acc.append(ch)
        acc.extend(ch + w for w in _completions(child))
    return acc


def is_dictionary_word(word: str) -> bool:
    return bool(word) and not any(c in FILTERED_CHARS for c in word)


def build_trie(words: Iterable[str]) -> Trie:
    trie = Trie()
    for line in words:
        word = line.strip()
        if is_dictionary_word(word):
            trie.insert(word)
    return trie


def load_trie(path: str) -> Trie:
    try:
        with open(path, "r", encoding="utf-8") as f:
            trie = build_trie(f)
    except OSError as e:
        raise DictionaryLoadError(f"could not read word list {path}: {e}") from e
    logger.info("Loaded %d words from %s", trie.size(), path)
    return trie

from __future__ import annotations

import logging
from typing import Callable, Iterator

from letterboxed.box import BoxLayout
from letterboxed.ranking import rank_words
from letterboxed.trie import Trie, TrieNode

logger = logging.getLogger("letterboxed")

NO_SIDE = -1
CHAIN_LENGTH = 3
ALPHABET_SIZE = 12


class InvalidLetterError(ValueError):
    """A query letter that is not on any side of the box."""


def valid_word_helper(node: TrieNode, letters: str, box: BoxLayout, forbidden_side: int) -> list[str]:
    """Every box-valid dictionary word that extends ``letters`` below ``node``.

    The next letter may come from any side except ``forbidden_side``, the side
    that supplied the previous letter. Words shorter than three letters are
    never produced.
    """
    acc: list[str] = []
    for side_idx, side in enumerate(box.sides):
        if side_idx == forbidden_side:
            continue
        for ch in side:
            child = node.children.get(ch)
            if child is None:
                continue
            if child.is_word and len(letters) >= 2:
                acc.append(letters + ch)
            acc.extend(valid_word_helper(child, letters + ch, box, side_idx))
    return acc


def valid_words(trie: Trie, box: BoxLayout) -> list[str]:
    return valid_word_helper(trie.root, "", box, NO_SIDE)


def valid_words_starting_with(trie: Trie, box: BoxLayout, prefix: str) -> list[str]:
    prefix = prefix.upper()
    sides = [box.side_of(ch) for ch in prefix]
    if not sides or None in sides:
        raise InvalidLetterError(f"char '{prefix}' was provided, but is not in the valid groupings: {list(box.sides)}")

    node = trie.find(prefix)
    if node is None:
        return []
    return valid_word_helper(node, prefix, box, sides[-1])


def is_game_complete(words: list[str], alphabet_size: int = ALPHABET_SIZE) -> bool:
    letters: set[str] = set()
    for w in words:
        for ch in w:
            letters.add(ch)
            if len(letters) == alphabet_size:
                return True
    return len(letters) == alphabet_size


def _extend_chain(
    chain: list[str],
    remaining: int,
    continuations: Callable[[str], list[str]],
) -> Iterator[list[str]]:
    if remaining == 0:
        if is_game_complete(chain):
            logger.debug("Solution: %s", chain)
            yield list(chain)
        return

    for word in continuations(chain[-1][-1]):
        if word in chain:
            continue
        chain.append(word)
        yield from _extend_chain(chain, remaining - 1, continuations)
        chain.pop()


def iter_solutions(trie: Trie, box: BoxLayout, chain_length: int = CHAIN_LENGTH) -> Iterator[list[str]]:
    """Yield every chain of exactly ``chain_length`` words covering the box.

    Start words are tried in ranked order. Shorter covering chains are not
    solutions: a chain only counts once it holds ``chain_length`` words.
    """
    cache: dict[str, list[str]] = {}

    def continuations(letter: str) -> list[str]:
        if letter not in cache:
            cache[letter] = valid_words_starting_with(trie, box, letter)
        return cache[letter]

    for start in rank_words(valid_words(trie, box)):
        yield from _extend_chain([start], chain_length - 1, continuations)


def number_of_solutions(trie: Trie, box: BoxLayout) -> int:
    return sum(1 for _ in iter_solutions(trie, box))


# Query interface used by the shell, the CLI and the HTTP API.

def count_solutions(trie: Trie, box: BoxLayout) -> int:
    count = number_of_solutions(trie, box)
    logger.debug("Box %s has %d solutions", box, count)
    return count


def words_starting_with_letter(trie: Trie, box: BoxLayout, letter: str) -> list[str]:
    return rank_words(valid_words_starting_with(trie, box, letter))

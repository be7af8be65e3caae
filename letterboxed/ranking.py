from typing import Iterable

DISPLAY_LIMIT = 10


def rank_words(words: Iterable[str]) -> list[str]:
    """Longest first, then alphabetical."""
    return sorted(words, key=lambda w: (-len(w), w))


def top_words(words: Iterable[str], limit: int = DISPLAY_LIMIT) -> list[str]:
    ranked = rank_words(words)
    return ranked[:limit] if limit > 0 else ranked

from __future__ import annotations

from dataclasses import dataclass

NUM_SIDES = 4
SIDE_LENGTH = 3


class BoxLayoutError(ValueError):
    """The letters string does not describe a valid box."""


@dataclass(frozen=True)
class BoxLayout:
    sides: tuple[str, ...]

    @property
    def letters(self) -> frozenset[str]:
        return frozenset("".join(self.sides))

    def side_of(self, letter: str) -> int | None:
        for i, side in enumerate(self.sides):
            if letter in side:
                return i
        return None

    def __str__(self):
        return ",".join(self.sides)


def parse_box(text: str) -> BoxLayout:
    """Parse "ABC,DEF,GHI,JKL" into a BoxLayout, rejecting malformed boxes."""
    if not text or not text.strip():
        raise BoxLayoutError("No letters provided. Use --letters to configure the letterboxed game.")

    groupings = [g.strip() for g in text.upper().split(",")]
    if len(groupings) != NUM_SIDES or any(len(g) != SIDE_LENGTH for g in groupings):
        raise BoxLayoutError(
            f"{len(groupings)} grouping(s) provided: {groupings}. "
            f"{NUM_SIDES} groupings of {SIDE_LENGTH} letters each are required."
        )

    seen: set[str] = set()
    for group in groupings:
        for ch in group:
            if not ch.isalpha():
                raise BoxLayoutError(f"Invalid char '{ch}' found. Only letters are allowed: {groupings}")
            if ch in seen:
                raise BoxLayoutError(
                    f"Duplicate char '{ch}' found. "
                    f"Letters must consist of {NUM_SIDES * SIDE_LENGTH} unique characters: {groupings}"
                )
            seen.add(ch)

    return BoxLayout(tuple(groupings))

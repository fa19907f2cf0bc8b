"""A player's rack as counts per machine letter."""

from __future__ import annotations

from typing import Optional

from magpie.letter_distribution import LetterDistribution


class Rack:
    """Multiset of machine letters."""

    def __init__(self, array_size: int) -> None:
        self.array_size = array_size
        self.array = [0] * array_size
        self.number_of_letters = 0

    @property
    def empty(self) -> bool:
        """Whether the rack holds no tiles."""
        return self.number_of_letters == 0

    def reset(self) -> None:
        """Remove every tile."""
        self.array = [0] * self.array_size
        self.number_of_letters = 0

    def copy(self) -> Rack:
        """Return an independent copy."""
        new_rack = Rack(self.array_size)
        new_rack.copy_from(self)
        return new_rack

    def copy_from(self, other: Rack) -> None:
        """Make this rack hold the same tiles as ``other``."""
        self.array = list(other.array)
        self.array_size = other.array_size
        self.number_of_letters = other.number_of_letters

    def take_letter(self, letter: int) -> None:
        """Remove one tile of ``letter``."""
        self.array[letter] -= 1
        self.number_of_letters -= 1

    def add_letter(self, letter: int) -> None:
        """Add one tile of ``letter``."""
        self.array[letter] += 1
        self.number_of_letters += 1

    def score(self, letter_distribution: LetterDistribution) -> int:
        """Sum of the scores of the tiles on the rack."""
        return sum(
            count * score
            for count, score in zip(self.array, letter_distribution.scores)
        )

    def set_to_string(
        self, text: str, letter_distribution: LetterDistribution
    ) -> None:
        """Replace the contents with the tiles written in ``text``."""
        self.reset()
        for ml in letter_distribution.str_to_machine_letters(text, False):
            self.add_letter(ml)

    def to_string(self, letter_distribution: LetterDistribution) -> str:
        """Write the tiles in machine-letter order."""
        return "".join(
            letter_distribution.to_human_letter(ml) * count
            for ml, count in enumerate(self.array)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rack):
            return NotImplemented
        return racks_are_equal(self, other)

    def __repr__(self) -> str:
        return f"Rack(array_size={self.array_size}, array={self.array})"


def racks_are_equal(rack1: Optional[Rack], rack2: Optional[Rack]) -> bool:
    """Whether two racks (or two missing racks) hold the same tiles."""
    if rack1 is None and rack2 is None:
        return True
    if rack1 is None or rack2 is None:
        return False
    return (
        rack1.array_size == rack2.array_size
        and rack1.empty == rack2.empty
        and rack1.array == rack2.array
    )
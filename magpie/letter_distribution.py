"""Tile sets: letter counts, scores, vowels and letter/machine-letter mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

BLANK_MASK = 0x80
UNBLANK_MASK = 0x7F
BLANK_MACHINE_LETTER = 0
PLAYED_THROUGH_MARKER = 0
ASCII_PLAYED_THROUGH = "."
LETTER_DISTRIBUTION_FILEPATH = "./data/letterdistributions"
LETTER_DISTRIBUTION_FILE_EXTENSION = ".csv"
DEFAULT_LETTER_DISTRIBUTION_NAME = "english"

# Lexicon families (name without its edition number) and their tile sets.
_LEXICON_FAMILY_DISTRIBUTIONS = {
    "CSW": "english",
    "NWL": "english",
    "TWL": "english",
}


class InvalidLetterError(ValueError):
    """Raised when text cannot be read as letters of a distribution."""


def get_blanked_machine_letter(ml: int) -> int:
    """Return the blank (designated) form of a machine letter."""
    return ml | BLANK_MASK


def get_unblanked_machine_letter(ml: int) -> int:
    """Return the plain form of a possibly blanked machine letter."""
    return ml & UNBLANK_MASK


def is_blanked(ml: int) -> bool:
    """Whether the machine letter stands for a designated blank."""
    return (ml & BLANK_MASK) > 0


@dataclass
class LetterDistribution:
    """The tiles of a game: per machine letter its count, score and vowel flag."""

    distribution: list[int] = field(default_factory=list)
    scores: list[int] = field(default_factory=list)
    is_vowel: list[bool] = field(default_factory=list)
    score_order: list[int] = field(default_factory=list)
    max_tile_length: int = 0
    human_letters: dict[int, str] = field(default_factory=dict)

    @property
    def size(self) -> int:
        """Number of distinct machine letters, blank included."""
        return len(self.distribution)

    def to_machine_letter(self, letter: str) -> int:
        """Return the machine letter written as ``letter``."""
        for ml in sorted(self.human_letters):
            if self.human_letters[ml] == letter:
                return ml
        raise InvalidLetterError(f"unknown letter: {letter!r}")

    def to_human_letter(self, ml: int) -> str:
        """Return how a machine letter is written; empty if it has no letter."""
        return self.human_letters.get(ml, "")

    def str_to_machine_letters(
        self, text: str, allow_played_through_marker: bool = False
    ) -> list[int]:
        """Split ``text`` greedily into the longest known letters."""
        mls: list[int] = []
        i = 0
        while i < len(text):
            longest = min(i + self.max_tile_length, len(text))
            for j in range(longest, i, -1):
                candidate = text[i:j]
                try:
                    ml = self.to_machine_letter(candidate)
                except InvalidLetterError:
                    if (
                        j - i == 1
                        and allow_played_through_marker
                        and candidate == ASCII_PLAYED_THROUGH
                    ):
                        ml = PLAYED_THROUGH_MARKER
                    else:
                        continue
                mls.append(ml)
                i = j
                break
            else:
                raise InvalidLetterError(
                    f"no letter matches at position {i} of {text!r}"
                )
        return mls


def parse_letter_distribution(lines: Iterable[str]) -> LetterDistribution:
    """Build a distribution from lines of ``letter,lower,count,score,is_vowel``."""
    ld = LetterDistribution()
    for ml, raw in enumerate(line for line in lines if line.strip()):
        fields = raw.strip().split(",")
        if len(fields) < 5:
            raise ValueError(f"malformed letter distribution line: {raw!r}")
        letter, lower, count, score, vowel = (f.strip() for f in fields[:5])
        ld.distribution.append(int(count))
        ld.scores.append(int(score))
        ld.is_vowel.append(bool(int(vowel)))
        ld.human_letters[ml] = letter
        if ml > 0:
            ld.human_letters[get_blanked_machine_letter(ml)] = lower
        ld.max_tile_length = max(ld.max_tile_length, len(letter))
    ld.score_order = sorted(range(ld.size), key=lambda m: -ld.scores[m])
    return ld


def load_letter_distribution(path: str) -> LetterDistribution:
    """Read a distribution from a CSV file."""
    with open(path, encoding="utf-8") as handle:
        return parse_letter_distribution(handle)


def get_letter_distribution_filepath(
    ld_name: str, directory: str = LETTER_DISTRIBUTION_FILEPATH
) -> str:
    """Return the path of the CSV file for the named distribution."""
    if directory and directory[-1] not in "/\\":
        directory += "/"
    return f"{directory}{ld_name}{LETTER_DISTRIBUTION_FILE_EXTENSION}"


def get_letter_distribution_name_from_lexicon_name(lexicon_name: str) -> str:
    """Return the distribution name used for a lexicon; english by default."""
    family = (lexicon_name or "").strip().upper().rstrip("0123456789")
    return _LEXICON_FAMILY_DISTRIBUTIONS.get(
        family, DEFAULT_LETTER_DISTRIBUTION_NAME
    )
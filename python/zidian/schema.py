"""Entry schema and data structures for zidian.

Core concept:
    - A written form (simplified characters) keys exactly one Word
    - Each Word maps every distinct Reading to the glosses for that reading
    - Several dictionary lines for the same form and reading merge their glosses

Example:
    "一氧化二氮 一氧化二氮 [yi1 yang3 hua4 er4 dan4] /nitrous oxide N2O/laughing gas/"
    → Word("一氧化二氮", {Reading(yi1 yang3 hua4 er4 dan4): {"nitrous oxide N2O", "laughing gas"}})
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

INTERPUNCT = "·"


class InvalidToneError(ValueError):
    """Raised when a tone digit is outside 1-5."""


class Tone(Enum):
    """Pitch contour class. FIFTH is the neutral tone."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5

    @classmethod
    def from_digit(cls, digit: int | str) -> "Tone":
        """Get Tone from its digit, e.g. 3 or "3"."""
        try:
            return cls(int(digit))
        except ValueError as e:
            raise InvalidToneError(f"Expected 1..5, got {digit}") from e

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Syllable:
    """One romanized sound unit and its tone."""

    text: str
    tone: Optional[Tone] = None

    @classmethod
    def parse(cls, token: str) -> "Syllable":
        """Parse a numbered pinyin token, e.g. 'yang3' or 'lu:4'.

        A bare interpunct is a toneless separator. A token without a trailing
        digit keeps all of its text and has no tone.
        """
        if token == INTERPUNCT:
            return cls(text=token, tone=None)

        text, last = token[:-1], token[-1:]
        if last and last in "0123456789":
            tone: Optional[Tone] = Tone.from_digit(last)
        else:
            # No tone digit, e.g. the letters of 卡拉OK: keep every character
            text, tone = token, None

        # MDBG writes ü as u:
        return cls(text=text.replace("u:", "ü"), tone=tone)

    def __str__(self) -> str:
        if self.tone is None:
            return self.text
        return f"{self.text}{self.tone.value}"


@dataclass(frozen=True)
class Reading:
    """A full transcription of a written form, one Syllable per sound."""

    syllables: tuple[Syllable, ...]

    def __post_init__(self):
        if not self.syllables:
            raise ValueError("A reading needs at least one syllable")

    @classmethod
    def parse(cls, transcription: str) -> "Reading":
        """Parse whitespace-separated numbered pinyin."""
        return cls(tuple(Syllable.parse(t) for t in transcription.split()))

    def tones(self) -> tuple[Optional[Tone], ...]:
        """Tone sequence, ignoring text."""
        return tuple(s.tone for s in self.syllables)

    def __len__(self) -> int:
        return len(self.syllables)

    def __iter__(self):
        return iter(self.syllables)

    def __str__(self) -> str:
        return " ".join(str(s) for s in self.syllables)


@dataclass
class Word:
    """A dictionary entry: one written form and all of its readings."""

    simplified: str                                  # Lookup key
    traditional: set[str] = field(default_factory=set)
    readings: dict[Reading, set[str]] = field(default_factory=dict)

    def add_reading(self, reading: Reading, glosses: set[str] | list[str]) -> None:
        """Add a reading, merging glosses if the reading already exists."""
        if reading in self.readings:
            self.readings[reading].update(glosses)
        else:
            self.readings[reading] = set(glosses)

    def merge(self, other: "Word") -> None:
        """Merge another entry for the same written form into this one."""
        if other.simplified != self.simplified:
            raise ValueError(
                f"Cannot merge {other.simplified!r} into {self.simplified!r}"
            )
        self.traditional.update(other.traditional)
        for reading, glosses in other.readings.items():
            self.add_reading(reading, glosses)

    def glosses(self, reading: Reading) -> list[str]:
        """Glosses for one reading, sorted for display."""
        return sorted(self.readings[reading])

    @property
    def length(self) -> int:
        return len(self.simplified)

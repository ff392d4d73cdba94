"""Tone colouring for readings and written forms.

Each tone maps to a CSS class (tone1 .. tone5). A Reading is coloured
syllable by syllable; a written form is coloured character by character
from the tone sequence its readings agree on.
"""

from dataclasses import dataclass
from typing import Optional

from ..schema import Reading, Tone, Word
from .diacritics import add_diacritic

DEFAULT_TONE_COLOURS = ("00e304", "b35815", "f00f0f", "1767fe", "777777")


def colourise(token: str, tone: Optional[Tone]) -> str:
    """Wrap token in the span for its tone class."""
    if tone is None:
        return token
    return f'<span class="tone{tone.value}">{token}</span>'


def render_reading(reading: Reading) -> str:
    """Diacritic pinyin, syllables separated by spaces."""
    return " ".join(add_diacritic(s.text, s.tone) for s in reading)


def colourise_reading(reading: Reading) -> str:
    """Diacritic pinyin with each syllable wrapped in its tone class."""
    return "".join(colourise(add_diacritic(s.text, s.tone), s.tone) for s in reading)


def tone_consensus(word: Word) -> list[tuple[str, Optional[Tone]]]:
    """Pick one tone per character of the written form.

    When every reading has the same tone sequence that sequence is used,
    even if the readings differ in text. When they disagree every character
    is treated as neutral.

    Args:
        word: Entry with one or more readings.

    Returns:
        (character, tone) pairs in written order.
    """
    sequences = {reading.tones() for reading in word.readings}

    if len(sequences) == 1:
        (tones,) = sequences
        return list(zip(word.simplified, tones))

    return [(char, Tone.FIFTH) for char in word.simplified]


def colour_hanzi(word: Word) -> str:
    """Written form with each character wrapped in its consensus tone class."""
    return "".join(colourise(char, tone) for char, tone in tone_consensus(word))


@dataclass(frozen=True)
class ToneColours:
    """RGB codes for tones 1-5, or None when colouring is off."""

    codes: Optional[tuple[str, str, str, str, str]] = DEFAULT_TONE_COLOURS

    @property
    def enabled(self) -> bool:
        return self.codes is not None

    @classmethod
    def off(cls) -> "ToneColours":
        return cls(codes=None)

    @classmethod
    def parse(cls, value: str) -> "ToneColours":
        """Parse "off", "none" or five semicolon-separated RGB codes.

        Example:
            ToneColours.parse("00e304;b35815;f00f0f;1767fe;777777")
        """
        lowered = value.lower()
        if lowered in ("off", "none"):
            return cls.off()

        codes = []
        for code in lowered.split(";"):
            if len(code) != 6 or not code.isalnum():
                raise ValueError(f"Expected 6-char alphanumeric code, got {code}")
            codes.append(code)

        if len(codes) != 5:
            raise ValueError(
                f"Should specify five RGB codes, specified '{value}' instead"
            )
        return cls(codes=tuple(codes))

    def css(self) -> str:
        """CSS rules for the tone1 .. tone5 classes."""
        if self.codes is None:
            colours = ["black"] * 5
        else:
            colours = [f"#{code}" for code in self.codes]
        return "\n".join(
            f".tone{i} {{color: {colour};}}"
            for i, colour in enumerate(colours, start=1)
        )

    def __str__(self) -> str:
        return "off" if self.codes is None else ";".join(self.codes)

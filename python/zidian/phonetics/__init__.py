"""Phonetics module for zidian.

Renders numbered pinyin with tone marks and colours readings by tone.

Usage:
    from zidian.phonetics import add_diacritic, colour_hanzi, colourise_reading

    add_diacritic("liang", Tone.SECOND)     # "liáng"
    colourise_reading(reading)              # '<span class="tone2">liáng</span>...'
    colour_hanzi(word)                      # consensus colouring of the characters
"""

from .diacritics import (
    DIACRITIC_TABLE,
    VOWELS,
    MissingVowelError,
    add_diacritic,
    mark_vowel,
    mark_vowel_group,
)
from .tones import (
    DEFAULT_TONE_COLOURS,
    ToneColours,
    colour_hanzi,
    colourise,
    colourise_reading,
    render_reading,
    tone_consensus,
)

__all__ = [
    "DIACRITIC_TABLE",
    "VOWELS",
    "MissingVowelError",
    "add_diacritic",
    "mark_vowel",
    "mark_vowel_group",
    "DEFAULT_TONE_COLOURS",
    "ToneColours",
    "colour_hanzi",
    "colourise",
    "colourise_reading",
    "render_reading",
    "tone_consensus",
]

"""Tone mark placement for numbered pinyin.

Turns a syllable such as ("liang", Tone.SECOND) into "liáng".
Placement follows the standard pinyin rules:
    1. A lone vowel takes the mark.
    2. Otherwise a or e takes the mark.
    3. Otherwise the o of ou takes the mark.
    4. Otherwise the second vowel takes the mark.
"""

from typing import Optional

from ..schema import Tone

VOWELS = "aeiouüAEIOUÜ"

# One row per vowel, indexed by tone - 1. The fifth column is the unmarked letter.
DIACRITIC_TABLE: dict[str, tuple[str, str, str, str, str]] = {
    "a": ("ā", "á", "ǎ", "à", "a"),
    "e": ("ē", "é", "ě", "è", "e"),
    "i": ("ī", "í", "ǐ", "ì", "i"),
    "o": ("ō", "ó", "ǒ", "ò", "o"),
    "u": ("ū", "ú", "ǔ", "ù", "u"),
    "ü": ("ǖ", "ǘ", "ǚ", "ǜ", "ü"),
}


class MissingVowelError(ValueError):
    """Raised when a toned syllable has no vowel to mark."""


def mark_vowel(char: str, tone: Tone) -> str:
    """Replace a single vowel with its tone-marked form.

    Args:
        char: Single vowel, either case.
        tone: Tone to mark.

    Returns:
        Marked vowel in the same case as the input.
    """
    row = DIACRITIC_TABLE.get(char.lower())
    if row is None:
        raise ValueError(f"Invalid pinyin vowel: {char}")

    marked = row[tone.value - 1]
    return marked.upper() if char.isupper() else marked


def mark_vowel_group(vowels: str, tone: Tone) -> str:
    """Mark the vowel that carries the tone within a vowel group.

    Args:
        vowels: Span from the first to the last vowel of a syllable.
        tone: Tone to mark.

    Returns:
        The span with exactly one vowel position marked.
    """
    if len(vowels) == 1:
        return mark_vowel(vowels, tone)

    lowered = vowels.lower()
    if "a" in lowered or "e" in lowered:
        targets = {i for i, c in enumerate(lowered) if c in "ae"}
    elif "ou" in lowered:
        targets = {i for i, c in enumerate(lowered) if c == "o"}
    else:
        targets = {1}

    return "".join(
        mark_vowel(c, tone) if i in targets else c
        for i, c in enumerate(vowels)
    )


def add_diacritic(text: str, tone: Optional[Tone]) -> str:
    """Render a numbered pinyin syllable with its tone mark.

    Args:
        text: Syllable without the tone digit, e.g. "shuang".
        tone: Tone of the syllable. None and the neutral tone leave text as is.

    Returns:
        Marked syllable, e.g. "shuàng".
    """
    if tone is None or tone is Tone.FIFTH:
        return text

    # Toned pinyin is always consonants, then vowels, then consonants
    positions = [i for i, c in enumerate(text) if c in VOWELS]
    if not positions:
        raise MissingVowelError(f"Pinyin always contains a vowel, got {text!r}")

    first, last = positions[0], positions[-1]
    return (
        text[:first]
        + mark_vowel_group(text[first:last + 1], tone)
        + text[last + 1:]
    )

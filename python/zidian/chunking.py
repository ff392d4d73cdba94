"""Decomposition of a written form into contiguous pieces.

For "abc" the chunkings are, in order:
    ["ab", "c"]
    ["a", "bc"]
    ["a", "b", "c"]

The whole form ("abc") is not a chunking. The first piece is tried longest
first, so longer recognizable sub-words come before single characters.

A form of n characters has 2**(n - 1) - 1 chunkings. Both generators are
lazy so a lookup can stop at the first chunking that resolves.
"""

from itertools import islice
from typing import Iterator


def iter_subdivisions(word: str) -> Iterator[list[str]]:
    """Yield every split of word into contiguous non-empty pieces.

    The first piece goes from longest to shortest, and the rest of the word
    is subdivided the same way. The first result is always [word].
    """
    if not word:
        yield []
        return

    for size in range(len(word), 0, -1):
        head = word[:size]
        for tail in iter_subdivisions(word[size:]):
            yield [head, *tail]


def generate_chunkings(word: str) -> Iterator[list[str]]:
    """Yield every chunking of word except the word as a single piece."""
    return islice(iter_subdivisions(word), 1, None)

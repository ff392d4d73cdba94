"""Pluggable word segmentation backends.

Segmenters propose word boundaries in running Chinese text. The dictionary
only resolves the tokens they produce; it never chooses boundaries itself.

Backends:
    - jieba: Dictionary segmenter, HMM optional (requires jieba)
    - character: One token per character, no dependencies

Usage:
    from zidian.segment import get_segmenter

    segmenter = get_segmenter("jieba")
    segmenter.add_words(cedict.keys())
    tokens = segmenter.cut("我们有共同话题")

    # Register custom backend
    from zidian.segment import register_segmenter
    register_segmenter("custom", MySegmenterClass)
"""

from abc import ABC, abstractmethod
from typing import Iterable
import logging

import hanzidentifier

LOGGER = logging.getLogger(__name__)

# Registry of available segmenters
_SEGMENTERS: dict[str, type["Segmenter"]] = {}

# CJK Unified Ideographs and Extension A
_HAN_RANGES = (
    ("一", "鿿"),
    ("㐀", "䶿"),
)


def is_han(token: str) -> bool:
    """True if token is non-empty and every character is a CJK ideograph."""
    return bool(token) and all(
        any(low <= c <= high for low, high in _HAN_RANGES) for c in token
    )


def is_simplified_chinese(token: str) -> bool:
    """True if token is Han characters that are all valid simplified forms.

    Characters shared by both scripts count as simplified.
    """
    return is_han(token) and hanzidentifier.is_simplified(token)


class Segmenter(ABC):
    """Base class for segmentation backends."""

    name: str = "base"

    @abstractmethod
    def cut(self, text: str) -> list[str]:
        """Split text into tokens.

        Args:
            text: Running text.

        Returns:
            Tokens in text order, including punctuation and whitespace runs.
        """
        pass

    def add_word(self, word: str) -> None:
        """Teach the segmenter a known word. Backends may ignore this."""

    def add_words(self, words: Iterable[str]) -> int:
        """Teach the segmenter several words.

        Returns:
            Number of words offered.
        """
        count = 0
        for word in words:
            self.add_word(word)
            count += 1
        return count

    def unique_words(self, text: str) -> list[str]:
        """Simplified Chinese tokens of text, without duplicates, in order.

        Tokens in traditional or mixed script are dropped, since the
        dictionary is keyed by simplified forms.
        """
        return list(dict.fromkeys(t for t in self.cut(text) if is_simplified_chinese(t)))


# =============================================================================
# Jieba Backend
# =============================================================================

class JiebaSegmenter(Segmenter):
    """Jieba-based segmenter.

    Uses a private jieba.Tokenizer so that added words do not leak into the
    global jieba instance.
    Install: pip install jieba
    """

    name = "jieba"

    def __init__(self, hmm: bool = False):
        # Off by default: only dictionary words and single characters come out
        self.hmm = hmm
        self._tokenizer = None

    def _get_instance(self):
        if self._tokenizer is None:
            try:
                import jieba
            except ImportError as e:
                raise ImportError(
                    "jieba required. Install: pip install jieba"
                ) from e

            jieba.setLogLevel(logging.WARNING)
            self._tokenizer = jieba.Tokenizer()
            self._tokenizer.initialize()

        return self._tokenizer

    def add_word(self, word: str) -> None:
        tokenizer = self._get_instance()
        # Words jieba already knows keep their own frequency
        if tokenizer.FREQ.get(word):
            return
        tokenizer.add_word(word)

    def add_words(self, words: Iterable[str]) -> int:
        count = super().add_words(words)
        LOGGER.debug("Offered %d words to jieba", count)
        return count

    def cut(self, text: str) -> list[str]:
        tokenizer = self._get_instance()
        return list(tokenizer.cut(text, cut_all=False, HMM=self.hmm))


# =============================================================================
# Character Backend
# =============================================================================

class CharacterSegmenter(Segmenter):
    """Splits text into single characters.

    Every token is one character, so every Han token is a direct
    dictionary hit for a complete dictionary.
    """

    name = "character"

    def cut(self, text: str) -> list[str]:
        return list(text)


# =============================================================================
# Registry Functions
# =============================================================================

def _init_registry():
    """Initialize the segmenter registry with built-in backends."""
    global _SEGMENTERS
    _SEGMENTERS = {
        "jieba": JiebaSegmenter,
        "character": CharacterSegmenter,
    }


_init_registry()


def get_segmenter(name: str) -> Segmenter:
    """Get a new segmenter instance by name.

    Instances are not cached, since add_word() changes their state.

    Args:
        name: Segmenter name.

    Returns:
        Segmenter instance.
    """
    if name not in _SEGMENTERS:
        raise ValueError(
            f"Unknown segmenter: {name}. "
            f"Available: {list(_SEGMENTERS.keys())}"
        )
    return _SEGMENTERS[name]()


def register_segmenter(name: str, cls: type[Segmenter]) -> None:
    """Register a custom segmenter.

    Args:
        name: Name to register under.
        cls: Segmenter class.
    """
    _SEGMENTERS[name] = cls


def list_segmenters() -> list[str]:
    """List available segmenter names."""
    return list(_SEGMENTERS.keys())

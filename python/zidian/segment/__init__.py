"""Segmentation module for zidian.

Provides pluggable word segmentation backends for running text.

Usage:
    from zidian.segment import get_segmenter

    # Bias a segmenter towards dictionary words
    segmenter = get_segmenter("jieba")
    segmenter.add_words(cedict.keys())
    words = segmenter.unique_words(text)    # simplified-script tokens only
"""

from .segmenters import (
    Segmenter,
    CharacterSegmenter,
    JiebaSegmenter,
    is_han,
    is_simplified_chinese,
    get_segmenter,
    register_segmenter,
    list_segmenters,
)

__all__ = [
    "Segmenter",
    "CharacterSegmenter",
    "JiebaSegmenter",
    "is_han",
    "is_simplified_chinese",
    "get_segmenter",
    "register_segmenter",
    "list_segmenters",
]

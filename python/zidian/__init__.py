"""zidian - Chinese dictionary lookup and pinyin rendering.

Resolves words from running Chinese text against a CC-CEDICT dictionary and
renders their readings for flashcards.

Core concepts:
    - Each simplified written form keys one Word with one or more Readings
    - A form missing from the dictionary resolves to its coarsest chunking
      whose chunks are all in the dictionary
    - Numbered pinyin renders with tone marks and tone colour classes

Example:
    "共同话题" (not in the dictionary)
    → ["共同", "话题"]

Usage:
    from zidian.dictionary import CEDict
    from zidian.phonetics import colour_hanzi, colourise_reading
    from zidian.segment import get_segmenter

    cedict = CEDict.from_file("sources/cedict_ts.u8")

    segmenter = get_segmenter("jieba")
    segmenter.add_words(cedict.keys())

    for token in segmenter.unique_words("我们有共同话题"):
        for word in cedict.resolve(token):
            print(colour_hanzi(word))
            for reading in word.readings:
                print(colourise_reading(reading), word.glosses(reading))
"""

__version__ = "0.1.0"

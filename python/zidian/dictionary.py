"""In-memory dictionary store and word resolution.

A CEDict is built once from one or more ingest results and is read-only
afterwards, so a single instance can be shared by any number of lookups,
including from several threads.

Usage:
    from zidian.dictionary import CEDict

    cedict = CEDict.from_file("sources/cedict_ts.u8")
    cedict.resolve("共同话题")   # [Word("共同"), Word("话题")] if there is no direct entry
"""

from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional
import logging

from .chunking import generate_chunkings
from .ingest import cedict
from .ingest.base import IngestResult
from .schema import Word

LOGGER = logging.getLogger(__name__)


class UnresolvedWordError(LookupError):
    """Raised when no chunking of a word is fully covered by the dictionary."""

    def __init__(self, word: str):
        super().__init__(f"The dictionary didn't contain one of the chars of {word!r}")
        self.word = word


class CEDict:
    """Read-only mapping of simplified written form to Word."""

    def __init__(self, words: Mapping[str, Word], name: str = "cedict"):
        self.name = name
        self._words: Mapping[str, Word] = MappingProxyType(dict(words))

    @classmethod
    def from_results(cls, *results: IngestResult, name: Optional[str] = None) -> "CEDict":
        """Merge ingest results into a store. Later results extend earlier ones."""
        words: dict[str, Word] = {}
        for result in results:
            for word in result.words:
                if word.simplified in words:
                    words[word.simplified].merge(word)
                else:
                    words[word.simplified] = word

        if name is None:
            name = "+".join(r.dict_name for r in results) or "empty"
        return cls(words, name=name)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CEDict":
        """Build a store from CC-CEDICT lines."""
        ingestor = cedict.CedictIngestor(cache_dir=".")
        return cls.from_results(ingestor.ingest_lines(lines))

    @classmethod
    def from_text(cls, text: str) -> "CEDict":
        """Build a store from CC-CEDICT text."""
        return cls.from_results(cedict.ingest_text(text))

    @classmethod
    def from_file(cls, filepath: Path | str) -> "CEDict":
        """Build a store from a CC-CEDICT file."""
        return cls.from_results(cedict.ingest(filepath))

    @classmethod
    def download(cls, cache_dir: Path | str, force: bool = False) -> "CEDict":
        """Build a store from the MDBG release, downloading it if not cached."""
        return cls.from_results(cedict.download_and_ingest(cache_dir, force=force))

    @property
    def words(self) -> Mapping[str, Word]:
        return self._words

    def lookup(self, word: str) -> Optional[Word]:
        """Direct lookup of a written form."""
        return self._words.get(word)

    def resolve(self, word: str) -> list[Word]:
        """Get the entries covering a written form.

        If the form is not in the dictionary, break it into chunks and return
        the entries of the first chunking whose every chunk is in the
        dictionary. Chunks are not broken down further.

        Args:
            word: Written form, e.g. "共同话题".

        Returns:
            One Word for a direct hit, otherwise one Word per chunk.

        Raises:
            UnresolvedWordError: If no chunking is fully covered.
        """
        direct = self._words.get(word)
        if direct is not None:
            return [direct]

        for chunking in generate_chunkings(word):
            entries = [self._words.get(chunk) for chunk in chunking]
            if all(entry is not None for entry in entries):
                LOGGER.debug("Resolved %s as %s", word, chunking)
                return entries

        raise UnresolvedWordError(word)

    get = resolve

    def keys(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"CEDict({self.name}: {len(self._words)} words)"

"""Dictionary builder.

Collects ingest results from one or more sources and builds the read-only
CEDict store, with statistics about what went in:
- Written forms by character length
- Readings and polyphonic forms
- Lines merged per source
"""

from dataclasses import dataclass, field
from typing import Optional

from ..dictionary import CEDict
from ..ingest.base import IngestResult


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    total_words: int = 0
    total_readings: int = 0
    polyphonic: int = 0                     # Forms with more than one reading
    by_length: dict[int, int] = field(default_factory=dict)
    by_source: dict[str, int] = field(default_factory=dict)
    merged_lines: int = 0


class DictionaryBuilder:
    """Builds a CEDict from ingested words."""

    def __init__(self, name: Optional[str] = None):
        """Initialize builder.

        Args:
            name: Name for the built dictionary (default: joined source names).
        """
        self.name = name
        self._results: list[IngestResult] = []
        self.stats: Optional[BuildStats] = None

    def add_words(self, result: IngestResult) -> None:
        """Add words from an IngestResult.

        Args:
            result: IngestResult from an ingestor. Later results extend
                earlier ones.
        """
        self._results.append(result)

    def build(self) -> CEDict:
        """Build the store.

        Returns:
            CEDict with every source merged. Statistics are kept in self.stats.
        """
        stats = BuildStats()
        for result in self._results:
            stats.by_source[result.dict_name] = result.total_valid
            stats.merged_lines += result.total_duplicates

        store = CEDict.from_results(*self._results, name=self.name)

        for word in store.words.values():
            stats.total_words += 1
            stats.total_readings += len(word.readings)
            if len(word.readings) > 1:
                stats.polyphonic += 1
            stats.by_length[word.length] = stats.by_length.get(word.length, 0) + 1

        self.stats = stats
        return store

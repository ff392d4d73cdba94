"""Dictionary ingestion module.

Provides pluggable ingestors for dictionary formats:
- CC-CEDICT text files (local or downloaded from MDBG)
- Tier lists (word -> level, e.g. HSK)

Usage:
    from zidian.ingest import cedict, tiers

    result = cedict.ingest("path/to/cedict_ts.u8")
    result = cedict.download_and_ingest(cache_dir="./sources")
    hsk = tiers.load("path/to/hsk.txt")
"""

from .base import DictionaryFormatError, DownloadableIngestor, Ingestor, IngestResult
from . import cedict
from . import tiers

__all__ = [
    "DictionaryFormatError",
    "DownloadableIngestor",
    "Ingestor",
    "IngestResult",
    "cedict",
    "tiers",
]

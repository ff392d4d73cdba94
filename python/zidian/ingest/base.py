"""Base ingestor interface for dictionary sources.

All ingestors inherit from Ingestor and implement the parse_lines() method.
This provides a consistent API for loading entries from any line format.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional
import logging
import urllib.request
import zipfile

from ..schema import Word

LOGGER = logging.getLogger(__name__)


class DictionaryFormatError(ValueError):
    """Raised when a dictionary line cannot be parsed."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None):
        location = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{location}{message}: {line!r}")
        self.line = line
        self.line_number = line_number


@dataclass
class IngestResult:
    """Result of ingesting a dictionary source."""

    words: list[Word]
    source_path: str
    dict_name: str
    total_raw: int = 0          # Entry lines in source
    total_valid: int = 0        # Unique written forms
    total_duplicates: int = 0   # Lines merged into an existing written form

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} forms, "
            f"{self.total_duplicates} merged)"
        )


class Ingestor(ABC):
    """Base class for dictionary ingestors.

    Subclasses must implement:
        - parse_lines(lines) -> Iterator of (Word, line_number) tuples

    The ingest() method handles merging entries for the same written form.
    """

    def __init__(self, comment_char: str = "#"):
        """Initialize ingestor.

        Args:
            comment_char: Lines starting with this are skipped.
        """
        self.comment_char = comment_char

    @abstractmethod
    def parse_lines(self, lines: Iterable[str]) -> Iterator[tuple[Word, int]]:
        """Parse source lines and yield (word, line_number) tuples.

        Each yielded Word holds the single reading of its line.

        Args:
            lines: Source lines, with or without line endings.

        Yields:
            Tuples of (word, line_number).
        """
        pass

    def parse(self, filepath: Path) -> Iterator[tuple[Word, int]]:
        """Parse a source file.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (word, line_number).
        """
        with open(filepath, "r", encoding="utf-8") as f:
            yield from self.parse_lines(f)

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def ingest_lines(
        self,
        lines: Iterable[str],
        source_path: str = "<memory>",
        dict_name: str = "memory",
    ) -> IngestResult:
        """Ingest dictionary entries from in-memory lines.

        Args:
            lines: Source lines.
            source_path: Where the lines came from, for reporting.
            dict_name: Name for the resulting dictionary.

        Returns:
            IngestResult with merged words and statistics.
        """
        return self._collect(self.parse_lines(lines), source_path, dict_name)

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest dictionary from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with merged words and statistics.
        """
        filepath = Path(filepath)
        return self._collect(
            self.parse(filepath),
            str(filepath.resolve()),
            self.get_dict_name(filepath),
        )

    def _collect(
        self,
        parsed: Iterable[tuple[Word, int]],
        source_path: str,
        dict_name: str,
    ) -> IngestResult:
        words: dict[str, Word] = {}
        total_raw = 0
        duplicates = 0

        for word, _line_num in parsed:
            total_raw += 1

            if word.simplified in words:
                words[word.simplified].merge(word)
                duplicates += 1
            else:
                words[word.simplified] = word

        LOGGER.info(
            "Ingested %s: %d lines, %d written forms", dict_name, total_raw, len(words)
        )
        return IngestResult(
            words=list(words.values()),
            source_path=source_path,
            dict_name=dict_name,
            total_raw=total_raw,
            total_valid=len(words),
            total_duplicates=duplicates,
        )


class DownloadableIngestor(Ingestor):
    """Ingestor that can download and unpack its source file."""

    download_url: str = ""
    archive_member: Optional[str] = None    # File to extract from a zip download

    def __init__(self, cache_dir: Path | str, comment_char: str = "#"):
        super().__init__(comment_char)
        self.cache_dir = Path(cache_dir)

    def get_download_path(self) -> Path:
        """Get path where the downloaded file should be cached."""
        if not self.download_url:
            raise ValueError(f"No download URL for {type(self).__name__}")
        filename = self.download_url.split("/")[-1]
        return self.cache_dir / filename

    def get_cached_path(self) -> Path:
        """Get path of the source file that gets ingested."""
        if self.archive_member:
            return self.cache_dir / self.archive_member
        return self.get_download_path()

    def download(self, force: bool = False) -> Path:
        """Download source file if not cached.

        Args:
            force: Force re-download even if cached.

        Returns:
            Path to the cached source file.
        """
        download_path = self.get_download_path()
        cached_path = self.get_cached_path()

        if cached_path.exists() and not force:
            LOGGER.info("Using cached: %s", cached_path)
            return cached_path

        self.cache_dir.mkdir(parents=True, exist_ok=True)

        LOGGER.info("Downloading from: %s", self.download_url)
        urllib.request.urlretrieve(self.download_url, download_path)
        LOGGER.info("Saved to: %s", download_path)

        if self.archive_member:
            self.extract(download_path)

        return cached_path

    def extract(self, archive_path: Path) -> Path:
        """Extract the source file from a zip archive into the cache dir."""
        with zipfile.ZipFile(archive_path, "r") as z:
            names = z.namelist()
            if self.archive_member not in names:
                raise ValueError(
                    f"Could not find {self.archive_member} inside {archive_path.name}. "
                    f"Files: {names[:20]}"
                )
            z.extract(self.archive_member, self.cache_dir)
        return self.cache_dir / self.archive_member

    def download_and_ingest(self, force: bool = False) -> IngestResult:
        """Download and ingest in one step."""
        filepath = self.download(force=force)
        return self.ingest(filepath)

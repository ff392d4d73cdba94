"""CC-CEDICT dictionary ingestor.

Parses the CC-CEDICT text format distributed by MDBG.

Format:
    # comment lines start with a hash
    一氧化氮 一氧化氮 [yi1 yang3 hua4 dan4] /nitric oxide/
    <traditional> <simplified> [<numbered pinyin>] /<gloss>/<gloss>/

Entries are keyed by their simplified form. Downloads the current release
from MDBG (CC BY-SA 4.0).
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..schema import Reading, Word
from .base import DictionaryFormatError, DownloadableIngestor, IngestResult

CEDICT_URL = "https://www.mdbg.net/chinese/export/cedict/cedict_1_0_ts_utf-8_mdbg.zip"
CEDICT_TXT_NAME = "cedict_ts.u8"


def parse_line(line: str, line_number: Optional[int] = None) -> Word:
    """Parse a single dictionary line into a Word with one reading.

    Args:
        line: e.g. '一氧化氮 一氧化氮 [yi1 yang3 hua4 dan4] /nitric oxide/'.
        line_number: Position in the source, for error messages.

    Returns:
        Word keyed by the simplified form.

    Raises:
        DictionaryFormatError: If the bracket or the simplified form is missing.
        InvalidToneError: If a tone digit is outside 1-5.
    """
    line = line.rstrip("\r\n")

    # Forms and pinyin come before the first "/", glosses after it
    head, *segments = line.split("/")
    glosses = [g for g in segments if g]

    if "[" not in head:
        raise DictionaryFormatError("Missing '['", line, line_number)
    forms, transcription = head.split("[", 1)

    tokens = forms.split()
    if len(tokens) < 2:
        raise DictionaryFormatError("Missing simplified form", line, line_number)
    traditional, simplified = tokens[0], tokens[1]

    transcription = transcription.split("]", 1)[0]
    if not transcription.split():
        raise DictionaryFormatError("Empty transcription", line, line_number)

    word = Word(simplified=simplified, traditional={traditional})
    word.add_reading(Reading.parse(transcription), glosses)
    return word


class CedictIngestor(DownloadableIngestor):
    """Ingestor for CC-CEDICT text files."""

    download_url = CEDICT_URL
    archive_member = CEDICT_TXT_NAME

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name."""
        return "cedict"

    def parse_lines(self, lines: Iterable[str]) -> Iterator[tuple[Word, int]]:
        """Parse CC-CEDICT lines.

        Args:
            lines: Source lines.

        Yields:
            Tuples of (word, line_number).
        """
        for line_num, line in enumerate(lines, start=1):
            if not line.strip() or line.startswith(self.comment_char):
                continue
            yield parse_line(line, line_num), line_num


def ingest(filepath: Path | str) -> IngestResult:
    """Convenience function to ingest a CC-CEDICT file.

    Args:
        filepath: Path to the dictionary text file.

    Returns:
        IngestResult with words.
    """
    ingestor = CedictIngestor(cache_dir=Path(filepath).parent)
    return ingestor.ingest(filepath)


def ingest_text(text: str) -> IngestResult:
    """Ingest CC-CEDICT entries from a string."""
    ingestor = CedictIngestor(cache_dir=".")
    return ingestor.ingest_lines(text.splitlines())


def download_and_ingest(cache_dir: Path | str, force: bool = False) -> IngestResult:
    """Download and ingest the MDBG CC-CEDICT release.

    Args:
        cache_dir: Directory to cache downloaded files.
        force: Force re-download.

    Returns:
        IngestResult with words.
    """
    ingestor = CedictIngestor(cache_dir=cache_dir)
    return ingestor.download_and_ingest(force=force)

"""Tier list ingestor.

Simple format: one written form and its tier per line.
Supports comments with # and empty lines.

    # HSK 2.0
    爱 1
    爱好 2

Use for:
- HSK level lists
- Frequency bands
- Any "word -> integer level" classification
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional


@dataclass
class TierList:
    """Maps written forms to integer tiers. Unlisted forms are tier 0."""

    name: str = "tiers"
    tiers: dict[str, int] = field(default_factory=dict)

    def add(self, written_form: str, tier: int) -> None:
        """Add a form. A form listed twice keeps its lowest tier."""
        existing = self.tiers.get(written_form)
        if existing is None or tier < existing:
            self.tiers[written_form] = tier

    def tier_of(self, written_form: str) -> int:
        """Tier of a written form, or 0 if unclassified."""
        return self.tiers.get(written_form, 0)

    def is_known_below(self, written_form: str, threshold: int) -> bool:
        """True if the form is classified at or below threshold."""
        tier = self.tier_of(written_form)
        return tier != 0 and tier <= threshold

    def __len__(self) -> int:
        return len(self.tiers)

    def __contains__(self, written_form: str) -> bool:
        return written_form in self.tiers


def parse_lines(
    lines: Iterable[str], comment_char: str = "#"
) -> Iterator[tuple[str, int, int]]:
    """Parse tier list lines.

    Args:
        lines: Source lines.
        comment_char: Character that starts a comment.

    Yields:
        Tuples of (written_form, tier, line_number).
    """
    for line_num, line in enumerate(lines, start=1):
        line = line.strip()

        # Skip empty lines and comments
        if not line or line.startswith(comment_char):
            continue

        # Handle inline comments: "爱 1 # love"
        if comment_char in line:
            line = line.split(comment_char)[0].strip()

        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"line {line_num}: expected '<word> <tier>', got {line!r}")

        word, tier = parts
        if not (tier.isascii() and tier.isdigit()):
            raise ValueError(f"line {line_num}: tier must be an integer, got {tier!r}")

        yield word, int(tier), line_num


def load_lines(lines: Iterable[str], name: str = "tiers", comment_char: str = "#") -> TierList:
    """Build a TierList from in-memory lines."""
    tier_list = TierList(name=name)
    for word, tier, _line_num in parse_lines(lines, comment_char):
        tier_list.add(word, tier)
    return tier_list


def load(filepath: Path | str, comment_char: str = "#") -> TierList:
    """Convenience function to load a tier list file.

    Args:
        filepath: Path to text file.
        comment_char: Character that starts a comment.

    Returns:
        TierList named after the file.
    """
    filepath = Path(filepath)
    with open(filepath, "r", encoding="utf-8") as f:
        return load_lines(f, name=filepath.stem, comment_char=comment_char)


def load_optional(filepath: Optional[Path | str]) -> TierList:
    """Load a tier list, or return an empty one when no path is given."""
    if filepath is None:
        return TierList(name="empty")
    return load(filepath)

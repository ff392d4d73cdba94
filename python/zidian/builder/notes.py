"""Flashcard note builder.

Turns resolved dictionary entries into Anki notes and writes them as an
.apkg package. Every note has five fields:

    AllDefinitions              glosses, one block per reading
    AllDefinitionsWithPinyin    coloured pinyin and glosses per reading
    Hanzi                       the simplified written form
    ColourHanzi                 the written form coloured by consensus tone
    Example                     empty, for the learner to fill in

Each card side is one template of the note model.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional
import zlib

import genanki

from ..ingest.tiers import TierList
from ..phonetics.tones import ToneColours, colour_hanzi, colourise_reading
from ..schema import Word

MODEL_ID = 1607392319
DECK_ID_BASE = 2059400000

GLOSS_SEPARATOR = " · "

CARD_CSS = """.card {
    font-family: arial;
    font-size: 20px;
    text-align: center;
    color: black;
    background-color: white;
}
.card { word-wrap: break-word; }
.win .chinese { font-family: "MS Mincho", "ＭＳ 明朝"; }
.linux .chinese { font-family: "Kochi Mincho", "東風明朝"; }
.mobile .chinese { font-family: "PingFang SC"; }
.chinese { font-size: 48px;}
.reading { font-size: 16px;}"""

FIELD_NAMES = ["AllDefinitions", "AllDefinitionsWithPinyin", "Hanzi", "ColourHanzi", "Example"]

# Both sides share the answer
BACK_TEMPLATE = """<div class=chinese>
    <a href="plecoapi://x-callback-url/s?q={{Hanzi}}" style="text-decoration:none">
        {{ColourHanzi}}
    </a>
</div>
<div>{{AllDefinitionsWithPinyin}}</div>
<div class=chinese>{{Example}}</div>"""


class Side(Enum):
    """Which direction a card tests."""

    CE_TO_EN = "ce-to-en"
    EN_TO_CE = "en-to-ce"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["Side"]:
        """Parse a side name. None or "both" means both sides."""
        if value is None or value.lower() == "both":
            return None
        try:
            return cls(value.lower())
        except ValueError as e:
            raise ValueError(
                f"Unknown side: {value}. Available: {[s.value for s in cls]}"
            ) from e


FRONT_TEMPLATES: dict[Side, str] = {
    Side.CE_TO_EN: "<div class=chinese>{{Hanzi}}</div>",
    Side.EN_TO_CE: "<div>{{AllDefinitions}}</div>",
}


def all_definitions(word: Word) -> str:
    """One div of glosses per reading."""
    return "".join(
        f"<div>{GLOSS_SEPARATOR.join(word.glosses(reading))}</div>"
        for reading in word.readings
    )


def all_definitions_with_pinyin(word: Word) -> str:
    """Coloured pinyin followed by its glosses, per reading."""
    return "".join(
        f"<div class=reading>{colourise_reading(reading)}</div>"
        f"<div>{GLOSS_SEPARATOR.join(word.glosses(reading))}</div>"
        for reading in word.readings
    )


def note_fields(word: Word) -> dict[str, str]:
    """Render every field of a note for word."""
    return {
        "AllDefinitions": all_definitions(word),
        "AllDefinitionsWithPinyin": all_definitions_with_pinyin(word),
        "Hanzi": word.simplified,
        "ColourHanzi": colour_hanzi(word),
        "Example": "",
    }


@dataclass
class DeckConfig:
    """Configuration for a deck.

    Examples:
        # Both sides, default colours
        DeckConfig(name="chapter1")

        # Chinese to English only, no colours, skip HSK 1-3
        DeckConfig(
            name="chapter1",
            tone_colours=ToneColours.off(),
            side=Side.CE_TO_EN,
            tier_filter=3,
        )
    """

    name: str
    tone_colours: ToneColours = field(default_factory=ToneColours)
    side: Optional[Side] = None             # None = both sides
    tier_filter: Optional[int] = None       # Skip words classified at or below this tier

    def sides(self) -> list[Side]:
        """Sides to generate cards for."""
        if self.side is None:
            return [Side.CE_TO_EN, Side.EN_TO_CE]
        return [self.side]

    def css(self) -> str:
        return CARD_CSS + "\n" + self.tone_colours.css()

    @property
    def deck_id(self) -> int:
        """Stable deck id, so re-imports update the same deck."""
        return DECK_ID_BASE + zlib.crc32(self.name.encode("utf-8")) % 1000000


@dataclass
class NoteStats:
    """Statistics from a note build."""

    deck_name: str
    total_notes: int = 0
    skipped_tier: int = 0
    skipped_duplicate: int = 0
    by_length: dict[int, int] = field(default_factory=dict)
    files_written: list[str] = field(default_factory=list)


class NoteBuilder:
    """Builds an Anki deck from resolved dictionary entries."""

    def __init__(self, config: DeckConfig, tiers: Optional[TierList] = None):
        """Initialize builder.

        Args:
            config: DeckConfig for the deck.
            tiers: Tier list used by config.tier_filter.
        """
        self.config = config
        self.tiers = tiers if tiers is not None else TierList(name="empty")
        self.model = self._create_model()
        self.deck = genanki.Deck(config.deck_id, config.name)
        self._words: dict[str, Word] = {}   # simplified -> Word
        self._skipped_tier = 0
        self._skipped_duplicate = 0

    def _create_model(self) -> genanki.Model:
        return genanki.Model(
            MODEL_ID,
            "zidian",
            fields=[{"name": name} for name in FIELD_NAMES],
            templates=[
                {
                    "name": side.value,
                    "qfmt": FRONT_TEMPLATES[side],
                    "afmt": BACK_TEMPLATE,
                }
                for side in self.config.sides()
            ],
            css=self.config.css(),
        )

    def add_word(self, word: Word) -> bool:
        """Add a note for word unless it is filtered out or already present.

        Returns:
            True if a note was added.
        """
        threshold = self.config.tier_filter
        if threshold is not None and self.tiers.is_known_below(word.simplified, threshold):
            self._skipped_tier += 1
            return False

        # Don't create multiple notes with the same hanzi
        if word.simplified in self._words:
            self._skipped_duplicate += 1
            return False

        fields = note_fields(word)
        note = genanki.Note(
            model=self.model,
            fields=[fields[name] for name in FIELD_NAMES],
            guid=genanki.guid_for(word.simplified),
        )
        self.deck.add_note(note)
        self._words[word.simplified] = word
        return True

    def add_words(self, words: Iterable[Word]) -> int:
        """Add several words. Returns how many notes were added."""
        return sum(1 for word in words if self.add_word(word))

    def get_note_count(self) -> int:
        return len(self.deck.notes)

    def get_words(self) -> list[Word]:
        return list(self._words.values())

    def build(self, filepath: Path | str) -> NoteStats:
        """Write the deck to an .apkg file.

        Args:
            filepath: Output path.

        Returns:
            NoteStats.
        """
        filepath = Path(filepath)
        stats = NoteStats(
            deck_name=self.config.name,
            total_notes=len(self.deck.notes),
            skipped_tier=self._skipped_tier,
            skipped_duplicate=self._skipped_duplicate,
        )
        for word in self._words.values():
            stats.by_length[word.length] = stats.by_length.get(word.length, 0) + 1

        filepath.parent.mkdir(parents=True, exist_ok=True)
        genanki.Package(self.deck).write_to_file(str(filepath))
        stats.files_written.append(str(filepath))

        return stats

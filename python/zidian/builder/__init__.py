"""Dictionary and note builder module.

Builds:
- The read-only CEDict store from ingested sources
- Flashcard note sets (JSON) from resolved entries
"""

from .dictionary import BuildStats, DictionaryBuilder
from .notes import DeckConfig, NoteBuilder, NoteStats, Side

__all__ = [
    "BuildStats",
    "DictionaryBuilder",
    "DeckConfig",
    "NoteBuilder",
    "NoteStats",
    "Side",
]

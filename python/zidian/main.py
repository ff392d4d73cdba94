"""zidian CLI - Chinese text to flashcard notes.

Usage:
    python -m zidian.main --text "我们有共同话题" --output output/deck.apkg
    python -m zidian.main --file chapter1.txt --tier-list hsk.txt --tier-filter 3
    python -m zidian.main --file chapter1.txt --dictionary cedict_ts.u8 --side ce-to-en
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .builder.dictionary import BuildStats, DictionaryBuilder
from .builder.notes import DeckConfig, NoteBuilder, Side
from .dictionary import CEDict, UnresolvedWordError
from .ingest import cedict, tiers
from .phonetics.tones import ToneColours
from .segment import get_segmenter, list_segmenters
from . import config as cfg


def build_dictionary(
    paths: list[Path],
    cache_dir: Path,
    force: bool = False,
) -> tuple[CEDict, BuildStats]:
    """Build the store from local files, or from the cached MDBG release.

    Args:
        paths: Local CC-CEDICT files, merged in order. Empty to download.
        cache_dir: Cache directory for the download.
        force: Force re-download.

    Returns:
        The store and its build statistics.
    """
    builder = DictionaryBuilder()
    if paths:
        for path in paths:
            builder.add_words(cedict.ingest(path))
    else:
        builder.add_words(cedict.download_and_ingest(cache_dir, force=force))

    store = builder.build()
    return store, builder.stats


def read_input(args: argparse.Namespace) -> str:
    """Text to make notes from."""
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    return args.text


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    # Defaults come from config.json
    output = cfg.default_output()
    segmenter_name = cfg.default_segmenter()
    project_root = Path(__file__).parent.parent.parent

    parser = argparse.ArgumentParser(
        description="zidian - Chunk up Chinese text and make flashcard notes"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--file",
        "-f",
        type=Path,
        help="File to be converted to flashcards",
    )
    source.add_argument(
        "--text",
        "-t",
        type=str,
        help="Text to be converted to flashcards",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path(output),
        help=f"Output .apkg path (default: {output})",
    )
    parser.add_argument(
        "--deck-name",
        type=str,
        help="Deck name (default: output file name without extension)",
    )
    parser.add_argument(
        "--dictionary",
        "-d",
        type=Path,
        action="append",
        help="CC-CEDICT file; repeat to merge several (default: download from MDBG)",
    )
    parser.add_argument(
        "--cache-dir",
        "-c",
        type=Path,
        default=project_root / cfg.default_cache_dir(),
        help="Cache directory for the downloaded dictionary",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        default=cfg.get_default("force", False),
        help="Force re-download of the dictionary",
    )
    parser.add_argument(
        "--segmenter",
        "-s",
        choices=list_segmenters(),
        default=segmenter_name,
        help=f"Word segmentation backend (default: {segmenter_name})",
    )
    parser.add_argument(
        "--tier-list",
        type=Path,
        default=cfg.get_default("tier_list"),
        help="Word list of '<word> <tier>' lines, e.g. HSK levels",
    )
    parser.add_argument(
        "--tier-filter",
        type=int,
        default=cfg.get_default("tier_filter"),
        help="Skip words whose tier is at or below this level",
    )
    parser.add_argument(
        "--tone-colours",
        type=ToneColours.parse,
        default=ToneColours.parse(cfg.default_tone_colours()),
        help="'off', or five semicolon-separated RGB codes for the five tones "
        "(default: 00e304;b35815;f00f0f;1767fe;777777)",
    )
    parser.add_argument(
        "--side",
        choices=[s.value for s in Side] + ["both"],
        default=cfg.get_default("side") or "both",
        help="Only make cards testing Chinese to English, or English to Chinese",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--quiet", "-q", action="store_true", default=cfg.get_default("quiet", False)
    )
    verbosity.add_argument(
        "--verbose", "-v", action="store_true", default=cfg.get_default("verbose", False)
    )

    args = parser.parse_args(argv)

    if args.tier_filter is not None and args.tier_list is None:
        parser.error("--tier-filter needs --tier-list")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    out = (lambda *a, **k: None) if args.quiet else print

    dictionary_paths = args.dictionary or [
        Path(p) for p in [cfg.default_dictionary_path()] if p
    ]
    deck_name = args.deck_name or args.output.stem

    out("=" * 60)
    out("zidian - Chinese Text to Flashcards")
    out("=" * 60)
    out(f"Deck: {deck_name}")
    out(f"Segmenter: {args.segmenter}")
    out(f"Output: {args.output}")
    out()

    try:
        text = read_input(args)

        out("[1/4] Loading dictionary...")
        store, build_stats = build_dictionary(dictionary_paths, args.cache_dir, args.force)
        out(f"  Sources: {', '.join(build_stats.by_source)}")
        out(f"  Written forms: {build_stats.total_words:,}")
        out(f"  Readings: {build_stats.total_readings:,}")
        out(f"  Polyphonic: {build_stats.polyphonic:,}")

        out("\n[2/4] Segmenting text...")
        segmenter = get_segmenter(args.segmenter)
        # A larger vocabulary helps the segmenter find dictionary words
        segmenter.add_words(store.keys())
        words = segmenter.unique_words(text)
        out(f"  Unique words: {len(words):,}")

        out("\n[3/4] Resolving words...")
        tier_list = tiers.load_optional(args.tier_list)
        notes = NoteBuilder(
            DeckConfig(
                name=deck_name,
                tone_colours=args.tone_colours,
                side=Side.parse(args.side),
                tier_filter=args.tier_filter,
            ),
            tiers=tier_list,
        )
        for word in words:
            notes.add_words(store.resolve(word))
        out(f"  Notes: {notes.get_note_count():,}")

        out("\n[4/4] Writing deck...")
        note_stats = notes.build(args.output)
    except (UnresolvedWordError, ValueError, OSError) as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1

    out(f"  Skipped by tier: {note_stats.skipped_tier:,}")
    out(f"  Skipped duplicates: {note_stats.skipped_duplicate:,}")
    out("\n  By length:")
    for length, count in sorted(note_stats.by_length.items()):
        out(f"    {length}: {count:,}")

    out("\n" + "=" * 60)
    out(f"Successfully created a deck with {note_stats.total_notes} notes")
    out("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())

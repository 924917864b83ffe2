"""Command-line entry point: fret a chord and print the placements."""

import logging
import sys
import xml.etree.ElementTree as ET
from argparse import ArgumentParser
from typing import List, Optional

from tabfret.assigner import ChordFretAssigner
from tabfret.base import ProfileError
from tabfret.chord import Chord
from tabfret.config import Config, build_profile
from tabfret.midi import read_midi_chord
from tabfret.model import ChordModel
from tabfret.parser import TuningSyntaxError, parse_notes
from tabfret.templates import ProfileTemplate
from tabfret.tuning import pitch_name


def format_chord(chord: Chord) -> List[str]:
    """Format one line per note: name, pitch, string, fret and conflict flag.

    Args:
        chord: The fretted chord.

    Returns:
        Lines in the chord's note order.
    """
    lines = []
    for note in chord:
        string = "-" if note.string is None else str(note.string)
        fret = "-" if note.fret is None else str(note.fret)
        line = f"{pitch_name(note.pitch)}\t{note.pitch}\t{string}\t{fret}"
        if note.conflict:
            line += "\tconflict"
        lines.append(line)
    return lines


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options.
    """
    parser = ArgumentParser(description="Assign strings and frets to a chord")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument(
        "--template",
        choices=[t.name for t in ProfileTemplate],
        default=ProfileTemplate.StandardGuitar.name,
    )
    parser.add_argument("--frets", type=int, default=None)
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--tuning", default=None, help="open strings, lowest first, e.g. 'D2 A2 D3'"
    )
    source.add_argument(
        "--musicxml", default=None, help="MusicXML file with <staff-details>"
    )
    parser.add_argument(
        "--midi", default=None, help="MIDI file whose first chord is fretted"
    )
    parser.add_argument("notes", nargs="*", help="note names or MIDI numbers")
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Parses arguments, builds the profile, frets the chord and prints it.

    Returns:
        Process exit status: 0 on success, 2 for missing or invalid notes,
        tunings or files.
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    config = Config(
        template=ProfileTemplate[args.template],
        fret_count=args.frets,
        tuning=args.tuning,
        musicxml=args.musicxml,
    )
    try:
        profile = build_profile(config)
        pitches: List[int] = []
        if args.midi is not None:
            pitches.extend(note.pitch for note in read_midi_chord(args.midi))
        pitches.extend(parse_notes(" ".join(args.notes)))
    except (ProfileError, TuningSyntaxError, ET.ParseError, OSError) as e:
        logging.error("%s", e)
        return 2
    if not pitches:
        logging.error("no notes to fret")
        return 2
    logging.info("fretting %d notes on %s", len(pitches), list(profile.strings))
    model = ChordModel(Chord.of_pitches(pitches))
    model.refret(ChordFretAssigner(profile))
    for line in format_chord(model.chord):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())

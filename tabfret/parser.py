"""Parser for compact note and tuning strings using Lark.

Notes are separated by whitespace. Each note is either a MIDI number or a
name made of a step letter, any number of accidentals (``#`` or ``b``) and
an octave number, for example ``E2 A2 D3 G3 B3 E4`` or ``Bb1 64``.
"""

from __future__ import annotations

from typing import List, Tuple, Union

from lark import Lark, Transformer
from lark.exceptions import LarkError

from tabfret import constants
from tabfret.tuning import (
    StaffDetails,
    StaffTuning,
    pitch_to_step_alter_octave,
    step_alter_octave_to_pitch,
)

NOTES_GRAMMAR = """
%import common.WS
%ignore WS

STEP: /[A-Ga-g]/
SHARP: "#"
FLAT: "b"
OCTAVE: /-?\\d+/
NUMBER: /\\d+/

start: note*
note: name | midi
name: STEP accidental* OCTAVE
accidental: SHARP | FLAT
midi: NUMBER
"""

Spelled = Tuple[str, int, int]
ParsedNote = Union[int, Spelled]


class TuningSyntaxError(ValueError):
    """Raised when a note or tuning string cannot be parsed."""


class NotesTransformer(Transformer):
    """Transform parsed notes into MIDI numbers or step/alter/octave triples."""

    def start(self, items):
        """Transform the root into a list of notes."""
        return list(items)

    def note(self, items):
        """Transform a note into its single alternative."""
        return items[0]

    def name(self, items):
        """Transform a note name like F#3 into a triple."""
        step = str(items[0]).upper()
        alter = sum(items[1:-1])
        octave = int(str(items[-1]))
        return (step, alter, octave)

    def accidental(self, items):
        """Transform an accidental into a semitone offset."""
        return 1 if str(items[0]) == "#" else -1

    def midi(self, items):
        """Transform a MIDI number."""
        return int(str(items[0]))


_PARSER = Lark(NOTES_GRAMMAR)


def _parse(text: str) -> List[ParsedNote]:
    try:
        tree = _PARSER.parse(text)
    except LarkError as e:
        raise TuningSyntaxError(f"Cannot parse notes {text!r}: {e}") from e
    return NotesTransformer().transform(tree)


def _to_pitch(note: ParsedNote) -> int:
    if isinstance(note, int):
        if note > constants.MIDI_MAX_PITCH:
            raise TuningSyntaxError(f"MIDI pitch out of range: {note}")
        return note
    pitch = step_alter_octave_to_pitch(*note)
    if pitch is None:
        raise TuningSyntaxError(f"Note out of range: {note}")
    return pitch


def parse_notes(text: str) -> List[int]:
    """Parse a note string into MIDI pitches.

    Args:
        text: Whitespace-separated note names or MIDI numbers.

    Returns:
        The pitches in the order given.

    Raises:
        TuningSyntaxError: If the text is malformed or a note is out of range.

    Examples:
        >>> parse_notes("C3 E3 G3")
        [48, 52, 55]

        >>> parse_notes("Bb1 64")
        [34, 64]
    """
    return [_to_pitch(note) for note in _parse(text)]


def parse_tuning(text: str) -> StaffDetails:
    """Parse a tuning string into staff details, lowest string first.

    Args:
        text: Whitespace-separated open string notes, lowest string first.

    Returns:
        Staff details with one line per note.

    Raises:
        TuningSyntaxError: If the text is malformed, empty, or a note is out
            of range.
    """
    tunings: List[StaffTuning] = []
    for line, note in enumerate(_parse(text), start=1):
        if isinstance(note, int):
            step, alter, octave = pitch_to_step_alter_octave(_to_pitch(note))
        else:
            _to_pitch(note)
            step, alter, octave = note
        tunings.append(StaffTuning(line=line, step=step, alter=alter, octave=octave))
    if not tunings:
        raise TuningSyntaxError("Tuning must name at least one string")
    return StaffDetails(staff_lines=len(tunings), tunings=tuple(tunings))

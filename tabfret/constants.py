"""Constants for pitches, fret counts and tunings."""

from typing import Dict, List

MIDI_MIN_PITCH = 0
"""Lowest valid MIDI pitch."""
MIDI_MAX_PITCH = 127
"""Highest valid MIDI pitch."""

DEFAULT_FRET_COUNT = 13
"""Fret count of the default guitar tablature (open string plus 12 frets)."""
MUSICXML_FRET_COUNT = 25
"""Fret count assumed for tunings imported from MusicXML staff details."""

STANDARD_TUNING: List[int] = [40, 45, 50, 55, 59, 64]
"""Standard guitar tuning in MIDI note numbers (E-A-D-G-B-E), lowest string first."""

STEP_TABLE: Dict[str, int] = {
    "A": 9,
    "B": 11,
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
}
"""Semitone offset of each diatonic step above C."""

SEMITONES_PER_OCTAVE = 12
"""Number of semitones in an octave."""

SORT_STRING_WEIGHT = 100000
"""Weight of the string index in the chord sort key."""
SORT_PITCH_WEIGHT = 100
"""Weight of the pitch in the chord sort key."""
UNASSIGNED_SORT_STRING = 1
"""String magnitude used in the sort key for notes without a string."""

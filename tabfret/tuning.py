"""Import of string tunings given as step/alter/octave triples.

Tunings arrive as a list of per-line entries in the MusicXML manner: line 1
is the lowest-pitched string. Invalid entries are skipped and leave the
previous value of the string in place; unsupported fields such as a capo
are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from tabfret import constants
from tabfret.profile import InstrumentProfile


@dataclass(frozen=True)
class StaffTuning:
    """Tuning of one tablature line."""

    line: int
    """1-based string position, 1 being the lowest-pitched string."""
    step: str
    """Diatonic step letter A-G."""
    alter: int = 0
    """Chromatic alteration in semitones."""
    octave: int = 0
    """Octave number, 4 being the octave of middle C."""

    def pitch(self) -> Optional[int]:
        return step_alter_octave_to_pitch(self.step, self.alter, self.octave)


@dataclass(frozen=True)
class StaffDetails:
    """Tablature staff description: line count, line tunings and capo."""

    staff_lines: Optional[int] = None
    """Number of lines, if given. Positive values resize the string table."""
    tunings: Tuple[StaffTuning, ...] = ()
    capo: Optional[int] = None
    """Capo fret. Carried along but not applied."""


def step_alter_octave_to_pitch(step: str, alter: int, octave: int) -> Optional[int]:
    """Convert a step/alter/octave triple to a MIDI pitch.

    Args:
        step: Upper-case diatonic step letter A-G (only the first character
            is used).
        alter: Chromatic alteration in semitones.
        octave: Octave number.

    Returns:
        The MIDI pitch, or None if the step is unknown or the pitch falls
        outside the MIDI range.
    """
    offset = constants.STEP_TABLE.get(step[:1]) if step else None
    if offset is None:
        logging.debug("illegal tuning step %r", step)
        return None
    pitch = offset + alter + (octave + 1) * constants.SEMITONES_PER_OCTAVE
    if pitch < constants.MIDI_MIN_PITCH or pitch > constants.MIDI_MAX_PITCH:
        return None
    return pitch


def apply_staff_details(details: StaffDetails, strings: Sequence[int]) -> List[int]:
    """Apply staff details to a string table.

    Args:
        details: The imported staff description.
        strings: The current open string pitches, lowest string first.

    Returns:
        The updated string table. A positive line count replaces the table
        with that many zero entries before tunings are applied.
    """
    table = list(strings)
    if details.staff_lines is not None:
        if details.staff_lines > 0:
            table = [0] * details.staff_lines
        else:
            logging.debug("illegal staff lines %d", details.staff_lines)
    for tuning in details.tunings:
        if tuning.line < 1 or tuning.line > len(table):
            logging.debug("tuning for line %d outside staff, skipping", tuning.line)
            continue
        pitch = tuning.pitch()
        if pitch is None:
            logging.debug(
                "invalid tuning for line %d: %s/%d/%d",
                tuning.line,
                tuning.step,
                tuning.alter,
                tuning.octave,
            )
            continue
        table[tuning.line - 1] = pitch
    if details.capo is not None:
        logging.debug("capo %d ignored", details.capo)
    return table


def profile_from_staff_details(
    details: StaffDetails,
    base: Sequence[int] = (),
    fret_count: int = constants.MUSICXML_FRET_COUNT,
) -> InstrumentProfile:
    """Build a profile from imported staff details.

    Args:
        details: The imported staff description.
        base: String table to start from, lowest string first.
        fret_count: Fret count of the resulting profile.

    Returns:
        A validated profile.

    Raises:
        ProfileError: If the resulting string table is not a valid profile,
            for example when some lines were left untuned.
    """
    strings = apply_staff_details(details, base)
    logging.debug("imported string table %s", strings)
    return InstrumentProfile.create(fret_count, strings)


_PITCH_CLASS_NAMES: Tuple[Tuple[str, int], ...] = (
    ("C", 0),
    ("C", 1),
    ("D", 0),
    ("D", 1),
    ("E", 0),
    ("F", 0),
    ("F", 1),
    ("G", 0),
    ("G", 1),
    ("A", 0),
    ("A", 1),
    ("B", 0),
)


def pitch_to_step_alter_octave(pitch: int) -> Tuple[str, int, int]:
    """Spell a MIDI pitch as a step/alter/octave triple, using sharps.

    Args:
        pitch: The MIDI pitch.

    Returns:
        The step letter, alteration and octave that sound the pitch.
    """
    octave, pitch_class = divmod(pitch, constants.SEMITONES_PER_OCTAVE)
    step, alter = _PITCH_CLASS_NAMES[pitch_class]
    return step, alter, octave - 1


def pitch_name(pitch: int) -> str:
    """Get a readable name for a pitch, such as ``F#3``."""
    step, alter, octave = pitch_to_step_alter_octave(pitch)
    return f"{step}{'#' * alter}{octave}"

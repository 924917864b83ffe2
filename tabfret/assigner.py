"""Assignment of strings and frets to every note of a chord.

The assigner reuses valid existing placements, keeps notes on their old
string when a fresh placement would collide with another note, moves notes
to free strings when their string is already taken, and flags the notes that
cannot be placed at all. It never aborts a chord: every note is visited and
conflicts are recorded as flags on the notes.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, List, Optional

from tabfret import constants
from tabfret.changes import ChangeSink, NoteChange, SetFret, SetFretConflict, SetString
from tabfret.chord import Chord, Note
from tabfret.converter import PositionConverter
from tabfret.pos import StringPos
from tabfret.profile import InstrumentProfile


class FrettingLatch:
    """Guards against re-entering the assigner while it is already running.

    Writing a change may notify listeners that ask for the chord to be
    fretted again. Sharing one latch between such callers turns the nested
    request into a no-op.
    """

    def __init__(self) -> None:
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    @contextmanager
    def hold(self) -> Generator[bool, None, None]:
        """Try to take the latch for the duration of the block.

        Yields:
            True if the latch was taken, False if it was already held.
        """
        if self._held:
            yield False
            return
        self._held = True
        try:
            yield True
        finally:
            self._held = False


def sort_key(note: Note, index: int) -> int:
    """Compute the processing order key of a note.

    Ascending keys visit notes from the highest string, then from the
    highest pitch, then in insertion order. Unplaced notes sort as if they
    were on string 1.

    Args:
        note: The note to order.
        index: The note's position in the chord.

    Returns:
        The sort key.
    """
    string = note.string
    if string is None:
        string = constants.UNASSIGNED_SORT_STRING
    return (
        abs(string) * constants.SORT_STRING_WEIGHT
        - note.pitch * constants.SORT_PITCH_WEIGHT
        - index
    )


class _Emitter:
    """Sends changes to a sink and remembers them."""

    def __init__(self, sink: ChangeSink) -> None:
        self._sink = sink
        self.changes: List[NoteChange] = []

    def emit(self, change: NoteChange) -> None:
        self.changes.append(change)
        self._sink.emit(change)

    def conflict(self, index: int, note: Note, conflict: bool) -> None:
        if note.conflict != conflict:
            self.emit(SetFretConflict(index, note.conflict, conflict))

    def position(self, index: int, note: Note, pos: StringPos) -> None:
        if note.fret != pos.fret:
            self.emit(SetFret(index, note.fret, pos.fret))
        if note.string != pos.string:
            self.emit(SetString(index, note.string, pos.string))


class ChordFretAssigner:
    """Assigns a string and fret to every note of a chord under one profile."""

    def __init__(
        self, profile: InstrumentProfile, latch: Optional[FrettingLatch] = None
    ) -> None:
        self._profile = profile
        self._converter = PositionConverter(profile)
        self._latch = latch if latch is not None else FrettingLatch()

    @property
    def profile(self) -> InstrumentProfile:
        return self._profile

    @property
    def latch(self) -> FrettingLatch:
        return self._latch

    def fret_chord(self, chord: Chord, sink: ChangeSink) -> List[NoteChange]:
        """Assign strings and frets to all notes of a chord.

        Changes are emitted to the sink one field at a time, as they are
        decided. Calls made while another call holds the latch do nothing.

        Args:
            chord: Snapshot of the chord to fret.
            sink: Receiver of the resulting changes.

        Returns:
            The emitted changes, in emission order.
        """
        with self._latch.hold() as acquired:
            if not acquired:
                logging.debug("fret_chord re-entered, ignoring nested call")
                return []
            emitter = _Emitter(sink)
            self._fret_notes(chord, emitter)
            return emitter.changes

    def _is_current(self, note: Note) -> bool:
        pos = note.pos
        return (
            pos is not None
            and self._profile.contains(pos)
            and self._converter.position_to_pitch(pos.string, pos.fret) == note.pitch
        )

    def _find_free_string(self, pitch: int, used: List[bool]) -> Optional[StringPos]:
        for string in range(self._profile.num_strings()):
            if used[string]:
                continue
            fret = self._converter.fret_for_position(pitch, string)
            if fret is not None:
                return StringPos(string=string, fret=fret)
        return None

    def _fret_notes(self, chord: Chord, emitter: _Emitter) -> None:
        used = [False] * self._profile.num_strings()
        # Strings held by each note, updated as notes are resolved
        held: List[Optional[int]] = [note.string for note in chord]
        order = sorted(range(len(chord)), key=lambda i: (sort_key(chord[i], i), i))

        for index in order:
            note = chord[index]
            target = note.pos
            if target is None or not self._is_current(note):
                conversion = self._converter.pitch_to_position(note.pitch)
                target = conversion.pos
                if not conversion.ok:
                    logging.debug(
                        "note %d pitch %d is out of range, conflict", index, note.pitch
                    )
                    emitter.conflict(index, note, True)
                    emitter.position(index, note, target)
                    held[index] = target.string
                    continue
                if any(
                    other != index and held[other] == target.string
                    for other in range(len(chord))
                ):
                    if note.string is not None:
                        old_fret = self._converter.fret_for_position(
                            note.pitch, note.string
                        )
                        if old_fret is not None:
                            target = StringPos(string=note.string, fret=old_fret)

            if used[target.string] or not self._profile.contains(target):
                found = self._find_free_string(note.pitch, used)
                if found is None:
                    logging.debug(
                        "note %d pitch %d has no free string, conflict",
                        index,
                        note.pitch,
                    )
                    emitter.conflict(index, note, True)
                    continue
                target = found

            emitter.conflict(index, note, False)
            emitter.position(index, note, target)
            logging.debug(
                "note %d pitch %d on string %d fret %d",
                index,
                note.pitch,
                target.string,
                target.fret,
            )
            held[index] = target.string
            used[target.string] = True

"""Snapshots of the notes of a chord as seen by the fretting engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generator, Iterable, Optional, Tuple

from tabfret.pos import StringPos


@dataclass(frozen=True)
class Note:
    """A single note of a chord with its current tablature placement."""

    pitch: int
    """MIDI pitch (0-127)."""
    string: Optional[int] = None
    """Visual string index, or None if the note has not been placed."""
    fret: Optional[int] = None
    """Fret number, or None if the note has not been placed."""
    conflict: bool = False
    """Whether the note could not be given its own valid string and fret."""

    @property
    def pos(self) -> Optional[StringPos]:
        """Get the note's position if both string and fret are assigned.

        Returns:
            The position, or None if either field is unassigned.
        """
        if self.string is None or self.fret is None:
            return None
        else:
            return StringPos(string=self.string, fret=self.fret)

    def with_pos(self, pos: StringPos) -> Note:
        return replace(self, string=pos.string, fret=pos.fret)


@dataclass(frozen=True)
class Chord:
    """The notes sounding at one onset, in insertion order.

    The order matters only as the final tie-break between notes of equal
    pitch when the chord is fretted.
    """

    notes: Tuple[Note, ...]

    @classmethod
    def of_pitches(cls, pitches: Iterable[int]) -> Chord:
        """Create a chord of unplaced notes.

        Args:
            pitches: MIDI pitches in insertion order.

        Returns:
            A chord with one unassigned note per pitch.
        """
        return cls(tuple(Note(pitch) for pitch in pitches))

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Generator[Note, None, None]:
        yield from self.notes

    def __getitem__(self, index: int) -> Note:
        return self.notes[index]

    def update(self, index: int, note: Note) -> Chord:
        """Replace one note.

        Args:
            index: Position of the note in the chord.
            note: The replacement note.

        Returns:
            A new chord with the note replaced.
        """
        notes = list(self.notes)
        notes[index] = note
        return Chord(tuple(notes))

    def conflicts(self) -> Tuple[int, ...]:
        """Get the indices of notes flagged as fret conflicts."""
        return tuple(i for i, note in enumerate(self.notes) if note.conflict)

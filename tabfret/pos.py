"""Position classes for strings and frets on a tablature staff."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StringPos:
    """A position on the fretboard as a visual string and fret combination.

    Visual strings count from the highest-pitched string (0) down to the
    lowest-pitched one (n-1), matching how tablature lines are drawn.
    """

    string: int
    """Visual string index (0 is the highest-pitched string)."""
    fret: int
    """Fret number (0 is the open string)."""


@dataclass(frozen=True)
class Conversion:
    """Result of converting a pitch to a position.

    When ``ok`` is False the position is a best-effort fallback: fret 0 on
    the highest string for pitches above the range, fret 0 on the lowest
    string for pitches below it.
    """

    pos: StringPos
    ok: bool

"""Conversion between pitches and string/fret positions under a profile."""

from __future__ import annotations

from typing import Optional

from tabfret.pos import Conversion, StringPos
from tabfret.profile import InstrumentProfile


class PositionConverter:
    """Converts pitches to positions and back for one instrument profile.

    All string indices taken and returned here are visual indices: 0 is the
    highest-pitched string.
    """

    def __init__(self, profile: InstrumentProfile) -> None:
        self._profile = profile

    @property
    def profile(self) -> InstrumentProfile:
        return self._profile

    def pitch_to_position(self, pitch: int) -> Conversion:
        """Find a string and fret for a pitch, using the highest possible string.

        The highest-pitched string whose open pitch does not exceed the target
        always wins, even when a lower string would give a smaller fret.

        Args:
            pitch: The MIDI pitch to place.

        Returns:
            The chosen position with ``ok`` set. Pitches above the top of the
            range fall back to fret 0 on the highest string and pitches below
            the lowest open string fall back to fret 0 on the lowest string,
            both with ``ok`` False.
        """
        strings = self._profile.strings
        count = len(strings)
        if pitch > strings[count - 1] + self._profile.fret_count:
            return Conversion(StringPos(string=0, fret=0), ok=False)
        for index in range(count - 1, -1, -1):
            if pitch >= strings[index]:
                return Conversion(
                    StringPos(string=count - index - 1, fret=pitch - strings[index]),
                    ok=True,
                )
        return Conversion(StringPos(string=count - 1, fret=0), ok=False)

    def position_to_pitch(self, string: int, fret: int) -> int:
        """Get the pitch sounded by a string/fret combination.

        No bounds checking is done; callers pass positions valid for the profile.
        """
        return self._profile.open_pitch(string) + fret

    def fret_for_position(self, pitch: int, string: int) -> Optional[int]:
        """Get the fret that sounds a pitch on a given string.

        Args:
            pitch: The MIDI pitch to place.
            string: Visual string index.

        Returns:
            The fret number, or None if the string does not exist or the pitch
            is not reachable on it within the profile's frets.
        """
        if string < 0 or string >= self._profile.num_strings():
            return None
        fret = pitch - self._profile.open_pitch(string)
        if fret < 0 or fret >= self._profile.fret_count:
            return None
        return fret

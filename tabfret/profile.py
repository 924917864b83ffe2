"""Instrument profiles: fret count and open string pitches.

A profile stores its strings from the lowest-pitched (index 0) to the
highest-pitched (index n-1). Everything that leaves this module speaks in
visual string indices instead, where 0 is the highest-pitched string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from tabfret import constants
from tabfret.base import ProfileError
from tabfret.pos import StringPos


@dataclass(frozen=True)
class InstrumentProfile:
    """Fret count and open string pitches of a fretted instrument.

    Construction validates that the profile is usable by the position search:
    at least one string, pitches within the MIDI range and strictly
    increasing from the lowest to the highest string.
    """

    fret_count: int
    """Number of usable frets, counting the open string as fret 0."""
    strings: Tuple[int, ...]
    """Open string pitches, lowest-pitched string first."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "strings", tuple(self.strings))
        if self.fret_count < 0:
            raise ProfileError(f"Fret count must be non-negative: {self.fret_count}")
        if len(self.strings) == 0:
            raise ProfileError("Profile must have at least one string")
        for pitch in self.strings:
            if pitch < constants.MIDI_MIN_PITCH or pitch > constants.MIDI_MAX_PITCH:
                raise ProfileError(f"Open string pitch out of range: {pitch}")
        for low, high in zip(self.strings, self.strings[1:]):
            if low >= high:
                raise ProfileError(
                    f"String pitches must strictly increase: {list(self.strings)}"
                )

    @classmethod
    def create(
        cls,
        fret_count: int,
        strings: Sequence[int],
        num_strings: Optional[int] = None,
    ) -> InstrumentProfile:
        """Create a profile from any sequence of open string pitches.

        Args:
            fret_count: Number of usable frets.
            strings: Open string pitches, lowest-pitched string first.
            num_strings: Expected number of strings, if known.

        Returns:
            A validated profile.

        Raises:
            ProfileError: If the number of pitches differs from ``num_strings``
                or the profile is otherwise invalid.
        """
        if num_strings is not None and len(strings) != num_strings:
            raise ProfileError(
                f"Expected {num_strings} strings but got {len(strings)}"
            )
        return cls(fret_count=fret_count, strings=tuple(strings))

    def num_strings(self) -> int:
        return len(self.strings)

    def num_frets(self) -> int:
        return self.fret_count

    def open_pitch(self, string: int) -> int:
        """Get the open pitch of a visual string.

        Args:
            string: Visual string index, 0 being the highest-pitched string.

        Returns:
            The MIDI pitch of the unfretted string.
        """
        return self.strings[self.num_strings() - 1 - string]

    def contains(self, pos: StringPos) -> bool:
        """Check whether a position lies on this instrument.

        Args:
            pos: The position to test.

        Returns:
            True if both string and fret are within range.
        """
        return (
            pos.string >= 0
            and pos.string < self.num_strings()
            and pos.fret >= 0
            and pos.fret < self.fret_count
        )

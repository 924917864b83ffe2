"""Named instrument profiles."""

from __future__ import annotations

from enum import Enum, auto, unique
from typing import Dict, Optional

from tabfret import constants
from tabfret.profile import InstrumentProfile


@unique
class ProfileTemplate(Enum):
    """Instrument templates with a ready-made profile."""

    StandardGuitar = auto()
    DropDGuitar = auto()
    OpenGGuitar = auto()
    OpenDGuitar = auto()
    DadgadGuitar = auto()
    StandardBass = auto()
    FiveStringBass = auto()
    Mandolin = auto()


# Re-entrant tunings (ukulele, banjo) do not have strictly rising strings
# and cannot be expressed as a profile.
TEMPLATE_PROFILES: Dict[ProfileTemplate, InstrumentProfile] = {
    ProfileTemplate.StandardGuitar: InstrumentProfile.create(
        constants.DEFAULT_FRET_COUNT, constants.STANDARD_TUNING
    ),  # E2 A2 D3 G3 B3 E4
    ProfileTemplate.DropDGuitar: InstrumentProfile.create(
        constants.DEFAULT_FRET_COUNT, [38, 45, 50, 55, 59, 64]
    ),  # D2 A2 D3 G3 B3 E4
    ProfileTemplate.OpenGGuitar: InstrumentProfile.create(
        constants.DEFAULT_FRET_COUNT, [38, 43, 50, 55, 59, 62]
    ),  # D2 G2 D3 G3 B3 D4
    ProfileTemplate.OpenDGuitar: InstrumentProfile.create(
        constants.DEFAULT_FRET_COUNT, [38, 45, 50, 54, 57, 62]
    ),  # D2 A2 D3 F#3 A3 D4
    ProfileTemplate.DadgadGuitar: InstrumentProfile.create(
        constants.DEFAULT_FRET_COUNT, [38, 45, 50, 55, 57, 62]
    ),  # D2 A2 D3 G3 A3 D4
    ProfileTemplate.StandardBass: InstrumentProfile.create(
        constants.DEFAULT_FRET_COUNT, [28, 33, 38, 43]
    ),  # E1 A1 D2 G2
    ProfileTemplate.FiveStringBass: InstrumentProfile.create(
        constants.DEFAULT_FRET_COUNT, [23, 28, 33, 38, 43]
    ),  # B0 E1 A1 D2 G2
    ProfileTemplate.Mandolin: InstrumentProfile.create(
        constants.DEFAULT_FRET_COUNT, [55, 62, 69, 76]
    ),  # G3 D4 A4 E5
}

DEFAULT_PROFILE = TEMPLATE_PROFILES[ProfileTemplate.StandardGuitar]
"""Profile used by instruments that do not define their own."""


def template_profile(template: ProfileTemplate) -> InstrumentProfile:
    return TEMPLATE_PROFILES[template]


def resolve_profile(profile: Optional[InstrumentProfile]) -> InstrumentProfile:
    """Get an instrument's profile, falling back to standard guitar.

    Args:
        profile: The instrument's own profile, if any.

    Returns:
        The given profile, or the default guitar profile.
    """
    return profile if profile is not None else DEFAULT_PROFILE

import pytest

from tabfret.base import ProfileError
from tabfret.pos import StringPos
from tabfret.profile import InstrumentProfile
from tabfret.templates import (
    DEFAULT_PROFILE,
    TEMPLATE_PROFILES,
    ProfileTemplate,
    resolve_profile,
    template_profile,
)

GUITAR = InstrumentProfile.create(13, [40, 45, 50, 55, 59, 64])


def test_counts() -> None:
    assert GUITAR.num_strings() == 6
    assert GUITAR.num_frets() == 13
    assert GUITAR.strings == (40, 45, 50, 55, 59, 64)


def test_open_pitch_uses_visual_order() -> None:
    assert GUITAR.open_pitch(0) == 64
    assert GUITAR.open_pitch(5) == 40


def test_equality_is_structural() -> None:
    assert GUITAR == InstrumentProfile(13, (40, 45, 50, 55, 59, 64))
    assert GUITAR != InstrumentProfile(12, (40, 45, 50, 55, 59, 64))
    assert GUITAR != InstrumentProfile(13, (38, 45, 50, 55, 59, 64))


def test_direct_construction_freezes_strings() -> None:
    strings = [40, 45, 50, 55, 59, 64]
    profile = InstrumentProfile(13, strings)  # pyright: ignore
    strings[0] = 70
    assert profile.strings == (40, 45, 50, 55, 59, 64)
    assert profile == GUITAR
    assert hash(profile) == hash(GUITAR)


@pytest.mark.parametrize(
    "pos, expected",
    [
        (StringPos(0, 0), True),
        (StringPos(5, 12), True),
        (StringPos(6, 0), False),
        (StringPos(-1, 0), False),
        (StringPos(0, 13), False),
        (StringPos(0, -1), False),
    ],
)
def test_contains(pos: StringPos, expected: bool) -> None:
    assert GUITAR.contains(pos) == expected


def test_create_checks_string_count() -> None:
    with pytest.raises(ProfileError):
        InstrumentProfile.create(13, [40, 45, 50], num_strings=6)
    assert InstrumentProfile.create(13, [40, 45, 50], num_strings=3).num_strings() == 3


@pytest.mark.parametrize(
    "fret_count, strings",
    [
        (-1, [40, 45]),
        (13, []),
        (13, [45, 40]),
        (13, [40, 40]),
        (13, [67, 60, 64, 69]),
        (13, [-1, 40]),
        (13, [40, 128]),
    ],
)
def test_invalid_profiles(fret_count: int, strings: list) -> None:
    with pytest.raises(ProfileError):
        InstrumentProfile.create(fret_count, strings)


def test_zero_frets_allowed() -> None:
    profile = InstrumentProfile.create(0, [40])
    assert profile.num_frets() == 0
    assert not profile.contains(StringPos(0, 0))


def test_default_profile_is_standard_guitar() -> None:
    assert DEFAULT_PROFILE == GUITAR
    assert template_profile(ProfileTemplate.StandardGuitar) == GUITAR


def test_every_template_has_a_profile() -> None:
    assert set(TEMPLATE_PROFILES) == set(ProfileTemplate)
    assert template_profile(ProfileTemplate.StandardBass).strings == (28, 33, 38, 43)


def test_resolve_profile_falls_back_to_guitar() -> None:
    bass = template_profile(ProfileTemplate.StandardBass)
    assert resolve_profile(None) == DEFAULT_PROFILE
    assert resolve_profile(bass) == bass

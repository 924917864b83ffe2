from typing import List, Optional

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tabfret.converter import PositionConverter
from tabfret.pos import Conversion, StringPos
from tabfret.profile import InstrumentProfile
from tests.tabfret.hypo import configure_hypo

configure_hypo()

GUITAR = InstrumentProfile.create(13, [40, 45, 50, 55, 59, 64])
CONVERTER = PositionConverter(GUITAR)


@pytest.mark.parametrize(
    "pitch, expected",
    [
        (64, Conversion(StringPos(0, 0), ok=True)),
        (45, Conversion(StringPos(4, 0), ok=True)),
        (52, Conversion(StringPos(3, 2), ok=True)),
        (40, Conversion(StringPos(5, 0), ok=True)),
        (44, Conversion(StringPos(5, 4), ok=True)),
        (76, Conversion(StringPos(0, 12), ok=True)),
        # Boundary of the range check: one past the last fret is still accepted
        (77, Conversion(StringPos(0, 13), ok=True)),
        (78, Conversion(StringPos(0, 0), ok=False)),
        (127, Conversion(StringPos(0, 0), ok=False)),
        (39, Conversion(StringPos(5, 0), ok=False)),
        (0, Conversion(StringPos(5, 0), ok=False)),
    ],
)
def test_pitch_to_position(pitch: int, expected: Conversion) -> None:
    assert CONVERTER.pitch_to_position(pitch) == expected


def test_highest_string_preferred() -> None:
    # 60 is B string fret 1 or G string fret 5 or D string fret 10
    assert CONVERTER.pitch_to_position(60) == Conversion(StringPos(1, 1), ok=True)
    # 62 is open on a higher string in open G but fretted on the D string too
    open_g = InstrumentProfile.create(13, [38, 43, 50, 55, 59, 62])
    assert PositionConverter(open_g).pitch_to_position(62) == Conversion(
        StringPos(0, 0), ok=True
    )


@pytest.mark.parametrize(
    "string, fret, expected",
    [(0, 0, 64), (3, 2, 52), (5, 12, 52), (1, 5, 64)],
)
def test_position_to_pitch(string: int, fret: int, expected: int) -> None:
    assert CONVERTER.position_to_pitch(string, fret) == expected


@pytest.mark.parametrize(
    "pitch, string, expected",
    [
        (52, 3, 2),
        (52, 5, 12),
        (52, 4, 7),
        (52, 2, None),
        (53, 5, None),
        (39, 5, None),
        (52, -1, None),
        (52, 6, None),
    ],
)
def test_fret_for_position(pitch: int, string: int, expected: Optional[int]) -> None:
    assert CONVERTER.fret_for_position(pitch, string) == expected


@st.composite
def profile_strategy(draw: st.DrawFn) -> InstrumentProfile:
    fret_count = draw(st.integers(min_value=1, max_value=24))
    base = draw(st.integers(min_value=0, max_value=60))
    steps = draw(st.lists(st.integers(min_value=1, max_value=7), max_size=7))
    strings: List[int] = [base]
    for step in steps:
        strings.append(strings[-1] + step)
    return InstrumentProfile.create(fret_count, strings)


@given(profile_strategy(), st.data())
def test_position_round_trip(profile: InstrumentProfile, data: st.DataObject) -> None:
    """Every valid position maps back to its own fret."""
    converter = PositionConverter(profile)
    string = data.draw(st.integers(min_value=0, max_value=profile.num_strings() - 1))
    fret = data.draw(st.integers(min_value=0, max_value=profile.fret_count - 1))
    pitch = converter.position_to_pitch(string, fret)
    assert converter.fret_for_position(pitch, string) == fret


@given(profile_strategy(), st.integers(min_value=0, max_value=127))
def test_conversion_sounds_pitch(profile: InstrumentProfile, pitch: int) -> None:
    """A successful conversion always sounds the requested pitch."""
    converter = PositionConverter(profile)
    conversion = converter.pitch_to_position(pitch)
    if conversion.ok:
        pos = conversion.pos
        assert converter.position_to_pitch(pos.string, pos.fret) == pitch
        # No higher string can reach the pitch
        for higher in range(pos.string):
            assert profile.open_pitch(higher) > pitch
    else:
        assert conversion.pos.fret == 0
        assert conversion.pos.string in (0, profile.num_strings() - 1)

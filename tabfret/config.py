"""Configuration for building the active instrument profile."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tabfret import constants
from tabfret.musicxml import read_staff_details
from tabfret.parser import parse_tuning
from tabfret.profile import InstrumentProfile
from tabfret.templates import ProfileTemplate, template_profile
from tabfret.tuning import apply_staff_details, profile_from_staff_details


@dataclass(frozen=True)
class Config:
    """Settings that select the profile chords are fretted against."""

    template: ProfileTemplate  # Instrument template to start from
    fret_count: Optional[int]  # Overrides the template's fret count
    tuning: Optional[str]  # Tuning string overriding the template's strings
    musicxml: Optional[str] = None  # MusicXML file supplying the tuning


def init_config() -> Config:
    """Initialize a default configuration: standard guitar, template frets."""
    return Config(
        template=ProfileTemplate.StandardGuitar,
        fret_count=None,
        tuning=None,
        musicxml=None,
    )


def build_profile(config: Config) -> InstrumentProfile:
    """Build the profile described by a configuration.

    Args:
        config: The configuration to realize.

    Returns:
        The template's profile with any fret count, tuning string or
        MusicXML tuning applied. MusicXML tunings default to 25 frets.

    Raises:
        ProfileError: If the overrides do not form a valid profile.
        TuningSyntaxError: If the tuning string cannot be parsed.
        xml.etree.ElementTree.ParseError: If the MusicXML file is malformed.
    """
    base = template_profile(config.template)
    strings = list(base.strings)
    if config.tuning is not None:
        strings = apply_staff_details(parse_tuning(config.tuning), strings)
    if config.musicxml is not None:
        fret_count = constants.MUSICXML_FRET_COUNT
        if config.fret_count is not None:
            fret_count = config.fret_count
        logging.info("reading staff details from %s", config.musicxml)
        return profile_from_staff_details(
            read_staff_details(config.musicxml), base=strings, fret_count=fret_count
        )
    fret_count = config.fret_count if config.fret_count is not None else base.fret_count
    return InstrumentProfile.create(fret_count, strings)

"""Tablature fretting: pitch to string/fret assignment for fretted instruments."""

from tabfret.assigner import ChordFretAssigner, FrettingLatch
from tabfret.changes import ChangeLog, ChangeSink, SetFret, SetFretConflict, SetString
from tabfret.chord import Chord, Note
from tabfret.converter import PositionConverter
from tabfret.model import ChordModel
from tabfret.pos import Conversion, StringPos
from tabfret.profile import InstrumentProfile
from tabfret.templates import DEFAULT_PROFILE, ProfileTemplate, template_profile

__all__ = [
    "ChangeLog",
    "ChangeSink",
    "Chord",
    "ChordFretAssigner",
    "ChordModel",
    "Conversion",
    "DEFAULT_PROFILE",
    "FrettingLatch",
    "InstrumentProfile",
    "Note",
    "PositionConverter",
    "ProfileTemplate",
    "SetFret",
    "SetFretConflict",
    "SetString",
    "StringPos",
    "template_profile",
]

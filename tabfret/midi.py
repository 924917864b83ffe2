"""Building chords from MIDI note messages and files."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, cast

import mido
from mido.frozen import FrozenMessage, freeze_message

from tabfret.chord import Chord

NOTE_MSG_TYPES = frozenset({"note_on", "note_off"})


def is_note_msg(msg: FrozenMessage) -> bool:
    """Tell whether a message can change which pitches are sounding."""
    return cast(bool, msg.type in NOTE_MSG_TYPES)


def is_note_on_msg(msg: FrozenMessage) -> bool:
    """Check if a message is a true note-on message.

    Args:
        msg: The MIDI message to check.

    Returns:
        True if the message is note_on with velocity > 0.
    """
    return cast(bool, msg.type == "note_on" and msg.velocity > 0)


def is_note_off_msg(msg: FrozenMessage) -> bool:
    """Check if a message is a note-off message.

    Args:
        msg: The MIDI message to check.

    Returns:
        True if the message is note_off or note_on with velocity 0.
    """
    return cast(
        bool, (msg.type == "note_on" and msg.velocity == 0) or msg.type == "note_off"
    )


def chord_from_msgs(msgs: Iterable[FrozenMessage]) -> Chord:
    """Collect the notes still sounding after a run of messages.

    Channels are ignored: a pitch counts once however many channels hold it.
    Non-note messages are skipped.

    Args:
        msgs: MIDI messages in arrival order.

    Returns:
        A chord of unplaced notes, ordered by when each pitch was first
        pressed.
    """
    # Dicts keep insertion order, which gives first-press order
    sounding: Dict[int, int] = {}
    for msg in msgs:
        if not is_note_msg(msg):
            logging.debug("skipping %s message", msg.type)
            continue
        note = cast(int, msg.note)  # pyright: ignore
        if is_note_on_msg(msg):
            sounding[note] = sounding.get(note, 0) + 1
        elif is_note_off_msg(msg):
            count = sounding.get(note, 0)
            if count <= 1:
                sounding.pop(note, None)
            else:
                sounding[note] = count - 1
    return Chord.of_pitches(sounding.keys())


def read_midi_chord(filepath: str) -> Chord:
    """Read the first chord of a MIDI file.

    Messages are replayed in time order until the first note is released,
    so the chord holds every note pressed before that point.

    Args:
        filepath: Path of the MIDI file to read.

    Returns:
        A chord of unplaced notes, empty if the file holds no notes.
    """
    msgs: List[FrozenMessage] = []
    for msg in mido.MidiFile(filepath):
        frozen = freeze_message(msg)
        if is_note_off_msg(frozen):
            break
        msgs.append(frozen)
    return chord_from_msgs(msgs)

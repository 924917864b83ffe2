"""In-memory note model that applies and records fretting changes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, List, Optional, override

from tabfret.changes import ChangeLog, ChangeSink, NoteChange
from tabfret.chord import Chord

if TYPE_CHECKING:
    from tabfret.assigner import ChordFretAssigner

Listener = Callable[[NoteChange], None]
"""Callback invoked after each change has been applied."""


class ChordModel(ChangeSink):
    """Owns a chord, applies changes to it and makes them undoable.

    Listeners are notified after each change is applied, in registration
    order. A listener may call back into the fretting engine; the engine's
    latch turns such nested calls into no-ops.
    """

    def __init__(self, chord: Chord, log: Optional[ChangeLog] = None) -> None:
        self._chord = chord
        self._log = log if log is not None else ChangeLog()
        self._listeners: List[Listener] = []

    @property
    def chord(self) -> Chord:
        return self._chord

    @property
    def log(self) -> ChangeLog:
        return self._log

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    @override
    def emit(self, change: NoteChange) -> None:
        self._chord = change.apply_to(self._chord)
        self._log.record(change)
        for listener in self._listeners:
            listener(change)

    def refret(self, assigner: ChordFretAssigner) -> List[NoteChange]:
        """Fret the model's chord as one undoable transaction.

        Args:
            assigner: The assigner to run over the current chord.

        Returns:
            The changes emitted by the assigner.
        """
        with self._log.transaction():
            changes = assigner.fret_chord(self._chord, self)
        logging.debug("refret emitted %d changes", len(changes))
        return changes

    def undo(self) -> Chord:
        self._chord = self._log.undo(self._chord)
        return self._chord

    def redo(self) -> Chord:
        self._chord = self._log.redo(self._chord)
        return self._chord

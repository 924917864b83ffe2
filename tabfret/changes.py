"""Change events emitted by the fretting engine and the log that records them.

Every mutation of a note is expressed as one event per field. Events carry
both the old and the new value so that they can be inverted, which is how
the log implements undo.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Generator, List, Optional, Tuple, override

from tabfret.chord import Chord, Note


class NoteChange(metaclass=ABCMeta):
    """A change to a single field of one note of a chord."""

    index: int

    @abstractmethod
    def apply(self, note: Note) -> Note:
        """Apply this change to a note.

        Args:
            note: The note before the change.

        Returns:
            The note after the change.
        """
        raise NotImplementedError()

    @abstractmethod
    def invert(self) -> NoteChange:
        """Get the change that undoes this one."""
        raise NotImplementedError()

    def apply_to(self, chord: Chord) -> Chord:
        """Apply this change to the addressed note of a chord.

        Args:
            chord: The chord before the change.

        Returns:
            A new chord with the change applied.
        """
        return chord.update(self.index, self.apply(chord[self.index]))


@dataclass(frozen=True)
class SetString(NoteChange):
    """Move a note to another visual string."""

    index: int
    old: Optional[int]
    new: Optional[int]

    @override
    def apply(self, note: Note) -> Note:
        return replace(note, string=self.new)

    @override
    def invert(self) -> SetString:
        return SetString(self.index, self.new, self.old)


@dataclass(frozen=True)
class SetFret(NoteChange):
    """Move a note to another fret."""

    index: int
    old: Optional[int]
    new: Optional[int]

    @override
    def apply(self, note: Note) -> Note:
        return replace(note, fret=self.new)

    @override
    def invert(self) -> SetFret:
        return SetFret(self.index, self.new, self.old)


@dataclass(frozen=True)
class SetFretConflict(NoteChange):
    """Flag or clear a note as a fret conflict."""

    index: int
    old: bool
    new: bool

    @override
    def apply(self, note: Note) -> Note:
        return replace(note, conflict=self.new)

    @override
    def invert(self) -> SetFretConflict:
        return SetFretConflict(self.index, self.new, self.old)


class ChangeSink(metaclass=ABCMeta):
    """Abstract receiver of note changes."""

    @abstractmethod
    def emit(self, change: NoteChange) -> None:
        """Receive one change.

        Args:
            change: The change to apply or record.
        """
        raise NotImplementedError()


Transaction = Tuple[NoteChange, ...]
"""A batch of changes that is undone and redone as a unit."""


class ChangeLog:
    """Records changes as undoable transactions.

    Changes recorded inside ``transaction()`` are grouped into a single entry;
    changes recorded outside of one become single-change entries. Recording a
    new entry discards anything that could have been redone.
    """

    def __init__(self) -> None:
        self._done: List[Transaction] = []
        self._undone: List[Transaction] = []
        self._pending: Optional[List[NoteChange]] = None

    def record(self, change: NoteChange) -> None:
        if self._pending is not None:
            self._pending.append(change)
        else:
            self._push((change,))

    def _push(self, transaction: Transaction) -> None:
        self._done.append(transaction)
        self._undone.clear()

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """Group all changes recorded in the block into one entry.

        Nested transactions fold into the outermost one. Empty transactions
        leave no entry.
        """
        if self._pending is not None:
            yield
            return
        self._pending = []
        try:
            yield
        finally:
            pending = self._pending
            self._pending = None
            if pending:
                self._push(tuple(pending))

    def can_undo(self) -> bool:
        return len(self._done) > 0

    def can_redo(self) -> bool:
        return len(self._undone) > 0

    def history(self) -> Tuple[Transaction, ...]:
        """Get the committed transactions, oldest first."""
        return tuple(self._done)

    def undo(self, chord: Chord) -> Chord:
        """Undo the most recent transaction.

        Args:
            chord: The chord the transaction was applied to.

        Returns:
            The chord with the transaction reverted, or the same chord if
            there is nothing to undo.
        """
        if not self._done:
            return chord
        transaction = self._done.pop()
        for change in reversed(transaction):
            chord = change.invert().apply_to(chord)
        self._undone.append(transaction)
        return chord

    def redo(self, chord: Chord) -> Chord:
        """Reapply the most recently undone transaction.

        Args:
            chord: The chord to reapply the transaction to.

        Returns:
            The chord with the transaction applied again, or the same chord
            if there is nothing to redo.
        """
        if not self._undone:
            return chord
        transaction = self._undone.pop()
        for change in transaction:
            chord = change.apply_to(chord)
        self._done.append(transaction)
        return chord

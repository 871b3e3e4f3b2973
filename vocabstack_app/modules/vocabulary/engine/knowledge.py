from typing import Dict, Iterable, Mapping, Optional

from vocabstack_app.core.signals import knowledge_changed

from ..schemas import KNOWLEDGE_UNKNOWN, EntryDTO


class KnowledgeTracker:
    """
    Self-assessed familiarity per entry id.

    Every mutation emits ``knowledge_changed`` with this tracker as sender so
    a persistence subscriber can write the snapshot through.
    """

    def __init__(self):
        self._states: Dict[str, str] = {}

    def read(self, entry_id: str) -> str:
        return self._states.get(entry_id, KNOWLEDGE_UNKNOWN)

    def mark(self, entry_id: str, state: str) -> None:
        # Last write wins, no history.
        self._states[entry_id] = state
        self._notify(entry_id=entry_id, state=state)

    def load(self, snapshot: Optional[Mapping[str, str]]) -> None:
        """
        Replace the whole mapping. The caller is responsible for validation.

        ``None`` (no prior data) leaves the current mapping alone; an empty
        mapping resets every entry to the ``unknown`` default.
        """
        if snapshot is None:
            return
        self._states = dict(snapshot)
        self._notify()

    def default_fill(self, entries: Iterable[EntryDTO]) -> None:
        changed = False
        for entry in entries:
            if entry.id not in self._states:
                self._states[entry.id] = KNOWLEDGE_UNKNOWN
                changed = True
        if changed:
            self._notify()

    def snapshot(self) -> Dict[str, str]:
        return dict(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def _notify(self, entry_id=None, state=None) -> None:
        knowledge_changed.send(self, snapshot=self.snapshot(), entry_id=entry_id, state=state)

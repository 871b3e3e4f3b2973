# File: vocabstack_app/modules/vocabulary/engine/core.py
# VocabOrderingEngine - state container for the vocabulary page.

import logging
import random
from typing import Dict, List, Optional

from vocabstack_app.core.error_handlers import ContentLoadError
from vocabstack_app.core.signals import list_order_changed, vocab_load_failed, vocab_loaded

from ..schemas import (
    KNOWLEDGE_STATES,
    KNOWLEDGE_UNKNOWN,
    STATUS_FAILED,
    STATUS_IDLE,
    STATUS_LOADING,
    STATUS_SUCCEEDED,
    EntryDTO,
    FilterParams,
    TopicDTO,
    TopicStatsDTO,
    VocabularyPayload,
)
from .filters import build_pipeline
from .flashcard import FlashcardSequencer
from .knowledge import KnowledgeTracker
from .ordering import merge_order

logger = logging.getLogger(__name__)


class VocabOrderingEngine:
    """
    Owns topics, entries, knowledge, the browsing list order and the
    flashcard sequence.

    Topics and entries are replaced only by a successful :meth:`load`.
    ``list_order`` follows the filters; the flashcard order only changes
    through the flashcard operations, so filter edits never move the active
    card.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.topics: List[TopicDTO] = []
        self.entries: List[EntryDTO] = []
        self.status = STATUS_IDLE
        self.error: Optional[str] = None
        self.knowledge = KnowledgeTracker()
        self.flashcard = FlashcardSequencer(self.rng)
        self.list_order: List[int] = []
        self.filters = FilterParams()
        self._index_by_id: Dict[str, int] = {}

    # ------------------------------------------------------------------ #
    #  Load lifecycle                                                      #
    # ------------------------------------------------------------------ #

    @property
    def is_ready(self) -> bool:
        return self.status == STATUS_SUCCEEDED

    def load(self, loader) -> bool:
        """
        Fetch content through ``loader.fetch_vocabulary()``.

        Failures are recorded on the engine instead of raised; entries and
        topics keep their previous values. Returns True on success.
        """
        self.status = STATUS_LOADING
        self.error = None
        try:
            payload = loader.fetch_vocabulary()
        except ContentLoadError as exc:
            self.mark_failed(exc.message)
            return False
        except Exception as exc:
            logger.exception("Unexpected error from %r", loader)
            self.mark_failed(str(exc))
            return False
        self.apply_payload(payload)
        return True

    def mark_failed(self, message: str) -> None:
        self.status = STATUS_FAILED
        self.error = message or 'Failed to load vocab'
        # Entries and topics survive a failed reload; the list does not.
        self.list_order = []
        logger.warning("Vocabulary load failed: %s", self.error)
        vocab_load_failed.send(self, error=self.error)

    def apply_payload(self, payload: VocabularyPayload) -> None:
        self.topics = list(payload.topics)
        self.entries = list(payload.entries)
        self._index_by_id = {entry.id: i for i, entry in enumerate(self.entries)}
        self.knowledge.default_fill(self.entries)

        identity = list(range(len(self.entries)))
        self.list_order = list(identity)
        self.filters = FilterParams()
        self.flashcard.reset()
        self.flashcard.initialize(identity, index=0)

        self.status = STATUS_SUCCEEDED
        self.error = None
        logger.info("Loaded %d topics and %d entries", len(self.topics), len(self.entries))
        vocab_loaded.send(self, topics_count=len(self.topics), entries_count=len(self.entries))

    # ------------------------------------------------------------------ #
    #  Browsing list                                                       #
    # ------------------------------------------------------------------ #

    def pipeline(self, params: FilterParams, apply_topics: bool = True) -> List[int]:
        if not self.is_ready:
            return []
        return build_pipeline(self.entries, params, self.knowledge.read, apply_topics=apply_topics)

    def apply_filters(self, params: FilterParams) -> bool:
        """
        Recompute ``list_order`` for ``params``. Returns True if it changed.

        Toggling ``mix`` drops the previous order: switching it on reshuffles
        everything, switching it off restores ascending order.
        """
        if not self.is_ready:
            return False

        fresh = self.pipeline(params)
        prev = self.list_order if params.mix == self.filters.mix else []
        new_order = merge_order(prev, fresh, mix=params.mix, rng=self.rng)
        self.filters = params

        if new_order == self.list_order:
            return False
        self.list_order = new_order
        list_order_changed.send(self, order=list(new_order))
        return True

    def entries_for(self, order: List[int]) -> List[EntryDTO]:
        return [self.entries[i] for i in order if 0 <= i < len(self.entries)]

    def entry_index(self, entry_id: str) -> Optional[int]:
        return self._index_by_id.get(entry_id)

    def get_entry(self, entry_id: str) -> Optional[EntryDTO]:
        index = self.entry_index(entry_id)
        return None if index is None else self.entries[index]

    def topic_stats(self, params: Optional[FilterParams] = None) -> Dict[str, TopicStatsDTO]:
        """
        Knowledge counts per topic over every filter except the topic filter.

        Entries pointing at an unknown topic id get a bucket of their own.
        """
        params = params or self.filters
        stats = {topic.id: TopicStatsDTO() for topic in self.topics}
        for i in self.pipeline(params, apply_topics=False):
            entry = self.entries[i]
            state = self.knowledge.read(entry.id)
            if state not in KNOWLEDGE_STATES:
                state = KNOWLEDGE_UNKNOWN
            stats.setdefault(entry.topic_id, TopicStatsDTO()).add(state)
        return stats

    # ------------------------------------------------------------------ #
    #  Knowledge                                                           #
    # ------------------------------------------------------------------ #

    def mark(self, entry_id: str, state: str) -> None:
        self.knowledge.mark(entry_id, state)

    def read_knowledge(self, entry_id: str) -> str:
        return self.knowledge.read(entry_id)

    def load_knowledge(self, snapshot) -> None:
        self.knowledge.load(snapshot)
        if self.is_ready:
            self.knowledge.default_fill(self.entries)

    # ------------------------------------------------------------------ #
    #  Flashcards                                                          #
    # ------------------------------------------------------------------ #

    def start_flashcards(self, order: Optional[List[int]] = None, index: Optional[int] = None,
                         shuffle: bool = False) -> None:
        """Start study mode from ``order``, the current list order, or all entries."""
        if order is None:
            order = self.list_order or list(range(len(self.entries)))
        self.flashcard.initialize(order, index=index, total=len(self.entries))
        if shuffle:
            self.flashcard.shuffle_all()

    def current_card(self) -> Optional[EntryDTO]:
        i = self.flashcard.current_entry_index()
        if i is None or not 0 <= i < len(self.entries):
            return None
        return self.entries[i]

    def to_dict(self) -> dict:
        return {
            'status': self.status,
            'error': self.error,
            'topics_count': len(self.topics),
            'entries_count': len(self.entries),
            'list_count': len(self.list_order),
            'flashcard': self.flashcard.to_dict(),
        }

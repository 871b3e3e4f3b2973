from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

LEVELS = ('A1', 'A2', 'B1', 'B2', 'C1', 'C2')
MIXED_LEVEL = 'Mixed'

KNOWLEDGE_UNKNOWN = 'unknown'
KNOWLEDGE_LEARNING = 'learning'
KNOWLEDGE_KNOWN = 'known'
KNOWLEDGE_STATES = (KNOWLEDGE_UNKNOWN, KNOWLEDGE_LEARNING, KNOWLEDGE_KNOWN)

KNOWLEDGE_FILTER_ALL = 'all'
KNOWLEDGE_FILTERS = (KNOWLEDGE_FILTER_ALL,) + KNOWLEDGE_STATES

STATUS_IDLE = 'idle'
STATUS_LOADING = 'loading'
STATUS_SUCCEEDED = 'succeeded'
STATUS_FAILED = 'failed'


@dataclass(frozen=True)
class ExampleDTO:
    en: str
    vi: str

    def to_dict(self) -> Dict[str, str]:
        return {'en': self.en, 'vi': self.vi}


@dataclass(frozen=True)
class TopicDTO:
    id: str
    name: str
    level: str = MIXED_LEVEL

    def to_dict(self) -> Dict[str, str]:
        return {'id': self.id, 'name': self.name, 'level': self.level}


@dataclass(frozen=True)
class EntryDTO:
    id: str
    word: str
    meaning_vi: str
    topic_id: str
    level: str
    phonetic: Optional[str] = None
    pos: Optional[str] = None
    examples: tuple = ()

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'word': self.word,
            'meaningVi': self.meaning_vi,
            'topicId': self.topic_id,
            'level': self.level,
            'examples': [ex.to_dict() for ex in self.examples],
        }
        if self.phonetic:
            data['phonetic'] = self.phonetic
        if self.pos:
            data['pos'] = self.pos
        return data


@dataclass
class VocabularyPayload:
    """What a content loader hands to the engine."""
    topics: List[TopicDTO] = field(default_factory=list)
    entries: List[EntryDTO] = field(default_factory=list)


@dataclass(frozen=True)
class FilterParams:
    """Filter configuration for the browsing list.

    Every field's default means "no restriction". ``start``/``end`` are
    1-based inclusive positions in the unfiltered entry array; ``end=None``
    runs through the last entry.
    """
    start: int = 1
    end: Optional[int] = None
    topics: FrozenSet[str] = frozenset()
    levels: FrozenSet[str] = frozenset()
    knowledge: str = KNOWLEDGE_FILTER_ALL
    search: str = ''
    mix: bool = False


@dataclass
class FlashcardState:
    order: List[int] = field(default_factory=list)
    index: int = 0
    show_answer: bool = False
    # Informational only; ``order`` is authoritative.
    start: int = 0
    end: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'order': list(self.order),
            'index': self.index,
            'showAnswer': self.show_answer,
            'start': self.start,
            'end': self.end,
        }


@dataclass
class TopicStatsDTO:
    total: int = 0
    known: int = 0
    learning: int = 0
    unknown: int = 0

    def add(self, state: str) -> None:
        self.total += 1
        setattr(self, state, getattr(self, state) + 1)

    def to_dict(self) -> Dict[str, int]:
        return {
            'total': self.total,
            'known': self.known,
            'learning': self.learning,
            'unknown': self.unknown,
        }

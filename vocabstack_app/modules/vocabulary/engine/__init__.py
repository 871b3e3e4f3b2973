# Vocabulary Engine
# Pure ordering/filtering/knowledge logic, no Flask request handling.

from .core import VocabOrderingEngine
from .filters import build_pipeline, clamp_range
from .flashcard import FlashcardSequencer
from .knowledge import KnowledgeTracker
from .ordering import fisher_yates, merge_order, stabilize_order

__all__ = [
    'VocabOrderingEngine',
    'FlashcardSequencer',
    'KnowledgeTracker',
    'build_pipeline',
    'clamp_range',
    'fisher_yates',
    'merge_order',
    'stabilize_order',
]

"""Public interface for the vocabulary module."""

import random
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from flask import Flask, current_app

from .engine import VocabOrderingEngine
from .services import KnowledgeStore, build_content_loader

EXTENSION_KEY = 'vocabstack.vocabulary'


@dataclass
class VocabularyRuntime:
    """Everything one app owns for the vocabulary page."""
    engine: VocabOrderingEngine
    store: KnowledgeStore
    lock: threading.RLock = field(default_factory=threading.RLock)
    # Strong reference to the signal receiver; blinker only holds it weakly.
    persistence_receiver: Optional[Callable] = None


class VocabularyInterface:
    @staticmethod
    def install(app: Flask, rng: Optional[random.Random] = None) -> VocabularyRuntime:
        """Create the engine and its persistence wiring for ``app``."""
        from .events import connect_persistence

        runtime = VocabularyRuntime(
            engine=VocabOrderingEngine(rng=rng),
            store=KnowledgeStore(app.config.get('KNOWLEDGE_STORAGE_KEY') or 'vocabKnowledge'),
        )
        app.extensions[EXTENSION_KEY] = runtime
        connect_persistence(app, runtime)
        return runtime

    @staticmethod
    def get_runtime(app: Optional[Flask] = None) -> VocabularyRuntime:
        app = app or current_app
        return app.extensions[EXTENSION_KEY]

    @staticmethod
    def get_engine(app: Optional[Flask] = None) -> VocabOrderingEngine:
        return VocabularyInterface.get_runtime(app).engine

    @staticmethod
    def restore_knowledge(app: Flask) -> bool:
        """Load the persisted knowledge snapshot, if any. Returns True when applied."""
        runtime = VocabularyInterface.get_runtime(app)
        snapshot = runtime.store.load_knowledge_snapshot()
        if snapshot is None:
            app.logger.info("No stored knowledge snapshot, starting from defaults.")
            return False
        with runtime.lock:
            runtime.engine.load_knowledge(snapshot)
        app.logger.info("Restored knowledge for %d entries.", len(snapshot))
        return True

    @staticmethod
    def load_content(app: Flask) -> bool:
        """(Re)load vocabulary from the configured source. Failures are recorded on the engine."""
        runtime = VocabularyInterface.get_runtime(app)
        loader = build_content_loader(app.config)
        with runtime.lock:
            return runtime.engine.load(loader)

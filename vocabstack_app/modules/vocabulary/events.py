# File: vocabstack_app/modules/vocabulary/events.py
# Signal subscribers: write-through persistence of the knowledge snapshot.

import logging

from flask import current_app, has_app_context
from sqlalchemy.exc import SQLAlchemyError

from vocabstack_app.core.signals import knowledge_changed

logger = logging.getLogger(__name__)


def connect_persistence(app, runtime):
    """Save the snapshot every time this runtime's tracker changes."""

    def on_knowledge_changed(sender, snapshot=None, **kwargs):
        try:
            if has_app_context() and current_app._get_current_object() is app:
                runtime.store.save_knowledge_snapshot(snapshot)
            else:
                with app.app_context():
                    runtime.store.save_knowledge_snapshot(snapshot)
        except SQLAlchemyError:
            # Already logged by the store; the in-memory state stays authoritative.
            logger.warning("Knowledge change not persisted (entry=%s)", kwargs.get('entry_id'))

    knowledge_changed.connect(on_knowledge_changed, sender=runtime.engine.knowledge)
    runtime.persistence_receiver = on_knowledge_changed
    return on_knowledge_changed

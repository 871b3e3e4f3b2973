import logging
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from vocabstack_app.models import AppStorage, db

from ..schemas import KNOWLEDGE_STATES

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = 'vocabKnowledge'


class KnowledgeStore:
    """Persist the knowledge snapshot as one JSON blob in ``app_storage``."""

    def __init__(self, key: str = DEFAULT_STORAGE_KEY):
        self.key = key

    def load_knowledge_snapshot(self) -> Optional[Dict[str, str]]:
        """
        Return the stored mapping, or None when nothing usable is stored.

        Values other than the known states are dropped.
        """
        raw = AppStorage.get(self.key)
        if not isinstance(raw, dict):
            if raw is not None:
                logger.debug("Ignoring malformed knowledge snapshot under %s", self.key)
            return None
        return {
            str(entry_id): state
            for entry_id, state in raw.items()
            if state in KNOWLEDGE_STATES
        }

    def save_knowledge_snapshot(self, mapping: Dict[str, str]) -> None:
        AppStorage.set(self.key, dict(mapping))
        try:
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception("Could not save knowledge snapshot under %s", self.key)
            raise

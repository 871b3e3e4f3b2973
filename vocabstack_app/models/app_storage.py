"""Key-value storage model for persisted user progress."""

from __future__ import annotations

from typing import Any

from sqlalchemy.sql import func

from vocabstack_app.core.extensions import db


class AppStorage(db.Model):
    """Simple key-value blob store.

    Each row holds one JSON document under a well-known key (for example the
    vocabulary knowledge snapshot).
    """

    __tablename__ = 'app_storage'

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.JSON, nullable=True)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Return the stored value for ``key`` or ``default`` when absent."""
        entry = db.session.get(cls, key)
        if entry is None or entry.value is None:
            return default
        return entry.value

    @classmethod
    def set(cls, key: str, value: Any) -> 'AppStorage':
        """Create or overwrite the value for ``key``. The caller commits."""
        entry = db.session.get(cls, key)
        if entry is None:
            entry = cls(key=key, value=value)
            db.session.add(entry)
        else:
            entry.value = value
        return entry

    def __repr__(self) -> str:
        return f'<AppStorage {self.key}>'

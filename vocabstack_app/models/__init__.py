from vocabstack_app.core.extensions import db

from .app_storage import AppStorage

__all__ = ["db", "AppStorage"]

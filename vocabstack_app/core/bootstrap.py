"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

from flask import Flask

from .error_handlers import register_error_handlers
from .extensions import csrf_protect, db
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure application logging if no handlers are present."""

    if not app.testing:
        setup_logging(
            app,
            log_level=app.config.get("LOG_LEVEL", "INFO"),
            log_dir=app.config.get("LOG_DIR"),
        )

    if app.logger.handlers:
        return

    app.logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    csrf_protect.init_app(app)
    register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create database tables."""

    from ..models import AppStorage  # noqa: F401  (registers the table)

    db.create_all()
    app.logger.info("Database tables ready at %s", app.config.get("SQLALCHEMY_DATABASE_URI"))


def initialize_content(app: Flask) -> None:
    """Restore persisted knowledge and, if enabled, load the vocabulary content."""

    from ..modules.vocabulary.interface import VocabularyInterface

    VocabularyInterface.restore_knowledge(app)
    if app.config.get("VOCAB_AUTOLOAD", True):
        VocabularyInterface.load_content(app)

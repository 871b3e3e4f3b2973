"""Application factory for the Vocabstack app."""

from __future__ import annotations

from flask import Flask

from .config import Config
from .core.bootstrap import (
    configure_logging,
    initialize_content,
    initialize_database,
    register_blueprints,
    register_extensions,
)
from .core.extensions import db

__all__ = ["create_app", "db"]


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure a Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)
    register_extensions(app)
    register_blueprints(app)

    with app.app_context():
        initialize_database(app)
        initialize_content(app)

    return app

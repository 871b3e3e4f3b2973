# File: vocabstack_app/modules/vocabulary/__init__.py
"""Vocabulary module: ordering/filtering engine, knowledge tracking and JSON API."""

from flask import Blueprint

blueprint = Blueprint('vocabulary_api', __name__)

module_metadata = {
    'name': 'Từ vựng',
    'icon': 'book',
    'category': 'Learning',
    'url_prefix': '/api/vocabulary',
    'enabled': True
}


def setup_module(app):
    """Attach routes and give ``app`` its own engine instance."""
    # Deferred imports to avoid circular dependencies
    from vocabstack_app.core.extensions import csrf_protect
    from . import routes  # noqa: F401  (trigger route registration)
    from .interface import VocabularyInterface

    csrf_protect.exempt(blueprint)
    VocabularyInterface.install(app)

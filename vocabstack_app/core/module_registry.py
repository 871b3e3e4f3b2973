"""Utilities for declaratively registering application modules.

Each feature module is described by a :class:`ModuleDefinition`; the registry
imports it, runs its ``setup_module`` hook and mounts its blueprint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str
    url_prefix: Optional[str] = None
    version: str = "1.0"

    def load_module(self):
        return import_string(self.import_path)

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = self.load_module()
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Register all modules in the provided iterable with the Flask app."""

    for module in modules:
        setup = getattr(module.load_module(), "setup_module", None)
        if callable(setup):
            setup(app)
        blueprint = module.load_blueprint()
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in Vocabstack modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition(
        "vocabstack_app.modules.vocabulary",
        "blueprint",
        url_prefix="/api/vocabulary",
        version="1.0",
    ),
)

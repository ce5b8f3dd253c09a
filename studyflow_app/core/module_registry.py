"""Utilities for declaratively registering application modules.

Each blueprint-backed module is described with metadata so that registration
stays a table lookup instead of a list of imports in the factory.
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

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = import_string(self.import_path)
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
        blueprint = module.load_blueprint()
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in StudyFlow modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("studyflow_app.modules.auth", "auth_bp", url_prefix="/api/auth"),
    ModuleDefinition("studyflow_app.modules.planner", "planner_bp", url_prefix="/api"),
    ModuleDefinition("studyflow_app.modules.notes", "notes_bp", url_prefix="/api/notes"),
    ModuleDefinition("studyflow_app.modules.calendar", "calendar_bp", url_prefix="/api/calendar"),
    ModuleDefinition("studyflow_app.modules.flashcard", "flashcard_bp", url_prefix="/api/flashcards"),
    ModuleDefinition("studyflow_app.modules.quiz", "quiz_bp", url_prefix="/api/quizzes"),
    ModuleDefinition("studyflow_app.modules.gamification", "gamification_bp", url_prefix="/api"),
    ModuleDefinition("studyflow_app.modules.notification", "notification_bp", url_prefix="/api/notifications"),
    ModuleDefinition("studyflow_app.modules.settings", "settings_bp", url_prefix="/api/settings"),
    ModuleDefinition("studyflow_app.modules.chat", "chat_bp", url_prefix="/api/ai"),
)

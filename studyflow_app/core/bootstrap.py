"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging
import os

from flask import Flask

from .extensions import db, login_manager
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Route ``app.logger`` through the shared ``studyflow`` handlers."""

    logger = setup_logging(
        app,
        log_level=app.config.get('LOG_LEVEL', 'INFO'),
        log_dir=app.config.get('LOG_DIR'),
        json_format=app.config.get('LOG_JSON', False),
        to_file=app.config.get('LOG_TO_FILE', True),
    )

    app.logger.handlers.clear()
    app.logger.setLevel(logger.level)
    for handler in logger.handlers:
        app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)

    from ..modules.auth.loader import register_loaders

    register_loaders(login_manager)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def register_events(app: Flask) -> None:
    """Connect every module's signal receivers."""

    from ..modules.access_control import events as access_events
    from ..modules.notification import events as notification_events

    access_events.register_events()
    notification_events.register_events()
    app.logger.debug("Signal receivers connected.")


def initialize_database(app: Flask) -> None:
    """Create database tables if they do not exist yet."""

    from .. import models  # noqa: F401  (registers every table on the metadata)

    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///'):
        db_path = app.config['SQLALCHEMY_DATABASE_URI'][len('sqlite:///'):]
        directory = os.path.dirname(db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    db.create_all()
    logging.getLogger('studyflow').debug("Database tables ensured.")

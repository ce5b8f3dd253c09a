from flask import Blueprint

flashcard_bp = Blueprint('flashcard', __name__)

module_metadata = {
    'name': 'Flashcards',
    'category': 'Learning',
    'url_prefix': '/api/flashcards',
    'enabled': True
}

from . import routes  # noqa: E402,F401

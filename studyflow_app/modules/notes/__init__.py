from flask import Blueprint

notes_bp = Blueprint('notes', __name__)

module_metadata = {
    'name': 'Shared Notes',
    'category': 'Collaboration',
    'url_prefix': '/api/notes',
    'enabled': True
}

from . import routes  # noqa: E402,F401

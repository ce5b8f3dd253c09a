from flask import Blueprint

chat_bp = Blueprint('chat', __name__)

module_metadata = {
    'name': 'AI Assistant',
    'category': 'Learning',
    'url_prefix': '/api/ai',
    'enabled': True
}

from . import routes  # noqa: E402,F401

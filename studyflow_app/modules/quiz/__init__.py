from flask import Blueprint

quiz_bp = Blueprint('quiz', __name__)

module_metadata = {
    'name': 'Quizzes',
    'category': 'Learning',
    'url_prefix': '/api/quizzes',
    'enabled': True
}

from . import routes  # noqa: E402,F401

from flask import Blueprint

gamification_bp = Blueprint('gamification', __name__)

module_metadata = {
    'name': 'Streaks & Rewards',
    'category': 'Gamification',
    'url_prefix': '/api',
    'enabled': True
}

from . import routes  # noqa: E402,F401

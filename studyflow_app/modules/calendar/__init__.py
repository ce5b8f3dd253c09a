from flask import Blueprint

calendar_bp = Blueprint('calendar', __name__)

module_metadata = {
    'name': 'Calendar',
    'category': 'Planning',
    'url_prefix': '/api/calendar',
    'enabled': True
}

from . import routes  # noqa: E402,F401

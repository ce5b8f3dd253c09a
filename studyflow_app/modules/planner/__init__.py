from flask import Blueprint

planner_bp = Blueprint('planner', __name__)

module_metadata = {
    'name': 'Study Planner',
    'category': 'Planning',
    'url_prefix': '/api',
    'enabled': True
}

from . import routes  # noqa: E402,F401

# File: studyflow_app/modules/auth/__init__.py
from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

module_metadata = {
    'name': 'Authentication',
    'category': 'System',
    'url_prefix': '/api/auth',
    'enabled': True
}

from . import routes  # noqa: E402,F401

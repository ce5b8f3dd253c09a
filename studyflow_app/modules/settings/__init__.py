from flask import Blueprint

settings_bp = Blueprint('settings', __name__)

module_metadata = {
    'name': 'Settings',
    'category': 'System',
    'url_prefix': '/api/settings',
    'enabled': True
}

from . import routes  # noqa: E402,F401

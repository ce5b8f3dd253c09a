from flask import Blueprint

notification_bp = Blueprint('notification', __name__)

module_metadata = {
    'name': 'Notifications',
    'category': 'System',
    'url_prefix': '/api/notifications',
    'enabled': True
}

from . import routes  # noqa: E402,F401

from flask import current_app, jsonify, request
from flask_login import login_required

from ...core.error_handlers import success_response
from ..auth.interface import AuthInterface
from . import notification_bp
from .services import NotificationService


@notification_bp.route('', methods=['GET'])
@login_required
def list_notifications():
    actor = AuthInterface.current_actor()
    default_limit = current_app.config.get('NOTIFICATIONS_PAGE_SIZE', 20)
    limit = max(1, min(request.args.get('limit', default_limit, type=int), 100))
    offset = max(0, request.args.get('offset', 0, type=int))

    notifs = NotificationService.list_notifications(actor, limit, offset)
    return jsonify(success_response({
        'notifications': [n.to_dict() for n in notifs],
        'unread_count': NotificationService.get_unread_count(actor),
    }))


@notification_bp.route('/<int:notif_id>/read', methods=['PATCH'])
@login_required
def mark_read(notif_id):
    notif = NotificationService.mark_read(AuthInterface.current_actor(), notif_id)
    return jsonify(success_response(notif.to_dict()))


@notification_bp.route('/read-all', methods=['POST'])
@login_required
def mark_all_read():
    updated = NotificationService.mark_all_read(AuthInterface.current_actor())
    return jsonify(success_response({'updated': updated}))


@notification_bp.route('/<int:notif_id>', methods=['DELETE'])
@login_required
def delete_notification(notif_id):
    NotificationService.delete(AuthInterface.current_actor(), notif_id)
    return jsonify(success_response(message='Notification deleted'))

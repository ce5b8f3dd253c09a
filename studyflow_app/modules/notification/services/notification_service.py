from typing import List

from ....core.error_handlers import NotFoundError
from ....core.extensions import db
from ....models import Notification
from ...auth.schemas import Actor


class NotificationService:
    @staticmethod
    def create_notification(user_id, title, message, type=Notification.TYPE_SYSTEM,
                            reference_id=None, reference_type=None):
        """Insert one notification. Only called from signal receivers."""
        notif = Notification(
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            reference_id=reference_id,
            reference_type=reference_type,
        )
        db.session.add(notif)
        db.session.commit()
        return notif

    @staticmethod
    def get_unread_count(actor: Actor) -> int:
        return Notification.query.filter_by(user_id=actor.user_id, is_read=False).count()

    @staticmethod
    def list_notifications(actor: Actor, limit=20, offset=0) -> List[Notification]:
        return Notification.query.filter_by(user_id=actor.user_id)\
            .order_by(Notification.created_at.desc(), Notification.id.desc())\
            .limit(limit).offset(offset).all()

    @staticmethod
    def _get_own(actor: Actor, notification_id: int) -> Notification:
        notif = Notification.query.filter_by(id=notification_id, user_id=actor.user_id).first()
        if notif is None:
            raise NotFoundError('Notification not found', resource='notification')
        return notif

    @staticmethod
    def mark_read(actor: Actor, notification_id: int) -> Notification:
        notif = NotificationService._get_own(actor, notification_id)
        notif.is_read = True
        db.session.commit()
        return notif

    @staticmethod
    def mark_all_read(actor: Actor) -> int:
        updated = Notification.query.filter_by(user_id=actor.user_id, is_read=False)\
            .update({'is_read': True})
        db.session.commit()
        return updated

    @staticmethod
    def delete(actor: Actor, notification_id: int) -> None:
        notif = NotificationService._get_own(actor, notification_id)
        db.session.delete(notif)
        db.session.commit()

"""
Calendar Event Service
======================
Events belong to one user and can be shared read-only with others.
"""
from datetime import datetime
from typing import Dict, List, Optional

from flask import current_app

from ....core.error_handlers import ValidationError
from ....core.extensions import db
from ....core.signals import event_shared
from ....models import CalendarEvent, EventShare, User
from ....utils.time_utils import ensure_utc
from ...access_control import AccessService, event_shares
from ...access_control.logics.policies import (
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_READ,
    ACTION_SHARE,
    STATUS_ACCEPTED,
)
from ...auth.schemas import Actor
from ...planner.services import ReminderService, SubjectService


class EventService:

    @staticmethod
    def list_events(
        actor: Actor, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> Dict[str, List[CalendarEvent]]:
        """
        Owned events (optionally limited to a start-time window) and events
        shared with the actor through an accepted share.
        """
        query = CalendarEvent.query.filter(CalendarEvent.user_id == actor.user_id)
        if start is not None:
            query = query.filter(CalendarEvent.start_time >= start)
        if end is not None:
            query = query.filter(CalendarEvent.start_time <= end)
        owned = query.order_by(CalendarEvent.start_time, CalendarEvent.id).all()

        shared = (
            CalendarEvent.query.join(EventShare, EventShare.event_id == CalendarEvent.id)
            .filter(
                EventShare.shared_with_user_id == actor.user_id,
                EventShare.status == STATUS_ACCEPTED,
                CalendarEvent.user_id != actor.user_id,
            )
            .order_by(CalendarEvent.start_time, CalendarEvent.id)
            .all()
        )
        return {'owned': owned, 'shared': shared}

    @staticmethod
    def _check_window(event: CalendarEvent) -> None:
        if event.end_time is not None and ensure_utc(event.end_time) < ensure_utc(event.start_time):
            raise ValidationError(
                'End time must not be before start time',
                errors={'end_time': ['End time must not be before start time.']},
            )

    @staticmethod
    def create_event(actor: Actor, data: dict) -> CalendarEvent:
        SubjectService.check_subject_ref(actor, data.get('subject_id'))
        event = CalendarEvent(user_id=actor.user_id, **data)
        db.session.add(event)
        if event.reminder_minutes:
            db.session.flush()
            ReminderService.add_event_reminder(event)
        db.session.commit()
        return event

    @staticmethod
    def get_event(actor: Actor, event_id: int) -> CalendarEvent:
        return AccessService.authorize_event(event_id, actor, ACTION_READ)

    @staticmethod
    def update_event(actor: Actor, event_id: int, changes: dict) -> CalendarEvent:
        event = AccessService.authorize_event(event_id, actor, ACTION_EDIT)
        if 'subject_id' in changes:
            SubjectService.check_subject_ref(actor, changes['subject_id'])
        for key, value in changes.items():
            setattr(event, key, value)
        EventService._check_window(event)
        db.session.commit()
        return event

    @staticmethod
    def delete_event(actor: Actor, event_id: int) -> None:
        event = AccessService.authorize_event(event_id, actor, ACTION_DELETE)
        db.session.delete(event)
        db.session.commit()

    # ------------------------------------------------------------------
    # Shares
    # ------------------------------------------------------------------
    @staticmethod
    def share_event(actor: Actor, event_id: int, email: str) -> EventShare:
        event = AccessService.authorize_event(event_id, actor, ACTION_SHARE)
        owner = db.session.get(User, actor.user_id)
        share = event_shares.create(event, owner, email)

        try:
            event_shared.send(current_app._get_current_object(), share=share, event=event, owner=owner)
        except Exception as e:
            current_app.logger.error(f"[Calendar] Error emitting event_shared for share {share.id}: {e}")
        return share

    @staticmethod
    def update_event_share(actor: Actor, share_id: int, changes: dict) -> EventShare:
        return event_shares.update(share_id, actor, changes)

    @staticmethod
    def delete_event_share(actor: Actor, share_id: int) -> None:
        event_shares.delete(share_id, actor)

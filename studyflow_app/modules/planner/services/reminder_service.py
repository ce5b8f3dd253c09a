"""
Reminder Service
================
Personal reminders, optionally attached to one of the actor's tasks or
calendar events. Calendar events created with ``reminder_minutes`` get one
automatically.
"""
from datetime import datetime, timedelta
from typing import List, Optional

from ....core.extensions import db
from ....models import CalendarEvent, Reminder, Task
from ....utils.time_utils import ensure_utc, utcnow
from ...access_control import AccessService
from ...auth.schemas import Actor


class ReminderService:

    @staticmethod
    def list_reminders(actor: Actor, due_only: bool = False, now: Optional[datetime] = None) -> List[Reminder]:
        query = Reminder.query.filter(Reminder.user_id == actor.user_id)
        if due_only:
            query = query.filter(Reminder.reminder_time <= (now or utcnow()), Reminder.is_read.is_(False))
        return query.order_by(Reminder.reminder_time, Reminder.id).all()

    @staticmethod
    def get_reminder(actor: Actor, reminder_id: int) -> Reminder:
        return AccessService.ensure_owned(Reminder, reminder_id, actor, resource='reminder')

    @staticmethod
    def _check_refs(actor: Actor, data: dict) -> None:
        if data.get('task_id') is not None:
            AccessService.ensure_owned(Task, data['task_id'], actor, resource='task')
        if data.get('event_id') is not None:
            AccessService.ensure_owned(CalendarEvent, data['event_id'], actor, resource='event')

    @staticmethod
    def create_reminder(actor: Actor, data: dict) -> Reminder:
        ReminderService._check_refs(actor, data)
        reminder = Reminder(user_id=actor.user_id, **data)
        db.session.add(reminder)
        db.session.commit()
        return reminder

    @staticmethod
    def add_event_reminder(event: CalendarEvent) -> Reminder:
        """Queue a reminder ``event.reminder_minutes`` before the event starts. Caller commits."""
        reminder = Reminder(
            user_id=event.user_id,
            title=f'Reminder: {event.title}',
            description=event.description,
            reminder_time=ensure_utc(event.start_time) - timedelta(minutes=event.reminder_minutes),
            event_id=event.id,
        )
        db.session.add(reminder)
        return reminder

    @staticmethod
    def update_reminder(actor: Actor, reminder_id: int, changes: dict) -> Reminder:
        reminder = ReminderService.get_reminder(actor, reminder_id)
        ReminderService._check_refs(actor, changes)
        for key, value in changes.items():
            setattr(reminder, key, value)
        db.session.commit()
        return reminder

    @staticmethod
    def delete_reminder(actor: Actor, reminder_id: int) -> None:
        reminder = ReminderService.get_reminder(actor, reminder_id)
        db.session.delete(reminder)
        db.session.commit()

"""
Chat Service
============
Data access for an external assistant: a read-only snapshot of the user's
study data for prompt building, and the per-user message log. No model is
called from here.
"""
from typing import List

from ....core.error_handlers import UnauthenticatedError
from ....core.extensions import db
from ....models import AIMessage, CalendarEvent, Exam, Flashcard, Subject, Task, User
from ....utils.time_utils import utcnow
from ...auth.schemas import Actor


class ChatService:

    @staticmethod
    def get_context(actor: Actor) -> dict:
        user = db.session.get(User, actor.user_id)
        if user is None:
            raise UnauthenticatedError()
        now = utcnow()

        subjects = Subject.query.filter_by(user_id=user.user_id).order_by(Subject.name).all()
        pending_tasks = (
            Task.query.filter(Task.user_id == user.user_id, Task.status != Task.STATUS_COMPLETED)
            .order_by(Task.due_date, Task.id)
            .all()
        )
        upcoming_exams = (
            Exam.query.filter(Exam.user_id == user.user_id, Exam.date >= now)
            .order_by(Exam.date)
            .all()
        )
        upcoming_events = CalendarEvent.query.filter(
            CalendarEvent.user_id == user.user_id, CalendarEvent.start_time > now
        ).count()
        flashcards = Flashcard.query.filter_by(user_id=user.user_id).count()

        return {
            'name': user.name,
            'subjects': [s.to_dict() for s in subjects],
            'pending_tasks': [t.to_dict() for t in pending_tasks],
            'upcoming_exams': [e.to_dict() for e in upcoming_exams],
            'upcoming_events': upcoming_events,
            'flashcards': flashcards,
            'daily_streak': user.daily_streak or 0,
            'total_focus_minutes': user.total_focus_minutes or 0,
        }

    @staticmethod
    def list_messages(actor: Actor) -> List[AIMessage]:
        return AIMessage.query.filter_by(user_id=actor.user_id)\
            .order_by(AIMessage.created_at, AIMessage.id).all()

    @staticmethod
    def append_message(actor: Actor, role: str, content: str) -> AIMessage:
        message = AIMessage(user_id=actor.user_id, role=role, content=content)
        db.session.add(message)
        db.session.commit()
        return message

    @staticmethod
    def clear_messages(actor: Actor) -> int:
        removed = AIMessage.query.filter_by(user_id=actor.user_id).delete()
        db.session.commit()
        return removed

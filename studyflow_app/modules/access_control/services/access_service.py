"""
Access Service - resolves an actor's relationship to a resource and enforces
the sharing policy.

Share rows are looked up by (resource id, user id) through indexed columns;
the resource's share list is never scanned.
"""
from typing import Optional, Type

from flask import current_app

from ....core.error_handlers import ForbiddenError, NotFoundError
from ....core.extensions import db
from ....models import CalendarEvent, EventShare, Note, NoteShare
from ...auth.schemas import Actor
from ..logics.policies import ROLE_VIEWER, Decision, Relationship, decide


class AccessService:
    """Authorization checks for owned and shared resources."""

    @staticmethod
    def enforce(decision: Decision, resource: str, action: str) -> None:
        if decision is Decision.NOT_FOUND:
            raise NotFoundError(f'{resource.capitalize()} not found', resource=resource)
        if decision is Decision.FORBIDDEN:
            raise ForbiddenError(f'You do not have permission to {action} this {resource}', action=action)

    # ------------------------------------------------------------------
    # Owned-only resources
    # ------------------------------------------------------------------
    @staticmethod
    def ensure_owned(model: Type[db.Model], obj_id: int, actor: Actor, resource: str):
        """Return the row if ``actor`` owns it. Foreign rows are reported missing."""
        obj = db.session.get(model, obj_id) if obj_id is not None else None
        if obj is None or obj.user_id != actor.user_id:
            raise NotFoundError(f'{resource.capitalize()} not found', resource=resource)
        return obj

    # ------------------------------------------------------------------
    # Notes
    # ------------------------------------------------------------------
    @staticmethod
    def find_note_share(note_id: int, user_id: int) -> Optional[NoteShare]:
        return NoteShare.query.filter_by(note_id=note_id, shared_with_user_id=user_id).first()

    @classmethod
    def note_relationship(cls, note: Note, actor: Actor) -> Relationship:
        if note.user_id == actor.user_id:
            return Relationship.owner()
        share = cls.find_note_share(note.id, actor.user_id)
        if share is None:
            return Relationship.none()
        return Relationship.from_share(share.role, share.status)

    @classmethod
    def authorize_note(cls, note_id: int, actor: Actor, action: str) -> Note:
        note = db.session.get(Note, note_id)
        if note is None:
            raise NotFoundError('Note not found', resource='note')
        decision = decide(cls.note_relationship(note, actor), action)
        if decision is not Decision.ALLOW:
            current_app.logger.debug(
                f"[Access] user {actor.user_id} {action} note {note_id}: {decision.value}"
            )
        cls.enforce(decision, 'note', action)
        return note

    # ------------------------------------------------------------------
    # Calendar events (shares carry no role, accepted means viewer)
    # ------------------------------------------------------------------
    @staticmethod
    def find_event_share(event_id: int, user_id: int) -> Optional[EventShare]:
        return EventShare.query.filter_by(event_id=event_id, shared_with_user_id=user_id).first()

    @classmethod
    def event_relationship(cls, event: CalendarEvent, actor: Actor) -> Relationship:
        if event.user_id == actor.user_id:
            return Relationship.owner()
        share = cls.find_event_share(event.id, actor.user_id)
        if share is None:
            return Relationship.none()
        return Relationship.from_share(ROLE_VIEWER, share.status)

    @classmethod
    def authorize_event(cls, event_id: int, actor: Actor, action: str) -> CalendarEvent:
        event = db.session.get(CalendarEvent, event_id)
        if event is None:
            raise NotFoundError('Event not found', resource='event')
        decision = decide(cls.event_relationship(event, actor), action)
        if decision is not Decision.ALLOW:
            current_app.logger.debug(
                f"[Access] user {actor.user_id} {action} event {event_id}: {decision.value}"
            )
        cls.enforce(decision, 'event', action)
        return event

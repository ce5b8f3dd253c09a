"""
Note Service
============
Notes owned by one user and shared with others by email. Every operation
goes through the access control engine; shares themselves follow the common
share lifecycle.
"""
from typing import Dict, List, Tuple

from flask import current_app

from ....core.error_handlers import ForbiddenError
from ....core.extensions import db
from ....core.signals import note_shared
from ....models import Note, NoteComment, NoteShare, User
from ...access_control import AccessService, note_shares
from ...access_control.logics.policies import (
    ACTION_COMMENT,
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_READ,
    ACTION_SHARE,
    STATUS_ACCEPTED,
)
from ...auth.schemas import Actor
from ...planner.services import SubjectService


class NoteService:

    @staticmethod
    def list_notes(actor: Actor) -> Dict[str, List[Note]]:
        """Owned notes and notes shared with the actor through an accepted share."""
        owned = (
            Note.query.filter(Note.user_id == actor.user_id)
            .order_by(Note.updated_at.desc(), Note.id.desc())
            .all()
        )
        shared = (
            Note.query.join(NoteShare, NoteShare.note_id == Note.id)
            .filter(
                NoteShare.shared_with_user_id == actor.user_id,
                NoteShare.status == STATUS_ACCEPTED,
                Note.user_id != actor.user_id,
            )
            .order_by(Note.updated_at.desc(), Note.id.desc())
            .all()
        )
        return {'owned': owned, 'shared': shared}

    @staticmethod
    def create_note(actor: Actor, data: dict) -> Note:
        SubjectService.check_subject_ref(actor, data.get('subject_id'))
        note = Note(user_id=actor.user_id, **data)
        db.session.add(note)
        db.session.commit()
        return note

    @staticmethod
    def get_note(actor: Actor, note_id: int) -> Tuple[Note, bool]:
        """Return the note and whether the actor owns it (owners also see shares)."""
        note = AccessService.authorize_note(note_id, actor, ACTION_READ)
        return note, note.user_id == actor.user_id

    @staticmethod
    def update_note(actor: Actor, note_id: int, changes: dict) -> Note:
        note = AccessService.authorize_note(note_id, actor, ACTION_EDIT)
        if 'subject_id' in changes:
            if note.user_id != actor.user_id:
                raise ForbiddenError('Only the owner can move a note to another subject', action=ACTION_EDIT)
            SubjectService.check_subject_ref(actor, changes['subject_id'])
        for key, value in changes.items():
            setattr(note, key, value)
        db.session.commit()
        return note

    @staticmethod
    def delete_note(actor: Actor, note_id: int) -> None:
        note = AccessService.authorize_note(note_id, actor, ACTION_DELETE)
        db.session.delete(note)
        db.session.commit()

    # ------------------------------------------------------------------
    # Shares
    # ------------------------------------------------------------------
    @staticmethod
    def share_note(actor: Actor, note_id: int, email: str, role: str) -> NoteShare:
        note = AccessService.authorize_note(note_id, actor, ACTION_SHARE)
        owner = db.session.get(User, actor.user_id)
        share = note_shares.create(note, owner, email, role=role)

        # The share is committed; notifying the invitee is best-effort.
        try:
            note_shared.send(current_app._get_current_object(), share=share, note=note, owner=owner)
        except Exception as e:
            current_app.logger.error(f"[Notes] Error emitting note_shared for share {share.id}: {e}")
        return share

    @staticmethod
    def update_note_share(actor: Actor, share_id: int, changes: dict) -> NoteShare:
        return note_shares.update(share_id, actor, changes)

    @staticmethod
    def delete_note_share(actor: Actor, share_id: int) -> None:
        note_shares.delete(share_id, actor)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------
    @staticmethod
    def add_comment(actor: Actor, note_id: int, content: str) -> NoteComment:
        note = AccessService.authorize_note(note_id, actor, ACTION_COMMENT)
        comment = NoteComment(note_id=note.id, user_id=actor.user_id, content=content)
        db.session.add(comment)
        db.session.commit()
        return comment

    @staticmethod
    def list_comments(actor: Actor, note_id: int) -> List[NoteComment]:
        note = AccessService.authorize_note(note_id, actor, ACTION_READ)
        return (
            NoteComment.query.filter_by(note_id=note.id)
            .order_by(NoteComment.created_at, NoteComment.id)
            .all()
        )

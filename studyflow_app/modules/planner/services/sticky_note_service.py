from typing import List

from ....core.extensions import db
from ....models import StickyNote
from ...access_control import AccessService
from ...auth.schemas import Actor


class StickyNoteService:

    @staticmethod
    def list_sticky_notes(actor: Actor) -> List[StickyNote]:
        return StickyNote.query.filter_by(user_id=actor.user_id).order_by(StickyNote.id).all()

    @staticmethod
    def get_sticky_note(actor: Actor, note_id: int) -> StickyNote:
        return AccessService.ensure_owned(StickyNote, note_id, actor, resource='sticky note')

    @staticmethod
    def create_sticky_note(actor: Actor, data: dict) -> StickyNote:
        note = StickyNote(user_id=actor.user_id, **data)
        db.session.add(note)
        db.session.commit()
        return note

    @staticmethod
    def update_sticky_note(actor: Actor, note_id: int, changes: dict) -> StickyNote:
        note = StickyNoteService.get_sticky_note(actor, note_id)
        for key, value in changes.items():
            setattr(note, key, value)
        db.session.commit()
        return note

    @staticmethod
    def delete_sticky_note(actor: Actor, note_id: int) -> None:
        note = StickyNoteService.get_sticky_note(actor, note_id)
        db.session.delete(note)
        db.session.commit()

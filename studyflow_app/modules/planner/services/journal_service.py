from typing import List

from ....core.extensions import db
from ....models import JournalEntry
from ...access_control import AccessService
from ...auth.schemas import Actor


class JournalService:

    @staticmethod
    def list_entries(actor: Actor) -> List[JournalEntry]:
        """Newest first."""
        return JournalEntry.query.filter_by(user_id=actor.user_id)\
            .order_by(JournalEntry.created_at.desc(), JournalEntry.id.desc()).all()

    @staticmethod
    def get_entry(actor: Actor, entry_id: int) -> JournalEntry:
        return AccessService.ensure_owned(JournalEntry, entry_id, actor, resource='journal entry')

    @staticmethod
    def create_entry(actor: Actor, data: dict) -> JournalEntry:
        entry = JournalEntry(user_id=actor.user_id, **data)
        db.session.add(entry)
        db.session.commit()
        return entry

    @staticmethod
    def update_entry(actor: Actor, entry_id: int, changes: dict) -> JournalEntry:
        entry = JournalService.get_entry(actor, entry_id)
        for key, value in changes.items():
            setattr(entry, key, value)
        db.session.commit()
        return entry

    @staticmethod
    def delete_entry(actor: Actor, entry_id: int) -> None:
        entry = JournalService.get_entry(actor, entry_id)
        db.session.delete(entry)
        db.session.commit()

from typing import List

from ....core.extensions import db
from ....models import Subject
from ...access_control import AccessService
from ...auth.schemas import Actor


class SubjectService:
    """Subjects are private to their owner."""

    @staticmethod
    def list_subjects(actor: Actor) -> List[Subject]:
        return Subject.query.filter_by(user_id=actor.user_id).order_by(Subject.created_at, Subject.id).all()

    @staticmethod
    def get_subject(actor: Actor, subject_id: int) -> Subject:
        return AccessService.ensure_owned(Subject, subject_id, actor, resource='subject')

    @staticmethod
    def check_subject_ref(actor: Actor, subject_id) -> None:
        """A referenced subject must belong to the actor (``None`` clears the link)."""
        if subject_id is not None:
            AccessService.ensure_owned(Subject, subject_id, actor, resource='subject')

    @staticmethod
    def create_subject(actor: Actor, data: dict) -> Subject:
        subject = Subject(user_id=actor.user_id, **data)
        db.session.add(subject)
        db.session.commit()
        return subject

    @staticmethod
    def update_subject(actor: Actor, subject_id: int, changes: dict) -> Subject:
        subject = SubjectService.get_subject(actor, subject_id)
        for key, value in changes.items():
            setattr(subject, key, value)
        db.session.commit()
        return subject

    @staticmethod
    def delete_subject(actor: Actor, subject_id: int) -> None:
        subject = SubjectService.get_subject(actor, subject_id)
        db.session.delete(subject)
        db.session.commit()

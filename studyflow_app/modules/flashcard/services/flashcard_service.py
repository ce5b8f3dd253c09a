# File: studyflow_app/modules/flashcard/services/flashcard_service.py
"""
Flashcard Service
=================
Owned flashcards scheduled by the Leitner engine.
"""
from typing import List, Optional

from flask import current_app

from ....core.error_handlers import NotFoundError
from ....core.extensions import db
from ....models import Flashcard
from ....utils.time_utils import utcnow
from ...access_control import AccessService
from ...auth.schemas import Actor
from ...planner.services import SubjectService
from ..logics.leitner import MIN_BOX, next_state


class FlashcardService:

    @staticmethod
    def list_flashcards(actor: Actor, due_only: bool = False, subject_id: Optional[int] = None) -> List[Flashcard]:
        query = Flashcard.query.filter(Flashcard.user_id == actor.user_id)
        if subject_id is not None:
            query = query.filter(Flashcard.subject_id == subject_id)
        if due_only:
            query = query.filter(Flashcard.next_review_date <= utcnow())
        return query.order_by(Flashcard.next_review_date, Flashcard.id).all()

    @staticmethod
    def get_flashcard(actor: Actor, card_id: int) -> Flashcard:
        return AccessService.ensure_owned(Flashcard, card_id, actor, resource='flashcard')

    @staticmethod
    def create_flashcard(actor: Actor, data: dict) -> Flashcard:
        """New cards start in box 1 and are due immediately."""
        SubjectService.check_subject_ref(actor, data.get('subject_id'))
        card = Flashcard(
            user_id=actor.user_id,
            box=MIN_BOX,
            next_review_date=utcnow(),
            **data,
        )
        db.session.add(card)
        db.session.commit()
        return card

    @staticmethod
    def update_flashcard(actor: Actor, card_id: int, changes: dict) -> Flashcard:
        card = FlashcardService.get_flashcard(actor, card_id)
        if 'subject_id' in changes:
            SubjectService.check_subject_ref(actor, changes['subject_id'])
        for key, value in changes.items():
            setattr(card, key, value)
        db.session.commit()
        return card

    @staticmethod
    def delete_flashcard(actor: Actor, card_id: int) -> None:
        card = FlashcardService.get_flashcard(actor, card_id)
        db.session.delete(card)
        db.session.commit()

    @staticmethod
    def review_flashcard(actor: Actor, card_id: int, correct: bool, now=None) -> Flashcard:
        """
        Record one review. The row is locked for the read-modify-write so two
        concurrent reviews apply one after the other.
        """
        card = (
            db.session.query(Flashcard)
            .filter(Flashcard.id == card_id, Flashcard.user_id == actor.user_id)
            .with_for_update()
            .first()
        )
        if card is None:
            raise NotFoundError('Flashcard not found', resource='flashcard')

        state = next_state(card.box, correct, now or utcnow())
        card.box = state.box
        card.last_review_date = state.last_review_date
        card.next_review_date = state.next_review_date
        db.session.commit()

        current_app.logger.debug(
            f"[Flashcards] Card {card_id} reviewed ({'correct' if correct else 'wrong'}) -> box {state.box}"
        )
        return card

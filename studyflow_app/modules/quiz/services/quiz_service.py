"""
Quiz Service
============
Owner-only quizzes. Grading happens server side; the last attempt's score
is kept on the quiz.
"""
from typing import List, Optional, Sequence, Tuple

from flask import current_app

from ....core.error_handlers import ValidationError
from ....core.extensions import db
from ....models import Quiz
from ....utils.time_utils import utcnow
from ...access_control import AccessService
from ...auth.schemas import Actor
from ...planner.services import SubjectService
from ..logics import QuizResult, grade


class QuizService:

    @staticmethod
    def list_quizzes(actor: Actor) -> List[Quiz]:
        return Quiz.query.filter_by(user_id=actor.user_id)\
            .order_by(Quiz.created_at.desc(), Quiz.id.desc()).all()

    @staticmethod
    def get_quiz(actor: Actor, quiz_id: int) -> Quiz:
        return AccessService.ensure_owned(Quiz, quiz_id, actor, resource='quiz')

    @staticmethod
    def create_quiz(actor: Actor, data: dict) -> Quiz:
        SubjectService.check_subject_ref(actor, data.get('subject_id'))
        quiz = Quiz(user_id=actor.user_id, **data)
        db.session.add(quiz)
        db.session.commit()
        return quiz

    @staticmethod
    def update_quiz(actor: Actor, quiz_id: int, changes: dict) -> Quiz:
        quiz = QuizService.get_quiz(actor, quiz_id)
        if 'subject_id' in changes:
            SubjectService.check_subject_ref(actor, changes['subject_id'])
        for key, value in changes.items():
            setattr(quiz, key, value)
        if 'questions' in changes:
            # A score for different questions means nothing.
            quiz.score = None
            quiz.completed_at = None
        db.session.commit()
        return quiz

    @staticmethod
    def delete_quiz(actor: Actor, quiz_id: int) -> None:
        quiz = QuizService.get_quiz(actor, quiz_id)
        db.session.delete(quiz)
        db.session.commit()

    @staticmethod
    def submit_quiz(actor: Actor, quiz_id: int, answers: Sequence[Optional[int]]) -> Tuple[Quiz, QuizResult]:
        quiz = QuizService.get_quiz(actor, quiz_id)
        try:
            result = grade(quiz.questions or [], answers)
        except ValueError as e:
            raise ValidationError(str(e), errors={'answers': [str(e)]}) from e

        quiz.score = result.score
        quiz.completed_at = utcnow()
        db.session.commit()
        current_app.logger.debug(f"[Quiz] User {actor.user_id} scored {result.score} on quiz {quiz.id}")
        return quiz, result

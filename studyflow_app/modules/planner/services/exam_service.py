from typing import List

from ....core.extensions import db
from ....models import Exam
from ...access_control import AccessService
from ...auth.schemas import Actor
from .subject_service import SubjectService


class ExamService:

    @staticmethod
    def list_exams(actor: Actor) -> List[Exam]:
        return Exam.query.filter_by(user_id=actor.user_id).order_by(Exam.date, Exam.id).all()

    @staticmethod
    def get_exam(actor: Actor, exam_id: int) -> Exam:
        return AccessService.ensure_owned(Exam, exam_id, actor, resource='exam')

    @staticmethod
    def create_exam(actor: Actor, data: dict) -> Exam:
        SubjectService.check_subject_ref(actor, data.get('subject_id'))
        exam = Exam(user_id=actor.user_id, **data)
        db.session.add(exam)
        db.session.commit()
        return exam

    @staticmethod
    def update_exam(actor: Actor, exam_id: int, changes: dict) -> Exam:
        exam = ExamService.get_exam(actor, exam_id)
        if 'subject_id' in changes:
            SubjectService.check_subject_ref(actor, changes['subject_id'])
        for key, value in changes.items():
            setattr(exam, key, value)
        db.session.commit()
        return exam

    @staticmethod
    def delete_exam(actor: Actor, exam_id: int) -> None:
        exam = ExamService.get_exam(actor, exam_id)
        db.session.delete(exam)
        db.session.commit()

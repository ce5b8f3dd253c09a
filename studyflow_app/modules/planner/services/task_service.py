"""
Task Service
============
Task CRUD plus the completion side effects: the completed-tasks counter,
reward progress and task badges.
"""
from typing import List, Tuple

from flask import current_app
from sqlalchemy import update

from ....core.extensions import db
from ....models import Reward, Task, User
from ....utils.time_utils import utcnow
from ...access_control import AccessService
from ...auth.schemas import Actor
from ...gamification.services import BadgeService, RewardService
from .subject_service import SubjectService


class TaskService:

    @staticmethod
    def list_tasks(actor: Actor) -> List[Task]:
        return Task.query.filter_by(user_id=actor.user_id).order_by(Task.order, Task.id).all()

    @staticmethod
    def get_task(actor: Actor, task_id: int) -> Task:
        return AccessService.ensure_owned(Task, task_id, actor, resource='task')

    @staticmethod
    def create_task(actor: Actor, data: dict) -> Task:
        SubjectService.check_subject_ref(actor, data.get('subject_id'))
        task = Task(user_id=actor.user_id, **data)
        if task.status == Task.STATUS_COMPLETED:
            task.completed_at = utcnow()
        db.session.add(task)
        db.session.commit()
        return task

    @staticmethod
    def _mark_completed(task_id: int) -> bool:
        """
        Move a task to ``completed`` with a conditional UPDATE.

        Returns True only for the call that actually changed the status, so
        concurrent completions of the same task count once.
        """
        result = db.session.execute(
            update(Task)
            .where(Task.id == task_id, Task.status != Task.STATUS_COMPLETED)
            .values(status=Task.STATUS_COMPLETED, completed_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    @staticmethod
    def update_task(actor: Actor, task_id: int, changes: dict) -> Tuple[Task, List[Reward]]:
        """
        Apply ``changes`` to a task.

        Returns the task and the rewards unlocked by this update (empty unless
        this request completed the task).
        """
        task = TaskService.get_task(actor, task_id)
        if 'subject_id' in changes:
            SubjectService.check_subject_ref(actor, changes['subject_id'])

        new_status = changes.pop('status', None)
        for key, value in changes.items():
            setattr(task, key, value)

        completed_now = False
        if new_status == Task.STATUS_COMPLETED:
            db.session.flush()
            completed_now = TaskService._mark_completed(task.id)
            if completed_now:
                User.query.filter_by(user_id=actor.user_id).update(
                    {User.total_tasks_completed: User.total_tasks_completed + 1},
                    synchronize_session=False,
                )
        elif new_status is not None:
            task.status = new_status
            task.completed_at = None
        db.session.commit()

        unlocked = []
        if completed_now:
            current_app.logger.debug(f"[Tasks] User {actor.user_id} completed task {task.id}")
            try:
                unlocked = RewardService.record_task_completion(actor.user_id)
            except Exception as e:
                db.session.rollback()
                current_app.logger.error(f"[Tasks] Reward progress failed for task {task.id}: {e}")
            try:
                BadgeService.check_and_award(actor.user_id)
            except Exception as e:
                db.session.rollback()
                current_app.logger.error(f"[Tasks] Badge check failed for task {task.id}: {e}")

        return task, unlocked

    @staticmethod
    def delete_task(actor: Actor, task_id: int) -> None:
        task = TaskService.get_task(actor, task_id)
        db.session.delete(task)
        db.session.commit()

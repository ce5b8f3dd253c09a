"""
Reward Service.

User-defined rewards that unlock after a number of completed tasks. Progress
only ever moves forward: un-completing a task does not take progress back and
a completed reward stays completed.
"""
from typing import List

from flask import current_app
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from ....core.error_handlers import ValidationError
from ....core.extensions import db
from ....core.signals import reward_unlocked
from ....models import Reward
from ...access_control import AccessService
from ...auth.schemas import Actor

# Attempts per reward when a concurrent completion moves the row between our two conditional UPDATEs.
MAX_PROGRESS_ATTEMPTS = 5


class RewardService:
    """CRUD for rewards plus the task-completion accumulator."""

    @staticmethod
    def list_rewards(actor: Actor) -> List[Reward]:
        return Reward.query.filter_by(user_id=actor.user_id).order_by(Reward.created_at, Reward.id).all()

    @staticmethod
    def create_reward(actor: Actor, data: dict) -> Reward:
        reward = Reward(
            user_id=actor.user_id,
            target_tasks=data['target_tasks'],
            reward=data['reward'],
            current_progress=0,
            is_completed=False,
        )
        db.session.add(reward)
        db.session.commit()
        return reward

    @staticmethod
    def update_reward(actor: Actor, reward_id: int, changes: dict) -> Reward:
        reward = AccessService.ensure_owned(Reward, reward_id, actor, resource='reward')
        if 'target_tasks' in changes:
            if reward.is_completed:
                raise ValidationError(
                    'A completed reward cannot be changed',
                    errors={'target_tasks': ['Reward already completed.']},
                )
            if changes['target_tasks'] <= reward.current_progress:
                raise ValidationError(
                    'Target must be above the current progress',
                    errors={'target_tasks': [f'Must be greater than {reward.current_progress}.']},
                )
        for key, value in changes.items():
            setattr(reward, key, value)
        db.session.commit()
        return reward

    @staticmethod
    def delete_reward(actor: Actor, reward_id: int) -> None:
        reward = AccessService.ensure_owned(Reward, reward_id, actor, resource='reward')
        db.session.delete(reward)
        db.session.commit()

    # ------------------------------------------------------------------
    # Accumulator
    # ------------------------------------------------------------------
    @staticmethod
    def _advance(reward_id: int) -> bool:
        """
        Add one unit of progress to a single reward with compare-and-set UPDATEs.

        Returns True when this call is the one that completed the reward.
        """
        for _ in range(MAX_PROGRESS_ATTEMPTS):
            unlock = db.session.execute(
                update(Reward)
                .where(
                    Reward.id == reward_id,
                    Reward.is_completed.is_(False),
                    Reward.current_progress + 1 >= Reward.target_tasks,
                )
                .values(current_progress=Reward.current_progress + 1, is_completed=True)
                .execution_options(synchronize_session=False)
            )
            if unlock.rowcount == 1:
                db.session.commit()
                return True

            step = db.session.execute(
                update(Reward)
                .where(
                    Reward.id == reward_id,
                    Reward.is_completed.is_(False),
                    Reward.current_progress + 1 < Reward.target_tasks,
                )
                .values(current_progress=Reward.current_progress + 1)
                .execution_options(synchronize_session=False)
            )
            db.session.commit()
            if step.rowcount == 1:
                return False

            # Neither matched: either completed by someone else or moved in between.
            still_active = db.session.query(Reward.id).filter(
                Reward.id == reward_id, Reward.is_completed.is_(False)
            ).first()
            if still_active is None:
                return False

        current_app.logger.warning(f"[Rewards] Gave up advancing reward {reward_id} after contention")
        return False

    @staticmethod
    def record_task_completion(user_id: int) -> List[Reward]:
        """
        Advance every active reward of ``user_id`` by one.

        Each reward is updated on its own; a failure on one is logged and the
        others still advance. Emits ``reward_unlocked`` for each reward this
        call completed and returns them.
        """
        active_ids = [
            row.id for row in db.session.query(Reward.id).filter(
                Reward.user_id == user_id, Reward.is_completed.is_(False)
            ).all()
        ]

        unlocked = []
        for reward_id in active_ids:
            try:
                if RewardService._advance(reward_id):
                    unlocked.append(db.session.get(Reward, reward_id))
            except SQLAlchemyError as e:
                db.session.rollback()
                current_app.logger.error(f"[Rewards] Could not advance reward {reward_id}: {e}")

        for reward in unlocked:
            current_app.logger.info(f"[Rewards] User {user_id} unlocked reward {reward.id}")
            try:
                reward_unlocked.send(current_app._get_current_object(), user_id=user_id, reward=reward)
            except Exception as e:
                current_app.logger.error(f"[Rewards] Error emitting reward_unlocked: {e}")

        return unlocked

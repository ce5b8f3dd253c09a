"""
Event Handlers for Notification Module.

Listens to signals from other modules and creates notifications accordingly.
No other module imports NotificationService directly.

Delivery is best-effort: the action that fired the signal is already
committed, so a failure here is logged and rolled back, never raised.
"""
from flask import current_app

from ...core.extensions import db
from ...core.signals import badge_earned, event_shared, note_shared, reward_unlocked
from ...models import Notification


def on_note_shared(sender, **kwargs):
    """
    Notify the invitee of a new note share.

    Expected kwargs: share, note, owner
    """
    from .services import NotificationService

    share = kwargs.get('share')
    note = kwargs.get('note')
    owner = kwargs.get('owner')

    # Invitations to emails without an account are not delivered.
    if share is None or share.shared_with_user_id is None:
        return

    try:
        NotificationService.create_notification(
            user_id=share.shared_with_user_id,
            title='Note shared with you',
            message=f'{owner.name} shared a note "{note.title}" with you',
            type=Notification.TYPE_SHARE,
            reference_id=note.id,
            reference_type='note',
        )
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"[Notification] Error creating share notification: {e}", exc_info=True)


def on_event_shared(sender, **kwargs):
    """
    Notify the invitee of a calendar invitation.

    Expected kwargs: share, event, owner
    """
    from .services import NotificationService

    share = kwargs.get('share')
    event = kwargs.get('event')
    owner = kwargs.get('owner')

    if share is None or share.shared_with_user_id is None:
        return

    try:
        NotificationService.create_notification(
            user_id=share.shared_with_user_id,
            title='Event invitation',
            message=f'{owner.name} invited you to "{event.title}"',
            type=Notification.TYPE_EVENT,
            reference_id=event.id,
            reference_type='event',
        )
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"[Notification] Error creating event notification: {e}", exc_info=True)


def on_reward_unlocked(sender, **kwargs):
    from .services import NotificationService

    user_id = kwargs.get('user_id')
    reward = kwargs.get('reward')
    if not user_id or reward is None:
        return

    try:
        NotificationService.create_notification(
            user_id=user_id,
            title='Reward unlocked!',
            message=f'You completed {reward.target_tasks} tasks and earned: {reward.reward}',
            type=Notification.TYPE_ACHIEVEMENT,
            reference_id=reward.id,
            reference_type='reward',
        )
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"[Notification] Error creating reward notification: {e}", exc_info=True)


def on_badge_earned(sender, **kwargs):
    from .services import NotificationService

    user_id = kwargs.get('user_id')
    badge_name = kwargs.get('badge_name') or kwargs.get('badge_id')
    if not user_id:
        return

    try:
        NotificationService.create_notification(
            user_id=user_id,
            title='New badge earned!',
            message=f'You earned the "{badge_name}" badge',
            type=Notification.TYPE_ACHIEVEMENT,
            reference_type='badge',
        )
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"[Notification] Error creating badge notification: {e}", exc_info=True)


def register_events():
    note_shared.connect(on_note_shared)
    event_shared.connect(on_event_shared)
    reward_unlocked.connect(on_reward_unlocked)
    badge_earned.connect(on_badge_earned)

"""
Event Handlers for Access Control.

Shares can be addressed to an email before anyone owns it; once that account
is created the share is attached to it.
"""
from flask import current_app

from ...core.extensions import db
from ...core.signals import user_registered


def on_user_registered(sender, **kwargs):
    from .services import event_shares, note_shares

    user = kwargs.get('user')
    if user is None:
        return

    try:
        resolved = note_shares.resolve_pending_for(user) + event_shares.resolve_pending_for(user)
        db.session.commit()
        if resolved:
            current_app.logger.info(f"[Access] Attached {resolved} share(s) to new user {user.user_id}")
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"[Access] Error resolving shares for user {user.user_id}: {e}", exc_info=True)


def register_events():
    user_registered.connect(on_user_registered)

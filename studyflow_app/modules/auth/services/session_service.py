"""
Session Service
===============
Opaque-token sessions with a fixed TTL and lazy expiry (no background sweep).
"""

import secrets
from datetime import timedelta
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from ....core.extensions import db
from ....models import AuthSession
from ....utils.time_utils import ensure_utc, utcnow


class SessionService:
    """Create, resolve and destroy bearer sessions."""

    @staticmethod
    def create_session(user_id: int) -> AuthSession:
        ttl_days = current_app.config.get('SESSION_TTL_DAYS', 7)
        session = AuthSession(
            id=secrets.token_urlsafe(32),
            user_id=user_id,
            expires_at=utcnow() + timedelta(days=ttl_days),
        )
        db.session.add(session)
        db.session.commit()
        return session

    @staticmethod
    def resolve_session(token: str) -> Optional[AuthSession]:
        """
        Return the live session for ``token``.

        An expired session is deleted on first detection and reported absent.
        A failure while deleting it is logged and ignored: the session keeps
        failing this check until some later call removes it.
        """
        if not token:
            return None

        session = db.session.get(AuthSession, token)
        if session is None:
            return None

        if ensure_utc(session.expires_at) < utcnow():
            try:
                SessionService.destroy_session(token)
            except SQLAlchemyError as e:
                db.session.rollback()
                current_app.logger.warning(f"Could not delete expired session for user {session.user_id}: {e}")
            return None

        return session

    @staticmethod
    def destroy_session(token: str) -> None:
        """Delete a session. Deleting a missing session is not an error."""
        AuthSession.query.filter_by(id=token).delete()
        db.session.commit()

    @staticmethod
    def destroy_user_sessions(user_id: int, keep: Optional[str] = None) -> int:
        query = AuthSession.query.filter(AuthSession.user_id == user_id)
        if keep:
            query = query.filter(AuthSession.id != keep)
        removed = query.delete()
        db.session.commit()
        return removed

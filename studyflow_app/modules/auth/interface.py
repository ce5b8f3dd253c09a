# File: studyflow_app/modules/auth/interface.py
from flask_login import current_user

from .schemas import Actor


class AuthInterface:
    """Bridge between the HTTP layer (flask-login) and the services."""

    @staticmethod
    def current_actor() -> Actor:
        """Build the explicit actor for the authenticated request."""
        return Actor(
            user_id=current_user.user_id,
            session_id=getattr(current_user, 'active_session_id', None),
        )

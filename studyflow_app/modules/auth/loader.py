"""Resolve ``current_user`` from a bearer token or the ``session_id`` cookie."""

from typing import Optional

from flask import Request, current_app

from ...core.error_handlers import UnauthenticatedError
from ...core.extensions import db
from ...models import User
from .services.session_service import SessionService


def extract_token(req: Request) -> Optional[str]:
    header = req.headers.get('Authorization', '')
    if header.lower().startswith('bearer '):
        token = header.split(' ', 1)[1].strip()
        if token:
            return token
    cookie_name = current_app.config.get('SESSION_COOKIE_NAME_API', 'session_id')
    return req.cookies.get(cookie_name) or None


def load_user_from_request(req: Request) -> Optional[User]:
    token = extract_token(req)
    if not token:
        return None

    session = SessionService.resolve_session(token)
    if session is None:
        return None

    user = db.session.get(User, session.user_id)
    if user is None:
        return None

    user.active_session_id = session.id
    return user


def handle_unauthorized():
    raise UnauthenticatedError()


def register_loaders(login_manager) -> None:
    login_manager.request_loader(load_user_from_request)
    login_manager.unauthorized_handler(handle_unauthorized)

"""
Auth Service - Identity and credential operations.

Handles registration, login, profile and password changes, and account
deletion. Decouples DB logic from routes; callers pass an explicit ``Actor``.
"""
from typing import Tuple

from flask import current_app
from sqlalchemy.exc import IntegrityError

from ....core.error_handlers import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthenticatedError,
)
from ....core.extensions import db
from ....core.signals import user_registered
from ....models import AuthSession, EventShare, NoteComment, NoteShare, User
from ..schemas import Actor
from .session_service import SessionService


class AuthService:
    """Service for authentication related operations."""

    @staticmethod
    def get_user(actor: Actor) -> User:
        user = db.session.get(User, actor.user_id)
        if user is None:
            raise UnauthenticatedError()
        return user

    @staticmethod
    def register(name: str, email: str, password: str) -> Tuple[User, AuthSession]:
        """
        Register a new user and open a session.

        Raises:
            ConflictError if an account already uses ``email``.
        """
        if User.query.filter_by(email=email).first() is not None:
            raise ConflictError('An account with this email already exists')

        user = User(name=name, email=email, badges=[])
        user.set_password(password)
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ConflictError('An account with this email already exists')

        current_app.logger.info(f"User registered: {user.user_id}")

        try:
            user_registered.send(current_app._get_current_object(), user=user)
        except Exception as e:
            current_app.logger.error(f"Error emitting user_registered signal: {e}")

        session = SessionService.create_session(user.user_id)
        return user, session

    @staticmethod
    def authenticate(email: str, password: str) -> Tuple[User, AuthSession]:
        """
        Verify credentials and open a session.

        Raises:
            NotFoundError if no account uses ``email``.
            InvalidCredentialsError if the password does not match.
        """
        user = User.query.filter_by(email=email).first()
        if user is None:
            raise NotFoundError('No account found with this email', resource='user')

        if not user.check_password(password):
            current_app.logger.info(f"Failed login for user {user.user_id}")
            raise InvalidCredentialsError()

        session = SessionService.create_session(user.user_id)
        current_app.logger.info(f"User logged in: {user.user_id}")
        return user, session

    @staticmethod
    def logout(actor: Actor) -> None:
        if actor.session_id:
            SessionService.destroy_session(actor.session_id)

    @staticmethod
    def update_profile(actor: Actor, changes: dict) -> User:
        """Apply already-validated profile changes (see ProfileUpdateSchema)."""
        user = AuthService.get_user(actor)
        for key, value in changes.items():
            setattr(user, key, value)
        db.session.commit()
        return user

    @staticmethod
    def change_password(actor: Actor, current_password: str, new_password: str) -> User:
        """Re-hash the password and close every other session of the user."""
        user = AuthService.get_user(actor)
        if not user.check_password(current_password):
            raise InvalidCredentialsError()

        user.set_password(new_password)
        db.session.commit()
        SessionService.destroy_user_sessions(user.user_id, keep=actor.session_id)
        current_app.logger.info(f"Password changed for user {user.user_id}")
        return user

    @staticmethod
    def delete_account(actor: Actor, confirm_email: str) -> None:
        """
        Remove the user and everything they own.

        Shares addressed to the user and comments they wrote on other people's
        notes are removed as well.
        """
        user = AuthService.get_user(actor)
        if confirm_email != user.email:
            raise ConflictError('Email does not match')

        user_id = user.user_id
        NoteShare.query.filter(NoteShare.shared_with_user_id == user_id).delete()
        EventShare.query.filter(EventShare.shared_with_user_id == user_id).delete()
        NoteComment.query.filter(NoteComment.user_id == user_id).delete()
        db.session.delete(user)
        db.session.commit()
        current_app.logger.info(f"Account deleted: {user_id}")

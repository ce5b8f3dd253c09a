"""
Share lifecycle shared by notes and calendar events.

- Only the owner creates, re-roles or deletes a share.
- Only the invitee changes its status (accept / decline, back and forth).
- Anyone else gets NOT_FOUND.
"""
from typing import Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from ....core.error_handlers import ConflictError, ForbiddenError, NotFoundError, ValidationError
from ....core.extensions import db
from ....models import User
from ...auth.schemas import Actor
from ..logics.policies import STATUS_PENDING


class ShareService:
    """Generic operations over a share model bound to a parent resource."""

    def __init__(self, share_model, parent_model, parent_key: str, resource: str):
        self.share_model = share_model
        self.parent_model = parent_model
        self.parent_key = parent_key
        self.resource = resource

    def _parent_id(self, share) -> int:
        return getattr(share, self.parent_key)

    def create(self, parent, owner: User, email: str, role: Optional[str] = None):
        """Create a pending share on ``parent``. Caller has already checked ownership."""
        if email == owner.email:
            raise ValidationError(
                f'You cannot share a {self.resource} with yourself',
                errors={'email': ['Cannot share with yourself.']},
            )

        duplicate = self.share_model.query.filter_by(
            **{self.parent_key: parent.id, 'shared_with_email': email}
        ).first()
        if duplicate is not None:
            raise ConflictError(f'This {self.resource} is already shared with {email}')

        invitee = User.query.filter_by(email=email).first()
        fields = {
            self.parent_key: parent.id,
            'shared_with_email': email,
            'shared_with_user_id': invitee.user_id if invitee else None,
            'status': STATUS_PENDING,
        }
        if role is not None:
            fields['role'] = role
        share = self.share_model(**fields)
        db.session.add(share)
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            raise ConflictError(f'This {self.resource} is already shared with {email}')

        current_app.logger.info(
            f"[Share] {self.resource} {parent.id} shared by {owner.user_id} "
            f"(invitee resolved: {invitee is not None})"
        )
        return share

    def load_for(self, share_id: int, actor: Actor):
        """Return ``(share, parent, is_owner, is_invitee)`` or raise NOT_FOUND for strangers."""
        share = db.session.get(self.share_model, share_id)
        if share is None:
            raise NotFoundError('Share not found', resource='share')
        parent = db.session.get(self.parent_model, self._parent_id(share))
        is_owner = parent is not None and parent.user_id == actor.user_id
        is_invitee = share.shared_with_user_id == actor.user_id
        if not (is_owner or is_invitee):
            raise NotFoundError('Share not found', resource='share')
        return share, parent, is_owner, is_invitee

    def update(self, share_id: int, actor: Actor, changes: dict):
        share, _parent, is_owner, is_invitee = self.load_for(share_id, actor)

        if 'status' in changes and not is_invitee:
            raise ForbiddenError('Only the invitee can accept or decline a share', action='manage_share')
        if 'role' in changes and not is_owner:
            raise ForbiddenError('Only the owner can change the role', action='manage_share')

        for key, value in changes.items():
            setattr(share, key, value)
        db.session.commit()
        return share

    def delete(self, share_id: int, actor: Actor) -> None:
        share, _parent, is_owner, _is_invitee = self.load_for(share_id, actor)
        if not is_owner:
            raise ForbiddenError('Only the owner can remove a share', action='manage_share')
        db.session.delete(share)
        db.session.commit()

    def resolve_pending_for(self, user: User) -> int:
        """Attach shares addressed to ``user.email`` before the account existed."""
        updated = self.share_model.query.filter(
            self.share_model.shared_with_email == user.email,
            self.share_model.shared_with_user_id.is_(None),
        ).update({'shared_with_user_id': user.user_id}, synchronize_session=False)
        return updated

"""
Pure sharing policy.

Maps the actor's relationship to a shared resource (note or calendar event)
and a requested action to a decision. No database access here.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# --- Constants: Share roles ---
ROLE_VIEWER = 'viewer'
ROLE_COMMENTER = 'commenter'
ROLE_EDITOR = 'editor'
ROLES = (ROLE_VIEWER, ROLE_COMMENTER, ROLE_EDITOR)

# --- Constants: Share statuses ---
STATUS_PENDING = 'pending'
STATUS_ACCEPTED = 'accepted'
STATUS_DECLINED = 'declined'
STATUSES = (STATUS_PENDING, STATUS_ACCEPTED, STATUS_DECLINED)
# Statuses an invitee may move a share to.
INVITEE_STATUSES = (STATUS_ACCEPTED, STATUS_DECLINED)

# --- Constants: Actions ---
ACTION_READ = 'read'
ACTION_EDIT = 'edit'
ACTION_COMMENT = 'comment'
ACTION_DELETE = 'delete'
ACTION_SHARE = 'share'
ACTION_MANAGE_SHARE = 'manage_share'
ACTIONS = (ACTION_READ, ACTION_EDIT, ACTION_COMMENT, ACTION_DELETE, ACTION_SHARE, ACTION_MANAGE_SHARE)

# --- Role matrix for accepted shares ---
ROLE_PERMISSIONS = {
    ROLE_VIEWER: frozenset({ACTION_READ}),
    ROLE_COMMENTER: frozenset({ACTION_READ, ACTION_COMMENT}),
    ROLE_EDITOR: frozenset({ACTION_READ, ACTION_COMMENT, ACTION_EDIT}),
}


class Decision(Enum):
    ALLOW = 'allow'
    NOT_FOUND = 'not_found'
    FORBIDDEN = 'forbidden'


@dataclass(frozen=True)
class Relationship:
    """How an actor relates to one resource."""

    is_owner: bool = False
    share_role: Optional[str] = None
    share_status: Optional[str] = None

    @classmethod
    def owner(cls) -> 'Relationship':
        return cls(is_owner=True)

    @classmethod
    def none(cls) -> 'Relationship':
        return cls()

    @classmethod
    def from_share(cls, role: Optional[str], status: str) -> 'Relationship':
        return cls(share_role=role or ROLE_VIEWER, share_status=status)

    @property
    def has_share(self) -> bool:
        return self.share_status is not None


def decide(relationship: Relationship, action: str) -> Decision:
    """
    Decide whether ``action`` is allowed.

    - Owners may do everything.
    - An accepted share grants what its role allows; anything else is FORBIDDEN.
    - A pending or declined share still makes the resource visible as existing,
      so every action is FORBIDDEN rather than NOT_FOUND.
    - No relationship at all is NOT_FOUND.
    """
    if relationship.is_owner:
        return Decision.ALLOW

    if not relationship.has_share:
        return Decision.NOT_FOUND

    if relationship.share_status != STATUS_ACCEPTED:
        return Decision.FORBIDDEN

    allowed = ROLE_PERMISSIONS.get(relationship.share_role, frozenset())
    return Decision.ALLOW if action in allowed else Decision.FORBIDDEN

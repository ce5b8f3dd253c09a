from .policies import (
    ACTION_COMMENT,
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_MANAGE_SHARE,
    ACTION_READ,
    ACTION_SHARE,
    INVITEE_STATUSES,
    ROLE_COMMENTER,
    ROLE_EDITOR,
    ROLE_VIEWER,
    ROLES,
    STATUS_ACCEPTED,
    STATUS_DECLINED,
    STATUS_PENDING,
    Decision,
    Relationship,
    decide,
)

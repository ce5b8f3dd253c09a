"""
Tests for the sharing policy (pure logic, no database).
"""

import pytest

from studyflow_app.modules.access_control.logics.policies import (
    ACTIONS,
    ACTION_COMMENT,
    ACTION_DELETE,
    ACTION_EDIT,
    ACTION_MANAGE_SHARE,
    ACTION_READ,
    ACTION_SHARE,
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


class TestOwner:

    @pytest.mark.parametrize('action', ACTIONS)
    def test_owner_can_do_everything(self, action):
        assert decide(Relationship.owner(), action) is Decision.ALLOW


class TestNoRelationship:

    @pytest.mark.parametrize('action', ACTIONS)
    def test_stranger_gets_not_found(self, action):
        assert decide(Relationship.none(), action) is Decision.NOT_FOUND


class TestAcceptedShare:

    @pytest.mark.parametrize('role', ROLES)
    def test_every_role_can_read(self, role):
        assert decide(Relationship.from_share(role, STATUS_ACCEPTED), ACTION_READ) is Decision.ALLOW

    def test_viewer_cannot_comment_or_edit(self):
        rel = Relationship.from_share(ROLE_VIEWER, STATUS_ACCEPTED)
        assert decide(rel, ACTION_COMMENT) is Decision.FORBIDDEN
        assert decide(rel, ACTION_EDIT) is Decision.FORBIDDEN

    def test_commenter_can_comment_but_not_edit(self):
        rel = Relationship.from_share(ROLE_COMMENTER, STATUS_ACCEPTED)
        assert decide(rel, ACTION_COMMENT) is Decision.ALLOW
        assert decide(rel, ACTION_EDIT) is Decision.FORBIDDEN

    def test_editor_can_comment_and_edit(self):
        rel = Relationship.from_share(ROLE_EDITOR, STATUS_ACCEPTED)
        assert decide(rel, ACTION_COMMENT) is Decision.ALLOW
        assert decide(rel, ACTION_EDIT) is Decision.ALLOW

    @pytest.mark.parametrize('role', ROLES)
    @pytest.mark.parametrize('action', [ACTION_DELETE, ACTION_SHARE, ACTION_MANAGE_SHARE])
    def test_owner_only_actions_are_forbidden(self, role, action):
        assert decide(Relationship.from_share(role, STATUS_ACCEPTED), action) is Decision.FORBIDDEN


class TestUnacceptedShare:

    @pytest.mark.parametrize('status', [STATUS_PENDING, STATUS_DECLINED])
    @pytest.mark.parametrize('action', ACTIONS)
    def test_pending_or_declined_is_forbidden_not_hidden(self, status, action):
        rel = Relationship.from_share(ROLE_EDITOR, status)
        assert decide(rel, action) is Decision.FORBIDDEN


def test_share_without_role_defaults_to_viewer():
    rel = Relationship.from_share(None, STATUS_ACCEPTED)
    assert rel.share_role == ROLE_VIEWER
    assert decide(rel, ACTION_COMMENT) is Decision.FORBIDDEN

"""
Tests for notes: share lifecycle, role enforcement and visibility.
"""

import pytest

from studyflow_app import db
from studyflow_app.models import Notification, NoteShare


def _create_note(client, account, title='Lecture notes', content='v1'):
    resp = client.post('/api/notes', json={'title': title, 'content': content}, headers=account.headers)
    assert resp.status_code == 201
    return resp.get_json()['data']['id']


def _share(client, owner, note_id, email, role='viewer'):
    return client.post(f'/api/notes/{note_id}/share', json={'email': email, 'role': role}, headers=owner.headers)


def _set_status(client, account, share_id, status):
    return client.patch(f'/api/notes/shares/{share_id}', json={'status': status}, headers=account.headers)


def _shared_ids(client, account):
    return [n['id'] for n in client.get('/api/notes', headers=account.headers).get_json()['data']['shared']]


@pytest.fixture
def note_id(client, alice):
    return _create_note(client, alice)


class TestRoleScenario:

    def test_commenter_then_editor(self, client, alice, bob, note_id):
        resp = _share(client, alice, note_id, bob.email, role='commenter')
        assert resp.status_code == 201
        share = resp.get_json()['data']
        assert share['status'] == 'pending'
        assert share['shared_with_user_id'] == bob.user_id

        # Pending share: the note is known to Bob but nothing is allowed yet.
        resp = client.patch(f'/api/notes/{note_id}', json={'content': 'bob was here'}, headers=bob.headers)
        assert resp.status_code == 403

        assert _set_status(client, bob, share['id'], 'accepted').status_code == 200

        resp = client.post(f'/api/notes/{note_id}/comments', json={'content': 'Nice!'}, headers=bob.headers)
        assert resp.status_code == 201
        assert resp.get_json()['data']['author_name'] == 'Bob'

        resp = client.patch(f'/api/notes/{note_id}', json={'content': 'bob was here'}, headers=bob.headers)
        assert resp.status_code == 403

        resp = client.patch(f'/api/notes/shares/{share["id"]}', json={'role': 'editor'}, headers=alice.headers)
        assert resp.status_code == 200

        resp = client.patch(f'/api/notes/{note_id}', json={'content': 'bob was here'}, headers=bob.headers)
        assert resp.status_code == 200
        assert resp.get_json()['data']['content'] == 'bob was here'


class TestRoleLimits:

    def _accepted(self, client, alice, bob, note_id, role):
        share_id = _share(client, alice, note_id, bob.email, role=role).get_json()['data']['id']
        _set_status(client, bob, share_id, 'accepted')
        return share_id

    def test_viewer_reads_but_cannot_comment_or_edit(self, client, alice, bob, note_id):
        self._accepted(client, alice, bob, note_id, 'viewer')
        resp = client.get(f'/api/notes/{note_id}', headers=bob.headers)
        assert resp.status_code == 200
        assert 'shares' not in resp.get_json()['data']

        assert client.post(f'/api/notes/{note_id}/comments', json={'content': 'x'},
                           headers=bob.headers).status_code == 403
        assert client.patch(f'/api/notes/{note_id}', json={'title': 'x'}, headers=bob.headers).status_code == 403

    def test_editor_cannot_delete_share_or_move_subject(self, client, alice, bob, carol, note_id):
        self._accepted(client, alice, bob, note_id, 'editor')
        assert client.delete(f'/api/notes/{note_id}', headers=bob.headers).status_code == 403
        assert _share(client, bob, note_id, carol.email).status_code == 403
        assert client.patch(f'/api/notes/{note_id}', json={'subject_id': None},
                            headers=bob.headers).status_code == 403

    def test_stranger_gets_not_found(self, client, alice, carol, note_id):
        assert client.get(f'/api/notes/{note_id}', headers=carol.headers).status_code == 404
        assert client.get(f'/api/notes/{note_id}/comments', headers=carol.headers).status_code == 404
        assert client.post(f'/api/notes/{note_id}/comments', json={'content': 'x'},
                           headers=carol.headers).status_code == 404

    def test_owner_sees_shares(self, client, alice, bob, note_id):
        _share(client, alice, note_id, bob.email)
        data = client.get(f'/api/notes/{note_id}', headers=alice.headers).get_json()['data']
        assert [s['shared_with_email'] for s in data['shares']] == [bob.email]


class TestVisibility:

    def test_shared_list_follows_status(self, client, alice, bob, note_id):
        share_id = _share(client, alice, note_id, bob.email).get_json()['data']['id']
        assert _shared_ids(client, bob) == []

        _set_status(client, bob, share_id, 'accepted')
        assert _shared_ids(client, bob) == [note_id]

        _set_status(client, bob, share_id, 'declined')
        assert _shared_ids(client, bob) == []
        assert client.get(f'/api/notes/{note_id}', headers=bob.headers).status_code == 403

    def test_owned_and_shared_are_disjoint(self, client, alice, bob, note_id):
        data = client.get('/api/notes', headers=alice.headers).get_json()['data']
        assert [n['id'] for n in data['owned']] == [note_id]
        assert data['shared'] == []


class TestShareLifecycle:

    def test_cannot_share_with_self(self, client, alice, note_id):
        resp = _share(client, alice, note_id, alice.email)
        assert resp.status_code == 400

    def test_duplicate_share_conflicts(self, client, alice, bob, note_id):
        _share(client, alice, note_id, bob.email)
        assert _share(client, alice, note_id, bob.email, role='editor').status_code == 409

    def test_invalid_role(self, client, alice, bob, note_id):
        assert _share(client, alice, note_id, bob.email, role='admin').status_code == 400

    def test_only_invitee_changes_status(self, client, alice, bob, carol, note_id):
        share_id = _share(client, alice, note_id, bob.email).get_json()['data']['id']
        assert _set_status(client, alice, share_id, 'accepted').status_code == 403
        assert _set_status(client, carol, share_id, 'accepted').status_code == 404

    def test_status_cannot_go_back_to_pending(self, client, alice, bob, note_id):
        share_id = _share(client, alice, note_id, bob.email).get_json()['data']['id']
        assert _set_status(client, bob, share_id, 'pending').status_code == 400

    def test_invitee_cannot_change_role(self, client, alice, bob, note_id):
        share_id = _share(client, alice, note_id, bob.email).get_json()['data']['id']
        resp = client.patch(f'/api/notes/shares/{share_id}', json={'role': 'editor'}, headers=bob.headers)
        assert resp.status_code == 403

    def test_only_owner_deletes_share(self, client, alice, bob, carol, note_id):
        share_id = _share(client, alice, note_id, bob.email).get_json()['data']['id']
        assert client.delete(f'/api/notes/shares/{share_id}', headers=bob.headers).status_code == 403
        assert client.delete(f'/api/notes/shares/{share_id}', headers=carol.headers).status_code == 404
        assert client.delete(f'/api/notes/shares/{share_id}', headers=alice.headers).status_code == 200
        assert _set_status(client, bob, share_id, 'accepted').status_code == 404

    def test_deleting_note_removes_shares_and_comments(self, app, client, alice, bob, note_id):
        _share(client, alice, note_id, bob.email)
        client.post(f'/api/notes/{note_id}/comments', json={'content': 'mine'}, headers=alice.headers)
        assert client.delete(f'/api/notes/{note_id}', headers=alice.headers).status_code == 200
        with app.app_context():
            assert NoteShare.query.filter_by(note_id=note_id).count() == 0


class TestShareNotifications:

    def test_resolved_invitee_is_notified(self, app, client, alice, bob, note_id):
        _share(client, alice, note_id, bob.email)
        inbox = client.get('/api/notifications', headers=bob.headers).get_json()['data']
        assert inbox['unread_count'] == 1
        notif = inbox['notifications'][0]
        assert notif['type'] == 'share'
        assert notif['reference_type'] == 'note'
        assert notif['reference_id'] == note_id

    def test_unknown_email_gets_no_notification(self, app, client, alice, note_id):
        resp = _share(client, alice, note_id, 'ghost@example.com')
        assert resp.status_code == 201
        assert resp.get_json()['data']['shared_with_user_id'] is None
        with app.app_context():
            assert Notification.query.count() == 0

    def test_share_survives_notification_failure(self, app, client, alice, bob, note_id, monkeypatch):
        from studyflow_app.modules.notification.services import NotificationService

        def boom(*args, **kwargs):
            raise RuntimeError('inbox unavailable')

        monkeypatch.setattr(NotificationService, 'create_notification', staticmethod(boom))
        resp = _share(client, alice, note_id, bob.email)
        assert resp.status_code == 201
        with app.app_context():
            assert NoteShare.query.filter_by(note_id=note_id).count() == 1


class TestSignupResolvesShares:

    def test_share_to_future_account_is_attached(self, client, register, alice, note_id):
        _share(client, alice, note_id, 'future@example.com', role='commenter')

        future = register('Future', 'future@example.com')
        share = client.get(f'/api/notes/{note_id}', headers=alice.headers).get_json()['data']['shares'][0]
        assert share['shared_with_user_id'] == future.user_id

        assert _set_status(client, future, share['id'], 'accepted').status_code == 200
        assert _shared_ids(client, future) == [note_id]

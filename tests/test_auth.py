"""
Tests for identity, credentials and sessions.
"""

from datetime import timedelta

from sqlalchemy.exc import OperationalError

from studyflow_app import db
from studyflow_app.models import AuthSession, Note, NoteComment, NoteShare, Subject, User
from studyflow_app.modules.auth.services import SessionService
from studyflow_app.utils.time_utils import utcnow


def _signup(client, name='Dana', email='dana@example.com', password='secret123'):
    return client.post('/api/auth/signup', json={'name': name, 'email': email, 'password': password})


class TestSignupAndLogin:

    def test_signup_returns_user_and_session(self, client):
        resp = _signup(client)
        assert resp.status_code == 201
        body = resp.get_json()['data']
        assert body['user']['email'] == 'dana@example.com'
        assert 'password_hash' not in body['user']
        assert body['session_id']
        assert 'session_id=' in resp.headers.get('Set-Cookie', '')
        assert 'HttpOnly' in resp.headers.get('Set-Cookie', '')

    def test_password_is_hashed(self, app, client):
        _signup(client)
        with app.app_context():
            user = User.query.filter_by(email='dana@example.com').one()
            assert user.password_hash != 'secret123'
            assert user.check_password('secret123')

    def test_duplicate_email_conflicts(self, client):
        _signup(client)
        resp = _signup(client, name='Other')
        assert resp.status_code == 409
        assert resp.get_json()['code'] == 'CONFLICT'

    def test_short_password_rejected(self, client):
        resp = _signup(client, password='abc')
        assert resp.status_code == 400
        assert 'password' in resp.get_json()['details']['errors']

    def test_login_errors(self, client, alice):
        resp = client.post('/api/auth/login', json={'email': 'nobody@example.com', 'password': 'whatever'})
        assert resp.status_code == 404
        resp = client.post('/api/auth/login', json={'email': alice.email, 'password': 'wrong-password'})
        assert resp.status_code == 401
        assert resp.get_json()['code'] == 'INVALID_CREDENTIALS'

    def test_login_then_use_cookie(self, client, alice):
        resp = client.post('/api/auth/login', json={'email': alice.email, 'password': alice.password})
        assert resp.status_code == 200
        # The test client keeps the session cookie.
        me = client.get('/api/auth/me')
        assert me.status_code == 200
        assert me.get_json()['data']['id'] == alice.user_id

    def test_invalid_json_body(self, client):
        resp = client.post('/api/auth/signup', data='not json', content_type='application/json')
        assert resp.status_code == 400


class TestSessions:

    def test_bearer_token_authenticates(self, client, alice):
        resp = client.get('/api/auth/me', headers=alice.headers)
        assert resp.get_json()['data']['name'] == 'Alice'

    def test_missing_or_unknown_token(self, client):
        assert client.get('/api/auth/me').status_code == 401
        assert client.get('/api/auth/me', headers={'Authorization': 'Bearer nope'}).status_code == 401

    def test_expired_session_is_rejected_and_removed(self, app, client, alice):
        with app.app_context():
            session = db.session.get(AuthSession, alice.token)
            session.expires_at = utcnow() - timedelta(minutes=1)
            db.session.commit()

        resp = client.get('/api/auth/me', headers=alice.headers)
        assert resp.status_code == 401

        with app.app_context():
            assert db.session.get(AuthSession, alice.token) is None

    def test_failed_expiry_cleanup_still_rejects_session(self, ctx, alice, monkeypatch):
        session = db.session.get(AuthSession, alice.token)
        session.expires_at = utcnow() - timedelta(minutes=1)
        db.session.commit()

        def locked(token):
            raise OperationalError('DELETE FROM auth_sessions', {}, Exception('database is locked'))

        monkeypatch.setattr(SessionService, 'destroy_session', locked)

        assert SessionService.resolve_session(alice.token) is None
        # The row survives until a later lookup manages to delete it.
        assert db.session.get(AuthSession, alice.token) is not None

        monkeypatch.undo()
        assert SessionService.resolve_session(alice.token) is None
        assert db.session.get(AuthSession, alice.token) is None

    def test_destroy_session_is_idempotent(self, ctx, alice):
        SessionService.destroy_session(alice.token)
        SessionService.destroy_session(alice.token)
        assert SessionService.resolve_session(alice.token) is None

    def test_logout(self, client, alice):
        assert client.post('/api/auth/logout', headers=alice.headers).status_code == 200
        assert client.get('/api/auth/me', headers=alice.headers).status_code == 401


class TestProfile:

    def test_update_profile(self, client, alice):
        resp = client.patch('/api/auth/me', json={'name': 'Alicia', 'has_completed_setup': True},
                            headers=alice.headers)
        assert resp.status_code == 200
        assert resp.get_json()['data']['name'] == 'Alicia'
        assert resp.get_json()['data']['has_completed_setup'] is True

    def test_protected_fields_rejected(self, client, alice):
        for payload in ({'email': 'x@example.com'}, {'password': 'newpass123'}, {'id': 99}, {'user_id': 99}):
            resp = client.patch('/api/auth/me', json=payload, headers=alice.headers)
            assert resp.status_code == 400, payload
        me = client.get('/api/auth/me', headers=alice.headers).get_json()['data']
        assert me['email'] == alice.email

    def test_stats_cannot_be_set_through_profile(self, client, alice):
        resp = client.patch('/api/auth/me', json={'daily_streak': 100}, headers=alice.headers)
        assert resp.status_code == 400


class TestPasswordChange:

    def test_change_password_keeps_current_session_only(self, client, register):
        account = register('Erin', 'erin@example.com', 'first-pass')
        other = client.post('/api/auth/login', json={'email': account.email, 'password': 'first-pass'})
        other_token = other.get_json()['data']['session_id']

        resp = client.post('/api/auth/password',
                           json={'current_password': 'first-pass', 'new_password': 'second-pass'},
                           headers=account.headers)
        assert resp.status_code == 200

        assert client.get('/api/auth/me', headers=account.headers).status_code == 200
        assert client.get('/api/auth/me', headers={'Authorization': f'Bearer {other_token}'}).status_code == 401
        login = client.post('/api/auth/login', json={'email': account.email, 'password': 'second-pass'})
        assert login.status_code == 200

    def test_wrong_current_password(self, client, alice):
        resp = client.post('/api/auth/password',
                           json={'current_password': 'nope-nope', 'new_password': 'whatever1'},
                           headers=alice.headers)
        assert resp.status_code == 401


class TestDeleteAccount:

    def test_confirm_email_must_match(self, client, alice):
        resp = client.delete('/api/auth/me', json={'confirm_email': 'wrong@example.com'}, headers=alice.headers)
        assert resp.status_code == 409

    def test_delete_cascades(self, app, client, alice, bob):
        client.post('/api/subjects', json={'name': 'Math', 'color': '#112233'}, headers=alice.headers)
        note_id = client.post('/api/notes', json={'title': 'N'}, headers=alice.headers).get_json()['data']['id']
        client.post(f'/api/notes/{note_id}/share', json={'email': bob.email, 'role': 'commenter'},
                    headers=alice.headers)

        # Bob comments on a note of his own, shared with Alice.
        bob_note = client.post('/api/notes', json={'title': 'B'}, headers=bob.headers).get_json()['data']['id']
        share_id = client.post(f'/api/notes/{bob_note}/share', json={'email': alice.email, 'role': 'commenter'},
                               headers=bob.headers).get_json()['data']['id']
        client.patch(f'/api/notes/shares/{share_id}', json={'status': 'accepted'}, headers=alice.headers)
        client.post(f'/api/notes/{bob_note}/comments', json={'content': 'hi from alice'}, headers=alice.headers)

        resp = client.delete('/api/auth/me', json={'confirm_email': alice.email}, headers=alice.headers)
        assert resp.status_code == 200

        with app.app_context():
            assert db.session.get(User, alice.user_id) is None
            assert Subject.query.filter_by(user_id=alice.user_id).count() == 0
            assert Note.query.filter_by(user_id=alice.user_id).count() == 0
            assert NoteShare.query.filter_by(note_id=note_id).count() == 0
            assert NoteShare.query.filter_by(shared_with_user_id=alice.user_id).count() == 0
            assert NoteComment.query.filter_by(user_id=alice.user_id).count() == 0
            assert AuthSession.query.filter_by(user_id=alice.user_id).count() == 0
            assert db.session.get(Note, bob_note) is not None

        assert client.get('/api/auth/me', headers=alice.headers).status_code == 401

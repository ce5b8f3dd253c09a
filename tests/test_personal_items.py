"""
Tests for reminders, sticky notes and journal entries: private, owner-only items.
"""

import pytest

from studyflow_app import db
from studyflow_app.models import JournalEntry, Quiz, Reminder, StickyNote


def _create(client, account, path, payload):
    resp = client.post(path, json=payload, headers=account.headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()['data']


class TestReminders:

    def test_listing_is_ordered_and_filters_due(self, client, alice):
        later = _create(client, alice, '/api/reminders', {'title': 'Later', 'reminder_time': '2099-01-01T09:00:00Z'})
        past = _create(client, alice, '/api/reminders', {'title': 'Past', 'reminder_time': '2020-01-01T09:00:00Z'})

        all_ids = [r['id'] for r in client.get('/api/reminders', headers=alice.headers).get_json()['data']]
        assert all_ids == [past['id'], later['id']]

        due = client.get('/api/reminders?due=true', headers=alice.headers).get_json()['data']
        assert [r['id'] for r in due] == [past['id']]

        client.patch(f"/api/reminders/{past['id']}", json={'is_read': True}, headers=alice.headers)
        assert client.get('/api/reminders?due=true', headers=alice.headers).get_json()['data'] == []

    def test_linked_task_must_be_owned(self, client, alice, bob):
        task_id = _create(client, bob, '/api/tasks', {'title': 'Bob task'})['id']
        resp = client.post('/api/reminders', json={'title': 'x', 'reminder_time': '2099-01-01T09:00:00Z',
                                                   'task_id': task_id}, headers=alice.headers)
        assert resp.status_code == 404

    def test_event_with_reminder_minutes_gets_a_reminder(self, app, client, alice):
        event = _create(client, alice, '/api/calendar', {'title': 'Chemistry lab',
                                                         'start_time': '2030-01-10T15:00:00Z',
                                                         'reminder_minutes': 30})
        reminders = client.get('/api/reminders', headers=alice.headers).get_json()['data']
        assert len(reminders) == 1
        assert reminders[0]['event_id'] == event['id']
        assert reminders[0]['title'] == 'Reminder: Chemistry lab'
        assert reminders[0]['reminder_time'] == '2030-01-10T14:30:00+00:00'

        client.delete(f"/api/calendar/{event['id']}", headers=alice.headers)
        with app.app_context():
            assert Reminder.query.filter_by(user_id=alice.user_id).count() == 0

    def test_event_without_reminder_minutes(self, client, alice):
        _create(client, alice, '/api/calendar', {'title': 'Lunch', 'start_time': '2030-01-10T12:00:00Z'})
        assert client.get('/api/reminders', headers=alice.headers).get_json()['data'] == []


class TestStickyNotes:

    def test_defaults_and_move(self, client, alice):
        note = _create(client, alice, '/api/sticky-notes', {'content': 'Buy flashcards'})
        assert note['color'] == StickyNote.DEFAULT_COLOR
        assert (note['x'], note['y'], note['width'], note['height']) == (0, 0, 200, 200)

        resp = client.patch(f"/api/sticky-notes/{note['id']}", json={'x': 120, 'y': 40}, headers=alice.headers)
        assert (resp.get_json()['data']['x'], resp.get_json()['data']['y']) == (120, 40)

    def test_invalid_color_rejected(self, client, alice):
        resp = client.post('/api/sticky-notes', json={'content': 'x', 'color': 'purple'}, headers=alice.headers)
        assert resp.status_code == 400


class TestJournal:

    def test_newest_first(self, client, alice):
        first = _create(client, alice, '/api/journal', {'date': '2024-05-01', 'mood': 'good', 'content': 'Day one'})
        second = _create(client, alice, '/api/journal', {'date': '2024-05-02', 'mood': 'okay', 'content': 'Day two'})
        assert second['date'] == '2024-05-02'

        entries = client.get('/api/journal', headers=alice.headers).get_json()['data']
        assert [e['id'] for e in entries] == [second['id'], first['id']]

    def test_mood_must_be_known(self, client, alice):
        resp = client.post('/api/journal', json={'date': '2024-05-01', 'mood': 'ecstatic', 'content': 'x'},
                           headers=alice.headers)
        assert resp.status_code == 400


@pytest.mark.parametrize('path, payload, resource', [
    ('/api/reminders', {'title': 'Call mum', 'reminder_time': '2099-01-01T09:00:00Z'}, 'reminder'),
    ('/api/sticky-notes', {'content': 'Private'}, 'sticky note'),
    ('/api/journal', {'date': '2024-05-01', 'mood': 'bad', 'content': 'Rough day'}, 'journal entry'),
])
def test_other_users_items_are_hidden(client, alice, bob, path, payload, resource):
    item_id = _create(client, alice, path, payload)['id']

    assert client.get(path, headers=bob.headers).get_json()['data'] == []
    resp = client.patch(f'{path}/{item_id}', json={}, headers=bob.headers)
    assert resp.status_code == 404
    assert resp.get_json()['details'] == {'resource': resource}
    assert client.delete(f'{path}/{item_id}', headers=bob.headers).status_code == 404

    assert client.delete(f'{path}/{item_id}', headers=alice.headers).status_code == 200
    assert client.delete(f'{path}/{item_id}', headers=alice.headers).status_code == 404


def test_account_deletion_removes_personal_items(app, client, alice):
    _create(client, alice, '/api/reminders', {'title': 'r', 'reminder_time': '2099-01-01T09:00:00Z'})
    _create(client, alice, '/api/sticky-notes', {'content': 's'})
    _create(client, alice, '/api/journal', {'date': '2024-05-01', 'mood': 'great', 'content': 'j'})
    _create(client, alice, '/api/quizzes', {'title': 'q', 'questions': [
        {'question': '?', 'options': ['a', 'b'], 'correct_answer': 0}]})

    resp = client.delete('/api/auth/me', json={'confirm_email': alice.email}, headers=alice.headers)
    assert resp.status_code == 200
    with app.app_context():
        for model in (Reminder, StickyNote, JournalEntry, Quiz):
            assert db.session.query(model).filter_by(user_id=alice.user_id).count() == 0

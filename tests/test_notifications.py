"""
Tests for the notification inbox.
"""

from studyflow_app.modules.notification.services import NotificationService


def _seed(app, account, count):
    with app.app_context():
        for i in range(count):
            NotificationService.create_notification(account.user_id, f'Title {i}', f'Message {i}')


def test_list_with_unread_count(app, client, alice):
    _seed(app, alice, 3)
    data = client.get('/api/notifications', headers=alice.headers).get_json()['data']
    assert data['unread_count'] == 3
    assert [n['title'] for n in data['notifications']] == ['Title 2', 'Title 1', 'Title 0']


def test_pagination(app, client, alice):
    _seed(app, alice, 5)
    data = client.get('/api/notifications?limit=2&offset=2', headers=alice.headers).get_json()['data']
    assert [n['title'] for n in data['notifications']] == ['Title 2', 'Title 1']


def test_mark_read_and_read_all(app, client, alice):
    _seed(app, alice, 3)
    first_id = client.get('/api/notifications', headers=alice.headers).get_json()['data']['notifications'][0]['id']

    resp = client.patch(f'/api/notifications/{first_id}/read', headers=alice.headers)
    assert resp.get_json()['data']['is_read'] is True
    assert client.get('/api/notifications', headers=alice.headers).get_json()['data']['unread_count'] == 2

    resp = client.post('/api/notifications/read-all', headers=alice.headers)
    assert resp.get_json()['data']['updated'] == 2
    assert client.get('/api/notifications', headers=alice.headers).get_json()['data']['unread_count'] == 0


def test_other_users_notifications_are_hidden(app, client, alice, bob):
    _seed(app, alice, 1)
    notif_id = client.get('/api/notifications', headers=alice.headers).get_json()['data']['notifications'][0]['id']

    assert client.get('/api/notifications', headers=bob.headers).get_json()['data']['notifications'] == []
    assert client.patch(f'/api/notifications/{notif_id}/read', headers=bob.headers).status_code == 404
    assert client.delete(f'/api/notifications/{notif_id}', headers=bob.headers).status_code == 404
    assert client.delete(f'/api/notifications/{notif_id}', headers=alice.headers).status_code == 200


def test_no_creation_endpoint(client, alice):
    resp = client.post('/api/notifications', json={'title': 'x', 'message': 'y'}, headers=alice.headers)
    assert resp.status_code == 405

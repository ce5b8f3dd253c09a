"""
Tests for subjects, exams and tasks: ownership isolation and task completion.
"""

import pytest

from studyflow_app import db
from studyflow_app.models import Task, User


@pytest.fixture
def subject_id(client, alice):
    resp = client.post('/api/subjects', json={'name': 'Physics', 'color': '#3B82F6'}, headers=alice.headers)
    assert resp.status_code == 201
    return resp.get_json()['data']['id']


class TestOwnershipIsolation:

    @pytest.mark.parametrize('collection,payload', [
        ('subjects', {'name': 'Chem', 'color': '#00FF00'}),
        ('exams', {'name': 'Final', 'date': '2030-06-01T09:00:00Z'}),
        ('tasks', {'title': 'Read chapter 3'}),
    ])
    def test_other_user_sees_not_found(self, client, alice, bob, collection, payload):
        resp = client.post(f'/api/{collection}', json=payload, headers=alice.headers)
        assert resp.status_code == 201
        item_id = resp.get_json()['data']['id']

        for method in ('get', 'patch', 'delete'):
            kwargs = {'headers': bob.headers}
            if method == 'patch':
                kwargs['json'] = {}
            resp = getattr(client, method)(f'/api/{collection}/{item_id}', **kwargs)
            assert resp.status_code == 404
            assert 'data' not in resp.get_json()

        listing = client.get(f'/api/{collection}', headers=bob.headers).get_json()['data']
        assert listing == []
        assert client.get(f'/api/{collection}/{item_id}', headers=alice.headers).status_code == 200

    def test_foreign_subject_reference_rejected(self, client, bob, subject_id):
        resp = client.post('/api/tasks', json={'title': 'x', 'subject_id': subject_id}, headers=bob.headers)
        assert resp.status_code == 404

    def test_user_id_cannot_be_injected(self, client, alice, bob):
        resp = client.post('/api/tasks', json={'title': 'x', 'user_id': bob.user_id}, headers=alice.headers)
        assert resp.status_code == 400


class TestSubjectsAndExams:

    def test_subject_crud(self, client, alice, subject_id):
        resp = client.patch(f'/api/subjects/{subject_id}', json={'covered_topics': 3, 'total_topics': 10},
                            headers=alice.headers)
        assert resp.get_json()['data']['covered_topics'] == 3
        assert client.delete(f'/api/subjects/{subject_id}', headers=alice.headers).status_code == 200
        assert client.get(f'/api/subjects/{subject_id}', headers=alice.headers).status_code == 404

    def test_deleting_subject_unlinks_exams(self, client, alice, subject_id):
        exam = client.post('/api/exams', json={'name': 'Midterm', 'date': '2030-03-01T10:00:00Z',
                                               'subject_id': subject_id}, headers=alice.headers)
        exam_id = exam.get_json()['data']['id']
        client.delete(f'/api/subjects/{subject_id}', headers=alice.headers)
        assert client.get(f'/api/exams/{exam_id}', headers=alice.headers).get_json()['data']['subject_id'] is None

    def test_exam_confidence_range(self, client, alice):
        resp = client.post('/api/exams', json={'name': 'Quiz', 'date': '2030-03-01T10:00:00Z', 'confidence': 150},
                           headers=alice.headers)
        assert resp.status_code == 400

    def test_invalid_color(self, client, alice):
        resp = client.post('/api/subjects', json={'name': 'Art', 'color': 'blue'}, headers=alice.headers)
        assert resp.status_code == 400


class TestTaskCompletion:

    def _task(self, client, account, **extra):
        payload = {'title': 'Homework', **extra}
        return client.post('/api/tasks', json=payload, headers=account.headers).get_json()['data']['id']

    def test_completion_counts_once(self, app, client, alice):
        task_id = self._task(client, alice)

        resp = client.patch(f'/api/tasks/{task_id}', json={'status': 'completed'}, headers=alice.headers)
        data = resp.get_json()['data']
        assert data['status'] == 'completed'
        assert data['completed_at'] is not None
        assert data['unlocked_rewards'] == []

        client.patch(f'/api/tasks/{task_id}', json={'status': 'completed'}, headers=alice.headers)

        with app.app_context():
            assert db.session.get(User, alice.user_id).total_tasks_completed == 1

    def test_uncompleting_does_not_decrement(self, app, client, alice):
        task_id = self._task(client, alice)
        client.patch(f'/api/tasks/{task_id}', json={'status': 'completed'}, headers=alice.headers)

        resp = client.patch(f'/api/tasks/{task_id}', json={'status': 'pending'}, headers=alice.headers)
        assert resp.get_json()['data']['completed_at'] is None

        with app.app_context():
            assert db.session.get(User, alice.user_id).total_tasks_completed == 1

        # Completing again counts again.
        client.patch(f'/api/tasks/{task_id}', json={'status': 'completed'}, headers=alice.headers)
        with app.app_context():
            assert db.session.get(User, alice.user_id).total_tasks_completed == 2

    def test_task_created_completed_is_not_a_completion(self, app, client, alice):
        resp = client.post('/api/tasks', json={'title': 'Already done', 'status': 'completed'},
                           headers=alice.headers)
        assert resp.get_json()['data']['completed_at'] is not None
        with app.app_context():
            assert db.session.get(User, alice.user_id).total_tasks_completed == 0

    def test_completion_reports_unlocked_rewards(self, client, alice):
        client.post('/api/rewards', json={'target_tasks': 2, 'reward': 'Pizza'}, headers=alice.headers)
        first, second = self._task(client, alice), self._task(client, alice)

        resp = client.patch(f'/api/tasks/{first}', json={'status': 'completed'}, headers=alice.headers)
        assert resp.get_json()['data']['unlocked_rewards'] == []

        resp = client.patch(f'/api/tasks/{second}', json={'status': 'completed'}, headers=alice.headers)
        unlocked = resp.get_json()['data']['unlocked_rewards']
        assert [r['reward'] for r in unlocked] == ['Pizza']
        assert unlocked[0]['is_completed'] is True

    def test_other_fields_update_with_status(self, client, alice):
        task_id = self._task(client, alice)
        resp = client.patch(f'/api/tasks/{task_id}', json={'status': 'completed', 'title': 'Done homework'},
                            headers=alice.headers)
        assert resp.get_json()['data']['title'] == 'Done homework'

    def test_centurion_badge(self, ctx, alice):
        from studyflow_app.modules.planner.services import TaskService

        user = db.session.get(User, alice.user_id)
        user.total_tasks_completed = 99
        db.session.commit()

        task = TaskService.create_task(alice.actor, {'title': 'The hundredth'})
        TaskService.update_task(alice.actor, task.id, {'status': Task.STATUS_COMPLETED})

        user = db.session.get(User, alice.user_id)
        assert user.total_tasks_completed == 100
        assert 'centurion' in user.badges

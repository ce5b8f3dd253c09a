"""
Tests for self-made quizzes and their grading.
"""

import pytest

from studyflow_app.modules.quiz.logics import grade

QUESTIONS = [
    {'question': '2 + 2?', 'options': ['3', '4', '5'], 'correct_answer': 1},
    {'question': 'Water boils at 100C at sea level', 'options': ['True', 'False'],
     'correct_answer': 0, 'type': 'true_false'},
    {'question': 'Capital of France?', 'options': ['Paris', 'Rome'], 'correct_answer': 0},
    {'question': 'H2O is?', 'options': ['Salt', 'Water'], 'correct_answer': 1},
]


class TestGrading:

    def test_all_correct(self):
        result = grade(QUESTIONS, [1, 0, 0, 1])
        assert (result.correct, result.total, result.score) == (4, 4, 100)

    def test_skipped_questions_count_as_wrong(self):
        result = grade(QUESTIONS, [1, None, 1, 1])
        assert result.results == [True, False, False, True]
        assert result.score == 50

    def test_score_is_rounded(self):
        assert grade(QUESTIONS[:3], [1, 0, 1]).score == 67

    def test_answer_count_must_match(self):
        with pytest.raises(ValueError):
            grade(QUESTIONS, [1, 0])


@pytest.fixture
def quiz_id(client, alice):
    resp = client.post('/api/quizzes', json={'title': 'Mixed', 'questions': QUESTIONS}, headers=alice.headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()['data']['id']


class TestQuizApi:

    def test_submit_stores_score(self, client, alice, quiz_id):
        resp = client.post(f'/api/quizzes/{quiz_id}/submit', json={'answers': [1, 0, 1, 1]}, headers=alice.headers)
        data = resp.get_json()['data']
        assert resp.status_code == 200
        assert (data['correct'], data['total'], data['score']) == (3, 4, 75)
        assert data['completed_at'] is not None

        stored = client.get(f'/api/quizzes/{quiz_id}', headers=alice.headers).get_json()['data']
        assert stored['score'] == 75

    def test_wrong_answer_count_rejected(self, client, alice, quiz_id):
        resp = client.post(f'/api/quizzes/{quiz_id}/submit', json={'answers': [1]}, headers=alice.headers)
        assert resp.status_code == 400

    def test_changing_questions_clears_score(self, client, alice, quiz_id):
        client.post(f'/api/quizzes/{quiz_id}/submit', json={'answers': [1, 0, 0, 1]}, headers=alice.headers)
        resp = client.patch(f'/api/quizzes/{quiz_id}', json={'questions': QUESTIONS[:2]}, headers=alice.headers)
        data = resp.get_json()['data']
        assert (data['score'], data['completed_at']) == (None, None)

        resp = client.patch(f'/api/quizzes/{quiz_id}', json={'title': 'Renamed'}, headers=alice.headers)
        assert resp.get_json()['data']['title'] == 'Renamed'

    @pytest.mark.parametrize('question', [
        {'question': 'q', 'options': ['a', 'b'], 'correct_answer': 2},
        {'question': 'q', 'options': ['a'], 'correct_answer': 0},
        {'question': 'q', 'options': ['a', 'b', 'c'], 'correct_answer': 0, 'type': 'true_false'},
        {'question': 'q', 'options': ['a', 'b'], 'correct_answer': '0'},
    ])
    def test_malformed_questions_rejected(self, client, alice, question):
        resp = client.post('/api/quizzes', json={'title': 'Bad', 'questions': [question]}, headers=alice.headers)
        assert resp.status_code == 400

    def test_other_users_quizzes_are_hidden(self, client, bob, quiz_id):
        assert client.get('/api/quizzes', headers=bob.headers).get_json()['data'] == []
        assert client.get(f'/api/quizzes/{quiz_id}', headers=bob.headers).status_code == 404
        assert client.post(f'/api/quizzes/{quiz_id}/submit', json={'answers': [1, 0, 0, 1]},
                           headers=bob.headers).status_code == 404
        assert client.delete(f'/api/quizzes/{quiz_id}', headers=bob.headers).status_code == 404

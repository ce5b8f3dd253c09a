from flask import jsonify
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.validation import get_json_body, load_payload
from ..auth.interface import AuthInterface
from . import quiz_bp
from .schemas import QuizSchema, QuizUpdateSchema, SubmissionSchema
from .services import QuizService


@quiz_bp.route('', methods=['GET'])
@login_required
def list_quizzes():
    quizzes = QuizService.list_quizzes(AuthInterface.current_actor())
    return jsonify(success_response([q.to_dict() for q in quizzes]))


@quiz_bp.route('', methods=['POST'])
@login_required
def create_quiz():
    data = load_payload(QuizSchema(), get_json_body())
    quiz = QuizService.create_quiz(AuthInterface.current_actor(), data)
    return jsonify(success_response(quiz.to_dict())), 201


@quiz_bp.route('/<int:quiz_id>', methods=['GET'])
@login_required
def get_quiz(quiz_id):
    quiz = QuizService.get_quiz(AuthInterface.current_actor(), quiz_id)
    return jsonify(success_response(quiz.to_dict()))


@quiz_bp.route('/<int:quiz_id>', methods=['PATCH'])
@login_required
def update_quiz(quiz_id):
    changes = load_payload(QuizUpdateSchema(), get_json_body())
    quiz = QuizService.update_quiz(AuthInterface.current_actor(), quiz_id, changes)
    return jsonify(success_response(quiz.to_dict()))


@quiz_bp.route('/<int:quiz_id>', methods=['DELETE'])
@login_required
def delete_quiz(quiz_id):
    QuizService.delete_quiz(AuthInterface.current_actor(), quiz_id)
    return jsonify(success_response(message='Quiz deleted'))


@quiz_bp.route('/<int:quiz_id>/submit', methods=['POST'])
@login_required
def submit_quiz(quiz_id):
    """Grade an attempt; answers are option indexes in question order."""
    data = load_payload(SubmissionSchema(), get_json_body())
    quiz, result = QuizService.submit_quiz(AuthInterface.current_actor(), quiz_id, data['answers'])
    payload = quiz.to_dict()
    payload.update({'correct': result.correct, 'total': result.total, 'results': result.results})
    return jsonify(success_response(payload))

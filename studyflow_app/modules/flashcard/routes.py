from flask import jsonify, request
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.validation import get_json_body, load_payload
from ..auth.interface import AuthInterface
from . import flashcard_bp
from .schemas import FlashcardSchema, FlashcardUpdateSchema, ReviewSchema
from .services import FlashcardService


@flashcard_bp.route('', methods=['GET'])
@login_required
def list_flashcards():
    due_only = request.args.get('due', '').lower() in ('1', 'true', 'yes')
    subject_id = request.args.get('subject_id', type=int)
    cards = FlashcardService.list_flashcards(
        AuthInterface.current_actor(), due_only=due_only, subject_id=subject_id
    )
    return jsonify(success_response([c.to_dict() for c in cards]))


@flashcard_bp.route('', methods=['POST'])
@login_required
def create_flashcard():
    data = load_payload(FlashcardSchema(), get_json_body())
    card = FlashcardService.create_flashcard(AuthInterface.current_actor(), data)
    return jsonify(success_response(card.to_dict())), 201


@flashcard_bp.route('/<int:card_id>', methods=['GET'])
@login_required
def get_flashcard(card_id):
    card = FlashcardService.get_flashcard(AuthInterface.current_actor(), card_id)
    return jsonify(success_response(card.to_dict()))


@flashcard_bp.route('/<int:card_id>', methods=['PATCH'])
@login_required
def update_flashcard(card_id):
    changes = load_payload(FlashcardUpdateSchema(), get_json_body())
    card = FlashcardService.update_flashcard(AuthInterface.current_actor(), card_id, changes)
    return jsonify(success_response(card.to_dict()))


@flashcard_bp.route('/<int:card_id>', methods=['DELETE'])
@login_required
def delete_flashcard(card_id):
    FlashcardService.delete_flashcard(AuthInterface.current_actor(), card_id)
    return jsonify(success_response(message='Flashcard deleted'))


@flashcard_bp.route('/<int:card_id>/review', methods=['POST'])
@login_required
def review_flashcard(card_id):
    data = load_payload(ReviewSchema(), get_json_body())
    card = FlashcardService.review_flashcard(AuthInterface.current_actor(), card_id, data['correct'])
    return jsonify(success_response(card.to_dict()))

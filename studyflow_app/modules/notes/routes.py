from flask import jsonify
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.validation import get_json_body, load_payload
from ..auth.interface import AuthInterface
from . import notes_bp
from .schemas import CommentSchema, NoteSchema, NoteShareSchema, NoteShareUpdateSchema, NoteUpdateSchema
from .services import NoteService


@notes_bp.route('', methods=['GET'])
@login_required
def list_notes():
    notes = NoteService.list_notes(AuthInterface.current_actor())
    return jsonify(success_response({
        'owned': [n.to_dict() for n in notes['owned']],
        'shared': [n.to_dict() for n in notes['shared']],
    }))


@notes_bp.route('', methods=['POST'])
@login_required
def create_note():
    data = load_payload(NoteSchema(), get_json_body())
    note = NoteService.create_note(AuthInterface.current_actor(), data)
    return jsonify(success_response(note.to_dict())), 201


@notes_bp.route('/<int:note_id>', methods=['GET'])
@login_required
def get_note(note_id):
    note, is_owner = NoteService.get_note(AuthInterface.current_actor(), note_id)
    data = note.to_dict()
    data['comments'] = [c.to_dict() for c in note.comments]
    if is_owner:
        data['shares'] = [s.to_dict() for s in note.shares]
    return jsonify(success_response(data))


@notes_bp.route('/<int:note_id>', methods=['PATCH'])
@login_required
def update_note(note_id):
    changes = load_payload(NoteUpdateSchema(), get_json_body())
    note = NoteService.update_note(AuthInterface.current_actor(), note_id, changes)
    return jsonify(success_response(note.to_dict()))


@notes_bp.route('/<int:note_id>', methods=['DELETE'])
@login_required
def delete_note(note_id):
    NoteService.delete_note(AuthInterface.current_actor(), note_id)
    return jsonify(success_response(message='Note deleted'))


@notes_bp.route('/<int:note_id>/share', methods=['POST'])
@login_required
def share_note(note_id):
    data = load_payload(NoteShareSchema(), get_json_body())
    share = NoteService.share_note(AuthInterface.current_actor(), note_id, data['email'], data['role'])
    return jsonify(success_response(share.to_dict())), 201


@notes_bp.route('/shares/<int:share_id>', methods=['PATCH'])
@login_required
def update_share(share_id):
    changes = load_payload(NoteShareUpdateSchema(), get_json_body())
    share = NoteService.update_note_share(AuthInterface.current_actor(), share_id, changes)
    return jsonify(success_response(share.to_dict()))


@notes_bp.route('/shares/<int:share_id>', methods=['DELETE'])
@login_required
def delete_share(share_id):
    NoteService.delete_note_share(AuthInterface.current_actor(), share_id)
    return jsonify(success_response(message='Share removed'))


@notes_bp.route('/<int:note_id>/comments', methods=['GET'])
@login_required
def list_comments(note_id):
    comments = NoteService.list_comments(AuthInterface.current_actor(), note_id)
    return jsonify(success_response([c.to_dict() for c in comments]))


@notes_bp.route('/<int:note_id>/comments', methods=['POST'])
@login_required
def add_comment(note_id):
    data = load_payload(CommentSchema(), get_json_body())
    comment = NoteService.add_comment(AuthInterface.current_actor(), note_id, data['content'])
    return jsonify(success_response(comment.to_dict())), 201

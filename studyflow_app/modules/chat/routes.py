from flask import jsonify
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.validation import get_json_body, load_payload
from ..auth.interface import AuthInterface
from . import chat_bp
from .schemas import MessageSchema
from .services import ChatService


@chat_bp.route('/context', methods=['GET'])
@login_required
def get_context():
    """Study data an assistant can use to personalise its prompt."""
    return jsonify(success_response(ChatService.get_context(AuthInterface.current_actor())))


@chat_bp.route('/messages', methods=['GET'])
@login_required
def list_messages():
    messages = ChatService.list_messages(AuthInterface.current_actor())
    return jsonify(success_response([m.to_dict() for m in messages]))


@chat_bp.route('/messages', methods=['POST'])
@login_required
def append_message():
    data = load_payload(MessageSchema(), get_json_body())
    message = ChatService.append_message(AuthInterface.current_actor(), data['role'], data['content'])
    return jsonify(success_response(message.to_dict())), 201


@chat_bp.route('/messages', methods=['DELETE'])
@login_required
def clear_messages():
    removed = ChatService.clear_messages(AuthInterface.current_actor())
    return jsonify(success_response({'removed': removed}))

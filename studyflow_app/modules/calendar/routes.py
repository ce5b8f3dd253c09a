from flask import jsonify, request
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.validation import get_json_body, load_payload
from ..auth.interface import AuthInterface
from . import calendar_bp
from .schemas import EventRangeSchema, EventSchema, EventShareSchema, EventShareUpdateSchema, EventUpdateSchema
from .services import EventService


@calendar_bp.route('', methods=['GET'])
@login_required
def list_events():
    window = load_payload(EventRangeSchema(), request.args.to_dict())
    events = EventService.list_events(
        AuthInterface.current_actor(), start=window.get('start'), end=window.get('end')
    )
    return jsonify(success_response({
        'owned': [e.to_dict() for e in events['owned']],
        'shared': [e.to_dict() for e in events['shared']],
    }))


@calendar_bp.route('', methods=['POST'])
@login_required
def create_event():
    data = load_payload(EventSchema(), get_json_body())
    event = EventService.create_event(AuthInterface.current_actor(), data)
    return jsonify(success_response(event.to_dict())), 201


@calendar_bp.route('/<int:event_id>', methods=['GET'])
@login_required
def get_event(event_id):
    actor = AuthInterface.current_actor()
    event = EventService.get_event(actor, event_id)
    data = event.to_dict()
    if event.user_id == actor.user_id:
        data['shares'] = [s.to_dict() for s in event.shares]
    return jsonify(success_response(data))


@calendar_bp.route('/<int:event_id>', methods=['PATCH'])
@login_required
def update_event(event_id):
    changes = load_payload(EventUpdateSchema(), get_json_body())
    event = EventService.update_event(AuthInterface.current_actor(), event_id, changes)
    return jsonify(success_response(event.to_dict()))


@calendar_bp.route('/<int:event_id>', methods=['DELETE'])
@login_required
def delete_event(event_id):
    EventService.delete_event(AuthInterface.current_actor(), event_id)
    return jsonify(success_response(message='Event deleted'))


@calendar_bp.route('/<int:event_id>/share', methods=['POST'])
@login_required
def share_event(event_id):
    data = load_payload(EventShareSchema(), get_json_body())
    share = EventService.share_event(AuthInterface.current_actor(), event_id, data['email'])
    return jsonify(success_response(share.to_dict())), 201


@calendar_bp.route('/shares/<int:share_id>', methods=['PATCH'])
@login_required
def update_share(share_id):
    changes = load_payload(EventShareUpdateSchema(), get_json_body())
    share = EventService.update_event_share(AuthInterface.current_actor(), share_id, changes)
    return jsonify(success_response(share.to_dict()))


@calendar_bp.route('/shares/<int:share_id>', methods=['DELETE'])
@login_required
def delete_share(share_id):
    EventService.delete_event_share(AuthInterface.current_actor(), share_id)
    return jsonify(success_response(message='Share removed'))

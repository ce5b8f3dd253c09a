from flask import jsonify
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.validation import get_json_body, load_payload
from ..auth.interface import AuthInterface
from . import gamification_bp
from .schemas import FocusSchema, RewardCreateSchema, RewardUpdateSchema
from .services import RewardService, StatsService, StreakService


@gamification_bp.route('/stats', methods=['GET'])
@login_required
def get_stats():
    return jsonify(success_response(StatsService.get_stats(AuthInterface.current_actor())))


@gamification_bp.route('/stats/streak', methods=['POST'])
@login_required
def touch_streak():
    """Record today's activity; calling it twice on one day is a no-op."""
    return jsonify(success_response(StreakService.touch(AuthInterface.current_actor())))


@gamification_bp.route('/stats/focus', methods=['POST'])
@login_required
def add_focus():
    data = load_payload(FocusSchema(), get_json_body())
    stats = StatsService.add_focus_minutes(AuthInterface.current_actor(), data['minutes'])
    return jsonify(success_response(stats))


@gamification_bp.route('/rewards', methods=['GET'])
@login_required
def list_rewards():
    rewards = RewardService.list_rewards(AuthInterface.current_actor())
    return jsonify(success_response([r.to_dict() for r in rewards]))


@gamification_bp.route('/rewards', methods=['POST'])
@login_required
def create_reward():
    data = load_payload(RewardCreateSchema(), get_json_body())
    reward = RewardService.create_reward(AuthInterface.current_actor(), data)
    return jsonify(success_response(reward.to_dict())), 201


@gamification_bp.route('/rewards/<int:reward_id>', methods=['PATCH'])
@login_required
def update_reward(reward_id):
    changes = load_payload(RewardUpdateSchema(), get_json_body())
    reward = RewardService.update_reward(AuthInterface.current_actor(), reward_id, changes)
    return jsonify(success_response(reward.to_dict()))


@gamification_bp.route('/rewards/<int:reward_id>', methods=['DELETE'])
@login_required
def delete_reward(reward_id):
    RewardService.delete_reward(AuthInterface.current_actor(), reward_id)
    return jsonify(success_response(message='Reward deleted'))

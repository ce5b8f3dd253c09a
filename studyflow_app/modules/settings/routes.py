from flask import jsonify
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.validation import get_json_body, load_payload
from ..auth.interface import AuthInterface
from . import settings_bp
from .schemas import AppPreferencesSchema, PomodoroSettingsSchema
from .services import SettingsService


@settings_bp.route('/pomodoro', methods=['GET'])
@login_required
def get_pomodoro():
    return jsonify(success_response(SettingsService.get_pomodoro_settings(AuthInterface.current_actor())))


@settings_bp.route('/pomodoro', methods=['PUT', 'POST'])
@login_required
def save_pomodoro():
    changes = load_payload(PomodoroSettingsSchema(), get_json_body())
    settings = SettingsService.save_pomodoro_settings(AuthInterface.current_actor(), changes)
    return jsonify(success_response(settings))


@settings_bp.route('/preferences', methods=['GET'])
@login_required
def get_preferences():
    return jsonify(success_response(SettingsService.get_app_preferences(AuthInterface.current_actor())))


@settings_bp.route('/preferences', methods=['PUT', 'POST'])
@login_required
def save_preferences():
    changes = load_payload(AppPreferencesSchema(), get_json_body())
    prefs = SettingsService.save_app_preferences(AuthInterface.current_actor(), changes)
    return jsonify(success_response(prefs))

from flask import current_app, jsonify
from flask_login import login_required

from ...core.error_handlers import success_response
from ...utils.time_utils import isoformat
from ...utils.validation import get_json_body, load_payload
from . import auth_bp
from .interface import AuthInterface
from .schemas import (
    DeleteAccountSchema,
    LoginSchema,
    PasswordChangeSchema,
    ProfileUpdateSchema,
    SignupSchema,
)
from .services import AuthService


def _session_response(user, session, status_code=200):
    """Return the user + token and mirror the token in the session cookie."""
    response = jsonify(success_response({
        'user': user.to_dict(),
        'session_id': session.id,
        'expires_at': isoformat(session.expires_at),
    }))
    response.status_code = status_code
    response.set_cookie(
        current_app.config.get('SESSION_COOKIE_NAME_API', 'session_id'),
        session.id,
        max_age=current_app.config.get('SESSION_TTL_DAYS', 7) * 24 * 60 * 60,
        httponly=True,
        samesite='Lax',
        secure=current_app.config.get('SESSION_COOKIE_SECURE', False),
    )
    return response


@auth_bp.route('/signup', methods=['POST'])
def signup():
    data = load_payload(SignupSchema(), get_json_body())
    user, session = AuthService.register(data['name'], data['email'], data['password'])
    return _session_response(user, session, status_code=201)


@auth_bp.route('/login', methods=['POST'])
def login():
    data = load_payload(LoginSchema(), get_json_body())
    user, session = AuthService.authenticate(data['email'], data['password'])
    return _session_response(user, session)


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    AuthService.logout(AuthInterface.current_actor())
    response = jsonify(success_response(message='Logged out'))
    response.delete_cookie(current_app.config.get('SESSION_COOKIE_NAME_API', 'session_id'))
    return response


@auth_bp.route('/me', methods=['GET'])
@login_required
def get_me():
    user = AuthService.get_user(AuthInterface.current_actor())
    return jsonify(success_response(user.to_dict()))


@auth_bp.route('/me', methods=['PATCH'])
@login_required
def update_me():
    changes = load_payload(ProfileUpdateSchema(), get_json_body())
    user = AuthService.update_profile(AuthInterface.current_actor(), changes)
    return jsonify(success_response(user.to_dict()))


@auth_bp.route('/me', methods=['DELETE'])
@login_required
def delete_me():
    data = load_payload(DeleteAccountSchema(), get_json_body())
    AuthService.delete_account(AuthInterface.current_actor(), data['confirm_email'])
    response = jsonify(success_response(message='Account deleted'))
    response.delete_cookie(current_app.config.get('SESSION_COOKIE_NAME_API', 'session_id'))
    return response


@auth_bp.route('/password', methods=['POST'])
@login_required
def change_password():
    data = load_payload(PasswordChangeSchema(), get_json_body())
    AuthService.change_password(
        AuthInterface.current_actor(), data['current_password'], data['new_password']
    )
    return jsonify(success_response(message='Password updated'))

"""
Error Handlers for StudyFlow

Provides:
- Custom exception classes
- Consistent error response format
- Flask error handlers
"""

from typing import Any, Dict, Optional

from flask import current_app, jsonify, request
from werkzeug.exceptions import HTTPException


class StudyFlowError(Exception):
    """Base exception class for StudyFlow."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


class UnauthenticatedError(StudyFlowError):
    """No session, or the session expired."""

    def __init__(self, message: str = 'Not authenticated'):
        super().__init__(message=message, code='UNAUTHENTICATED', status_code=401)


class InvalidCredentialsError(StudyFlowError):
    """Password check failed."""

    def __init__(self, message: str = 'Incorrect password'):
        super().__init__(message=message, code='INVALID_CREDENTIALS', status_code=401)


class NotFoundError(StudyFlowError):
    """Resource not found, or the actor has no relationship to it."""

    def __init__(self, message: str = 'Resource not found', resource: str = None):
        super().__init__(
            message=message,
            code='NOT_FOUND',
            status_code=404,
            details={'resource': resource} if resource else None
        )


class ForbiddenError(StudyFlowError):
    """The actor is related to the resource but lacks the permission."""

    def __init__(self, message: str = 'Access denied', action: str = None):
        super().__init__(
            message=message,
            code='FORBIDDEN',
            status_code=403,
            details={'action': action} if action else None
        )


class ConflictError(StudyFlowError):
    """Request conflicts with stored state."""

    def __init__(self, message: str = 'Conflict'):
        super().__init__(message=message, code='CONFLICT', status_code=409)


class ValidationError(StudyFlowError):
    """Input validation failed."""

    def __init__(self, message: str = 'Validation failed', errors: Dict = None):
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            status_code=400,
            details={'errors': errors} if errors else None
        )


class UnexpectedError(StudyFlowError):
    """Storage or infrastructure failure."""

    def __init__(self, message: str = 'Internal server error'):
        super().__init__(message=message, code='SERVER_ERROR', status_code=500)


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def success_response(data: Any = None, message: str = None) -> dict:
    """Create a standardized success response."""
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    return response


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    @app.errorhandler(StudyFlowError)
    def handle_studyflow_error(error):
        if error.status_code >= 500:
            current_app.logger.error(f"{error.code}: {error.message}")
        else:
            current_app.logger.info(f"{error.code} on {request.method} {request.path}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        if request.path.startswith('/api/'):
            return error_response('Method not allowed', 'METHOD_NOT_ALLOWED', 405)
        return error

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        if isinstance(error, HTTPException):
            return error
        current_app.logger.exception('Internal server error')
        unexpected = UnexpectedError()
        return jsonify(unexpected.to_dict()), unexpected.status_code

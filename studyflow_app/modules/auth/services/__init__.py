from .auth_service import AuthService
from .session_service import SessionService

__all__ = ['AuthService', 'SessionService']

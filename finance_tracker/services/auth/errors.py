from finance_tracker.services.errors import NotAuthenticatedError
from finance_tracker.services.users.errors import UserAlreadyExists

__all__ = ["AuthenticationError", "UserAlreadyExists", "WrongPasswordError"]


class AuthenticationError(NotAuthenticatedError):
    detail = "Authentication failed"


class WrongPasswordError(NotAuthenticatedError):
    detail = "Invalid username or password"

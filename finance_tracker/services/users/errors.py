from finance_tracker.services.errors import BaseServiceError


class UserAlreadyExists(BaseServiceError):
    detail = "Username or email already registered"

class BaseServiceError(Exception):
    detail: str = "Unexpected service error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.detail
        super().__init__(self.detail)


class NotAuthenticatedError(BaseServiceError):
    detail = "Not authenticated"


class PermissionDeniedError(BaseServiceError):
    detail = "You do not have permission to perform this action"


class NotFoundError(BaseServiceError):
    detail = "Not found"


class InvalidOrderingError(BaseServiceError):
    detail = "Unsupported ordering"

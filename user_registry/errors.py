from __future__ import annotations


class RegistryError(Exception):
    """Base for errors that end a request with a fixed JSON error body."""

    status_code: int = 500
    message: str = "internal server error"

    def __init__(self, detail: str | None = None):
        # ``detail`` is for logs only; clients always see ``message``.
        super().__init__(detail or self.message)
        self.detail = detail


class NotFoundError(RegistryError):
    status_code = 404
    message = "not found"


class BadRequestError(RegistryError):
    status_code = 400
    message = "bad request"


class InternalError(RegistryError):
    status_code = 500
    message = "internal server error"


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        super().__init__(f"no user with id {user_id!r}")
        self.user_id = user_id


def error_body(err: type[RegistryError] | RegistryError) -> dict[str, str]:
    return {"error": err.message}

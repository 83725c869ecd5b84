"""Domain errors. Routers let them propagate; ``main`` maps them to JSON responses."""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class BadRequest(AppError):
    status_code = 400


class NotFound(AppError):
    status_code = 404


class Forbidden(AppError):
    status_code = 403


class Conflict(AppError):
    # clients already rely on 400 for duplicates
    status_code = 400

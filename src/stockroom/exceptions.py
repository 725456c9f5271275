"""Domain errors that carry their own HTTP translation.

Field-level input problems are reported with ``protean.exceptions.ValidationError``;
the classes here cover the remaining kinds a caller can act on.
"""


class StockroomError(Exception):
    """Base class for errors surfaced to API clients with a machine-readable code."""

    code = "INTERNAL_ERROR"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(StockroomError):
    """The referenced identifier does not exist."""

    code = "NOT_FOUND"
    status_code = 404
    default_message = "Resource not found"


class ConflictError(StockroomError):
    """The write would break a uniqueness rule."""

    code = "CONFLICT"
    status_code = 409
    default_message = "Resource already exists"

"""
Domain exceptions raised by the order placement pipeline.

Each error carries a stable, client-facing message. The API layer maps the
three kinds onto HTTP responses (see core_backend.exceptions).
"""


class OrderServiceError(Exception):
    """Base exception for order pipeline failures."""

    code = "order_error"

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class ResourceNotFoundError(OrderServiceError):
    """Raised when a referenced table, order or tax context does not exist."""

    code = "not_found"


class TableConflictError(OrderServiceError):
    """Raised when the requested table is occupied by another active order."""

    code = "table_conflict"

    def __init__(self, message, table=None):
        self.table = table
        super().__init__(message)


class OrderRejectedError(OrderServiceError):
    """Raised when an order payload or status transition is invalid."""

    code = "rejected"

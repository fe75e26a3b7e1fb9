"""
Domain errors raised by the service layer.

Each error carries the HTTP status and machine-readable code it is reported
with, so routes can let them propagate to the registered exception handler.

Access policy: an inventory (or a product inside one) that the requester
cannot see is always reported as NotFound. AuthorizationDenied is reserved for
inventories the requester can see but does not own.
"""


class StockroomError(Exception):
    status_code = 400
    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(StockroomError):
    """No verified identity accompanied the request."""
    status_code = 401
    code = "unauthenticated"


class AuthorizationDenied(StockroomError):
    """The identity can see the inventory but the operation is owner-only."""
    status_code = 403
    code = "forbidden"


class NotFound(StockroomError):
    status_code = 404
    code = "not_found"


class ValidationFailed(StockroomError):
    status_code = 400
    code = "validation_error"


class DomainConstraintViolation(StockroomError):
    """A business rule forbids the operation (e.g. deleting the last inventory)."""
    status_code = 409
    code = "domain_constraint"

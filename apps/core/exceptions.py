"""
Typed errors raised by the service layer.

Services never build HTTP responses; they raise one of these and the
NinjaAPI exception handlers in apps.core.handlers render the error envelope
with the matching status code.
"""


class ServiceError(Exception):
    """Base class for every error a service may surface to the caller."""

    status_code = 400
    default_message = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(ServiceError):
    status_code = 401
    default_message = "Authentication required"


class ValidationError(ServiceError):
    status_code = 400
    default_message = "Please fill all required fields"


class PermissionDenied(ServiceError):
    status_code = 403
    default_message = "Permission denied"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"

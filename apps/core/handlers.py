"""
Exception handlers that turn every failure into the error envelope.

Registered once on the NinjaAPI instance in config.urls.
"""
import logging

from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError as NinjaValidationError

from .envelopes import error
from .exceptions import ServiceError

logger = logging.getLogger(__name__)


def register_exception_handlers(api: NinjaAPI) -> None:

    @api.exception_handler(ServiceError)
    def on_service_error(request, exc: ServiceError):
        return api.create_response(request, error(exc.message), status=exc.status_code)

    @api.exception_handler(NinjaValidationError)
    def on_request_validation_error(request, exc: NinjaValidationError):
        logger.info(f"Rejected malformed request to {request.path}: {exc.errors}")
        return api.create_response(request, error("Please fill all required fields"), status=400)

    @api.exception_handler(HttpError)
    def on_http_error(request, exc: HttpError):
        return api.create_response(request, error(str(exc)), status=exc.status_code)

    @api.exception_handler(Exception)
    def on_unexpected_error(request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}: {exc}")
        return api.create_response(request, error("Something went wrong"), status=500)

"""
Errors raised by the item store and the request router.
"""

from http import HTTPStatus


class ServiceError(Exception):
    """Base class for errors that map to a client-facing status code."""

    status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR


class RequestValidationError(ServiceError, ValueError):
    status_code = HTTPStatus.BAD_REQUEST


class NotFoundError(ServiceError):
    status_code = HTTPStatus.NOT_FOUND


class MethodNotAllowedError(ServiceError):
    status_code = HTTPStatus.METHOD_NOT_ALLOWED

"""Typed errors raised by services and translated at the HTTP boundary.

Each class carries the status code the global handler responds with; see
:func:`medrec_commons.core.middleware.error_response`.
"""

from http import HTTPStatus


class CommonsException(Exception):
    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ResourceNotFoundException(CommonsException):
    status_code = HTTPStatus.NOT_FOUND


class UnauthorizedAccessException(CommonsException):
    status_code = HTTPStatus.UNAUTHORIZED


class InsufficientRoleException(CommonsException):
    status_code = HTTPStatus.FORBIDDEN


class ImproperRequestException(CommonsException):
    status_code = HTTPStatus.BAD_REQUEST


class ValidationException(CommonsException):
    status_code = HTTPStatus.BAD_REQUEST


class EmailAlreadyExistsException(CommonsException):
    status_code = HTTPStatus.CONFLICT


class ResourceCreationException(CommonsException):
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR

"""Errors raised by the service layer.

Each error carries the HTTP status it maps to; the handlers registered in
``report_it.main`` turn them into ``{"error": message}`` responses.
"""


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = 400


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 400


class StoreError(ServiceError):
    status_code = 500

"""Domain errors translated to HTTP responses by the server layer."""

from __future__ import annotations


class BusinessIdeasError(Exception):
    """Base class for errors raised by this package."""

    status_code = 500


class NotFoundError(BusinessIdeasError):
    """A requested record does not exist."""

    status_code = 404

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity} not found")


class RequestError(BusinessIdeasError):
    """The request body is missing required data or is malformed."""

    status_code = 400

# catalog/errors.py
from typing import Optional, Union

BAD_REQUEST = 400
NOT_FOUND = 404
NOT_UNIQUE = 409
SERVER_ERROR = 500

Source = Union[str, Exception]


class CatalogError(Exception):
    """Base class for every failure reported by a catalog action.

    Args:
        source: A message, or an exception whose text becomes the message
        context: Name of the action that raised the error (e.g. "AuthorActions.insert")
    """
    status = BAD_REQUEST

    def __init__(self, source: Source, context: Optional[str] = None):
        super().__init__(str(source))
        self.message = str(source)
        self.context = context
        self.inner = source if isinstance(source, Exception) else None

    @property
    def field(self) -> Optional[str]:
        """Field prefix of the message ("name" for "name: Missing ..."), if any"""
        head, sep, _ = self.message.partition(":")
        return head.strip() if sep else None

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} ({self.context})"
        return self.message


class BadRequest(CatalogError):
    """A domain validation rule failed."""
    status = BAD_REQUEST


class NotFound(CatalogError):
    """A requested row, parent scope or relationship link does not exist."""
    status = NOT_FOUND


class NotUnique(CatalogError):
    """An insert, update or connect would violate a uniqueness rule."""
    status = NOT_UNIQUE


class ServerError(CatalogError):
    """An unexpected failure in the storage layer."""
    status = SERVER_ERROR

"""
API Exceptions

Two failures are surfaced to clients, both as plain text:

- ResourceNotFoundError (404): a lookup, update or delete by id matched
  no row.
- StoreError (500): anything else the database raised. Constraint
  violations and lost connections are reported the same way; the cause is
  logged, never sent to the client.
"""

from fastapi import status


class BibliotecaError(Exception):
    """Base class for errors turned into HTTP responses."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(BibliotecaError):
    """No row with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreError(BibliotecaError):
    """The database failed to run a statement."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

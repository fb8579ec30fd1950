"""Translation of domain failures into HTTP responses."""

from fastapi import HTTPException

from pcstore.shared.errors import ErrorKind, StoreError
from pcstore.shared.result import Result

STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.INVALID: 400,
    ErrorKind.UNKNOWN: 500,
}


def status_for(error: StoreError) -> int:
    return STATUS_CODES[error.kind]


def http_error(error: StoreError) -> HTTPException:
    return HTTPException(status_code=status_for(error), detail=error.message)


def raise_for_error(result: Result):
    """Return the result value, or raise the HTTP error matching its failure."""
    if not result.ok:
        raise http_error(result.error)
    return result.value

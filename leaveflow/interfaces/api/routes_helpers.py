"""Helpers shared by API route modules."""

from __future__ import annotations

from fastapi import HTTPException, status

from leaveflow.application.errors import NotFoundError, PermissionDeniedError


def to_http_exception(exc: ValueError) -> HTTPException:
    """Translate a use case error into the matching HTTP error response."""

    if isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, PermissionDeniedError):
        status_code = status.HTTP_403_FORBIDDEN
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=status_code, detail=str(exc))


__all__ = ["to_http_exception"]

"""Errors raised by use cases and translated to HTTP responses by the routes."""


class NotFoundError(ValueError):
    """The requested resource does not exist."""


class PermissionDeniedError(ValueError):
    """The acting user may not perform the operation."""


class InvalidStateError(ValueError):
    """The resource is not in a state that allows the operation."""


__all__ = ["InvalidStateError", "NotFoundError", "PermissionDeniedError"]

"""
Domain errors. Raised by use cases, mapped to HTTP status codes in the api layer.
"""


class TeamMoveError(Exception):
    """Base error for the service."""


class ValidationError(TeamMoveError, ValueError):
    pass


class NotFoundError(TeamMoveError):
    pass


class ConflictError(TeamMoveError):
    pass


class PlanLimitError(TeamMoveError):
    pass


class AuthError(TeamMoveError):
    pass

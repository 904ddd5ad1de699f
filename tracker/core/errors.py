"""
Domain errors raised below the HTTP layer.

Routes translate these into status codes; the store never raises HTTPException.
"""


class TrackerError(Exception):
    """Base class for tracker domain errors."""


class AccessDeniedError(TrackerError):
    """A referenced parent record does not resolve under the acting user."""


class InvalidFilterError(TrackerError, ValueError):
    """A list filter carried a value outside its enumeration."""


class AuthenticationError(TrackerError):
    """Base class for failures of the authentication gate."""


class MissingCredentialsError(AuthenticationError):
    """No bearer credential, or the Authorization header is malformed."""


class InvalidCredentialsError(AuthenticationError):
    """The bearer credential is invalid, expired, or names no known user."""


class AuthServiceUnavailableError(AuthenticationError):
    """The credential could not be resolved because a dependency failed."""

"""
User service exceptions.

Flows raise these; ``api.middleware`` turns them into JSON error
responses using ``status_code`` and ``message``.  The message is the
only text a caller ever sees, so it must not carry internal detail.
"""

from __future__ import annotations

from fastapi import status


class UserServiceError(Exception):
    """Base exception for all classified user-service errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Request failed"):
        self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class ConflictError(UserServiceError):
    """Username or email already taken.  Which one is deliberately not said."""

    def __init__(self, message: str = "User with this username or email already exists"):
        super().__init__(message)


class InvalidCredentialsError(UserServiceError):
    """Unknown email or wrong password during login."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class MissingTokenError(UserServiceError):
    """No Bearer token on a protected route."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class InvalidTokenError(UserServiceError):
    """Bearer token present but not acceptable."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenMalformedError(InvalidTokenError):
    """Token cannot be decoded or its signature does not match."""


class TokenExpiredError(InvalidTokenError):
    """Token signature is valid but ``exp`` has passed."""


class UserNotFoundError(UserServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "User not found"):
        super().__init__(message)

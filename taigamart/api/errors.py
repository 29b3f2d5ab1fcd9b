"""
API error hierarchy.

    APIError                  - request reached the server, response unusable
    ├── TransportError        - timeout / connection failure, no response
    └── AuthenticationExpired - 401; stored token already cleared
"""

from typing import Any, Optional


class APIError(Exception):
    """Remote call failed."""

    def __init__(self, message: str, status: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.data = data


class TransportError(APIError):
    """Network-level failure (timeout, DNS, refused connection)."""


class AuthenticationExpired(APIError):
    """The server rejected the bearer token; the caller must send the user to login_route."""

    def __init__(self, login_route: str, message: str = "Authentication expired", data: Any = None):
        super().__init__(message, status=401, data=data)
        self.login_route = login_route

from __future__ import annotations


class TwitchClientError(Exception):
    """Base client error."""


class ApiError(TwitchClientError):
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class UnexpectedStatusError(ApiError):
    """Any response other than 200 OK."""

    def __init__(self, status_code: int):
        super().__init__(status_code, f"Request failed with status: {status_code}")


class AuthError(UnexpectedStatusError):
    """Auth-related API error."""


class DecodeError(TwitchClientError):
    """Response body is not JSON or does not have the expected shape."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause

"""
Exception classes for deezer-metadata.

Every failure of a fetch surfaces as one of these, so callers can decide
their own retry or propagation policy.

Exception Hierarchy:
    DeezerError (base)
        TransportError - the request never produced a response
        ApiStatusError - the API answered with a non-2xx status
        ApiError - the API answered 200 with an ``{"error": ...}`` body
        DecodeError - the body is not JSON or does not match the record
"""

from __future__ import annotations

from typing import Any


class DeezerError(Exception):
    """
    Base exception for all deezer-metadata errors.

    Attributes:
        message: Human-readable error description.
        details: Additional context such as ``url`` or ``path``.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class TransportError(DeezerError):
    """
    Raised when no HTTP response could be obtained.

    Covers DNS failures, refused connections, timeouts and broken reads.
    The wrapped ``httpx`` exception is chained as ``__cause__``.
    """


class ApiStatusError(DeezerError):
    """
    Raised when the API answers with a non-success HTTP status.

    Attributes:
        status_code: The HTTP status code of the response.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class ApiError(DeezerError):
    """
    Raised when the API reports an error inside a successful response.

    Deezer answers unknown ids, quota exhaustion and similar conditions with
    HTTP 200 and a body like::

        {"error": {"type": "DataException", "message": "no data", "code": 800}}

    Attributes:
        error_type: The ``type`` reported by the API (e.g. "DataException").
        code: The numeric error code reported by the API, if any.
    """

    def __init__(
        self,
        message: str,
        error_type: str | None = None,
        code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.error_type = error_type
        self.code = code


class DecodeError(DeezerError):
    """
    Raised when a body cannot be turned into the requested record.

    Attributes:
        path: Location of the offending value, e.g. ``"Album.tracks[2].artist"``.
    """

    def __init__(
        self,
        message: str,
        path: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.path = path

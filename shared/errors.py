"""
Shared error handling for the Movie Catalog Gateway.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class GatewayException(Exception):
    """Base exception for gateway services."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self, request_id: Optional[str] = None) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id,
            code=self.code,
            message=self.message,
            details=self.details
        )


class TransportError(GatewayException):
    """Network-level failure talking to an upstream source (DNS, connect, timeout)."""

    def __init__(self, url: str, message: str = "Transport error", details: Optional[Dict[str, Any]] = None):
        super().__init__("TRANSPORT_ERROR", f"{url}: {message}", {"url": url, **(details or {})})
        self.url = url


class RemoteFetchError(GatewayException):
    """Upstream source answered with a non-success status."""

    def __init__(self, url: str, status_code: int, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            "REMOTE_FETCH_ERROR",
            f"{url}: unexpected status {status_code}",
            {"url": url, "status_code": status_code, **(details or {})}
        )
        self.url = url
        self.status_code = status_code


class DecodeError(GatewayException):
    """Upstream document is not a well-formed array of movies."""

    def __init__(self, url: str, message: str = "Decode error", index: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        payload: Dict[str, Any] = {"url": url, **(details or {})}
        if index is not None:
            payload["index"] = index
        super().__init__("DECODE_ERROR", f"{url}: {message}", payload)
        self.url = url
        self.index = index

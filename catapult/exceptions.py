"""Exceptions raised by the Catapult node clients."""
from typing import Any, Optional


class CatapultClientError(Exception):
    """Base exception class for node client errors"""
    pass


class TransportError(CatapultClientError):
    """Raised when the node answers with a non-2xx status or cannot be reached"""

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body


RequestError = TransportError


class DecodeError(CatapultClientError):
    """Raised when a response body does not have the expected JSON shape"""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.payload = payload

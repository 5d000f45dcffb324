"""
Error taxonomy for the Roads API binding

- InvalidArgument: caller input rejected before any request is sent
- RoadsError: base for everything that came back from the wire
  - ApiError: the service answered with an error (optional message)
    - InvalidRequestError, RequestDeniedError, RateLimitError, MalformedResponseError
  - HTTPError: non-200 status without a structured error body
    - ClientError, ServerError, RedirectError
"""
from typing import Optional

import requests


class InvalidArgument(ValueError):
    """Local input could not be encoded into a request."""


class RoadsError(Exception):
    """Base error carrying the HTTP response that produced it."""

    def __init__(self, response: Optional[requests.Response] = None, message: Optional[str] = None):
        self.response = response
        self.message = message
        args = (message,) if message is not None else ()
        super().__init__(*args)

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    def __str__(self) -> str:
        if self.message is not None:
            return self.message
        if self.status_code is not None:
            return f"HTTP {self.status_code}"
        return self.__class__.__name__


class ApiError(RoadsError):
    """The service returned an error payload."""


class InvalidRequestError(ApiError):
    """The service rejected the request as malformed."""


class RequestDeniedError(ApiError):
    """The API key is invalid or lacks permission."""


class RateLimitError(ApiError):
    """Quota exhausted."""


class MalformedResponseError(ApiError):
    """HTTP 200 with a body that is not a JSON object."""


class HTTPError(RoadsError):
    """Non-200 status with no structured error body."""

    def __str__(self) -> str:
        base = f"HTTP Error: {self.status_code}"
        return f"{base} ({self.message})" if self.message else base


class ClientError(HTTPError):
    pass


class ServerError(HTTPError):
    pass


class RedirectError(HTTPError):
    pass

"""Definitions of all custom exception classes."""

from typing import Optional
from requests import HTTPError, Response


class FormstackException(Exception):
    """Base class for errors raised by formstack-api itself"""


class FormstackConfigurationError(FormstackException, ValueError):
    """Invalid argument passed to a client method, raised before any request is made"""


class InvalidDateFormatException(FormstackConfigurationError):
    """Entered invalid date for timestamp, min_time or max_time parameter"""


class FormstackRequestFailedException(HTTPError):
    """Formstack API responded with a status code outside of the 2xx range"""

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        response: Optional[Response] = None,
    ) -> None:
        self.status_code = status_code
        if message is None:
            message = f"Request failed with status code: {status_code}"
        super().__init__(message, response=response)


class FormstackInvalidAuthenticationException(FormstackRequestFailedException):
    """Invalid or expired access token (HTTP 401)"""


class FormstackForbiddenException(FormstackRequestFailedException):
    """HTTP 403 Error"""


class FormstackNotFoundException(FormstackRequestFailedException):
    """Invalid form or submission id (HTTP 404)"""


class FormstackInvalidParameterException(FormstackRequestFailedException):
    """Invalid parameter passed to request"""


class FormstackRateLimitException(FormstackRequestFailedException):
    """Reached Formstack API rate limit (HTTP 429)"""


class FormstackInternalException(FormstackRequestFailedException):
    """Unexpected error on Formstack servers (HTTP 5xx)"""


class FormstackAPIErrorException(FormstackException):
    """Request succeeded but the payload reports an error (status == "error")"""

    def __init__(self, payload: dict) -> None:
        self.payload = payload
        message = payload.get("error") or payload.get("message") or "Formstack API error"
        super().__init__(message)


class FormstackResponseParseException(FormstackException, ValueError):
    """Response body could not be parsed as JSON"""


def exception_for_status(
    status_code: int, response: Optional[Response] = None
) -> FormstackRequestFailedException:
    """Picks the exception class matching a non-2xx HTTP status code"""
    if status_code == 401:  # Access token is missing or invalid.
        return FormstackInvalidAuthenticationException(
            status_code,
            "Request failed with status code: 401, please check your access token",
            response=response,
        )
    if status_code == 403:  # Forbidden.
        return FormstackForbiddenException(status_code, response=response)
    if status_code == 404:  # Path or object not found.
        return FormstackNotFoundException(status_code, response=response)
    if status_code in (400, 405, 422):  # Invalid parameter or verb.
        return FormstackInvalidParameterException(status_code, response=response)
    if status_code == 429:  # Too many requests.
        return FormstackRateLimitException(status_code, response=response)
    if status_code >= 500:  # Unexpected Formstack internal error.
        return FormstackInternalException(status_code, response=response)
    return FormstackRequestFailedException(status_code, response=response)

from .client import APIClient
from .exceptions import (
    APIClientError,
    APIConnectionError,
    APIReportedError,
    APIResponseError,
    APITimeoutError,
    InvalidAPIKeyError,
    InvalidURLError,
    RequestFailedError,
)

__all__ = [
    # Base client
    "APIClient",
    # Exceptions
    "APIClientError",
    "InvalidAPIKeyError",
    "InvalidURLError",
    "RequestFailedError",
    "APIConnectionError",
    "APITimeoutError",
    "APIResponseError",
    "APIReportedError",
]

class APIClientError(Exception):
    """Base exception for all API client errors."""

    default_message = "The request failed for another reason."

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidAPIKeyError(APIClientError):
    """Raised when no API key is configured for the client."""

    default_message = "An invalid API key was used."


class InvalidURLError(APIClientError):
    """Raised when the endpoint and parameters cannot form a valid URL."""

    default_message = "An invalid URL was used."


class RequestFailedError(APIClientError):
    """Raised when the request fails in transport or in decoding."""

    pass


class APIConnectionError(RequestFailedError):
    """Raised when there's a connection error with the API."""

    pass


class APITimeoutError(RequestFailedError):
    """Raised when the API request times out."""

    pass


class APIResponseError(RequestFailedError):
    """Raised when the API returns an invalid or unexpected response."""

    pass


class APIReportedError(APIClientError):
    """Raised when the API answers with ``success: false`` and an error object."""

    def __init__(self, code: int, type: str, info: str):
        super().__init__(info or f"API error {code} ({type})")
        self.code = code
        self.type = type
        self.info = info

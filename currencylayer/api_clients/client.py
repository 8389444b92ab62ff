import logging
from collections.abc import Iterable
from typing import Any

import requests

from .exceptions import (
    APIConnectionError,
    APIResponseError,
    APITimeoutError,
    InvalidURLError,
    RequestFailedError,
)

logger = logging.getLogger(__name__)

QueryParams = list[tuple[str, str]]


class APIClient:
    """
    Base API client that issues GET requests and maps failures to exceptions.
    """

    base_url: str = ""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int = 30,
    ):
        self.api_key = api_key
        if base_url:
            self.base_url = base_url
        self.timeout = timeout
        self._session = requests.Session()

    def _get_default_headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
        }

    def _get_default_params(self) -> QueryParams:
        return []

    def _build_url(self, endpoint: str) -> str:
        base = self.base_url.rstrip("/")
        endpoint = endpoint.lstrip("/")
        return f"{base}/{endpoint}"

    def _prepare(
        self, endpoint: str, params: Iterable[tuple[str, str]] | None = None
    ) -> requests.PreparedRequest:
        """
        Build the prepared GET request for an endpoint.

        Default parameters come first, followed by ``params`` in the given
        order.

        Raises:
            InvalidURLError: If the URL cannot be built
        """
        url = self._build_url(endpoint)
        request_params = self._get_default_params()
        if params:
            request_params.extend(params)

        request = requests.Request(
            method="GET",
            url=url,
            params=request_params,
            headers=self._get_default_headers(),
        )
        try:
            return self._session.prepare_request(request)
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as e:
            raise InvalidURLError(f"An invalid URL was used: {url}") from e

    def build_request_url(
        self, endpoint: str, params: Iterable[tuple[str, str]] | None = None
    ) -> str:
        """Return the fully-qualified URL, query string included."""
        return self._prepare(endpoint, params).url

    def _handle_response(self, response: requests.Response) -> Any:
        """
        Handle the API response and raise appropriate exceptions.

        Args:
            response: The requests Response object

        Returns:
            The parsed JSON response

        Raises:
            APIResponseError: For error status codes or a non-JSON body
        """
        try:
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            status_code = response.status_code
            raise APIResponseError(
                f"The request failed with HTTP {status_code}.",
                status_code=status_code,
            ) from e
        except ValueError as e:
            raise APIResponseError(f"Invalid JSON response: {e}") from e

    def get(
        self,
        endpoint: str,
        params: Iterable[tuple[str, str]] | None = None,
    ) -> Any:
        """
        Make a GET request.

        Args:
            endpoint: API endpoint (will be appended to base_url)
            params: Query parameters as key/value pairs

        Returns:
            The parsed JSON response

        Raises:
            APIClientError: For any API-related errors
        """
        prepared = self._prepare(endpoint, params)

        logger.debug(f"Making GET request to {self._build_url(endpoint)}")

        try:
            response = self._session.send(prepared, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise APITimeoutError(
                f"Request to {self._build_url(endpoint)} timed out "
                f"after {self.timeout}s"
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise APIConnectionError(
                f"Connection error to {self._build_url(endpoint)}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise RequestFailedError(
                f"Request to {self._build_url(endpoint)} failed: {type(e).__name__}"
            ) from e

        return self._handle_response(response)

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

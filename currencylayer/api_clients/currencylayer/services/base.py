from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from currencylayer.api_clients.currencylayer.endpoints import Endpoint
from currencylayer.api_clients.currencylayer.params import QueryParams
from currencylayer.api_clients.currencylayer.schemas import APIKeyErrorData
from currencylayer.api_clients.exceptions import APIReportedError, APIResponseError

if TYPE_CHECKING:
    from currencylayer.api_clients.currencylayer.client import CurrencyLayerClient

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class BaseService:
    def __init__(self, client: CurrencyLayerClient) -> None:
        """
        Initialize the service with a shared client.

        Args:
            client: The CurrencyLayerClient instance to use for API calls
        """
        self._client = client

    def _fetch(self, endpoint: Endpoint, params: QueryParams, model: type[T]) -> T:
        """
        GET an endpoint and decode the body as ``model``.

        Raises:
            APIClientError: If the request fails or the API reports an error
        """
        response = self._client.get(endpoint.path, params=params.to_query())
        return self._parse_response(response, model)

    def _parse_response(self, response: Any, model: type[T]) -> T:
        """
        Parse and validate an API response using a Pydantic model.

        Args:
            response: Raw API response
            model: Pydantic model class to validate against

        Returns:
            Validated Pydantic model instance

        Raises:
            APIReportedError: If the response has ``success: false``
            APIResponseError: If the response doesn't match the expected schema
        """
        if not isinstance(response, dict):
            raise APIResponseError(
                f"Invalid response from currencylayer API: expected an object, "
                f"got {type(response).__name__}"
            )

        if response.get("success") is False:
            try:
                failure = APIKeyErrorData.model_validate(response)
            except ValidationError as e:
                raise APIResponseError(
                    f"Invalid error response from currencylayer API: {e}"
                ) from e
            logger.warning(
                f"currencylayer API error {failure.error.code} ({failure.error.type})"
            )
            raise APIReportedError(
                code=failure.error.code,
                type=failure.error.type,
                info=failure.error.info,
            )

        try:
            return model.model_validate(response)
        except ValidationError as e:
            raise APIResponseError(
                f"Invalid response from currencylayer API: {e}"
            ) from e

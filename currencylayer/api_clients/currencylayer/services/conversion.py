from currencylayer.api_clients.currencylayer.endpoints import Endpoint
from currencylayer.api_clients.currencylayer.params import ConvertParams
from currencylayer.api_clients.currencylayer.schemas import ConversionResponse

from .base import BaseService


class ConversionService(BaseService):
    def convert(self, params: ConvertParams) -> ConversionResponse:
        """
        Convert an amount from one currency to another.

        Uses real-time exchange rates, or the rates of ``params.valuation_date``
        when one is given.

        Args:
            params: Source and target currency, amount and optional date

        Returns:
            ConversionResponse containing:
                - query: The echoed from/to/amount
                - info: Timestamp and rate used
                - result: The converted amount
        """
        return self._fetch(Endpoint.CONVERT, params, ConversionResponse)

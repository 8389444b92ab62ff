from currencylayer.api_clients.currencylayer.endpoints import Endpoint
from currencylayer.api_clients.currencylayer.params import (
    ChangeParams,
    HistoricalParams,
    LiveParams,
    TimeframeParams,
)
from currencylayer.api_clients.currencylayer.schemas import (
    ChangeResponse,
    HistoricalData,
    LiveData,
    TimeframeResponse,
)

from .base import BaseService


class RatesService(BaseService):
    """
    Service for exchange rate operations.

    Provides methods to fetch live, historical, timeframe and change
    data from the currencylayer API.
    """

    def live(self, params: LiveParams | None = None) -> LiveData:
        """
        Get the most recent exchange rates.

        Args:
            params: Optional source currency and currency filter.
                    Without them the API answers relative to USD for
                    every available currency.

        Returns:
            LiveData with the source currency and pair -> rate quotes.
        """
        return self._fetch(Endpoint.LIVE, params or LiveParams(), LiveData)

    def historical(self, params: HistoricalParams) -> HistoricalData:
        """
        Get historical exchange rates for a specific day.

        Args:
            params: The date plus optional source and currency filter.

        Returns:
            HistoricalData for the requested date.
        """
        return self._fetch(Endpoint.HISTORICAL, params, HistoricalData)

    def timeframe(self, params: TimeframeParams) -> TimeframeResponse:
        """
        Get exchange rates for every day of a date range.

        Args:
            params: Start and end date (inclusive) plus optional filters.

        Returns:
            TimeframeResponse whose quotes are keyed by date string, each
            value being a dict of currency pairs to rates.
        """
        return self._fetch(Endpoint.TIMEFRAME, params, TimeframeResponse)

    def change(self, params: ChangeParams) -> ChangeResponse:
        """
        Get the margin and percentage change of currencies between two dates.
        """
        return self._fetch(Endpoint.CHANGE, params, ChangeResponse)

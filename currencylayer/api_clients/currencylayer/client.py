from currencylayer.api_clients.client import APIClient, QueryParams
from currencylayer.api_clients.exceptions import InvalidAPIKeyError
from currencylayer.settings import get_settings

from .services import ConversionService, RatesService


class CurrencyLayerClient(APIClient):
    base_url: str = "http://api.currencylayer.com/"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
    ) -> None:
        settings = get_settings()

        super().__init__(
            api_key=api_key or settings.api_key,
            base_url=base_url or settings.base_url,
            timeout=timeout or settings.timeout,
        )

        self._rates = RatesService(self)
        self._conversion = ConversionService(self)

    @property
    def rates(self) -> RatesService:
        """
        Access the rates service.

        Provides methods for:
            - live(): Get the most recent exchange rates
            - historical(): Get rates for a specific date
            - timeframe(): Get rates for a date range
            - change(): Get change metrics between two dates

        Returns:
            RatesService instance
        """
        return self._rates

    @property
    def conversion(self) -> ConversionService:
        """
        Access the conversion service.

        Provides methods for:
            - convert(): Convert an amount between currencies

        Returns:
            ConversionService instance
        """
        return self._conversion

    def _get_default_params(self) -> QueryParams:
        # currencylayer authenticates through the query string only
        if not self.api_key:
            raise InvalidAPIKeyError("No API key configured.")
        params = super()._get_default_params()
        params.append(("access_key", self.api_key))
        return params

from datetime import UTC, date, datetime

from pydantic import BaseModel, Field


def target_currency(pair: str, source: str) -> str:
    """Strip the source currency from a pair code ('USDEUR' -> 'EUR')."""
    if pair.startswith(source) and len(pair) > len(source):
        return pair[len(source) :]
    return pair


class CurrencyLayerResponse(BaseModel):
    """Fields shared by every currencylayer response."""

    success: bool
    terms: str
    privacy: str


class LiveData(CurrencyLayerResponse):
    """Schema for the live rates response."""

    timestamp: int
    source: str
    quotes: dict[str, float]  # currency pair -> rate

    @property
    def collected_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)

    def rates(self) -> dict[str, float]:
        """Quotes keyed by target currency instead of pair code."""
        return {
            target_currency(pair, self.source): rate
            for pair, rate in self.quotes.items()
        }


class HistoricalData(LiveData):
    """Schema for the historical rates response."""

    historical: bool = True
    valuation_date: date = Field(alias="date")


class ConversionQuery(BaseModel):
    """Query echoed back by the convert endpoint."""

    from_currency: str = Field(alias="from")
    to: str
    amount: float


class ConversionInfo(BaseModel):
    """Timestamp and rate used for a conversion."""

    timestamp: int
    quote: float


class ConversionResponse(CurrencyLayerResponse):
    """Schema for the currency conversion response."""

    query: ConversionQuery
    info: ConversionInfo
    result: float
    historical: bool = False
    valuation_date: date | None = Field(default=None, alias="date")


class TimeframeResponse(CurrencyLayerResponse):
    """Schema for the timeframe response."""

    timeframe: bool = True
    start_date: date
    end_date: date
    source: str
    quotes: dict[str, dict[str, float]]  # date -> {currency pair: rate}


class ChangeQuote(BaseModel):
    """Change metrics for one currency pair."""

    start_rate: float
    end_rate: float
    change: float
    change_pct: float


class ChangeResponse(CurrencyLayerResponse):
    """Schema for the change response."""

    change: bool = True
    start_date: date | None = None
    end_date: date | None = None
    source: str
    quotes: dict[str, ChangeQuote]


class NetworkingError(BaseModel):
    """Error object reported by the API."""

    code: int
    type: str
    info: str = ""


class APIKeyErrorData(BaseModel):
    """
    Schema for a failed request, e.g. an invalid access key:

        {"success": false, "error": {"code": 101, "type": "invalid_access_key",
         "info": "You have not supplied a valid API Access Key."}}
    """

    success: bool
    error: NetworkingError

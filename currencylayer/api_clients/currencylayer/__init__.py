from .client import CurrencyLayerClient
from .endpoints import Endpoint
from .params import (
    ChangeParams,
    ConvertParams,
    HistoricalParams,
    LiveParams,
    TimeframeParams,
)
from .schemas import (
    APIKeyErrorData,
    ChangeResponse,
    ConversionResponse,
    HistoricalData,
    LiveData,
    NetworkingError,
    TimeframeResponse,
)
from .services import ConversionService, RatesService

__all__ = [
    # Main client
    "CurrencyLayerClient",
    "Endpoint",
    # Services
    "RatesService",
    "ConversionService",
    # Parameters
    "LiveParams",
    "HistoricalParams",
    "ConvertParams",
    "TimeframeParams",
    "ChangeParams",
    # Schemas
    "LiveData",
    "HistoricalData",
    "ConversionResponse",
    "TimeframeResponse",
    "ChangeResponse",
    "APIKeyErrorData",
    "NetworkingError",
]

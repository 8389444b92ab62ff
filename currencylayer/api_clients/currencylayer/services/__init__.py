from .base import BaseService
from .conversion import ConversionService
from .rates import RatesService

__all__ = [
    "BaseService",
    "RatesService",
    "ConversionService",
]

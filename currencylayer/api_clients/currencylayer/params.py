"""
Per-command query parameters.

Each struct is validated at construction and converted to a sorted
key/value sequence by ``to_query()``. Unset optional fields are omitted.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

CurrencyCode = Annotated[
    str,
    BeforeValidator(lambda v: v.strip().upper() if isinstance(v, str) else v),
    Field(min_length=3, max_length=3, pattern=r"^[A-Z]{3}$"),
]


def _split_codes(value: Any) -> Any:
    if isinstance(value, str):
        return [code for code in value.split(",") if code.strip()]
    return value


CurrencyList = Annotated[
    list[CurrencyCode],
    BeforeValidator(_split_codes),
    Field(min_length=1),
]


def _query_value(value: Any) -> str:
    if isinstance(value, list):
        return ",".join(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    return str(value)


class QueryParams(BaseModel):
    """Base class for endpoint parameters."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_query(self) -> list[tuple[str, str]]:
        data = self.model_dump(by_alias=True, exclude_none=True)
        return sorted((key, _query_value(value)) for key, value in data.items())


class RateFilter(QueryParams):
    source: CurrencyCode | None = None
    currencies: CurrencyList | None = None


class LiveParams(RateFilter):
    pass


class HistoricalParams(RateFilter):
    valuation_date: date = Field(alias="date")


class ConvertParams(QueryParams):
    from_currency: CurrencyCode = Field(alias="from")
    to: CurrencyCode
    amount: Decimal = Field(gt=0)
    valuation_date: date | None = Field(default=None, alias="date")


class DateRangeParams(RateFilter):
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_range(self) -> "DateRangeParams":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TimeframeParams(DateRangeParams):
    pass


class ChangeParams(DateRangeParams):
    pass

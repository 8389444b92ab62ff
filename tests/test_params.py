"""
Tests for the per-command query parameters.
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from currencylayer.api_clients.currencylayer.params import (
    ChangeParams,
    ConvertParams,
    HistoricalParams,
    LiveParams,
    TimeframeParams,
)


class TestQueryParams:
    """Validation and query conversion of parameter structs."""

    def test_live_without_options_is_empty(self):
        assert LiveParams().to_query() == []

    def test_live_with_options(self):
        params = LiveParams(source="eur", currencies="usd, gbp,JPY")

        assert params.source == "EUR"
        assert params.currencies == ["USD", "GBP", "JPY"]
        assert params.to_query() == [
            ("currencies", "USD,GBP,JPY"),
            ("source", "EUR"),
        ]

    def test_historical_query_is_sorted(self):
        params = HistoricalParams(date="2020-01-31", source="USD", currencies="EUR")

        assert params.valuation_date == date(2020, 1, 31)
        assert params.to_query() == [
            ("currencies", "EUR"),
            ("date", "2020-01-31"),
            ("source", "USD"),
        ]

    def test_convert_query(self):
        params = ConvertParams(from_currency="usd", to="eur", amount="10")

        assert params.amount == Decimal("10")
        assert params.to_query() == [
            ("amount", "10"),
            ("from", "USD"),
            ("to", "EUR"),
        ]

    def test_convert_query_with_date(self):
        params = ConvertParams.model_validate(
            {"from": "GBP", "to": "USD", "amount": "12.50", "date": "2019-06-01"}
        )

        assert params.to_query() == [
            ("amount", "12.5"),
            ("date", "2019-06-01"),
            ("from", "GBP"),
            ("to", "USD"),
        ]

    @pytest.mark.parametrize("params_class", [TimeframeParams, ChangeParams])
    def test_date_range_query(self, params_class):
        params = params_class(start_date="2010-03-01", end_date="2010-04-01")

        assert params.to_query() == [
            ("end_date", "2010-04-01"),
            ("start_date", "2010-03-01"),
        ]

    @pytest.mark.parametrize("params_class", [TimeframeParams, ChangeParams])
    def test_date_range_must_be_ordered(self, params_class):
        with pytest.raises(ValidationError):
            params_class(start_date="2010-04-01", end_date="2010-03-01")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"from_currency": "USD", "to": "EUR", "amount": "0"},
            {"from_currency": "USD", "to": "EUR", "amount": "-5"},
            {"from_currency": "USD", "to": "EUR", "amount": "ten"},
            {"from_currency": "DOLLAR", "to": "EUR", "amount": "10"},
            {"from_currency": "USD", "to": "E1R", "amount": "10"},
            {"from_currency": "USD", "to": "EUR", "amount": "10", "date": "yesterday"},
        ],
    )
    def test_convert_rejects_invalid_values(self, kwargs):
        with pytest.raises(ValidationError):
            ConvertParams(**kwargs)

    @pytest.mark.parametrize("currencies", ["", " , ", "EUR,EURO"])
    def test_currency_list_rejects_invalid_values(self, currencies):
        with pytest.raises(ValidationError):
            LiveParams(currencies=currencies)

    def test_historical_requires_date(self):
        with pytest.raises(ValidationError):
            HistoricalParams()

    def test_params_are_immutable(self):
        params = LiveParams(source="USD")
        with pytest.raises(ValidationError):
            params.source = "EUR"

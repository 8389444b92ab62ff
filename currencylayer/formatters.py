"""
Terminal formatting of decoded currencylayer responses.
"""

from collections.abc import Mapping

from currencylayer.api_clients.currencylayer.schemas import (
    ChangeResponse,
    ConversionResponse,
    TimeframeResponse,
    target_currency,
)


def format_number(value: float) -> str:
    """Render a float without a trailing '.0' for whole values."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_signed(value: float) -> str:
    text = format_number(value)
    return text if text.startswith("-") else f"+{text}"


def format_quotes(source: str, quotes: Mapping[str, float]) -> list[str]:
    """One '* USD->EUR = 0.85' line per pair, sorted by pair code."""
    return [
        f"* {source}->{target_currency(pair, source)} = {format_number(rate)}"
        for pair, rate in sorted(quotes.items())
    ]


def format_conversion(response: ConversionResponse) -> list[str]:
    query = response.query
    line = (
        f"{format_number(query.amount)} {query.from_currency} -> {query.to} = "
        f"{format_number(response.result)} (rate {format_number(response.info.quote)})"
    )
    if response.valuation_date is not None:
        line += f" on {response.valuation_date.isoformat()}"
    return [line]


def format_timeframe(response: TimeframeResponse) -> list[str]:
    lines = []
    for day, quotes in sorted(response.quotes.items()):
        lines.append(f"{day}:")
        lines.extend(f"  {line}" for line in format_quotes(response.source, quotes))
    return lines


def format_change(response: ChangeResponse) -> list[str]:
    lines = []
    for pair, quote in sorted(response.quotes.items()):
        lines.append(
            f"* {response.source}->{target_currency(pair, response.source)}: "
            f"{format_number(quote.start_rate)} -> {format_number(quote.end_rate)} "
            f"({format_signed(quote.change)}, {format_signed(quote.change_pct)}%)"
        )
    return lines

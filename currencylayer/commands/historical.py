from currencylayer.api_clients.currencylayer import HistoricalParams
from currencylayer.formatters import format_quotes

from .base import BaseCommand, add_rate_filter_arguments


class Command(BaseCommand):
    name = "historical"
    help = "Request historical rates for a specific day."

    def add_arguments(self, parser):
        parser.add_argument(
            "date",
            help="Date for which to request historical rates (format: YYYY-MM-DD).",
        )
        add_rate_filter_arguments(parser)

    def handle(self, options, client):
        params = HistoricalParams(
            date=options.date,
            source=options.source,
            currencies=options.currencies,
        )
        data = client.rates.historical(params)
        self.write(format_quotes(data.source, data.quotes))

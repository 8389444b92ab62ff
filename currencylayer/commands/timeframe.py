from currencylayer.api_clients.currencylayer import TimeframeParams
from currencylayer.formatters import format_timeframe

from .base import BaseCommand, add_rate_filter_arguments


class Command(BaseCommand):
    name = "timeframe"
    help = "Request exchange rates for a specific period of time."

    def add_arguments(self, parser):
        parser.add_argument("start_date", help="Start date of the time frame.")
        parser.add_argument("end_date", help="End date of the time frame.")
        add_rate_filter_arguments(parser)

    def handle(self, options, client):
        params = TimeframeParams(
            start_date=options.start_date,
            end_date=options.end_date,
            source=options.source,
            currencies=options.currencies,
        )
        response = client.rates.timeframe(params)
        self.write(format_timeframe(response))

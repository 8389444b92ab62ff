from currencylayer.api_clients.currencylayer import LiveParams
from currencylayer.formatters import format_quotes

from .base import BaseCommand, add_rate_filter_arguments


class Command(BaseCommand):
    name = "live"
    help = "Request the most recent exchange rate data."

    def add_arguments(self, parser):
        add_rate_filter_arguments(parser)

    def handle(self, options, client):
        params = LiveParams(source=options.source, currencies=options.currencies)
        data = client.rates.live(params)
        self.write(format_quotes(data.source, data.quotes))

from currencylayer.api_clients.currencylayer import ChangeParams
from currencylayer.formatters import format_change

from .base import BaseCommand, add_rate_filter_arguments


class Command(BaseCommand):
    name = "change"
    help = (
        "Request any currency's change parameters (margin and percentage) "
        "between two dates."
    )

    def add_arguments(self, parser):
        parser.add_argument("start_date", help="Start date of the time frame.")
        parser.add_argument("end_date", help="End date of the time frame.")
        add_rate_filter_arguments(parser)

    def handle(self, options, client):
        params = ChangeParams(
            start_date=options.start_date,
            end_date=options.end_date,
            source=options.source,
            currencies=options.currencies,
        )
        response = client.rates.change(params)
        self.write(format_change(response))

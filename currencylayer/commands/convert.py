from currencylayer.api_clients.currencylayer import ConvertParams
from currencylayer.formatters import format_conversion

from .base import BaseCommand


class Command(BaseCommand):
    name = "convert"
    help = (
        "Convert any amount from one currency to another "
        "using real-time exchange rates."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "from_currency", metavar="from", help="Currency to convert from."
        )
        parser.add_argument("to", help="Currency to convert to.")
        parser.add_argument("amount", help="Amount to convert.")
        parser.add_argument(
            "-d",
            "--date",
            help="Use the historical rate of this date (format: YYYY-MM-DD).",
        )

    def handle(self, options, client):
        params = ConvertParams(
            from_currency=options.from_currency,
            to=options.to,
            amount=options.amount,
            date=options.date,
        )
        response = client.conversion.convert(params)
        self.write(format_conversion(response))

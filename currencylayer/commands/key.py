from currencylayer.key_store import KeyStore

from .base import BaseCommand


class Command(BaseCommand):
    name = "key"
    help = "Set your currencylayer API key."
    requires_api_key = False

    def __init__(self, stdout=None, key_store: KeyStore | None = None):
        super().__init__(stdout)
        self.key_store = key_store or KeyStore()

    def add_arguments(self, parser):
        parser.add_argument("api_key", help="Your API key from currencylayer.")

    def handle(self, options, client):
        self.key_store.set_api_key(options.api_key)
        self.write("API key has been set successfully.")

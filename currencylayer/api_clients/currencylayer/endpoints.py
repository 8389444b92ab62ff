from enum import Enum


class Endpoint(str, Enum):
    """Fixed API paths, appended to the client's base URL."""

    LIVE = "live"
    HISTORICAL = "historical"
    CONVERT = "convert"
    TIMEFRAME = "timeframe"
    CHANGE = "change"

    @property
    def path(self) -> str:
        return f"/{self.value}"

from .base import BaseCommand
from .change import Command as ChangeCommand
from .convert import Command as ConvertCommand
from .historical import Command as HistoricalCommand
from .key import Command as KeyCommand
from .live import Command as LiveCommand
from .timeframe import Command as TimeframeCommand

# Registry of subcommands, in help order
COMMANDS: dict[str, type[BaseCommand]] = {
    "live": LiveCommand,
    "historical": HistoricalCommand,
    "convert": ConvertCommand,
    "timeframe": TimeframeCommand,
    "change": ChangeCommand,
    "key": KeyCommand,
}

__all__ = [
    "BaseCommand",
    "COMMANDS",
]

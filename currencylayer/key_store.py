"""
Persistent storage for the currencylayer API key.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from .settings import get_settings

logger = logging.getLogger(__name__)


class StoredConfig(BaseModel):
    """On-disk layout of the config file."""

    api_key: str | None = None


class KeyStore:
    """JSON-file store holding a single API key for the current user."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else get_settings().config_file

    def _load(self) -> StoredConfig:
        if not self.path.exists():
            return StoredConfig()
        try:
            return StoredConfig.model_validate_json(self.path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable config file {self.path}: {e}")
            return StoredConfig()

    def get_api_key(self) -> str | None:
        """Return the stored key, or None if none has been set."""
        return self._load().api_key or None

    def set_api_key(self, api_key: str) -> None:
        """Persist ``api_key``, creating the config directory if needed."""
        api_key = api_key.strip()
        if not api_key:
            raise ValueError("API key must not be empty")

        config = self._load().model_copy(update={"api_key": api_key})
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(config.model_dump_json(indent=2), "utf-8")
        logger.debug(f"Stored API key in {self.path}")

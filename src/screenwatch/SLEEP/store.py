# SLEEP/store.py
import logging
from pathlib import Path
from typing import Optional

from screenwatch.io_utils import StoreError, dump_json, load_json
from screenwatch.SLEEP.model import Config

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"


class ConfigParseError(StoreError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Couldn't parse {path}: {reason}")


class ConfigStore:
    """The sleep/wake window, stored as a single JSON object."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[Config]:
        """
        Returns None when no config has been saved yet.
        Raises ConfigParseError when the file exists but isn't a valid config.
        """
        if not self.path.exists():
            return None
        try:
            data = load_json(self.path)
        except (OSError, ValueError) as e:
            raise ConfigParseError(self.path, str(e)) from e

        if not isinstance(data, dict):
            raise ConfigParseError(self.path, f"expected a JSON object, got {type(data).__name__}")
        sleep_time = data.get("sleep_time")
        wake_time = data.get("wake_time")
        if not isinstance(sleep_time, str) or not isinstance(wake_time, str):
            raise ConfigParseError(self.path, "'sleep_time' and 'wake_time' must both be strings")

        logger.debug("Loaded config from %s", self.path)
        return Config(sleep_time=sleep_time, wake_time=wake_time)

    def save(self, config: Config) -> None:
        dump_json(self.path, config.to_dict())

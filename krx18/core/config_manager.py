"""
Configuration Manager - settings.json persistence for the CLI.

Settings live in a single JSON file inside the configuration directory.
The file is created on first use, rewritten atomically on every change,
and moved aside to ``settings.json.backup`` when it cannot be parsed.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from threading import Lock

from pydantic import ValidationError

from krx18.core.config_schemas import AppSettings
from krx18.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

_MISSING = object()


def _walk(data: Dict[str, Any], keys: List[str]) -> Any:
    """Follow keys through nested dictionaries, returning _MISSING on a dead end."""
    node: Any = data
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return _MISSING
        node = node[key]
    return node


class ConfigManager:
    """
    Loads, validates and persists AppSettings.

    Access to the in-memory settings is serialized with a lock; every
    successful update is written straight back to disk.
    """

    SETTINGS_FILENAME = "settings.json"

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory holding settings.json (default: ./config)

        Raises:
            ConfigurationError: If the settings file cannot be read or written
        """
        self.config_dir = Path(config_dir or "config")
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self._settings_file = self.config_dir / self.SETTINGS_FILENAME
        self._lock = Lock()
        self._settings = self._read()

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    @property
    def settings(self) -> AppSettings:
        with self._lock:
            return self._settings

    def _read(self) -> AppSettings:
        if not self._settings_file.exists():
            logger.info("No settings file at %s, writing defaults", self._settings_file)
            return self._write(AppSettings())

        try:
            raw = self._settings_file.read_text(encoding='utf-8')
            return AppSettings.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            backup_path = self._settings_file.with_suffix('.json.backup')
            logger.warning(f"Settings file is invalid ({e}), moving it to {backup_path}")
            self._settings_file.replace(backup_path)
            return self._write(AppSettings())
        except OSError as e:
            raise ConfigurationError(f"Cannot read settings: {e}", str(self._settings_file))

    def _write(self, settings: AppSettings) -> AppSettings:
        """Write settings through a temporary file so a crash never leaves half a file."""
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            temp_file.write_text(
                json.dumps(settings.model_dump(), indent=2, ensure_ascii=False),
                encoding='utf-8',
            )
            temp_file.replace(self._settings_file)
        except OSError as e:
            temp_file.unlink(missing_ok=True)
            raise ConfigurationError(f"Cannot save settings: {e}", str(self._settings_file))
        return settings

    def update_setting(self, key_path: str, value: Any) -> None:
        """
        Change one setting addressed with dot notation, e.g. 'provider.timeout'.

        Raises:
            ConfigurationError: If the key does not exist or the value fails validation
        """
        *parents, leaf = key_path.split('.')
        with self._lock:
            data = self._settings.model_dump()
            section = _walk(data, parents)
            if not isinstance(section, dict) or leaf not in section:
                raise ConfigurationError(f"Unknown setting: {key_path}")

            section[leaf] = value
            try:
                updated = AppSettings.model_validate(data)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid value for {key_path}: {e}", str(self._settings_file))

            self._settings = self._write(updated)
        logger.info(f"Setting updated: {key_path} = {value!r}")

    def get_setting(self, key_path: str, default: Any = None) -> Any:
        """Read one setting addressed with dot notation, or default if it does not exist."""
        with self._lock:
            value = _walk(self._settings.model_dump(), key_path.split('.'))
        return default if value is _MISSING else value

    def reset_to_defaults(self) -> None:
        with self._lock:
            logger.warning("Resetting configuration to defaults")
            self._settings = self._write(AppSettings())

    def provider_config(self) -> Dict[str, Any]:
        """Configuration dictionary for the site provider."""
        return self.settings.provider.model_dump()


__all__ = ["ConfigManager"]

# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Type

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from ..constants import CONFIG_DIR, CONFIG_FILE_NAME

logger = logging.getLogger(__name__)


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A Pydantic settings source that loads variables from a YAML file.
    """

    def __init__(self, settings_cls: Type[BaseSettings], yaml_file: Path | None):
        super().__init__(settings_cls)
        self.yaml_file = Path(yaml_file) if yaml_file else None
        self._data: dict[str, Any] = {}
        if self.yaml_file and self.yaml_file.exists():
            try:
                loaded = yaml.safe_load(self.yaml_file.read_text()) or {}
            except (yaml.YAMLError, OSError) as exc:
                logger.warning("Ignoring unreadable config file '%s': %s", self.yaml_file, exc)
                loaded = {}
            if isinstance(loaded, dict):
                self._data = loaded
            else:
                logger.warning("Ignoring config file '%s': top level is not a mapping", self.yaml_file)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str] | None:
        if not self._data:
            return None
        return (self._data.get(field_name), field_name)

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


def load_config(path: Path | None = None) -> "Settings":
    """
    Load settings from a YAML file and environment variables.

    When ``path`` is not given, ``~/.config/quickconnect/quickconnect.yaml``
    is used if it exists.
    """
    from . import Settings

    config_file = path
    if config_file is None:
        default_config_path = CONFIG_DIR / CONFIG_FILE_NAME
        if default_config_path.exists():
            config_file = default_config_path
        else:
            logger.debug("No config file at '%s'; using defaults", default_config_path)
    try:
        return Settings(config_file=config_file)
    except ValidationError as exc:
        if config_file is None:
            raise
        logger.warning("Ignoring invalid config file '%s': %s", config_file, exc)
        return Settings()

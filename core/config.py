"""
Configuration for the File Manager.

Settings come from three layers, highest priority first: environment
variables, an optional YAML file, and built-in defaults. The result is a
frozen Config built once at startup and passed to whoever needs it.
"""

from pathlib import Path
from typing import Any, Dict, Tuple, Type

import yaml
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


BASE_DIR_ENV = "FILE_MANAGER_BASE_DIR"
LOG_LEVEL_ENV = "LOG_LEVEL"


class Config(BaseSettings):
    """
    Process-wide settings, read-only after loading.
    Automatically reads variables from the environment.
    """
    model_config = SettingsConfigDict(frozen=True, env_ignore_empty=True)

    base_dir: str = Field(".", validation_alias=BASE_DIR_ENV)
    log_level: str = Field("", validation_alias=LOG_LEVEL_ENV)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Init kwargs carry the YAML file values, so the environment goes first.
        return env_settings, init_settings

    @classmethod
    def load(cls, config_path: str = "config.yaml") -> "Config":
        """
        Load configuration from the YAML file and the environment.

        Args:
            config_path: Path to the YAML configuration file (may not exist)

        Returns:
            A Config instance
        """
        file_config = _load_file(Path(config_path))

        values = {}
        if file_config.get("base_dir"):
            values[BASE_DIR_ENV] = str(file_config["base_dir"])
        if file_config.get("log_level"):
            values[LOG_LEVEL_ENV] = str(file_config["log_level"])

        return cls(**values)


def _load_file(config_path: Path) -> Dict[str, Any]:
    """Read the `filemanager` section of a YAML file, or {} if unavailable."""
    if not config_path.exists():
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}

    if not isinstance(config, dict):
        return {}

    section = config.get("filemanager", config)
    return section if isinstance(section, dict) else {}

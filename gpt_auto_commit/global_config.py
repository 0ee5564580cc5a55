"""Global configuration management for gpt-auto-commit.

Handles the user-level configuration stored in ~/.gpt-auto-commit/config.yaml,
which holds the OpenAI API key and the model used for generation.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from gpt_auto_commit.config import DEFAULT_MODEL


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


class Config(BaseModel):
    """Pydantic model for the stored configuration.

    Attributes:
        api_key: The OpenAI API key. Empty when not configured.
        model: The chat model used to generate commit messages.
    """

    api_key: str = ""
    model: str = DEFAULT_MODEL

    @field_validator("api_key", mode="before")
    @classmethod
    def api_key_none_to_empty(cls, v: Optional[str]) -> str:
        """Treat a null key as an unset key."""
        return v or ""

    @field_validator("model", mode="before")
    @classmethod
    def model_defaults_when_empty(cls, v: Optional[str]) -> str:
        """Older or hand-edited files may carry an empty model."""
        return v or DEFAULT_MODEL


_CONFIG_DIR = Path.home() / ".gpt-auto-commit"


def get_global_config_dir() -> Path:
    """Get the global configuration directory.

    Returns:
        Path to ~/.gpt-auto-commit/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.gpt-auto-commit/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


class ConfigStore:
    """Reads and writes the configuration file.

    Nothing is cached: every read and write goes to the file, so the last
    writer wins.
    """

    def __init__(self, path: Path):
        self.path = path

    def read(self) -> Config:
        """Load the configuration.

        Returns:
            The stored Config, or the defaults if the file is missing,
            unreadable or malformed.
        """
        try:
            with open(self.path, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError):
            return Config()

        if not isinstance(data, dict):
            return Config()

        try:
            return Config.model_validate(data)
        except ValidationError:
            return Config()

    def write(self, config: Config) -> None:
        """Save the configuration, creating the parent directory if needed.

        Raises:
            GlobalConfigError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise GlobalConfigError(f"Failed to save config to {self.path}: {e}")

    def exists(self) -> bool:
        return self.path.exists()


def get_config_store() -> ConfigStore:
    """Get the store backed by ~/.gpt-auto-commit/config.yaml."""
    return ConfigStore(get_config_file_path())


def ensure_config(store: Optional[ConfigStore] = None) -> None:
    """Create the config file with default values if it doesn't exist.

    Raises:
        GlobalConfigError: If the directory or file cannot be created.
    """
    store = store or get_config_store()
    if store.exists():
        return
    store.write(Config())


def get_config(store: Optional[ConfigStore] = None) -> Config:
    """Get the current configuration."""
    store = store or get_config_store()
    return store.read()


def set_api_key(api_key: str, store: Optional[ConfigStore] = None) -> None:
    """Store the OpenAI API key, keeping the other settings.

    Args:
        api_key: The API key value.
        store: The config store (defaults to the global one).
    """
    store = store or get_config_store()
    config = store.read()
    config.api_key = api_key
    store.write(config)


def set_model(model: str, store: Optional[ConfigStore] = None) -> None:
    """Store the model name, keeping the other settings.

    Args:
        model: The OpenAI model name (e.g., "gpt-4o-mini").
        store: The config store (defaults to the global one).
    """
    store = store or get_config_store()
    config = store.read()
    config.model = model
    store.write(config)


def mask_api_key(api_key: str) -> str:
    """Hide the API key for display."""
    return "********" if api_key else "Not set"

"""Tests for gpt_auto_commit.global_config module."""

from pathlib import Path

import pytest
import yaml

from gpt_auto_commit.config import DEFAULT_MODEL
from gpt_auto_commit.global_config import (
    Config,
    ConfigStore,
    GlobalConfigError,
    ensure_config,
    get_config,
    get_config_file_path,
    get_config_store,
    get_global_config_dir,
    mask_api_key,
    set_api_key,
    set_model,
)


class TestConfigPaths:
    """Tests for config path functions."""

    def test_config_file_is_yaml_in_config_dir(self, config_dir):
        """Test that the config file lives in the (patched) config dir."""
        assert get_global_config_dir() == config_dir
        assert get_config_file_path() == config_dir / "config.yaml"

    def test_default_store_uses_config_file(self, config_dir):
        """Test that the default store points at config.yaml."""
        assert get_config_store().path == config_dir / "config.yaml"


class TestConfigModel:
    """Tests for the Config model."""

    def test_defaults(self):
        config = Config()
        assert config.api_key == ""
        assert config.model == DEFAULT_MODEL

    def test_empty_model_uses_default(self):
        """Test that older files without a model get the default."""
        assert Config(api_key="sk-test", model="").model == DEFAULT_MODEL
        assert Config(model=None).model == DEFAULT_MODEL

    def test_null_api_key_is_empty(self):
        assert Config(api_key=None).api_key == ""


class TestConfigStore:
    """Tests for ConfigStore read and write."""

    def test_read_missing_file_returns_defaults(self, config_store):
        """Test that a missing file yields the default config."""
        assert config_store.read() == Config()

    def test_read_corrupt_yaml_returns_defaults(self, config_store):
        """Test that unparseable YAML yields the default config."""
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_text("api_key: [unclosed\n")

        assert config_store.read() == Config()

    def test_read_non_mapping_returns_defaults(self, config_store):
        """Test that a YAML list instead of a mapping yields defaults."""
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_text("- one\n- two\n")

        assert config_store.read() == Config()

    def test_read_existing_file(self, config_store):
        """Test loading values from an existing file."""
        config_store.path.parent.mkdir(parents=True)
        config_store.path.write_text("api_key: sk-test\nmodel: gpt-4.1-mini\n")

        config = config_store.read()

        assert config.api_key == "sk-test"
        assert config.model == "gpt-4.1-mini"

    def test_write_creates_directory_and_file(self, config_store):
        """Test saving config creates the file with both keys."""
        config_store.write(Config(api_key="sk-test", model="gpt-4o"))

        content = yaml.safe_load(config_store.path.read_text())
        assert content == {"api_key": "sk-test", "model": "gpt-4o"}

    def test_write_failure_raises(self, temp_dir):
        """Test that an unwritable location raises GlobalConfigError."""
        blocker = temp_dir / "blocker"
        blocker.write_text("not a directory")
        store = ConfigStore(blocker / "config.yaml")

        with pytest.raises(GlobalConfigError):
            store.write(Config())


class TestEnsureConfig:
    """Tests for ensure_config function."""

    def test_creates_default_file(self, config_store):
        """Test first run creates the file with defaults."""
        ensure_config(config_store)

        content = yaml.safe_load(config_store.path.read_text())
        assert content == {"api_key": "", "model": DEFAULT_MODEL}

    def test_keeps_existing_file(self, config_store):
        """Test that an existing config is not overwritten."""
        config_store.write(Config(api_key="sk-keep", model="gpt-4o"))

        ensure_config(config_store)

        assert config_store.read().api_key == "sk-keep"

    def test_uses_global_store_by_default(self, config_dir):
        """Test that the global config file is created without a store."""
        ensure_config()

        assert (config_dir / "config.yaml").exists()


class TestSetters:
    """Tests for set_api_key and set_model."""

    def test_set_api_key_keeps_model(self, config_store):
        config_store.write(Config(model="gpt-4.1"))

        set_api_key("sk-new", config_store)

        config = get_config(config_store)
        assert config.api_key == "sk-new"
        assert config.model == "gpt-4.1"

    def test_set_model_keeps_api_key(self, config_store):
        config_store.write(Config(api_key="sk-test"))

        set_model("gpt-5-mini", config_store)

        config = get_config(config_store)
        assert config.api_key == "sk-test"
        assert config.model == "gpt-5-mini"

    def test_setters_without_existing_file(self, config_dir):
        """Test that setters write to the global store when none is given."""
        set_model("gpt-4o")

        assert get_config().model == "gpt-4o"
        assert Path(config_dir / "config.yaml").exists()


class TestMaskApiKey:
    """Tests for mask_api_key function."""

    def test_masks_key(self):
        assert mask_api_key("sk-secret") == "********"

    def test_not_set(self):
        assert mask_api_key("") == "Not set"

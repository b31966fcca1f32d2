"""Tests for the configuration module."""

import pytest
import tempfile
from pathlib import Path
from cute.config import DEFAULT_DATABASE, DEFAULT_LOG_FILE, Config, load_config


class TestConfig:
    """Tests for Config dataclass."""

    def test_default_values(self):
        """Config has sensible defaults."""
        config = Config()
        assert config.database == DEFAULT_DATABASE
        assert config.curl_path == "curl"
        assert config.wget_path == "wget"
        assert config.log_file == DEFAULT_LOG_FILE
        assert config.max_visible_items == 20

    def test_default_database_in_user_data_dir(self):
        """The default database is cute.db in the user data directory."""
        assert Path(DEFAULT_DATABASE).name == "cute.db"

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(
            database="/custom/cute.db",
            curl_path="/opt/bin/curl",
            max_visible_items=10,
        )
        assert config.database == "/custom/cute.db"
        assert config.curl_path == "/opt/bin/curl"
        assert config.max_visible_items == 10


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_from_yaml_file(self):
        """Load config from YAML file."""
        yaml_content = """
storage:
  database: /tmp/cute/test.db

commands:
  curl: /usr/local/bin/curl
  wget: /usr/local/bin/wget

logging:
  file: /tmp/cute/cute.log

ui:
  max_visible_items: 12
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.database == "/tmp/cute/test.db"
            assert config.curl_path == "/usr/local/bin/curl"
            assert config.wget_path == "/usr/local/bin/wget"
            assert config.log_file == "/tmp/cute/cute.log"
            assert config.max_visible_items == 12

    def test_load_partial_config(self):
        """Load config with partial values (rest use defaults)."""
        yaml_content = """
commands:
  curl: curl-impersonate
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)

            assert config.curl_path == "curl-impersonate"
            # Rest should be defaults
            assert config.wget_path == "wget"
            assert config.database == DEFAULT_DATABASE

    def test_load_empty_file(self):
        """Load config from empty file uses defaults."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = load_config(f.name)

            assert config.curl_path == "curl"
            assert config.max_visible_items == 20

    def test_load_nonexistent_file_raises(self):
        """Loading nonexistent file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_expand_home_directory(self):
        """Home directory is expanded in the database path."""
        yaml_content = """
storage:
  database: ~/my-cute/cute.db
"""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()

            config = load_config(f.name)
            expanded = config.get_database_path()

            assert "~" not in str(expanded)
            assert expanded.parent.name == "my-cute"

    def test_get_log_path_returns_path_object(self):
        """get_log_path returns Path object."""
        config = Config(log_file="/tmp/cute.log")
        path = config.get_log_path()
        assert isinstance(path, Path)
        assert str(path) == "/tmp/cute.log"

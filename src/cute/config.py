"""Configuration handling for CuTE."""

from dataclasses import dataclass
from pathlib import Path

import platformdirs
import yaml

APP_NAME = "cute"

DEFAULT_DATABASE = str(Path(platformdirs.user_data_dir(APP_NAME)) / "cute.db")
DEFAULT_LOG_FILE = str(Path(platformdirs.user_log_dir(APP_NAME)) / "cute.log")


@dataclass
class Config:
    """Configuration settings for CuTE.

    Attributes:
        database: SQLite file for saved keys and commands.
        curl_path: curl executable name or path.
        wget_path: wget executable name or path.
        log_file: File that log output is written to.
        max_visible_items: Menu items shown at once before scrolling.
    """

    database: str = DEFAULT_DATABASE
    curl_path: str = "curl"
    wget_path: str = "wget"
    log_file: str = DEFAULT_LOG_FILE
    max_visible_items: int = 20

    def get_database_path(self) -> Path:
        """Get database as expanded Path object."""
        return Path(self.database).expanduser()

    def get_log_path(self) -> Path:
        """Get log file as expanded Path object."""
        return Path(self.log_file).expanduser()


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    storage = data.get("storage", {})
    commands = data.get("commands", {})
    logging_section = data.get("logging", {})
    ui = data.get("ui", {})

    return Config(
        database=storage.get("database", Config.database),
        curl_path=commands.get("curl", Config.curl_path),
        wget_path=commands.get("wget", Config.wget_path),
        log_file=logging_section.get("file", Config.log_file),
        max_visible_items=ui.get("max_visible_items", Config.max_visible_items),
    )

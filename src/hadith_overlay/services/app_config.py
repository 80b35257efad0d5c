"""App Config - environment-driven application settings."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from hadith_overlay.logger_config import default_log_dir


class AppConfig:
    """
    Resolves process-level configuration from a .env file and the environment.

    Recognised variables:
        HADITH_DATA_FILE: content file to load instead of the bundled list.
        HADITH_SETTINGS_FILE: INI file backing the settings store.
        HADITH_LOG_LEVEL: console log level name.
        HADITH_LOG_DIR: directory for the rotating log file.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize the configuration.

        Args:
            project_root: Directory containing the .env file.
                         If None, the current working directory is used.
        """
        if project_root is None:
            project_root = Path.cwd()

        self._project_root = project_root
        load_dotenv(dotenv_path=project_root / ".env")

    def get_data_file(self) -> Optional[Path]:
        """Content file override, or None to use the bundled list."""
        value = self._get("HADITH_DATA_FILE")
        return Path(value).expanduser() if value else None

    def get_settings_file(self) -> Optional[Path]:
        """INI settings file override, or None for the per-user default."""
        value = self._get("HADITH_SETTINGS_FILE")
        return Path(value).expanduser() if value else None

    def get_log_level(self) -> str:
        return self._get("HADITH_LOG_LEVEL") or "INFO"

    def get_log_dir(self) -> Path:
        value = self._get("HADITH_LOG_DIR")
        return Path(value).expanduser() if value else default_log_dir()

    def reload_env(self) -> None:
        """Reload environment variables from the .env file."""
        load_dotenv(dotenv_path=self._project_root / ".env", override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None

# teleproj/config.py
"""
Configuration management for teleproj.
Uses TOML format for the saved project list.
"""
import os
import stat
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

# Reader (tomllib for >= 3.11, tomli for < 3.11)
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import BaseModel, Field, ValidationError, field_validator
from dotenv import load_dotenv

from teleproj.constants import CONFIG_FILE, CONFIG_ENV_VAR
from teleproj.errors import ConfigSaveError
from teleproj.utils.logging import get_logger

logger = get_logger(__name__)


# --- Configuration Models ---

class ProjectsConfig(BaseModel):
    """The saved project list, in insertion order."""
    paths: List[str] = Field(default_factory=list, description="Saved project paths")

    @field_validator("paths")
    @classmethod
    def _drop_duplicates(cls, paths: List[str]) -> List[str]:
        # Keep the first occurrence; order is how entries are addressed.
        return list(dict.fromkeys(paths))


# --- Configuration Manager ---

class ConfigManager:
    """Loads and saves the project list as a TOML file."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initializes the ConfigManager.

        Args:
            config_file: Explicit config file location. Falls back to the
                ``TELEPROJ_CONFIG`` environment variable, then ``~/.teleproj.toml``.
        """
        self._config: ProjectsConfig = ProjectsConfig()
        self.config_file = Path(config_file) if config_file else self._load_environment()

    def _load_environment(self) -> Path:
        """Resolves the config file location from the environment and .env file."""
        load_dotenv()  # Load .env file if present
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            return Path(os.path.expanduser(env_path))
        return CONFIG_FILE

    def load_config(self) -> ProjectsConfig:
        """
        Loads the project list from the TOML config file.

        A missing file yields an empty list. A file that cannot be read or
        parsed is reported as a warning and also yields an empty list.

        Returns:
            The loaded configuration.
        """
        self._config = ProjectsConfig()

        if not self.config_file.exists():
            logger.debug(f"Configuration file not found at '{self.config_file}'. Using defaults.")
            return self._config

        try:
            logger.debug(f"Loading configuration from: {self.config_file}")
            with open(self.config_file, "rb") as f:  # TOML requires binary read mode
                config_data = tomllib.load(f)
            self._config = ProjectsConfig(**config_data)

        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Invalid config file format ({self.config_file}): {e}. Using defaults.")
        except ValidationError as e:
            logger.warning(
                f"Invalid config file contents ({self.config_file}): "
                f"{e.error_count()} validation error(s). Using defaults."
            )
        except OSError as e:
            logger.warning(f"Could not read config file ({self.config_file}): {e}. Using defaults.")

        return self._config

    def save_config(self) -> None:
        """
        Saves the current configuration to the config file (as TOML).

        The file is replaced as a whole: the new contents are written to a
        temporary file next to it which is then renamed over the original.

        Raises:
            ConfigSaveError: If the file could not be written.
        """
        config_dict = self._config.model_dump()
        tmp_path = None

        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.config_file.parent,
                prefix=f".{self.config_file.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "wb") as f:
                tomli_w.dump(config_dict, f)
            # mkstemp creates 0600; keep the permissions of the file being replaced
            if self.config_file.exists():
                os.chmod(tmp_path, stat.S_IMODE(os.stat(self.config_file).st_mode))
            os.replace(tmp_path, self.config_file)
            logger.debug(f"Configuration saved to {self.config_file}")

        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise ConfigSaveError(f"Failed to write config file {self.config_file}: {e}") from e

    @property
    def config(self) -> ProjectsConfig:
        """Provides access to the current configuration."""
        return self._config

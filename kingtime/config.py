"""Configuration management for the command-line client."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from kingtime.errors import ConfigNotFoundError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "kingtime" / "config.ini"
SECTION = "kingtime"


@dataclass
class Config:
    """KING OF TIME credentials of the command-line user."""

    access_token: str
    employee_code: str

    @classmethod
    def from_env(cls) -> "Config | None":
        """Load configuration from environment variables."""
        try:
            return cls(
                access_token=os.environ["KINGTIME_ACCESS_TOKEN"],
                employee_code=os.environ["KINGTIME_EMPLOYEE_CODE"],
            )
        except KeyError:
            return None

    @classmethod
    def load(cls, path: Path | None = None) -> "Config | None":
        """
        Load configuration from file.

        Returns None when the file does not exist.

        Raises:
            ConfigNotFoundError: the file exists but lacks the credentials.
        """
        path = path or DEFAULT_CONFIG_PATH
        if not path.is_file():
            return None

        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read(path)
            section = parser[SECTION]
            return cls(
                access_token=section["accessToken"],
                employee_code=section["employeeCode"],
            )
        except (configparser.Error, KeyError) as e:
            msg = f"Invalid configuration in {path}: missing {e}"
            raise ConfigNotFoundError(msg) from e

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file, readable by the owner only."""
        path = path or DEFAULT_CONFIG_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        parser = configparser.ConfigParser(interpolation=None)
        parser[SECTION] = {
            "accessToken": self.access_token,
            "employeeCode": self.employee_code,
        }
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as config_file:
            # O_CREAT only applies the mode to new files
            path.chmod(0o600)
            parser.write(config_file)

"""Simple JSON configuration loader for tallysheet."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "storage": {"db_path": "data/tallysheet.db"},
    "summary": {"days": 14},
    "projects": ["Lunch", "Meetings"],
    "logging": {"level": "INFO", "log_dir": "logs"},
}

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "TALLYSHEET_DB_PATH": ("storage", "db_path"),
    "TALLYSHEET_LOG_LEVEL": ("logging", "level"),
    "TALLYSHEET_LOG_DIR": ("logging", "log_dir"),
}


class Config:
    """Configuration container loaded from JSON file."""

    def __init__(self, config_path: str = "config.json") -> None:
        """Initialize configuration from JSON file.

        Missing files fall back to built-in defaults. Values from the
        environment (or a ``.env`` file) take precedence over the file.

        Args:
            config_path: Path to config.json file
        """
        self.path = Path(config_path)
        self.data: Dict[str, Any] = json.loads(json.dumps(DEFAULTS))

        if self.path.exists():
            with open(self.path) as f:
                loaded = json.load(f)
            for key, value in loaded.items():
                if isinstance(value, dict) and isinstance(self.data.get(key), dict):
                    self.data[key].update(value)
                else:
                    self.data[key] = value
            logger.debug(f"Loaded configuration from {self.path}")
        else:
            logger.debug(f"No configuration file at {self.path}, using defaults")

        load_dotenv()
        for env_key, (section, key) in ENV_OVERRIDES.items():
            env_value = os.getenv(env_key)
            if env_value and isinstance(self.data.get(section), dict):
                self.data[section][key] = env_value

    @property
    def storage(self) -> Dict[str, str]:
        """Get storage configuration."""
        return self.data.get("storage", {})

    @property
    def summary(self) -> Dict[str, Any]:
        """Get summary window configuration."""
        return self.data.get("summary", {})

    @property
    def projects(self) -> list[str]:
        """Get the default project registry."""
        return list(self.data.get("projects", []))

    @property
    def log(self) -> Dict[str, str]:
        """Get logging configuration."""
        return self.data.get("logging", {})

    def validate(self) -> tuple[bool, list[str]]:
        """Validate configuration fields.

        Returns:
            Tuple of (is_valid, error_messages)
        """
        errors: list[str] = []

        for section in ("storage", "summary", "logging"):
            if not isinstance(self.data.get(section), dict):
                errors.append(f"{section} must be an object")
        if errors:
            return False, errors

        if not self.storage.get("db_path"):
            errors.append("storage.db_path is required")

        days = self.summary.get("days")
        if not isinstance(days, int) or isinstance(days, bool) or days < 0:
            errors.append("summary.days must be a non-negative integer")

        projects = self.data.get("projects")
        if not isinstance(projects, list) or not all(
            isinstance(name, str) and name.strip() for name in projects
        ):
            errors.append("projects must be a list of non-empty names")

        level = str(self.log.get("level", "")).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"logging.level is invalid: {self.log.get('level')}")

        return len(errors) == 0, errors

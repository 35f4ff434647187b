"""
Configuration management for capturedate.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from .constants import PROGRAM


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """Manages the configuration file for logging preferences."""

    def __init__(self, config_path: Optional[Path] = None):
        # Default config location: ~/.<PROGRAM>/config.yml
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / f".{PROGRAM}" / "config.yml"
        self.program_root = self.config_path.parent
        self.data = self._load_config()

    def _load_config(self) -> Dict:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logging.getLogger(PROGRAM).warning(f"Could not load config: {e}")
            return {}

        if not isinstance(data, dict):
            logging.getLogger(PROGRAM).warning(f"Ignoring malformed config: {self.config_path}")
            return {}
        return data

    def save_config(self) -> None:
        """Save current configuration to file."""
        try:
            self.program_root.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, 'w') as f:
                yaml.safe_dump(self.data, f, default_flow_style=False)
        except OSError as e:
            logging.getLogger(PROGRAM).error(f"Could not save config: {e}")

    def get_log_level(self) -> str:
        """Get the console log level (default: WARNING)."""
        level = str(self.data.get('log_level', DEFAULT_LOG_LEVEL)).upper()
        return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL

    def get_log_file(self) -> Optional[str]:
        """Get the saved log file path."""
        return self.data.get('log_file')

    def update_log_level(self, level: str) -> None:
        """Update and save the console log level."""
        level = level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {level} (expected one of {', '.join(LOG_LEVELS)})")
        self.data['log_level'] = level
        self.save_config()

    def update_log_file(self, log_file: str) -> None:
        """Update and save the log file path."""
        self.data['log_file'] = str(log_file)
        self.save_config()

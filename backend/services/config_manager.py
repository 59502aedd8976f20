"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # Environment variable first
            config_dir = os.environ.get("TEXT_DIFF_CONFIG_DIR")

            # Then the home directory ~/.text_diff
            if not config_dir:
                try:
                    config_dir = os.path.expanduser("~/.text_diff")
                except Exception:
                    config_dir = None

            if config_dir:
                config_path = Path(config_dir)
                try:
                    config_path.mkdir(parents=True, exist_ok=True)
                    self._config_file = config_path / "config.json"
                except OSError as e:
                    print(f"Warning: Cannot write to {config_dir}: {e}")
                    self._config_file = None

            # Last resort: temp directory
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "text_diff"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"Using temporary config path: {self._config_file}")

        except Exception as e:
            print(f"Critical Error in ConfigManager init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "text_diff_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next get_instance() re-reads the environment"""
        cls._instance = None

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file) as f:
                return {**self._default_config(), **json.load(f)}
        except (json.JSONDecodeError, OSError) as e:
            print(f"Error loading config: {e}")
            return self._default_config()

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "server": {"host": "0.0.0.0", "port": 3000},
            "diff": {"maxInputLength": 0},  # 0 disables the input-size guard
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get_max_input_length(self) -> int:
        """Largest accepted input string length, 0 when unlimited"""
        # Cached copy; save_config and get_config keep it current
        limit = self._config.get("diff", {}).get("maxInputLength", 0)
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            return 0
        return limit

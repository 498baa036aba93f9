"""
Configuration Manager - Handle vendorpatch settings persistence
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
            # 1st: environment variable
            config_dir = os.environ.get("VENDORPATCH_CONFIG_DIR")

            # 2nd: ~/.vendorpatch
            if not config_dir:
                config_dir = os.path.expanduser("~/.vendorpatch")

            config_path = Path(config_dir)
            try:
                config_path.mkdir(parents=True, exist_ok=True)
                self._config_file = config_path / "config.json"
            except OSError as e:
                print(f"[Config] Warning: Cannot write to {config_dir}: {e}")
                self._config_file = None

            # Last resort: temp dir
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "vendorpatch"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[Config] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[Config] Critical Error in ConfigManager init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "vendorpatch_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next call re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file"""
        if not self._config_file.exists():
            return self._default_config()

        try:
            with open(self._config_file, encoding="utf-8") as f:
                loaded = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[Config] Error loading config: {e}")
            return self._default_config()

        config = self._default_config()
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section] = {**config[section], **values}
            else:
                config[section] = values
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": {"contextLines": 3, "lookahead": 50},
            "output": {"patchesDir": "artifacts/patches"},
            "server": {"host": "127.0.0.1", "port": 8000},
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
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def diff_settings(self) -> tuple[int, int]:
        """(context_lines, lookahead) from the ``diff`` section"""
        diff = self.get_config().get("diff", {})
        context_lines = int(diff.get("contextLines", 3))
        lookahead = int(diff.get("lookahead", 50))
        if context_lines < 0:
            raise ValueError(f"diff.contextLines must not be negative, got {context_lines}")
        if lookahead < 1:
            raise ValueError(f"diff.lookahead must be positive, got {lookahead}")
        return context_lines, lookahead

    def patches_dir(self) -> Path:
        """Base directory for suggested patch output paths"""
        output = self.get_config().get("output", {})
        return Path(output.get("patchesDir", "artifacts/patches"))

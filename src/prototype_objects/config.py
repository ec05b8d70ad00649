"""
Model configuration loader

Reads PROTOTYPE_* environment variables to configure self-logging of nodes.
Falls back to defaults for anything that isn't set.
"""

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from .core.errors import ConfigError
from .core.self_logger import LEVELS, DEFAULT_MAX_ENTRIES, DEFAULT_MAX_LOG_SIZE


FALSE_VALUES = {'0', 'false', 'no', 'off'}


class ModelConfig:
    """Load and manage object model configuration"""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self.log_dir: Optional[Path] = None
        self.log_level = 'INFO'
        self.max_log_size = DEFAULT_MAX_LOG_SIZE
        self.max_log_entries = DEFAULT_MAX_ENTRIES
        self.self_logging = True
        self._load()

    def _load(self):
        """Load configuration from environment variables"""
        log_dir = self.environ.get('PROTOTYPE_LOG_DIR', '').strip()
        if log_dir:
            self.log_dir = Path(log_dir)

        level = self.environ.get('PROTOTYPE_LOG_LEVEL', self.log_level).strip().upper()
        if level not in LEVELS:
            raise ConfigError(
                f"PROTOTYPE_LOG_LEVEL must be one of {', '.join(LEVELS)}, got {level!r}"
            )
        self.log_level = level

        self.max_log_size = self._get_int('PROTOTYPE_MAX_LOG_SIZE', self.max_log_size)
        self.max_log_entries = self._get_int('PROTOTYPE_MAX_LOG_ENTRIES', self.max_log_entries)

        enabled = self.environ.get('PROTOTYPE_SELF_LOGGING', 'true').strip().lower()
        self.self_logging = enabled not in FALSE_VALUES

    def _get_int(self, key: str, default: int) -> int:
        raw = self.environ.get(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigError(f"{key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigError(f"{key} must be positive, got {value}")
        return value

    def as_dict(self) -> Dict:
        """Get all configuration values"""
        return {
            'log_dir': str(self.log_dir) if self.log_dir else None,
            'log_level': self.log_level,
            'max_log_size': self.max_log_size,
            'max_log_entries': self.max_log_entries,
            'self_logging': self.self_logging,
        }


# Global instance (lazy loaded)
_config = None


def get_config() -> ModelConfig:
    """Get the global model configuration"""
    global _config
    if _config is None:
        _config = ModelConfig()
    return _config


def reload_config() -> ModelConfig:
    """Reload configuration from the environment"""
    global _config
    _config = ModelConfig()
    return _config

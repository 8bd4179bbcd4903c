# compile_ebpf/utils/config.py - Configuration management
"""
Configuration management for the eBPF compiler driver.
Loads configuration from YAML files and applies environment overrides.
"""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Mapping
import logging


DEFAULT_CLANG = '/usr/bin/clang'
CLANG_ENV_VAR = 'CLANG'


class Config:
    """
    Configuration manager for the compiler driver.

    Loads configuration from YAML files and provides access to settings.
    """

    DEFAULT_CONFIG = {
        'compiler': {
            'clang': DEFAULT_CLANG,
        },
        'paths': {
            'include_dir': 'include',
        },
        'logging': {
            'level': 'WARNING',
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML configuration file
        """
        self.logger = logging.getLogger(__name__)
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str):
        """
        Load configuration from YAML file.

        Args:
            config_file: Path to YAML file
        """
        config_path = Path(config_file)

        if not config_path.exists():
            self.logger.warning(f"Config file not found: {config_file}, using defaults")
            return

        try:
            with open(config_path, 'r') as f:
                loaded_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to load config: {e}")
            raise

        if not isinstance(loaded_config, dict):
            raise ValueError(f"Config file {config_file} must contain a mapping")

        # Merge with defaults
        self._merge_config(self.config, loaded_config)
        self.logger.info(f"Loaded configuration from {config_file}")

    def _merge_config(self, base: Dict, override: Dict):
        """Recursively merge ``override`` into ``base``."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation key.

        Args:
            key: Configuration key (e.g., 'compiler.clang')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value by dot-notation key.

        Args:
            key: Configuration key (e.g., 'paths.include_dir')
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def clang_path(self, environ: Optional[Mapping[str, str]] = None) -> str:
        """
        Resolve the compiler executable.

        The ``CLANG`` environment variable wins over the configured value.
        """
        if environ is None:
            environ = os.environ

        override = environ.get(CLANG_ENV_VAR)
        if override:
            return override

        return self.get('compiler.clang') or DEFAULT_CLANG

    def to_dict(self) -> Dict:
        """Get full configuration as dictionary."""
        return copy.deepcopy(self.config)

"""YAML configuration loading and validation.

Converter settings are read from a YAML file. Every field is optional;
missing fields take their defaults.
"""

import logging
import os
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .models import DEFAULT_BUNDLE_NAME, DEFAULT_CONFIG_PATH, MAX_FILE_SIZE, ConverterConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates converter configuration.

    Configuration file structure:
        output_dir: ./html
        max_file_size: 10485760
        pretty_output: true
        bundle: false
        bundle_name: "{stem}-xml-html-conversion.zip"
    """

    KNOWN_FIELDS = {'output_dir', 'max_file_size', 'pretty_output', 'bundle', 'bundle_name'}

    DEFAULTS = {
        'output_dir': None,
        'max_file_size': MAX_FILE_SIZE,
        'pretty_output': True,
        'bundle': False,
        'bundle_name': DEFAULT_BUNDLE_NAME,
    }

    @classmethod
    def load(cls, config_path: str) -> ConverterConfig:
        """Load and parse configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ConverterConfig object with parsed configuration

        Raises:
            ConfigError: If the file cannot be read or is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found at {config_path}")
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        # An empty file means "all defaults"
        if config_dict is None:
            config_dict = {}

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def load_or_default(cls, config_path: Optional[str] = None) -> ConverterConfig:
        """Load an explicit config file, or the default one if it exists.

        Args:
            config_path: Explicit path (must exist), or None to look for
                .xml2html.yaml in the working directory

        Returns:
            Parsed configuration, or defaults when no file applies

        Raises:
            ConfigError: If an explicit file is missing or any file is invalid
        """
        if config_path is not None:
            return cls.load(config_path)
        if os.path.exists(DEFAULT_CONFIG_PATH):
            logger.debug(f"Using configuration from {DEFAULT_CONFIG_PATH}")
            return cls.load(DEFAULT_CONFIG_PATH)
        return ConverterConfig()

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> ConverterConfig:
        """Parse and validate configuration dictionary.

        Args:
            config_dict: Raw configuration dictionary from YAML

        Returns:
            Validated ConverterConfig object

        Raises:
            ConfigError: If configuration is invalid
        """
        unknown = set(config_dict.keys()) - cls.KNOWN_FIELDS
        if unknown:
            raise ConfigError(f"Unknown fields: {', '.join(sorted(map(str, unknown)))}")

        values = {**cls.DEFAULTS, **config_dict}

        output_dir = values['output_dir']
        if output_dir is not None:
            if not isinstance(output_dir, str) or not output_dir.strip():
                raise ConfigError("Field 'output_dir' must be a non-empty string", 'output_dir')
            output_dir = output_dir.strip()

        # bool is an int subclass; reject it explicitly
        max_file_size = values['max_file_size']
        if isinstance(max_file_size, bool) or not isinstance(max_file_size, int):
            raise ConfigError(
                f"Field 'max_file_size' must be an integer, got {type(max_file_size).__name__}",
                'max_file_size'
            )
        if max_file_size < 1:
            raise ConfigError(
                f"Field 'max_file_size' must be at least 1, got {max_file_size}",
                'max_file_size'
            )

        for flag in ('pretty_output', 'bundle'):
            if not isinstance(values[flag], bool):
                raise ConfigError(
                    f"Field '{flag}' must be a boolean, got {type(values[flag]).__name__}",
                    flag
                )

        bundle_name = values['bundle_name']
        if not isinstance(bundle_name, str) or not bundle_name.strip():
            raise ConfigError("Field 'bundle_name' must be a non-empty string", 'bundle_name')
        bundle_name = bundle_name.strip()
        if not bundle_name.endswith('.zip'):
            raise ConfigError(f"Field 'bundle_name' must end with .zip, got {bundle_name}", 'bundle_name')

        return ConverterConfig(
            output_dir=output_dir,
            max_file_size=max_file_size,
            pretty_output=values['pretty_output'],
            bundle=values['bundle'],
            bundle_name=bundle_name,
        )

"""
Configuration management for template extraction and generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for the marker settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union, List
from dataclasses import dataclass, field, asdict


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class TemplateConfig:
    """Settings used when extracting and generating a class template."""

    # Markers delimiting the template block (line prefixes)
    start_mark: str = "#"
    end_mark: str = "#end"

    # Line terminator used to join generated lines
    newline: str = "\n"

    # Extension of the generated script file
    file_extension: str = ".cs"

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> TemplateConfig:
    """
    Build a configuration from defaults, a JSON file and overrides.

    Args:
        custom_config: Configuration overrides, applied last
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    config_dict: Dict[str, Any] = {}

    if config_file:
        config_dict.update(_load_config_file(config_file))

    if custom_config:
        config_dict.update(
            {key: value for key, value in custom_config.items() if value is not None}
        )

    return _dict_to_config(config_dict)


def _load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    if not path.suffix.lower() == ".json":
        raise ConfigError(f"Configuration file must be JSON: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    return config


def _dict_to_config(config_dict: Dict[str, Any]) -> TemplateConfig:
    """Convert dictionary to TemplateConfig instance."""
    known_fields = {f for f in TemplateConfig.__dataclass_fields__}

    config_args = {}
    custom_args = {}

    for key, value in config_dict.items():
        if key in known_fields:
            config_args[key] = value
        else:
            custom_args[key] = value

    for key in ("start_mark", "end_mark", "newline", "file_extension"):
        if key in config_args and not isinstance(config_args[key], str):
            raise ConfigError(f"Setting '{key}' must be a string")

    if custom_args:
        existing_custom = dict(config_args.get("custom", {}))
        existing_custom.update(custom_args)
        config_args["custom"] = existing_custom

    return TemplateConfig(**config_args)


def save_config(config: TemplateConfig, output_path: Union[str, Path]):
    """Save configuration to JSON file."""
    path = Path(output_path)

    config_dict = asdict(config)
    custom = config_dict.pop("custom")
    config_dict.update(custom)

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ConfigError(f"Failed to save configuration to {path}: {e}") from e


def validate_config(config: TemplateConfig) -> List[str]:
    """
    Validate a configuration.

    Returns:
        List of validation warnings
    """
    warnings = []

    if not config.start_mark:
        warnings.append(
            "Empty start_mark: the first line opens the template block "
            "and every later line is collected"
        )

    if not config.end_mark:
        warnings.append("Empty end_mark: the template block is always empty")

    if config.start_mark and config.start_mark == config.end_mark:
        warnings.append(
            f"start_mark and end_mark are both '{config.start_mark}': "
            "the block ends at the next marker line"
        )

    if config.newline not in {"\n", "\r\n", "\r"}:
        warnings.append(f"Unusual newline setting: {config.newline!r}")

    if config.file_extension and not config.file_extension.startswith("."):
        warnings.append(f"file_extension should start with '.': {config.file_extension}")

    return warnings

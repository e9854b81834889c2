#!/usr/bin/env python3

import os
import json
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import logging
import sys

import yaml

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("rosvoid")

CONFIG_FILENAMES = ['config.yaml', 'config.yml', 'config.json', 'config.toml']


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. ROSVOID_CONFIG environment variable
    2. ~/.rosvoid/ directory
    """
    if 'ROSVOID_CONFIG' in os.environ:
        path = Path(os.environ['ROSVOID_CONFIG'])
        if path.exists():
            return path

    rosvoid_dir = Path.home() / '.rosvoid'
    for filename in CONFIG_FILENAMES:
        path = rosvoid_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path
    return rosvoid_dir / 'config.yaml'


def get_default_config():
    """Get default configuration."""
    return {
        "catalog": {
            "url": "https://raw.githubusercontent.com/ros/rosdistro/master/melodic/distribution.yaml",
        },
        "distro": {
            "name": "melodic",
            "prefix": "ros-melodic",
            "python_version": "3.6",
        },
        "sources": {
            "raw_host": "https://raw.githubusercontent.com",
        },
        "output": {
            "path": "out",
            "recipe_name": "template",
        },
        "recipe": {
            "maintainer": "",
            "license": "BSD-3-Clause",
        },
        "http": {
            "timeout_seconds": None,  # No timeout unless configured
            "user_agent": "rosvoid",
        },
        "general": {
            "max_workers": 16,
        },
        "manifest": {
            "strict": False,
        },
        "logging": {
            "level": "INFO",
        },
    }


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    # Load from file if it exists
    if config_path.exists():
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            config = merge_configs(config, file_config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    # Apply environment variable overrides
    config = apply_env_overrides(config)

    return config


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: ROSVOID_SECTION_KEY
    For example: ROSVOID_DISTRO_NAME=noetic or ROSVOID_GENERAL_MAX_WORKERS=4
    """
    env_prefix = "ROSVOID_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix):
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        # Convert value
        if value.lower() in ('true', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts_from_key = config_key.split('_')
                if key_parts[i : i + len(config_key_parts_from_key)] == config_key_parts_from_key:
                    if len(config_key_parts_from_key) > best_match_len:
                        best_match_len = len(config_key_parts_from_key)
                        matched_key = config_key

            if not matched_key:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # Path conflict: env var is longer than the config path
                break

    return config


def apply_log_level(config, verbose=False):
    """Set the rosvoid logger level from ``logging.level`` (DEBUG when verbose)."""
    if verbose:
        logger.setLevel(logging.DEBUG)
        return

    level = str(config.get('logging', {}).get('level', 'INFO')).upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning(f"Unknown logging.level {level!r}, using INFO")
        level = 'INFO'
    logger.setLevel(level)


@dataclass
class Settings:
    """Effective run settings derived from the merged configuration."""
    catalog_url: str
    distro: str
    prefix: str
    python_version: str
    raw_host: str
    output_path: Path
    recipe_name: str
    maintainer: str
    license: str
    timeout: Optional[float] = None
    user_agent: str = "rosvoid"
    max_workers: int = 16
    strict_manifests: bool = False

    @classmethod
    def from_config(cls, config: dict) -> 'Settings':
        return cls(
            catalog_url=config['catalog']['url'],
            distro=config['distro']['name'],
            prefix=config['distro']['prefix'],
            python_version=str(config['distro']['python_version']),
            raw_host=config['sources']['raw_host'].rstrip('/'),
            output_path=Path(config['output']['path']),
            recipe_name=config['output']['recipe_name'],
            maintainer=config['recipe']['maintainer'],
            license=config['recipe']['license'],
            timeout=config['http'].get('timeout_seconds'),
            user_agent=config['http'].get('user_agent', 'rosvoid'),
            max_workers=int(config['general']['max_workers']),
            strict_manifests=bool(config['manifest']['strict']),
        )


def load_settings(**overrides) -> Settings:
    """Load settings from config, then apply non-None keyword overrides (CLI flags)."""
    settings = Settings.from_config(load_config())
    for key, value in overrides.items():
        if value is not None:
            if key == 'output_path':
                value = Path(value)
            setattr(settings, key, value)
    return settings

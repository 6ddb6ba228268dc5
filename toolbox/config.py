"""
Configuration management for toolbox

Configuration lives in a YAML file with a `vfs` and a `logging` section:

    vfs:
      root: /srv/data
      strict_chroot: true
    logging:
      level: DEBUG
      file: toolbox.log

The `TOOLBOX_CONFIG` environment variable names the file when no path is
given, and `TOOLBOX_ROOT` overrides the configured root.
"""

import os
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger('toolbox.config')

CONFIG_ENV = 'TOOLBOX_CONFIG'
ROOT_ENV = 'TOOLBOX_ROOT'

@dataclass
class ToolboxConfig:
    """Toolbox configuration"""
    root: str = '.'
    strict_chroot: bool = True
    log_level: str = 'INFO'
    log_file: Optional[str] = None

# section -> {yaml key: ToolboxConfig field}
_SECTIONS = {
    'vfs': {'root': 'root', 'strict_chroot': 'strict_chroot'},
    'logging': {'level': 'log_level', 'file': 'log_file'},
}

def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data

def load_config(path: Optional[str] = None) -> ToolboxConfig:
    """Load configuration from `path`, the environment, or defaults"""
    config = ToolboxConfig()
    path = path or os.environ.get(CONFIG_ENV)

    if path:
        data = _read_yaml(path)
        for section, value in data.items():
            if section not in _SECTIONS:
                logger.warning(f"Ignoring unknown config section: {section}")
                continue
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ConfigError(f"Config section '{section}' must be a mapping")
            for key, item in value.items():
                field_name = _SECTIONS[section].get(key)
                if field_name is None:
                    logger.warning(f"Ignoring unknown config key: {section}.{key}")
                    continue
                setattr(config, field_name, item)
        logger.debug(f"Loaded configuration from {path}")

    root_override = os.environ.get(ROOT_ENV)
    if root_override:
        config.root = root_override

    _validate(config)
    return config

def _validate(config: ToolboxConfig) -> None:
    if not isinstance(config.root, str) or not config.root:
        raise ConfigError(f"vfs.root must be a non-empty string, got {config.root!r}")
    if not isinstance(config.strict_chroot, bool):
        raise ConfigError(f"vfs.strict_chroot must be a boolean, got {config.strict_chroot!r}")
    if not isinstance(config.log_file, (str, type(None))):
        raise ConfigError(f"logging.file must be a string, got {config.log_file!r}")
    if isinstance(config.log_level, int):
        return
    if not isinstance(logging.getLevelName(str(config.log_level).upper()), int):
        raise ConfigError(f"Unknown logging level: {config.log_level}")

def config_to_dict(config: ToolboxConfig) -> Dict[str, Any]:
    """Return the configuration in its YAML layout"""
    values = {f.name: getattr(config, f.name) for f in fields(config)}
    return {
        section: {key: values[name] for key, name in mapping.items()}
        for section, mapping in _SECTIONS.items()
    }

def save_config(config: ToolboxConfig, path: str) -> None:
    """Write the configuration to a YAML file"""
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(config_to_dict(config), f, default_flow_style=False)
    logger.debug(f"Saved configuration to {path}")

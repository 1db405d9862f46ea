"""
Configuration management for the campaignforge package.

Settings are resolved in three layers:
1. Bundled defaults (campaignforge/core/default_config.json) - gateway endpoint,
   agent identities, storage location and logging
2. User configuration (~/.campaignforge/config.json) - persistent per-user overrides
3. Runtime overrides - values set through set_config_value(..., save=False)

A user file only needs the keys it overrides; it is deep merged over the defaults.
"""

import os
import json
from typing import Dict, Any, Optional

from campaignforge.core.constants import DEFAULT_AGENT_IDS, DEFAULT_STORAGE_DIRECTORY

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.json")
USER_CONFIG_PATH = os.path.expanduser("~/.campaignforge/config.json")

# Configuration singleton
_config_cache = {}

def get_config(reload: bool = False) -> Dict[str, Any]:
    """
    Get the configuration dictionary, loading it on first use.

    Args:
        reload (bool): Force reload the configuration even if cached

    Returns:
        Dict[str, Any]: The configuration dictionary
    """
    global _config_cache

    if not _config_cache or reload:
        _config_cache = load_config()

    return _config_cache

def load_config() -> Dict[str, Any]:
    """
    Load the bundled defaults and deep merge the user configuration over them.

    Returns:
        Dict[str, Any]: The merged configuration dictionary
    """
    config = {}

    if os.path.exists(DEFAULT_CONFIG_PATH):
        with open(DEFAULT_CONFIG_PATH, 'r') as f:
            config.update(json.load(f))

    if os.path.exists(USER_CONFIG_PATH):
        with open(USER_CONFIG_PATH, 'r') as f:
            user_config = json.load(f)
            deep_merge(config, user_config)

    return config

def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """
    Recursively merge override into base, in place.

    Nested dictionaries are merged key by key, so overriding
    'agent_gateway.timeout' keeps 'agent_gateway.endpoint'. Any other value in
    override replaces the value in base.

    Args:
        base (Dict[str, Any]): Base dictionary to be updated
        override (Dict[str, Any]): Dictionary with values to override
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value

def save_user_config(config: Dict[str, Any]) -> None:
    """
    Write the configuration to ~/.campaignforge/config.json and refresh the cache.

    Args:
        config (Dict[str, Any]): Configuration dictionary to save
    """
    os.makedirs(os.path.dirname(USER_CONFIG_PATH), exist_ok=True)

    with open(USER_CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)

    global _config_cache
    _config_cache = load_config()

def get_config_value(key: str, default: Any = None) -> Any:
    """
    Get a configuration value using dot notation.

    Examples:
        >>> get_config_value('agent_gateway.timeout', 60)
        300
        >>> get_config_value('nonexistent.key', 'fallback')
        'fallback'

    Args:
        key (str): The configuration key, e.g. 'agents.video_brief'
        default (Any): Value returned when the key is missing at any level

    Returns:
        Any: The configuration value or default
    """
    config = get_config()

    if '.' in key:
        current = config
        for part in key.split('.'):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    return config.get(key, default)

def set_config_value(key: str, value: Any, save: bool = True) -> None:
    """
    Set a configuration value using dot notation.

    Intermediate dictionaries are created as needed. With save=False the
    change lives only for the current process.

    Args:
        key (str): The configuration key
        value (Any): The value to set
        save (bool): Whether to persist the change to the user configuration file
    """
    config = get_config()

    if '.' in key:
        parts = key.split('.')
        current = config
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value
    else:
        config[key] = value

    global _config_cache
    _config_cache = config

    if save:
        save_user_config(config)

def get_agent_ids() -> Dict[str, str]:
    """
    Get the identifiers of the three generation agents.

    Returns:
        Dict[str, str]: Mapping of 'orchestrator', 'graphic_designer' and
        'video_brief' to agent identifiers
    """
    agent_ids = dict(DEFAULT_AGENT_IDS)
    configured = get_config_value("agents", {})
    if isinstance(configured, dict):
        agent_ids.update({k: v for k, v in configured.items() if k in agent_ids and v})
    return agent_ids

def get_storage_directory(override: Optional[str] = None) -> str:
    """
    Resolve the directory holding the persisted campaign and brand records.

    Args:
        override (str, optional): Directory given on the command line

    Returns:
        str: Absolute storage directory path
    """
    directory = override or get_config_value("storage.directory", DEFAULT_STORAGE_DIRECTORY)
    return os.path.abspath(os.path.expanduser(directory))

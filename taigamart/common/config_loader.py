"""
Configuration Loader

Loads the YAML settings file and applies environment overrides
(a local .env file is honoured via python-dotenv).

Precedence, lowest to highest:
    built-in defaults -> config/settings.yaml -> environment variables
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

SETTINGS_FILE = 'settings.yaml'

DEFAULT_SETTINGS: Dict[str, Any] = {
    'api_url': 'http://localhost:8000',
    'pos_api_url': 'http://localhost:8000/api',
    'timeout': 30,
    'max_retries': 1,
    'auth_file': '~/.taigamart/auth.json',
    'currency': 'LKR',
}

# Environment variable -> settings key
ENV_OVERRIDES = {
    'TAIGA_API_URL': 'api_url',
    'TAIGA_POS_API_URL': 'pos_api_url',
    'TAIGA_TIMEOUT': 'timeout',
    'TAIGA_MAX_RETRIES': 'max_retries',
    'TAIGA_AUTH_FILE': 'auth_file',
    'TAIGA_CURRENCY': 'currency',
}

_INT_KEYS = {'timeout', 'max_retries'}


@dataclass
class Settings:
    """Resolved client settings."""
    api_url: str
    pos_api_url: str
    timeout: int = 30
    max_retries: int = 1
    auth_file: str = '~/.taigamart/auth.json'
    currency: str = 'LKR'

    @property
    def auth_path(self) -> Path:
        return Path(self.auth_file).expanduser()


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'settings.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _coerce(key: str, value: Any) -> Any:
    if key in _INT_KEYS:
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring non-integer %s: %r", key, value)
            return DEFAULT_SETTINGS[key]
    return str(value)


def load_settings(
    filename: str = SETTINGS_FILE,
    environ: Optional[Dict[str, str]] = None,
) -> Settings:
    """
    Resolve client settings.

    Args:
        filename: Settings file inside the config directory
        environ: Environment mapping (defaults to os.environ after loading .env)

    Returns:
        Settings instance
    """
    values = dict(DEFAULT_SETTINGS)

    try:
        file_values = load_config(filename)
    except FileNotFoundError:
        logger.debug("No %s found, using built-in defaults", filename)
        file_values = {}

    for key, value in (file_values.get('api') or {}).items():
        if key in DEFAULT_SETTINGS and value is not None:
            values[key] = value

    if environ is None:
        load_dotenv()
        environ = dict(os.environ)

    for env_name, key in ENV_OVERRIDES.items():
        if environ.get(env_name):
            values[key] = environ[env_name]

    return Settings(**{key: _coerce(key, value) for key, value in values.items()})

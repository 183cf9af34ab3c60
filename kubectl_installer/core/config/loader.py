"""
Configuration loader — reads config.yml into ``InstallerSettings``.

The config file is optional.  Lookup order:

    --config PATH  >  $KCI_CONFIG  >  ~/.config/kubectl-installer/config.yml

Environment overrides (KCI_INSTALL_DIR, KCI_BACKUP_DIR, KCI_RELEASE_URL)
are applied on top of whatever the file provides.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml

from kubectl_installer.core.models.settings import InstallerSettings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "KCI_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/kubectl-installer/config.yml")

# env var → settings field
_ENV_OVERRIDES: dict[str, str] = {
    "KCI_INSTALL_DIR": "install_dir",
    "KCI_BACKUP_DIR": "backup_dir",
    "KCI_RELEASE_URL": "release_url",
}


class ConfigError(Exception):
    """Raised when installer configuration is invalid or missing."""


def find_config_file(explicit: Path | None = None) -> Path | None:
    """Locate the config file to load.

    An explicit path (``--config`` or ``$KCI_CONFIG``) is returned as-is,
    even if it does not exist, so that ``load_settings`` can report it.
    The default per-user location is only returned when it exists.
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.is_file():
        return default
    return None


def load_settings(path: Path | None = None) -> InstallerSettings:
    """Load and validate installer settings.

    Args:
        path: Explicit config path.  If None, falls back to
            ``$KCI_CONFIG`` and then the per-user default.

    Returns:
        Validated settings (defaults when no file is found).

    Raises:
        ConfigError: If an explicit file is missing or any file is invalid.
    """
    config_path = find_config_file(path)
    data: dict = {}

    if config_path is not None:
        data = _read_config(config_path)

    for env_var, field in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            data[field] = value

    try:
        settings = InstallerSettings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid installer configuration: {e}") from e

    logger.debug(
        "Settings: install_dir=%s backup_dir=%s release_url=%s",
        settings.install_dir, settings.backup_dir, settings.release_url,
    )
    return settings


def _read_config(path: Path) -> dict:
    """Parse a YAML config file into a plain mapping."""
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading installer config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Accept both flat files and files wrapped under a "kubectl" key
    if isinstance(data.get("kubectl"), dict):
        data = dict(data["kubectl"])

    return data

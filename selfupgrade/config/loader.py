"""
Upgrade configuration loading for selfupgrade.

The host application may keep its upgrade preferences in a YAML file. This
module reads the ``upgrade:`` section of such a file. It never writes
configuration back.

File Format
-----------
    upgrade:
      allow_prerelease: false          # Optional: consider pre-releases
      asset_pattern: "linux-amd64"     # Optional: regex for the asset name

Other top-level keys are ignored, so the section can live inside a larger
application config. A file without an ``upgrade:`` section yields the
defaults.

Error Handling
--------------
- FileNotFoundError: Config file doesn't exist
- ConfigError: YAML parse errors, empty files, wrongly typed fields
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from selfupgrade.config import load_upgrade_config
    >>> cfg = load_upgrade_config(Path("app.yaml"))
    >>> cfg.allow_prerelease
    False
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Any

import yaml

from selfupgrade.exceptions import ConfigError
from selfupgrade.logging import get_global_logger

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class UpgradeConfig:
    """
    Upgrade preferences read from the application's config file.

    Attributes:
        allow_prerelease: Consider releases flagged as pre-release.
        asset_pattern: Regular expression selecting this platform's asset,
            or None to let the application choose.
    """

    allow_prerelease: bool = False
    asset_pattern: str | None = None


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      FileNotFoundError      - when file does not exist
      ConfigError            - for invalid YAML or an empty document
    """
    if not p.exists():
        raise FileNotFoundError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Public API
# -------------------------------


def load_upgrade_config(path: Path) -> UpgradeConfig:
    """
    Read upgrade preferences from a YAML file.

    Args:
        path: Path to the application's YAML config file.

    Returns:
        The parsed preferences, with defaults for missing fields.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the YAML is invalid, empty, or a field has the
            wrong type.
    """
    logger = get_global_logger()
    data = _load_yaml_file(path)
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML must be a mapping: {path}")

    section = data.get("upgrade")
    if section is None:
        logger.verbose("CONFIG", f"No upgrade section in {path}, using defaults")
        return UpgradeConfig()
    if not isinstance(section, dict):
        raise ConfigError(f"'upgrade' must be a mapping in {path}")

    allow_prerelease = section.get("allow_prerelease", False)
    if not isinstance(allow_prerelease, bool):
        raise ConfigError(
            f"'upgrade.allow_prerelease' must be true or false, "
            f"got {allow_prerelease!r}"
        )

    asset_pattern = section.get("asset_pattern")
    if asset_pattern is not None:
        if not isinstance(asset_pattern, str):
            raise ConfigError(
                f"'upgrade.asset_pattern' must be a string, got {asset_pattern!r}"
            )
        try:
            re.compile(asset_pattern)
        except re.error as err:
            raise ConfigError(
                f"Invalid 'upgrade.asset_pattern' {asset_pattern!r}: {err}"
            ) from err

    logger.verbose(
        "CONFIG",
        f"Loaded upgrade config from {path} "
        f"(allow_prerelease={allow_prerelease}, asset_pattern={asset_pattern!r})",
    )
    return UpgradeConfig(allow_prerelease=allow_prerelease, asset_pattern=asset_pattern)

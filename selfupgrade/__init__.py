"""
selfupgrade - release comparison and upgrade coordination

A small library for self-updating applications. It answers two questions:

  - Is this release newer than the binary that is running?
  - Is it safe to start replacing the binary right now?

selfupgrade provides:
  - Lenient version parsing with a fixed, documented ordering
  - Release/asset descriptors built from release-source JSON
  - Selection of the newest eligible release
  - A non-blocking, at-most-one upgrade coordinator
  - Read-only YAML configuration for upgrade preferences

Downloading, verifying and swapping the binary are left to the
application, which plugs them in as collaborators.

Quick Start
-----------
    import selfupgrade

    selfupgrade.configure(
        perform_upgrade=replace_from_release,
        perform_upgrade_from_url=replace_from_url,
    )

    releases = [selfupgrade.Release.from_dict(r) for r in payload]
    try:
        release = selfupgrade.select_latest_release(releases, __version__)
    except selfupgrade.VersionUpToDate:
        pass
    else:
        selfupgrade.upgrade_to(release)

Package Structure
-----------------
versioning : package
    Version parsing and comparison.
releases : module
    Release and Asset descriptors, release selection.
upgrade : package
    Upgrade slot and coordinator.
config : package
    YAML configuration loading.
exceptions : module
    Exception hierarchy.
logging : module
    Pluggable logger used by the library.

Project Information
-------------------
License: Apache-2.0
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Release comparison and single-flight self-upgrade coordination"

# Re-export commonly used names for convenience
from selfupgrade.config import UpgradeConfig, load_upgrade_config
from selfupgrade.exceptions import (
    ConfigError,
    SelfUpgradeError,
    UpgradeInProgress,
    UpgradeUnsupported,
    VersionUnknown,
    VersionUpToDate,
)
from selfupgrade.releases import Asset, Release, select_latest_release
from selfupgrade.upgrade import (
    UpgradeCoordinator,
    UpgradeSlot,
    configure,
    upgrade_to,
    upgrade_to_url,
)
from selfupgrade.versioning import compare_versions, is_newer, parse_version

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "Asset",
    "ConfigError",
    "Release",
    "SelfUpgradeError",
    "UpgradeConfig",
    "UpgradeCoordinator",
    "UpgradeInProgress",
    "UpgradeSlot",
    "UpgradeUnsupported",
    "VersionUnknown",
    "VersionUpToDate",
    "compare_versions",
    "configure",
    "is_newer",
    "load_upgrade_config",
    "parse_version",
    "select_latest_release",
    "upgrade_to",
    "upgrade_to_url",
]

# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Exception hierarchy for selfupgrade.

This module defines the errors a self-updating application sees when
checking for and applying upgrades:

- ConfigError: Bad configuration files or malformed release descriptors
- VersionUpToDate: The candidate release is not newer than the running one
- VersionUnknown: Release information is missing or unusable
- UpgradeUnsupported: This platform or build cannot upgrade itself
- UpgradeInProgress: Another upgrade already holds the upgrade slot

All exceptions inherit from SelfUpgradeError, allowing callers to catch
every selfupgrade error with a single except clause if needed.

Errors raised by the external collaborators (executable path lookup,
download and replace) are NOT wrapped. They reach the caller unchanged.

Example:
    Reacting to the common outcomes of an upgrade check:
        ```python
        from selfupgrade import select_latest_release, upgrade_to
        from selfupgrade.exceptions import UpgradeInProgress, VersionUpToDate

        try:
            release = select_latest_release(releases, __version__)
            upgrade_to(release)
        except VersionUpToDate:
            print("Already running the latest version")
        except UpgradeInProgress:
            print("An upgrade is already running")
        ```
"""

from __future__ import annotations

__all__ = [
    "SelfUpgradeError",
    "ConfigError",
    "VersionUpToDate",
    "VersionUnknown",
    "UpgradeUnsupported",
    "UpgradeInProgress",
]


class SelfUpgradeError(Exception):
    """Base exception for all selfupgrade errors."""

    pass


class ConfigError(SelfUpgradeError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, empty documents)
    - Wrongly typed configuration fields
    - Release descriptors with malformed assets
    - Invalid asset name patterns
    """

    pass


class VersionUpToDate(SelfUpgradeError):
    """Raised when the candidate release is not newer than the current one."""

    def __init__(self, message: str = "current version is up to date") -> None:
        super().__init__(message)


class VersionUnknown(SelfUpgradeError):
    """Raised when release information could not be determined."""

    def __init__(self, message: str = "couldn't fetch release information") -> None:
        super().__init__(message)


class UpgradeUnsupported(SelfUpgradeError):
    """Raised when this platform or build cannot upgrade itself.

    Usually surfaced by the perform-upgrade collaborator and propagated
    unchanged. The default collaborators installed at import time raise
    it until an application configures real ones.
    """

    def __init__(self, message: str = "upgrade unsupported") -> None:
        super().__init__(message)


class UpgradeInProgress(SelfUpgradeError):
    """Raised when the upgrade slot is already held.

    Either another upgrade is running right now, or an earlier upgrade in
    this process succeeded and the process is expected to restart.
    """

    def __init__(self, message: str = "upgrade already in progress") -> None:
        super().__init__(message)

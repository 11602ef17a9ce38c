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

"""Upgrade coordination for selfupgrade.

The coordinator makes sure at most one upgrade of the running binary is in
flight per process. It does not download or replace anything itself: the
application supplies collaborators for that.

Collaborators:

- **executable_path()**: Return the path of the running binary.
- **perform_upgrade(path, release)**: Download, verify and replace the
  binary at 'path' using a Release descriptor.
- **perform_upgrade_from_url(path, url)**: Same, from a direct URL.

Each collaborator signals failure by raising. The coordinator re-raises the
original exception unchanged.

Slot Release Policy
-------------------
- Path lookup fails: the slot is released.
- Upgrade fails: the slot is released, so a later attempt can be made.
- Upgrade succeeds: the slot stays HELD for the rest of the process. The
  binary on disk has been replaced and the process is expected to restart;
  any further upgrade attempt raises UpgradeInProgress.

This asymmetry is intentional.

Example:
    Wiring real collaborators into the process-wide coordinator:
        ```python
        import selfupgrade

        selfupgrade.configure(
            perform_upgrade=my_replace_from_release,
            perform_upgrade_from_url=my_replace_from_url,
        )
        selfupgrade.upgrade_to(release)
        ```

    Using an isolated coordinator:
        ```python
        from selfupgrade.upgrade import UpgradeCoordinator, UpgradeSlot

        coordinator = UpgradeCoordinator(
            my_replace_from_release,
            my_replace_from_url,
            slot=UpgradeSlot(),
        )
        coordinator.upgrade_to_url("https://example.com/app-1.4.0.tar.gz")
        ```
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Callable

from selfupgrade.exceptions import UpgradeInProgress, UpgradeUnsupported
from selfupgrade.logging import Logger, get_global_logger
from selfupgrade.releases import Release

from .slot import DEFAULT_SLOT, UpgradeSlot

ExecutablePath = Callable[[], Path]
PerformUpgrade = Callable[[Path, Release], None]
PerformUpgradeFromURL = Callable[[Path, str], None]


def current_executable() -> Path:
    """Return the path of the running binary.

    For frozen applications (PyInstaller, cx_Freeze, ...) this is
    sys.executable. Otherwise it is the script the process was started with.

    Raises:
        UpgradeUnsupported: If the running binary cannot be located.

    """
    if getattr(sys, "frozen", False):
        path = Path(sys.executable)
    elif sys.argv and sys.argv[0]:
        path = Path(sys.argv[0]).resolve()
    else:
        raise UpgradeUnsupported("Cannot determine the running executable")

    if not path.is_file():
        raise UpgradeUnsupported(f"Running executable not found: {path}")
    return path


def _unsupported_upgrade(path: Path, release: Release) -> None:
    raise UpgradeUnsupported()


def _unsupported_upgrade_from_url(path: Path, url: str) -> None:
    raise UpgradeUnsupported()


class UpgradeCoordinator:
    """Gate upgrade attempts behind a single non-blocking slot."""

    def __init__(
        self,
        perform_upgrade: PerformUpgrade,
        perform_upgrade_from_url: PerformUpgradeFromURL,
        executable_path: ExecutablePath = current_executable,
        slot: UpgradeSlot | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a coordinator.

        Args:
            perform_upgrade: Replaces the binary using a Release.
            perform_upgrade_from_url: Replaces the binary from a URL.
            executable_path: Returns the path of the running binary.
            slot: Exclusion slot. A fresh private slot is created if None.
            logger: Logger to use. Defaults to the global logger at call time.

        """
        self.perform_upgrade = perform_upgrade
        self.perform_upgrade_from_url = perform_upgrade_from_url
        self.executable_path = executable_path
        self.slot = slot if slot is not None else UpgradeSlot()
        self._logger = logger

    @property
    def logger(self) -> Logger:
        return self._logger if self._logger is not None else get_global_logger()

    def upgrade_to(self, release: Release) -> None:
        """Upgrade the running binary to 'release'.

        Raises:
            UpgradeInProgress: If another upgrade holds the slot, or an
                earlier upgrade in this process succeeded.
            Exception: Whatever the executable_path or perform_upgrade
                collaborators raise, unchanged.

        """
        self.logger.verbose("UPGRADE", f"Upgrading to release {release.tag}")
        self._run(lambda path: self.perform_upgrade(path, release))

    def upgrade_to_url(self, url: str) -> None:
        """Upgrade the running binary from a direct download URL.

        Raises:
            UpgradeInProgress: If another upgrade holds the slot, or an
                earlier upgrade in this process succeeded.
            Exception: Whatever the executable_path or
                perform_upgrade_from_url collaborators raise, unchanged.

        """
        self.logger.verbose("UPGRADE", f"Upgrading from URL {url}")
        self._run(lambda path: self.perform_upgrade_from_url(path, url))

    def _run(self, action: Callable[[Path], None]) -> None:
        if not self.slot.try_acquire():
            self.logger.verbose("UPGRADE", "Upgrade already in progress")
            raise UpgradeInProgress()

        try:
            path = self.executable_path()
            self.logger.debug("UPGRADE", f"Running executable: {path}")
            action(path)
        except Exception:
            self.slot.release()
            self.logger.verbose("UPGRADE", "Upgrade failed, slot released")
            raise

        # Slot stays held until the process restarts
        self.logger.verbose("UPGRADE", "Upgrade complete, restart required")


_default_coordinator = UpgradeCoordinator(
    _unsupported_upgrade,
    _unsupported_upgrade_from_url,
    slot=DEFAULT_SLOT,
)


def get_default_coordinator() -> UpgradeCoordinator:
    """Return the process-wide coordinator used by upgrade_to/upgrade_to_url."""
    return _default_coordinator


def configure(
    *,
    perform_upgrade: PerformUpgrade | None = None,
    perform_upgrade_from_url: PerformUpgradeFromURL | None = None,
    executable_path: ExecutablePath | None = None,
) -> UpgradeCoordinator:
    """Install collaborators on the process-wide coordinator.

    Arguments left as None keep their current value. Until configured, the
    default collaborators raise UpgradeUnsupported. The shared slot is kept,
    so configuring never resets an upgrade that is already in progress.
    """
    coordinator = _default_coordinator
    if perform_upgrade is not None:
        coordinator.perform_upgrade = perform_upgrade
    if perform_upgrade_from_url is not None:
        coordinator.perform_upgrade_from_url = perform_upgrade_from_url
    if executable_path is not None:
        coordinator.executable_path = executable_path
    return coordinator


def upgrade_to(release: Release) -> None:
    """Upgrade the running binary to 'release' via the default coordinator."""
    _default_coordinator.upgrade_to(release)


def upgrade_to_url(url: str) -> None:
    """Upgrade the running binary from 'url' via the default coordinator."""
    _default_coordinator.upgrade_to_url(url)

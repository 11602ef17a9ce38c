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

"""Release and asset descriptors for selfupgrade.

Releases are fetched by the host application (typically from the GitHub
releases API) and handed to this module as already-decoded JSON. Only the
fields below are read; everything else in the payload is ignored.

Release JSON shape:
    ```json
    {
        "tag_name": "v1.4.0",
        "prerelease": false,
        "assets": [
            {"url": "https://.../app-linux-amd64.tar.gz",
             "name": "app-linux-amd64.tar.gz"}
        ]
    }
    ```

Example:
    Pick the newest stable release and the asset for this platform:
        ```python
        from selfupgrade.releases import Release, select_latest_release

        releases = [Release.from_dict(item) for item in payload]
        release = select_latest_release(releases, "1.3.2")
        asset = release.find_asset(r"linux-amd64\\.tar\\.gz$")
        ```
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import re
from typing import Any

from selfupgrade.exceptions import (
    ConfigError,
    UpgradeUnsupported,
    VersionUnknown,
    VersionUpToDate,
)
from selfupgrade.logging import get_global_logger
from selfupgrade.versioning import compare_versions


@dataclass(frozen=True)
class Asset:
    """A downloadable file attached to a release.

    Attributes:
        url: Where the asset can be downloaded from.
        name: File name of the asset (e.g., "app-linux-amd64.tar.gz").

    """

    url: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Asset:
        try:
            url, name = data["url"], data["name"]
        except (KeyError, TypeError) as err:
            raise ConfigError(
                f"Release asset is missing url or name: {data!r}"
            ) from err
        if not isinstance(url, str) or not isinstance(name, str):
            raise ConfigError(f"Release asset url and name must be strings: {data!r}")
        return cls(url=url, name=name)


@dataclass(frozen=True)
class Release:
    """A published release of the application.

    Attributes:
        tag: Version tag, possibly prefixed with "v" (e.g., "v1.4.0").
        prerelease: Prerelease flag set by the release source. Independent
            of whether the tag itself carries a prerelease suffix.
        assets: Files attached to the release, in source order.

    """

    tag: str
    prerelease: bool = False
    assets: tuple[Asset, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Release:
        """Build a Release from a release-source JSON object.

        Raises:
            VersionUnknown: If tag_name is missing or not a non-empty string.
            ConfigError: If prerelease is not a boolean, or an asset entry
                lacks a string url or name.

        """
        tag = data.get("tag_name")
        if not tag:
            raise VersionUnknown("Release has no tag_name field")
        if not isinstance(tag, str):
            raise VersionUnknown(f"Release tag_name must be a string, got {tag!r}")

        prerelease = data.get("prerelease", False)
        if not isinstance(prerelease, bool):
            raise ConfigError(
                f"Release {tag} prerelease must be true or false, got {prerelease!r}"
            )

        assets = tuple(Asset.from_dict(a) for a in data.get("assets") or ())
        return cls(
            tag=tag,
            prerelease=prerelease,
            assets=assets,
        )

    def find_asset(self, pattern: str) -> Asset:
        """Return the first asset whose name matches 'pattern'.

        Args:
            pattern: Regular expression searched in each asset name. Use
                (?i) for case-insensitive matching.

        Raises:
            ConfigError: If the pattern is not a valid regular expression.
            UpgradeUnsupported: If no asset matches, i.e. the release has
                no build for this platform.

        """
        try:
            regex = re.compile(pattern)
        except re.error as err:
            raise ConfigError(f"Invalid asset pattern {pattern!r}: {err}") from err

        for asset in self.assets:
            if regex.search(asset.name):
                return asset

        names = [a.name for a in self.assets]
        raise UpgradeUnsupported(
            f"No asset in release {self.tag} matches {pattern!r}. "
            f"Available assets: {names}"
        )


def select_latest_release(
    releases: Iterable[Release],
    current: str,
    *,
    allow_prerelease: bool = False,
) -> Release:
    """Pick the newest release that should replace 'current'.

    Releases flagged as prerelease by the source are skipped unless
    allow_prerelease is True. Among the rest, the newest tag wins; on equal
    tags the first one seen is kept.

    Args:
        releases: Candidate releases, in any order.
        current: Version of the running binary.
        allow_prerelease: Consider releases flagged as prerelease.

    Returns:
        The release to upgrade to.

    Raises:
        VersionUnknown: If there is no eligible release at all.
        VersionUpToDate: If the newest eligible release is not newer
            than 'current'.

    """
    logger = get_global_logger()

    latest: Release | None = None
    for release in releases:
        if release.prerelease and not allow_prerelease:
            logger.debug("RELEASE", f"Skipping pre-release {release.tag}")
            continue
        if latest is None or compare_versions(release.tag, latest.tag) > 0:
            latest = release

    if latest is None:
        raise VersionUnknown("No eligible release found")

    logger.verbose("RELEASE", f"Latest release: {latest.tag} (current: {current})")
    if compare_versions(latest.tag, current) <= 0:
        raise VersionUpToDate(
            f"Current version {current} is up to date (latest: {latest.tag})"
        )
    return latest

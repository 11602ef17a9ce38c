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

"""Upgrade configuration for selfupgrade.

Public API:

- UpgradeConfig: Read-only upgrade preferences
- load_upgrade_config: Read the ``upgrade:`` section of a YAML file

Example:
    Basic usage:

        from pathlib import Path
        from selfupgrade.config import load_upgrade_config

        config = load_upgrade_config(Path("app.yaml"))
        release = select_latest_release(
            releases, __version__, allow_prerelease=config.allow_prerelease
        )

"""

from .loader import UpgradeConfig, load_upgrade_config

__all__ = ["UpgradeConfig", "load_upgrade_config"]

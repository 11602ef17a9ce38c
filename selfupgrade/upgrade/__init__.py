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

Public API:

- UpgradeSlot: Non-blocking single-slot exclusion
- UpgradeCoordinator: Runs upgrade collaborators under a slot
- upgrade_to / upgrade_to_url: Upgrade via the process-wide coordinator
- configure: Install collaborators on the process-wide coordinator
- current_executable: Locate the running binary
"""

from .coordinator import (
    UpgradeCoordinator,
    configure,
    current_executable,
    get_default_coordinator,
    upgrade_to,
    upgrade_to_url,
)
from .slot import DEFAULT_SLOT, UpgradeSlot

__all__ = [
    "DEFAULT_SLOT",
    "UpgradeCoordinator",
    "UpgradeSlot",
    "configure",
    "current_executable",
    "get_default_coordinator",
    "upgrade_to",
    "upgrade_to_url",
]

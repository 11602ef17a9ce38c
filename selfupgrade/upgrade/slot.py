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

"""Single-slot exclusion guarding upgrade attempts.

An UpgradeSlot is either free or held. try_acquire() never blocks: it takes
the slot if it is free and reports failure otherwise. There is no wait
queue and no fairness; the first caller to win the race gets the slot.

Coordinators are given a slot explicitly, so tests can build isolated
slots. DEFAULT_SLOT is the one shared by the module-level upgrade API.
"""

from __future__ import annotations

import threading


class UpgradeSlot:
    """Non-blocking, non-queueing mutual exclusion for upgrades."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def try_acquire(self) -> bool:
        """Take the slot if it is free. Returns False immediately if held."""
        return self._lock.acquire(blocking=False)

    def release(self) -> None:
        """Return the slot to the free state.

        Raises:
            RuntimeError: If the slot is not held.

        """
        self._lock.release()

    @property
    def held(self) -> bool:
        return self._lock.locked()

    def __repr__(self) -> str:
        state = "held" if self.held else "free"
        return f"<UpgradeSlot {state}>"


DEFAULT_SLOT = UpgradeSlot()

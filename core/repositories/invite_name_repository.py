"""In-memory mapping of invite codes to client names submitted through ingress."""

from __future__ import annotations

import logging
import threading
from typing import Optional


class InviteNameRegistry:
    """Process-wide invite code -> display name map.

    Written by the ingress server and read by join handlers; each put/get is
    atomic under a lock. Entries are last-write-wins and never expire.
    """

    def __init__(self) -> None:
        self._names: dict[str, str] = {}
        self._lock = threading.Lock()
        self.logger = logging.getLogger(self.__class__.__name__)

    def put(self, code: str, name: str) -> None:
        """Store (or overwrite) the name submitted for an invite code."""
        with self._lock:
            previous = self._names.get(code)
            self._names[code] = name
        if previous is not None and previous != name:
            self.logger.info(f"Remapped {code} from {previous} to {name}")
        else:
            self.logger.info(f"Mapped {code} -> {name}")

    def get(self, code: str) -> Optional[str]:
        with self._lock:
            return self._names.get(code)

    def clear(self) -> None:
        with self._lock:
            self._names.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._names

from __future__ import annotations

from typing import Any, Optional, Protocol


class McidRepository(Protocol):
    def fetch(self, *, from_date: str, to_date: str) -> Any:
        """Pull MCID punches for the range and store them on the backend."""

        raise NotImplementedError

    def process(self, *, from_date: str, to_date: str, empcode: Optional[str] = None) -> Any:
        raise NotImplementedError

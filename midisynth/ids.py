"""Allocation of unique positive integer identifiers."""

from __future__ import annotations

import heapq

__all__ = ["INVALID_ID", "IDUnavailableError", "IDManager"]

INVALID_ID = 0


class IDUnavailableError(LookupError):
    """Raised when an id cannot be handed out or released."""


class IDManager:
    """Hands out ids from 1 to max_id, smallest available first."""

    def __init__(self, max_id: int) -> None:
        self._available: set[int] = set(range(1, max_id + 1))
        self._heap: list[int] = sorted(self._available)

    def get_id(self, wanted_id: int | None = None) -> int:
        """Take the smallest free id, or the given one if it is free."""
        if wanted_id is not None:
            if wanted_id not in self._available:
                raise IDUnavailableError(f"Requested id '{wanted_id}' is not available.")
            self._available.discard(wanted_id)
            return wanted_id

        while self._heap:
            candidate = heapq.heappop(self._heap)
            if candidate in self._available:
                self._available.discard(candidate)
                return candidate
        raise IDUnavailableError("No more id available.")

    def release_id(self, id_: int) -> None:
        """Give an id back so that it can be handed out again."""
        if id_ in self._available:
            raise IDUnavailableError(f"Cannot release id {id_} which was not used.")
        self._available.add(id_)
        heapq.heappush(self._heap, id_)

    def is_available(self, id_: int) -> bool:
        """True if the id is free to be handed out."""
        return id_ in self._available
import time
from collections.abc import Callable
from typing import Any

from domain.models.rates import CacheEntry


class MemoryCache:
	"""In-process key/value store with per-entry TTL and lazy expiry."""

	def __init__(self, clock: Callable[[], float] = time.time):
		self._clock = clock
		self._entries: dict[str, CacheEntry] = {}

	def get(self, key: str, default: Any = None) -> Any:
		"""Return the live value for key, or ``default`` when missing or expired."""
		entry = self._entries.get(key)
		if entry is None:
			return default

		if entry.expiry <= self._clock():
			del self._entries[key]
			return default

		return entry.value

	def set(self, key: str, value: Any, ttl_seconds: float) -> None:
		self._entries[key] = CacheEntry(value=value, expiry=self._clock() + ttl_seconds)

	def clear(self) -> None:
		self._entries.clear()

	def __len__(self) -> int:
		return len(self._entries)

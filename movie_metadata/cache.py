"""
Metadata cache.
Keeps recently resolved OMDb records in memory so repeated searches don't refetch them.
"""

import time
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from loguru import logger

from .models import MetadataMovie
from .providers import MetadataProvider


class CachedMetadataProvider:
	"""
	LRU cache with a max age in front of any metadata provider.
	Only found records are cached; misses and errors always go to the provider.
	"""

	def __init__(
		self,
		provider: MetadataProvider,
		max_size: int = 25,
		max_age: float = 432000,  # seconds (5 days)
		clock: Callable[[], float] = time.monotonic,
	):
		self.provider = provider
		self.max_size = max_size
		self.max_age = max_age
		self._clock = clock
		self._entries: 'OrderedDict[str, Tuple[MetadataMovie, float]]' = OrderedDict()

	async def get_movie_by_id(self, imdb_id: str) -> Optional[MetadataMovie]:
		cached = self._get(imdb_id)
		if cached is not None:
			logger.debug(f"[Cache] Hit for {imdb_id}")
			return cached
		logger.debug(f"[Cache] Miss for {imdb_id}")
		movie = await self.provider.get_movie_by_id(imdb_id)
		if movie is not None:
			self._put(imdb_id, movie)
		return movie

	def __len__(self) -> int:
		return len(self._entries)

	def clear(self) -> None:
		self._entries.clear()

	def _get(self, key: str) -> Optional[MetadataMovie]:
		entry = self._entries.get(key)
		if entry is None:
			return None
		movie, stored_at = entry
		if self._clock() - stored_at > self.max_age:
			del self._entries[key]  # expired
			return None
		self._entries.move_to_end(key)  # most recently used
		return movie

	def _put(self, key: str, movie: MetadataMovie) -> None:
		if self.max_size <= 0:
			return
		self._entries[key] = (movie, self._clock())
		self._entries.move_to_end(key)
		while len(self._entries) > self.max_size:
			evicted, _ = self._entries.popitem(last=False)  # least recently used
			logger.debug(f"[Cache] Evicted {evicted}")

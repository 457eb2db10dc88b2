"""
Provider interfaces consumed by the search engine.
Any object with these async methods can be passed in; the concrete ones live in
catalog_provider.py, omdb_client.py and cache.py.
"""

from typing import AsyncIterator, Optional, Protocol

from .models import CatalogMovie, MetadataMovie


class ProviderError(Exception):
	"""A provider failed to fetch or parse a record (transport error, bad payload)."""


class CatalogProvider(Protocol):
	async def get_movie_by_id(self, movie_id: str) -> Optional[CatalogMovie]:
		"""Look up by catalog id or IMDb id; None when unknown."""
		...

	def get_movies(self) -> AsyncIterator[CatalogMovie]:
		"""Lazily yield every catalog movie; calling again starts over."""
		...


class MetadataProvider(Protocol):
	async def get_movie_by_id(self, imdb_id: str) -> Optional[MetadataMovie]:
		"""Resolve an IMDb id; None when the database has no such movie."""
		...

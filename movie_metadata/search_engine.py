"""
Search engine module.
Fetches catalog and metadata records, merges them, and filters the merged collection by fields.
"""

from typing import List, Mapping, Optional  # type annotations for clarity

# Import project modules for data structures and components
from .models import Movie, SearchResponse  # core data classes
from .merge import merge_movie  # catalog + metadata -> Movie
from .matcher import is_search_match  # flattened field filter
from .providers import CatalogProvider, MetadataProvider  # injected collaborators

# Import loguru for console logging
from loguru import logger  # simple structured logger


class SearchEngine:
	"""
	Final composition over the catalog and metadata providers.
	Implements lookup by id and search by fields, both returning merged movies.
	"""
	def __init__(self, catalog: CatalogProvider, metadata: MetadataProvider):
		self.catalog = catalog  # Joyn-like catalog provider
		self.metadata = metadata  # OMDb-like metadata provider (usually cached)

	async def get_movie_by_id(self, movie_id: str) -> Optional[Movie]:
		"""Find a movie by catalog id or IMDb id; None if either provider lacks it."""
		catalog_movie = await self.catalog.get_movie_by_id(movie_id)  # catalog first
		if not catalog_movie:
			logger.debug(f"[Engine] No catalog movie for id={movie_id}")
			return None
		metadata_movie = await self.metadata.get_movie_by_id(catalog_movie.imdb_id)  # join on imdb id
		if not metadata_movie:
			logger.debug(f"[Engine] No metadata for id={movie_id} imdb_id={catalog_movie.imdb_id}")
			return None
		return merge_movie(catalog_movie, metadata_movie)

	async def get_movies_by_search(self, search: Mapping[str, str]) -> SearchResponse:
		"""
		Search merged movies by fields.
		- no search terms: every movie, matches is None
		- some movies matched: only those, matches is their count
		- nothing matched: every movie again, matches is 0
		"""
		movies = await self._get_movies()  # full merged collection
		if not search:
			logger.info(f"[Engine] No filter given, returning all {len(movies)} movies")
			return SearchResponse(movies=movies)

		logger.debug(f"[Engine] Filtering {len(movies)} movies by {dict(search)}")
		matched = [movie for movie in movies if is_search_match(movie, search)]
		if matched:
			logger.info(f"[Engine] Filter matched {len(matched)} of {len(movies)} movies")
			return SearchResponse(movies=matched, matches=len(matched))
		logger.info(f"[Engine] Filter matched nothing, returning all {len(movies)} movies")
		return SearchResponse(movies=movies, matches=0)

	async def _get_movies(self) -> List[Movie]:
		"""Merge every catalog movie that has metadata, in catalog order."""
		movies: List[Movie] = []  # accumulator
		async for catalog_movie in self.catalog.get_movies():  # one record at a time
			metadata_movie = await self.metadata.get_movie_by_id(catalog_movie.imdb_id)
			if not metadata_movie:  # no metadata match
				logger.debug(f"[Engine] Skipping {catalog_movie.id}: no metadata for {catalog_movie.imdb_id}")
				continue  # skip
			movies.append(merge_movie(catalog_movie, metadata_movie))
		return movies

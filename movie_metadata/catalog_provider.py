"""
Catalog provider module.
Loads Joyn catalog movies from a directory of JSON files and serves them by id.
"""

# Standard libs for JSON parsing, async file access, typing, and paths
import asyncio  # run blocking file reads off the event loop
import json  # parse catalog files
from typing import AsyncIterator, Dict, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our models used across the project
from .models import CatalogMovie, CatalogRating  # structured catalog records

# Console logging
from loguru import logger  # console logger


class JsonCatalogProvider:
	"""
	Reads catalog movies from `<movies_dir>/*.json`.
	Each file holds one movie object or a list of them, using the catalog's camelCase keys.
	Files are read again on every call so edits on disk are picked up.
	"""

	def __init__(self, movies_dir: str):
		"""Remember the directory; fail early if it does not exist."""
		self.movies_dir = Path(movies_dir)  # normalize path

		# Validate the directory presence early to give clear error messages
		if not self.movies_dir.is_dir():
			raise FileNotFoundError(f"Movies directory not found: {self.movies_dir}")

	async def get_movie_by_id(self, movie_id: str) -> Optional[CatalogMovie]:
		"""Find a movie by its catalog id or its IMDb id."""
		async for movie in self.get_movies():  # scan lazily, stop at first hit
			if movie_id in (movie.id, movie.imdb_id):
				return movie
		logger.debug(f"[Catalog] No movie with id={movie_id}")  # miss
		return None

	async def get_movies(self) -> AsyncIterator[CatalogMovie]:
		"""Yield every catalog movie, file by file in name order."""
		for path in sorted(self.movies_dir.glob('*.json')):  # stable order
			for movie in await asyncio.to_thread(self._load_file, path):
				yield movie

	def _load_file(self, path: Path) -> List[CatalogMovie]:
		"""
		Parse one catalog file into CatalogMovie objects.
		Broken files and malformed entries are logged and skipped.
		"""
		try:
			data = json.loads(path.read_text(encoding='utf-8'))  # whole file
		except json.JSONDecodeError as e:
			logger.warning(f"[Catalog] Skipping invalid JSON in {path.name}: {e}")  # malformed file
			return []
		except OSError as e:
			logger.warning(f"[Catalog] Could not read {path.name}: {e}")  # unreadable file
			return []

		entries = data if isinstance(data, list) else [data]  # one movie or many
		movies = []  # accumulator
		for position, entry in enumerate(entries):
			try:
				movies.append(self._parse_movie_data(entry))  # convert dict -> CatalogMovie
			except (KeyError, TypeError, ValueError) as e:
				logger.warning(f"[Catalog] Skipping entry {position} in {path.name}: {e}")  # bad entry
		return movies

	def _parse_movie_data(self, data: Dict) -> CatalogMovie:
		"""
		Convert a raw catalog dictionary into a CatalogMovie.
		id, imdbId and duration are required; everything else has safe defaults.
		Anything that is not shaped like a catalog movie raises TypeError or ValueError.
		"""
		if not isinstance(data, dict):
			raise TypeError(f"expected an object, got {type(data).__name__}")
		rating = data.get('userrating') or {}  # histogram may be missing
		if not isinstance(rating, dict):
			raise TypeError(f"userrating must be an object, got {type(rating).__name__}")
		return CatalogMovie(
			id=self._required_id(data, 'id'),  # native catalog id
			imdb_id=self._required_id(data, 'imdbId'),  # canonical join key
			duration=int(data['duration']),  # minutes
			languages=[str(lang) for lang in data.get('languages') or []],  # ordered list
			original_language=data.get('originalLanguage') or '',
			production_year=int(data.get('productionYear') or 0),
			studios=[str(studio) for studio in data.get('studios') or []],
			userrating=CatalogRating(
				count_star1=int(rating.get('countStar1', 0)),
				count_star2=int(rating.get('countStar2', 0)),
				count_star3=int(rating.get('countStar3', 0)),
				count_star4=int(rating.get('countStar4', 0)),
				count_star5=int(rating.get('countStar5', 0)),
			),
			title=data.get('title'),  # optional, unused by the merge
		)

	def _required_id(self, data: Dict, key: str) -> str:
		"""Ids must be present and non-empty; null or "" would join as a bogus key."""
		value = data.get(key)
		if value is None or str(value).strip() == '':
			raise ValueError(f"missing {key}")
		return str(value)

"""
Shared fixtures: sample provider records and in-memory fake providers.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from movie_metadata.models import CatalogMovie, CatalogRating, MetadataMovie, MetadataRating


class FakeCatalog:
	"""In-memory catalog; records every call so tests can check ordering."""

	def __init__(self, movies: List[CatalogMovie]):
		self.movies = movies
		self.calls: List[str] = []

	async def get_movie_by_id(self, movie_id: str) -> Optional[CatalogMovie]:
		self.calls.append(f'catalog:{movie_id}')
		for movie in self.movies:
			if movie_id in (movie.id, movie.imdb_id):
				return movie
		return None

	async def get_movies(self):
		self.calls.append('catalog:all')
		for movie in self.movies:
			yield movie


class FakeMetadata:
	def __init__(self, movies: Dict[str, MetadataMovie]):
		self.movies = movies
		self.calls: List[str] = []

	async def get_movie_by_id(self, imdb_id: str) -> Optional[MetadataMovie]:
		self.calls.append(f'metadata:{imdb_id}')
		return self.movies.get(imdb_id)


def make_catalog_movie(movie_id: str, imdb_id: str, duration: int = 124, **kwargs) -> CatalogMovie:
	defaults = dict(
		languages=['de', 'en'],
		original_language='en',
		production_year=2005,
		studios=['Dimension Films'],
		userrating=CatalogRating(count_star1=1, count_star5=1),
		title='Catalog Title',
	)
	defaults.update(kwargs)
	return CatalogMovie(id=movie_id, imdb_id=imdb_id, duration=duration, **defaults)


def make_metadata_movie(imdb_id: str, title: str, director: str, **kwargs) -> MetadataMovie:
	defaults = dict(
		Year='2005',
		Rated='R',
		Released='01 Apr 2005',
		Runtime='124 min',
		Genre='Crime, Thriller',
		Writer='Frank Miller',
		Actors='Mickey Rourke, Clive Owen, Bruce Willis',
		Plot=f'Plot of {title}.',
		Language='English',
		Country='USA',
		Awards='N/A',
		Poster='https://example.com/poster.jpg',
		Ratings=[MetadataRating(Source='Internet Movie Database', Value='8.0/10')],
		Metascore='74',
		imdbRating='8.0',
		imdbVotes='700,000',
		Type='movie',
		DVD='16 Aug 2005',
		BoxOffice='$74,103,820',
		Production='Dimension Films',
		Website='N/A',
		Response='True',
	)
	defaults.update(kwargs)
	return MetadataMovie(Title=title, Director=director, imdbID=imdb_id, **defaults)


@pytest.fixture
def catalog_movies() -> List[CatalogMovie]:
	return [
		make_catalog_movie('a-1', 'tt0401792', duration=124),
		make_catalog_movie('a-2', 'tt0133093', duration=136, production_year=1999),
		make_catalog_movie('a-3', 'tt0000000', duration=90),  # no metadata
		make_catalog_movie('a-4', 'tt0458481', duration=102, production_year=2014),
	]


@pytest.fixture
def metadata_movies() -> Dict[str, MetadataMovie]:
	return {
		'tt0401792': make_metadata_movie('tt0401792', 'Sin City', 'Frank Miller, Quentin Tarantino, Robert Rodriguez'),
		'tt0133093': make_metadata_movie('tt0133093', 'The Matrix', 'Lana Wachowski, Lilly Wachowski', Year='1999'),
		'tt0458481': make_metadata_movie('tt0458481', 'Sin City: A Dame to Kill For', 'Frank Miller, Robert Rodriguez', Year='2014'),
	}


@pytest.fixture
def fake_catalog(catalog_movies) -> FakeCatalog:
	return FakeCatalog(catalog_movies)


@pytest.fixture
def fake_metadata(metadata_movies) -> FakeMetadata:
	return FakeMetadata(metadata_movies)

"""
Merge module.
Combines one catalog record and one metadata record into the served Movie.
"""

from typing import List

from .models import CatalogMovie, MetadataMovie, MetadataRating, Movie
from .rating import map_catalog_rating

# OMDb joins people with a comma and a space ("Frank Miller, Robert Rodriguez")
CREDITS_SEPARATOR = ', '


def split_credits(value: str) -> List[str]:
	"""Split an OMDb credits string into names; an empty string gives no names."""
	if not value:
		return []
	return value.split(CREDITS_SEPARATOR)


def merge_movie(catalog: CatalogMovie, metadata: MetadataMovie) -> Movie:
	"""
	Merge a catalog movie with its metadata record.
	- title/Title and description/Plot come from the metadata provider
	- Runtime is derived from the catalog duration, the metadata runtime is dropped
	- Director/Writer/Actors are split into lists of names
	- Ratings get one extra entry synthesized from the catalog histogram
	Neither input is modified; lists are copied into the result.
	"""
	ratings = [MetadataRating(Source=r.Source, Value=r.Value) for r in metadata.Ratings]
	ratings.append(map_catalog_rating(catalog.userrating))

	return Movie(
		# Catalog
		description=metadata.Plot,
		duration=catalog.duration,
		id=catalog.id,
		imdbId=catalog.imdb_id,
		languages=list(catalog.languages),
		originalLanguage=catalog.original_language,
		productionYear=catalog.production_year,
		studios=list(catalog.studios),
		title=metadata.Title,

		# Metadata
		Title=metadata.Title,
		Year=metadata.Year,
		Rated=metadata.Rated,
		Released=metadata.Released,
		Runtime=f'{catalog.duration} min',
		Genre=metadata.Genre,
		Director=split_credits(metadata.Director),
		Writer=split_credits(metadata.Writer),
		Actors=split_credits(metadata.Actors),
		Plot=metadata.Plot,
		Language=metadata.Language,
		Country=metadata.Country,
		Awards=metadata.Awards,
		Poster=metadata.Poster,
		Ratings=ratings,
		Metascore=metadata.Metascore,
		imdbRating=metadata.imdbRating,
		imdbVotes=metadata.imdbVotes,
		imdbID=metadata.imdbID,
		Type=metadata.Type,
		DVD=metadata.DVD,
		BoxOffice=metadata.BoxOffice,
		Production=metadata.Production,
		Website=metadata.Website,
		Response=metadata.Response,
	)

"""
Data models for the Movie Metadata Service.
Defines the records coming from both providers and the merged movie we serve.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field, fields  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict, List, Optional  # lists, optional values, raw payloads


@dataclass
class CatalogRating:
	"""Five-bucket histogram of catalog user ratings (how many users gave 1..5 stars)."""
	count_star1: int = 0
	count_star2: int = 0
	count_star3: int = 0
	count_star4: int = 0
	count_star5: int = 0


@dataclass
class CatalogMovie:
	"""
	A movie as the catalog (Joyn) knows it.
	The imdb_id is the canonical id used to join with the metadata provider.
	"""
	id: str  # native catalog id
	imdb_id: str  # canonical cross-provider id (e.g. tt0401792)
	duration: int  # length in minutes
	languages: List[str] = field(default_factory=list)  # audio languages, ordered
	original_language: str = ''  # language the movie was shot in
	production_year: int = 0  # year of production
	studios: List[str] = field(default_factory=list)  # production studios
	userrating: CatalogRating = field(default_factory=CatalogRating)  # star histogram
	title: Optional[str] = None  # catalog title, never used when merging


@dataclass
class MetadataRating:
	"""A single rating entry in OMDb shape, e.g. Source='Metacritic', Value='63/100'."""
	Source: str
	Value: str


@dataclass
class MetadataMovie:
	"""
	A movie as the public movie database (OMDb) returns it.
	Field names mirror the OMDb JSON keys so payloads map onto them directly.
	"""
	Title: str = ''
	Year: str = ''
	Rated: str = ''
	Released: str = ''
	Runtime: str = ''
	Genre: str = ''
	Director: str = ''  # comma-joined names
	Writer: str = ''  # comma-joined names
	Actors: str = ''  # comma-joined names
	Plot: str = ''
	Language: str = ''
	Country: str = ''
	Awards: str = ''
	Poster: str = ''
	Ratings: List[MetadataRating] = field(default_factory=list)
	Metascore: str = ''
	imdbRating: str = ''
	imdbVotes: str = ''
	imdbID: str = ''
	Type: str = ''
	DVD: str = ''
	BoxOffice: str = ''
	Production: str = ''
	Website: str = ''
	Response: str = ''

	@classmethod
	def from_payload(cls, data: Dict[str, Any]) -> 'MetadataMovie':
		"""
		Build a record from a raw OMDb payload.
		Unknown keys are ignored and missing keys keep their empty defaults.
		"""
		known = {f.name for f in fields(cls)}  # names we can accept
		values = {k: v for k, v in data.items() if k in known and k != 'Ratings'}  # plain fields
		ratings = [
			MetadataRating(Source=str(r.get('Source', '')), Value=str(r.get('Value', '')))
			for r in (data.get('Ratings') or [])
		]  # nested rating objects
		return cls(Ratings=ratings, **values)


@dataclass
class Movie:
	"""
	The merged movie served to callers.
	Field names are the public, searchable paths (e.g. ?director=... matches Director.0),
	so they keep the casing of the provider they come from.
	"""
	# Catalog part
	description: str
	duration: int
	id: str
	imdbId: str
	languages: List[str]
	originalLanguage: str
	productionYear: int
	studios: List[str]
	title: str

	# Metadata part
	Title: str
	Year: str
	Rated: str
	Released: str
	Runtime: str
	Genre: str
	Director: List[str]
	Writer: List[str]
	Actors: List[str]
	Plot: str
	Language: str
	Country: str
	Awards: str
	Poster: str
	Ratings: List[MetadataRating]
	Metascore: str
	imdbRating: str
	imdbVotes: str
	imdbID: str
	Type: str
	DVD: str
	BoxOffice: str
	Production: str
	Website: str
	Response: str


@dataclass
class SearchResponse:
	movies: List[Movie]  # matched movies, or the full collection
	matches: Optional[int] = None  # None when no filter was applied

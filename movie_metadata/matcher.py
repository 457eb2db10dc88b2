"""
Field filter matching.
Decides whether a merged movie satisfies a set of field=value filters.
"""

from typing import Mapping

from .flatten import Scalar, flatten
from .models import Movie


def is_match(field_path: str, search_term: str) -> bool:
	"""Field paths match a search term by case-insensitive prefix (director -> Director.0)."""
	return field_path.lower().startswith(search_term.lower())


def stringify(value: Scalar) -> str:
	"""Text form of a flattened leaf as it appears in the JSON we serve."""
	if value is None:
		return ''
	if isinstance(value, bool):
		return 'true' if value else 'false'
	if isinstance(value, float) and value.is_integer():
		return str(int(value))
	return str(value)


def is_equal(expected: str, value: Scalar) -> bool:
	"""Case-insensitive exact comparison between a filter value and a field value."""
	return stringify(value).lower() == expected.lower()


def is_search_match(movie: Movie, search: Mapping[str, str]) -> bool:
	"""
	True when every (term, value) pair in the filter is satisfied (logical AND).
	A term is satisfied if any flattened field starting with the term holds the value,
	so ?director=Frank Miller is satisfied by Director.0, Director.1 and so on.
	"""
	movie_fields = list(flatten(movie).items())
	for search_term, search_value in search.items():
		matched = False
		for field_path, field_value in movie_fields:
			if not is_match(field_path, search_term):
				continue
			if is_equal(search_value, field_value):
				matched = True
				break
		if not matched:
			return False  # remaining terms are not evaluated
	return True

"""
Rating module.
Turns the catalog's star histogram into an OMDb-style rating entry.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .models import CatalogRating, MetadataRating


RATING_SOURCE = 'Joyn'
RATING_SCALE = '5.0'
# Returned when nobody rated the movie; real averages are never below 1.0
EMPTY_RATING_VALUE = f'0.0/{RATING_SCALE}'


def average_rating(rating: CatalogRating) -> Optional[Decimal]:
	"""
	Weighted mean of the histogram (1..5 stars), or None if there are no votes.
	Computed with Decimal so .x5 averages round half up like a display would.
	Float formatting can round those down instead (1.15 is stored as 1.1499... and shows as 1.1).
	"""
	counts = [
		rating.count_star1,
		rating.count_star2,
		rating.count_star3,
		rating.count_star4,
		rating.count_star5,
	]
	total = sum(counts)
	if total == 0:
		return None
	weighted = sum(stars * count for stars, count in enumerate(counts, start=1))
	return Decimal(weighted) / Decimal(total)


def format_rating(value: Optional[Decimal]) -> str:
	"""Render an average as '<one decimal>/5.0'."""
	if value is None:
		return EMPTY_RATING_VALUE
	return f"{value.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}/{RATING_SCALE}"


def map_catalog_rating(rating: CatalogRating) -> MetadataRating:
	"""Map the catalog histogram onto the OMDb Ratings entry shape."""
	return MetadataRating(Source=RATING_SOURCE, Value=format_rating(average_rating(rating)))

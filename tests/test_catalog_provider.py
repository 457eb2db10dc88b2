"""
Tests for loading catalog movies from a directory of JSON files.
"""

import asyncio
import json

import pytest

from movie_metadata.catalog_provider import JsonCatalogProvider


SIN_CITY = {
	'id': 'a-1',
	'imdbId': 'tt0401792',
	'title': 'Sin City',
	'duration': 124,
	'languages': ['de', 'en'],
	'originalLanguage': 'en',
	'productionYear': 2005,
	'studios': ['Dimension Films'],
	'userrating': {'countStar1': 1, 'countStar2': 0, 'countStar3': 2, 'countStar4': 5, 'countStar5': 9},
}


def write(path, data):
	path.write_text(json.dumps(data), encoding='utf-8')


def collect(provider):
	async def run():
		return [m async for m in provider.get_movies()]
	return asyncio.run(run())


def test_missing_directory_raises(tmp_path):
	with pytest.raises(FileNotFoundError):
		JsonCatalogProvider(str(tmp_path / 'nope'))


def test_parses_catalog_fields(tmp_path):
	write(tmp_path / 'a-1.json', SIN_CITY)
	movies = collect(JsonCatalogProvider(str(tmp_path)))
	assert len(movies) == 1
	movie = movies[0]
	assert movie.id == 'a-1'
	assert movie.imdb_id == 'tt0401792'
	assert movie.duration == 124
	assert movie.languages == ['de', 'en']
	assert movie.original_language == 'en'
	assert movie.production_year == 2005
	assert movie.studios == ['Dimension Films']
	assert movie.userrating.count_star4 == 5
	assert movie.userrating.count_star5 == 9


def test_lists_files_in_name_order(tmp_path):
	write(tmp_path / 'b.json', dict(SIN_CITY, id='b', imdbId='tt2'))
	write(tmp_path / 'a.json', [dict(SIN_CITY, id='a1', imdbId='tt1'), dict(SIN_CITY, id='a2', imdbId='tt3')])
	provider = JsonCatalogProvider(str(tmp_path))
	assert [m.id for m in collect(provider)] == ['a1', 'a2', 'b']
	assert [m.id for m in collect(provider)] == ['a1', 'a2', 'b']  # restartable


def test_skips_broken_files_and_entries(tmp_path):
	(tmp_path / 'broken.json').write_text('{not json', encoding='utf-8')
	write(tmp_path / 'mixed.json', [{'id': 'no-imdb'}, SIN_CITY])
	(tmp_path / 'notes.txt').write_text('ignored', encoding='utf-8')
	assert [m.id for m in collect(JsonCatalogProvider(str(tmp_path)))] == ['a-1']


def test_missing_rating_defaults_to_zero(tmp_path):
	data = dict(SIN_CITY)
	del data['userrating']
	write(tmp_path / 'a.json', data)
	movie = collect(JsonCatalogProvider(str(tmp_path)))[0]
	assert movie.userrating.count_star1 == 0
	assert movie.userrating.count_star5 == 0


def test_get_movie_by_either_id(tmp_path):
	write(tmp_path / 'a-1.json', SIN_CITY)
	provider = JsonCatalogProvider(str(tmp_path))
	assert asyncio.run(provider.get_movie_by_id('a-1')).imdb_id == 'tt0401792'
	assert asyncio.run(provider.get_movie_by_id('tt0401792')).id == 'a-1'
	assert asyncio.run(provider.get_movie_by_id('unknown')) is None


def test_skips_entries_that_are_not_objects(tmp_path):
	write(tmp_path / 'a.json', [42, 'text', None, SIN_CITY])
	assert [m.id for m in collect(JsonCatalogProvider(str(tmp_path)))] == ['a-1']


def test_skips_entry_with_non_object_rating(tmp_path):
	write(tmp_path / 'a.json', [dict(SIN_CITY, id='bad', userrating=[1, 2]), SIN_CITY])
	provider = JsonCatalogProvider(str(tmp_path))
	assert [m.id for m in collect(provider)] == ['a-1']
	assert asyncio.run(provider.get_movie_by_id('a-1')).id == 'a-1'


def test_skips_entries_with_null_or_empty_ids(tmp_path):
	write(tmp_path / 'a.json', [
		dict(SIN_CITY, id=None),
		dict(SIN_CITY, id='b', imdbId=None),
		dict(SIN_CITY, id='c', imdbId=''),
		SIN_CITY,
	])
	provider = JsonCatalogProvider(str(tmp_path))
	assert [m.id for m in collect(provider)] == ['a-1']
	assert asyncio.run(provider.get_movie_by_id('None')) is None

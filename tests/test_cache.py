"""
Tests for the LRU metadata cache.
"""

import asyncio

from movie_metadata.cache import CachedMetadataProvider

from conftest import FakeMetadata, make_metadata_movie


class Clock:
	def __init__(self):
		self.now = 0.0

	def __call__(self):
		return self.now


def provider_with(*imdb_ids):
	return FakeMetadata({i: make_metadata_movie(i, f'Movie {i}', 'Someone') for i in imdb_ids})


def test_hits_are_served_from_cache():
	inner = provider_with('tt1')
	cache = CachedMetadataProvider(inner)
	first = asyncio.run(cache.get_movie_by_id('tt1'))
	second = asyncio.run(cache.get_movie_by_id('tt1'))
	assert first is second
	assert inner.calls == ['metadata:tt1']


def test_misses_are_not_cached():
	inner = provider_with()
	cache = CachedMetadataProvider(inner)
	assert asyncio.run(cache.get_movie_by_id('tt404')) is None
	assert asyncio.run(cache.get_movie_by_id('tt404')) is None
	assert inner.calls == ['metadata:tt404', 'metadata:tt404']
	assert len(cache) == 0


def test_entries_expire_after_max_age():
	inner = provider_with('tt1')
	clock = Clock()
	cache = CachedMetadataProvider(inner, max_age=10, clock=clock)
	asyncio.run(cache.get_movie_by_id('tt1'))
	clock.now = 10.0
	asyncio.run(cache.get_movie_by_id('tt1'))
	assert inner.calls == ['metadata:tt1']
	clock.now = 10.5
	asyncio.run(cache.get_movie_by_id('tt1'))
	assert inner.calls == ['metadata:tt1', 'metadata:tt1']


def test_least_recently_used_is_evicted():
	inner = provider_with('tt1', 'tt2', 'tt3')
	cache = CachedMetadataProvider(inner, max_size=2)
	for imdb_id in ['tt1', 'tt2', 'tt1', 'tt3']:  # tt2 is now the oldest
		asyncio.run(cache.get_movie_by_id(imdb_id))
	assert len(cache) == 2
	inner.calls.clear()
	asyncio.run(cache.get_movie_by_id('tt1'))
	asyncio.run(cache.get_movie_by_id('tt2'))
	assert inner.calls == ['metadata:tt2']


def test_clear():
	inner = provider_with('tt1')
	cache = CachedMetadataProvider(inner)
	asyncio.run(cache.get_movie_by_id('tt1'))
	cache.clear()
	asyncio.run(cache.get_movie_by_id('tt1'))
	assert inner.calls == ['metadata:tt1', 'metadata:tt1']

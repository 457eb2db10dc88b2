"""
OMDb client.
Resolves an IMDb id to the OMDb record for that movie.
"""

import asyncio
from typing import Any, Dict, Optional

import requests  # HTTP client
from loguru import logger

from .models import MetadataMovie
from .providers import ProviderError

DEFAULT_BASE_URL = 'http://www.omdbapi.com'


class OmdbProvider:
	"""
	Thin async wrapper around the OMDb HTTP API.
	Requests are blocking, so each one runs in a worker thread.
	"""

	def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, timeout: float = 8.0):
		self.api_key = api_key
		self.base_url = base_url.rstrip('/') + '/'
		self.timeout = timeout

	async def get_movie_by_id(self, imdb_id: str) -> Optional[MetadataMovie]:
		"""Return the OMDb record, or None when OMDb answers Response=False."""
		data = await asyncio.to_thread(self._fetch, imdb_id)
		if data.get('Response') != 'True':
			logger.debug(f"[OMDb] No movie for {imdb_id}: {data.get('Error', 'unknown error')}")
			return None
		try:
			return MetadataMovie.from_payload(data)
		except (AttributeError, TypeError) as exc:  # e.g. Ratings entries that are not objects
			raise ProviderError(f"OMDb returned a malformed record for {imdb_id}: {exc}") from exc

	def _fetch(self, imdb_id: str) -> Dict[str, Any]:
		params = {'apikey': self.api_key, 'i': imdb_id, 'plot': 'full'}
		logger.debug(f"[OMDb] GET {self.base_url} i={imdb_id}")
		try:
			resp = requests.get(self.base_url, params=params, timeout=self.timeout)
			resp.raise_for_status()
			data = resp.json()
		except requests.RequestException as exc:  # includes JSON decode errors
			raise ProviderError(f"OMDb request for {imdb_id} failed: {exc}") from exc
		except ValueError as exc:
			raise ProviderError(f"OMDb returned invalid JSON for {imdb_id}") from exc
		if not isinstance(data, dict):
			raise ProviderError(f"OMDb returned an unexpected payload for {imdb_id}")
		return data

"""
Wires the concrete providers into a SearchEngine from settings.
"""

from loguru import logger

from .cache import CachedMetadataProvider
from .catalog_provider import JsonCatalogProvider
from .omdb_client import OmdbProvider
from .search_engine import SearchEngine
from .settings import Settings


def build_engine(settings: Settings) -> SearchEngine:
	"""Catalog from MOVIES_DIR, OMDb behind the LRU cache."""
	catalog = JsonCatalogProvider(settings.movies_dir)
	omdb = OmdbProvider(
		api_key=settings.omdb_access_token,
		base_url=settings.omdb_base_url,
		timeout=settings.omdb_timeout,
	)
	metadata = CachedMetadataProvider(omdb, max_size=settings.lru_size, max_age=settings.lru_max_age)
	if not settings.omdb_access_token:
		logger.warning("[Engine] OMDB_ACCESS_TOKEN is empty, OMDb will reject requests")
	logger.info(
		f"[Engine] Catalog at '{settings.movies_dir}', OMDb at {settings.omdb_base_url} "
		f"(cache size={settings.lru_size}, max age={settings.lru_max_age:.0f}s)"
	)
	return SearchEngine(catalog, metadata)

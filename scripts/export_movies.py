"""
Export the merged movie collection.

This script:
1) Reads settings from the environment (.env supported)
2) Wires the catalog directory and the cached OMDb client
3) Merges every catalog movie that has OMDb metadata
4) Writes one merged movie per line to data/movies.jsonl

Usage:
    python -m scripts.export_movies
"""

import asyncio  # drive the async engine
import json  # JSON Lines output
import time  # measure step timings
from dataclasses import asdict  # dataclass -> dict
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from movie_metadata.factory import build_engine  # provider wiring
from movie_metadata.logging_config import configure_logging  # loguru sink setup
from movie_metadata.settings import Settings  # environment configuration


async def export(output_path: Path) -> int:
	"""Merge the whole catalog and write it out; returns how many movies were written."""
	settings = Settings.from_env()  # environment + .env
	configure_logging(settings.log_level)  # same level as the API

	logger.info("[1/2] Merging catalog with OMDb metadata...")
	t0 = time.time()  # start timer
	engine = build_engine(settings)  # engine with cached OMDb
	result = await engine.get_movies_by_search({})  # no filter: whole collection
	logger.info(f"[OK] Merged {len(result.movies)} movies in {time.time() - t0:.2f}s")

	logger.info(f"[2/2] Writing {output_path}...")
	output_path.parent.mkdir(parents=True, exist_ok=True)  # ensure exists
	with open(output_path, 'w', encoding='utf-8') as f:
		for movie in result.movies:
			f.write(json.dumps(asdict(movie), ensure_ascii=False) + '\n')  # one movie per line
	logger.info("[OK] Saved.")
	return len(result.movies)


def main():
	root = Path(__file__).resolve().parents[1]  # project root
	asyncio.run(export(root / 'data' / 'movies.jsonl'))


if __name__ == '__main__':
	main()  # invoke exporter

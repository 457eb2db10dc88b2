"""
Service configuration read from the environment (and an optional .env file).
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent


@dataclass
class Settings:
	host: str = '0.0.0.0'
	port: int = 8080
	omdb_base_url: str = 'http://www.omdbapi.com'
	omdb_access_token: str = ''
	omdb_timeout: float = 8.0
	log_level: str = 'INFO'
	lru_size: int = 25
	lru_max_age: float = 432000  # seconds
	movies_dir: str = 'movies'

	@classmethod
	def from_env(cls, env_file: Path = BASE_DIR / '.env') -> 'Settings':
		"""Load .env (without overriding real environment variables) and read settings."""
		load_dotenv(env_file)
		return cls(
			host=os.getenv('HOST', cls.host),
			port=int(os.getenv('PORT', cls.port)),
			omdb_base_url=os.getenv('OMDB_BASE_URL', cls.omdb_base_url),
			omdb_access_token=os.getenv('OMDB_ACCESS_TOKEN', cls.omdb_access_token),
			omdb_timeout=float(os.getenv('OMDB_TIMEOUT', cls.omdb_timeout)),
			log_level=os.getenv('LOG_LEVEL', cls.log_level).upper(),
			lru_size=int(os.getenv('LRU_SIZE', cls.lru_size)),
			lru_max_age=float(os.getenv('LRU_MAX_AGE', cls.lru_max_age)),
			movies_dir=os.getenv('MOVIES_DIR', cls.movies_dir),
		)

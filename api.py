"""
FastAPI server exposing the movie metadata API.
Endpoints:
- GET /health: basic health check
- GET /api/movies/{id}: merged movie by catalog id or IMDb id (404 if unknown)
- GET /api/movies?director=...&year=...: field search over all merged movies

Startup reads settings from the environment (.env supported), configures logging
and wires the catalog directory and the cached OMDb client into the engine.

Run: uvicorn api:app --reload
"""

# Import standard libraries for timing and response conversion
import time  # measure startup and request latencies
from contextlib import asynccontextmanager  # lifespan hook
from dataclasses import asdict  # dataclass -> dict for response models
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Request  # FastAPI primitives
from fastapi.responses import JSONResponse  # custom error payloads
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration and search
from movie_metadata.factory import build_engine  # wires providers into the engine
from movie_metadata.logging_config import configure_logging  # loguru sink setup
from movie_metadata.models import Movie  # merged movie dataclass
from movie_metadata.providers import ProviderError  # upstream failures
from movie_metadata.search_engine import SearchEngine  # core search engine
from movie_metadata.settings import Settings  # environment configuration

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger


# Globals that hold the search engine instance and measured startup time
ENGINE: Optional[SearchEngine] = None  # will point to the initialized engine
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model for one entry of the Ratings list
class RatingOut(BaseModel):
	Source: str  # e.g. "Internet Movie Database" or "Joyn"
	Value: str  # e.g. "8.0/10" or "4.2/5.0"


# Pydantic model that describes the shape of a merged movie in responses
class MovieOut(BaseModel):
	description: str
	duration: int
	id: str
	imdbId: str
	languages: List[str]
	originalLanguage: str
	productionYear: int
	studios: List[str]
	title: str
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
	Ratings: List[RatingOut]
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


# Pydantic model for the search response; matches is left out when no filter was given
class MoviesResponse(BaseModel):
	movies: List[MovieOut]  # matched movies or the whole collection
	matches: Optional[int] = None  # number of matches for a filtered search


def to_movie_out(movie: Movie) -> MovieOut:
	"""Convert the engine's dataclass into the response model."""
	return MovieOut(**asdict(movie))


# Startup hook that initializes the search engine once
@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Read settings, set up logging and build the search engine."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	settings = Settings.from_env()  # environment + .env
	configure_logging(settings.log_level)  # loguru level from LOG_LEVEL
	logger.info("[API] Startup: wiring catalog and OMDb providers...")  # log intent

	ENGINE = build_engine(settings)  # create engine

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s.")  # summary log
	yield


# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Metadata API", version="1.0.0", lifespan=lifespan)  # web app


# Upstream provider failures abort the request with 502
@app.exception_handler(ProviderError)
async def provider_error_handler(request: Request, exc: ProviderError):
	logger.error(f"[API] Provider failure on {request.url.path}: {exc}")
	return JSONResponse(status_code=502, content={"detail": str(exc)})


def get_engine() -> SearchEngine:
	"""Return the engine or answer 503 while it is not initialized."""
	if ENGINE is None:  # engine must be ready to serve
		logger.warning("[API] Request received but engine not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Search engine not initialized")
	return ENGINE


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


# Lookup by catalog id or IMDb id
@app.get("/api/movies/{movie_id}", response_model=MovieOut)
async def get_movie(movie_id: str):
	"""Return the merged movie or 404."""
	engine = get_engine()  # ready engine
	start = time.time()  # start timer
	movie = await engine.get_movie_by_id(movie_id)  # delegate to the engine
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	if movie is None:
		logger.info(f"[API] /api/movies/{movie_id} not found ({elapsed_ms:.2f} ms)")
		raise HTTPException(status_code=404, detail="Movie not found")
	logger.info(f"[API] /api/movies/{movie_id} served in {elapsed_ms:.2f} ms")
	return to_movie_out(movie)


# Field search: every query parameter is a field filter, e.g. ?director=Frank Miller
@app.get("/api/movies", response_model=MoviesResponse, response_model_exclude_unset=True)
async def search_movies(request: Request):
	"""Filter merged movies by query parameters (case-insensitive, prefix-matched field names)."""
	engine = get_engine()  # ready engine
	search = dict(request.query_params)  # keeps parameter order
	start = time.time()  # start timer
	logger.debug(f"[API] /api/movies search={search}")  # debug log of input

	result = await engine.get_movies_by_search(search)  # run search
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /api/movies served {len(result.movies)} movies (matches={result.matches}) in {elapsed_ms:.2f} ms")

	movies = [to_movie_out(m) for m in result.movies]  # convert to response schema
	if result.matches is None:
		return MoviesResponse(movies=movies)  # no filter applied: matches stays unset
	return MoviesResponse(movies=movies, matches=result.matches)


if __name__ == '__main__':
	import uvicorn  # ASGI server

	settings = Settings.from_env()
	uvicorn.run(app, host=settings.host, port=settings.port)

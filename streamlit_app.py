"""
Streamlit UI for the Movie Metadata Service.
Calls the local FastAPI server at http://localhost:8080 to run field searches,
or runs locally by wiring the catalog directory and OMDb client like the API does.

Run API (optional):   uvicorn api:app --port 8080 --reload
Run UI:                streamlit run streamlit_app.py
"""

# Standard libs: run the async engine from Streamlit's synchronous script
import asyncio  # event loop for local engine calls
from dataclasses import asdict  # dataclass -> dict, same shape as the API JSON
# Typing to make function signatures clearer
from typing import Dict, Optional  # indicates values can be None

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives

# Local engine imports for fallback/local mode (when API isn't used)
from movie_metadata.factory import build_engine  # wire providers
from movie_metadata.search_engine import SearchEngine  # merge + field search
from movie_metadata.settings import Settings  # environment configuration

# Default URL where the FastAPI server is expected to run locally
DEFAULT_API_URL = "http://localhost:8080"  # default API base URL

# Number of key/value filter rows offered in the form
FILTER_ROWS = 3

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Metadata Search", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Metadata Search")  # friendly header

# Cache the local engine so providers and the OMDb cache live for the whole session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[SearchEngine]:
	"""Create a local SearchEngine from environment settings."""
	try:
		return build_engine(Settings.from_env())  # catalog dir + cached OMDb
	except Exception as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to initialize local search engine: {e}")
		return None  # signal failure

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", DEFAULT_API_URL)  # where the API lives
	# Toggle to force local mode; if API health probe fails we also fall back to local
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[SearchEngine] = None  # placeholder
if use_local or not api_available:
	with st.spinner("Initializing local engine..."):
		local_engine = init_local_engine()  # wire providers
		if local_engine is not None:
			st.sidebar.success("Local engine ready.")  # success note
		else:
			st.sidebar.error("Local engine failed to initialize.")  # error note

# Filter rows: field name (prefix, case-insensitive) and exact value
st.caption("Field names match by prefix, values must match exactly (case-insensitive). Leave all empty to list everything.")
search: Dict[str, str] = {}  # ordered filter
for row in range(FILTER_ROWS):
	c1, c2 = st.columns(2)  # field | value
	with c1:
		field_name = st.text_input("Field", key=f"field_{row}", placeholder="e.g., director")
	with c2:
		field_value = st.text_input("Value", key=f"value_{row}", placeholder="e.g., Frank Miller")
	if field_name.strip():
		search[field_name.strip()] = field_value.strip()  # only filled rows count

search_btn = st.button("Search", type="primary")  # triggers a search

if search_btn:
	with st.spinner("Searching..."):
		try:
			if local_engine is not None:
				# Local mode: run the engine inside this process
				res = asyncio.run(local_engine.get_movies_by_search(search))
				payload = {"movies": [asdict(m) for m in res.movies]}  # same shape as API output
				if res.matches is not None:
					payload["matches"] = res.matches
			else:
				# API mode: every filter becomes a query parameter
				resp = requests.get(f"{api_url}/api/movies", params=search, timeout=60)
				resp.raise_for_status()  # raise error if server responded with an error code
				payload = resp.json()  # parse JSON returned by API

			movies = payload.get("movies", [])  # list of merged movies
			if "matches" not in payload:
				st.success(f"No filter applied, showing all {len(movies)} movies")
			elif payload["matches"] == 0:
				st.warning(f"Nothing matched, showing all {len(movies)} movies instead")
			else:
				st.success(f"{payload['matches']} movies matched")
			st.divider()  # visual separator

			# Render each movie as an image + details row
			for i, movie in enumerate(movies, start=1):
				c1, c2 = st.columns([1, 4])  # small image column + large text column
				with c1:
					if movie.get('Poster') and movie['Poster'] != 'N/A':
						st.image(movie['Poster'], width='stretch')  # poster
				with c2:
					st.subheader(f"{i}. {movie['title']} ({movie['Year']})")  # title + year
					st.caption(f"{movie['Runtime']} | {movie['Genre']} | {movie['id']} / {movie['imdbId']}")
					st.write(f"Director: {', '.join(movie['Director'])}")  # directors
					st.write(f"Actors: {', '.join(movie['Actors'])}")  # actors
					st.write(" | ".join(f"{r['Source']}: {r['Value']}" for r in movie['Ratings']))  # ratings
					if movie.get('description'):
						st.write(movie['description'])  # synopsis
				st.divider()  # separator

		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")  # show human-friendly message
		except Exception as e:  # any other runtime error
			st.error(f"Search failed: {e}")  # show error

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app is running)")  # mode label

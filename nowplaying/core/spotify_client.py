"""Spotify API client via Spotipy; searches album cover art for a track."""
import logging
import threading
from functools import lru_cache
from typing import Optional

from spotipy import Spotify
from spotipy.oauth2 import SpotifyClientCredentials

from nowplaying.core.errors import MissingCredentialsError

logger = logging.getLogger(__name__)

COVER_CACHE_SIZE = 512


class CoverArtClient:
    """Client-credentials Spotify client used only for track search.

    Spotipy caches and refreshes the app token itself; the last
    COVER_CACHE_SIZE covers are memoized per (artist, title). Failed
    searches are not cached.
    """

    def __init__(self, client_id: str, client_secret: str) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._spotify: Optional[Spotify] = None
        self._lock = threading.Lock()
        self._cached_cover = lru_cache(maxsize=COVER_CACHE_SIZE)(self._fetch_cover)

    @property
    def configured(self) -> bool:
        return bool(self._client_id and self._client_secret)

    def get_spotify_client(self) -> Spotify:
        """Return the Spotipy client. Raises MissingCredentialsError if not configured."""
        if not self.configured:
            raise MissingCredentialsError(
                "Spotify credentials are not set in the environment variables."
            )
        with self._lock:
            if self._spotify is None:
                auth = SpotifyClientCredentials(
                    client_id=self._client_id,
                    client_secret=self._client_secret,
                )
                self._spotify = Spotify(auth_manager=auth)
            return self._spotify

    def search_cover_url(self, artist: str, title: str) -> str:
        """Return the album cover URL of the best track match, or "" if none."""
        self.get_spotify_client()
        try:
            return self._cached_cover(artist, title)
        except Exception as e:
            logger.warning("Error fetching album cover: %s", e)
            return ""

    def _fetch_cover(self, artist: str, title: str) -> str:
        results = self.get_spotify_client().search(q=f"{artist} {title}", type="track", limit=1)
        items = ((results or {}).get("tracks") or {}).get("items") or []
        if not items:
            return ""
        images = (items[0].get("album") or {}).get("images") or []
        return images[0].get("url", "") if images else ""

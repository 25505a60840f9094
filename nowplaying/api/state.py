"""Shared application state (injected into routes)."""
import sys

from nowplaying.config import (
    BROWSER_APP,
    COMMAND_TIMEOUT_SEC,
    PLAYERCTL_INSTANCE,
    SPOTIFY_CLIENT_ID,
    SPOTIFY_CLIENT_SECRET,
)
from nowplaying.core.browser_source import BrowserTitleSource
from nowplaying.core.now_playing import NowPlayingService
from nowplaying.core.playerctl_source import PlayerctlSource
from nowplaying.core.spotify_client import CoverArtClient


class AppState:
    def __init__(self, platform: str = sys.platform) -> None:
        self.platform = platform
        self.now_playing = NowPlayingService(
            platform=platform,
            playerctl=PlayerctlSource(PLAYERCTL_INSTANCE, timeout=COMMAND_TIMEOUT_SEC),
            browser=BrowserTitleSource(BROWSER_APP, timeout=COMMAND_TIMEOUT_SEC),
            cover_art=CoverArtClient(SPOTIFY_CLIENT_ID, SPOTIFY_CLIENT_SECRET),
        )

    def shutdown(self) -> None:
        self.now_playing.shutdown()


_state = AppState()


def get_state() -> AppState:
    return _state

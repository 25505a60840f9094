"""Core services: media-session monitor, track sources, normalization, cover art."""
from nowplaying.core.browser_source import BrowserTitleSource
from nowplaying.core.music_monitor import MusicMonitor
from nowplaying.core.now_playing import NowPlayingService
from nowplaying.core.playerctl_source import PlayerctlSource
from nowplaying.core.spotify_client import CoverArtClient

__all__ = [
    "BrowserTitleSource",
    "CoverArtClient",
    "MusicMonitor",
    "NowPlayingService",
    "PlayerctlSource",
]

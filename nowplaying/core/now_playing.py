"""Resolve the current track per platform, falling back across sources."""
import logging
import threading
from typing import Callable, Optional

from nowplaying.core.browser_source import BrowserTitleSource
from nowplaying.core.errors import NoMusicDetectedError, NowPlayingError
from nowplaying.core.media_session import WinsdkSessionSource
from nowplaying.core.music_monitor import MusicMonitor
from nowplaying.core.playerctl_source import PlayerctlSource
from nowplaying.core.spotify_client import CoverArtClient
from nowplaying.models.music import MusicInfo, NowPlayingData

logger = logging.getLogger(__name__)


def _found(music: Optional[MusicInfo]) -> bool:
    return music is not None and bool(music.artist or music.title)


def default_monitor() -> MusicMonitor:
    return MusicMonitor(WinsdkSessionSource())


class NowPlayingService:
    """Owns the track sources for one process and applies the platform fallback order.

    win32: media session monitor, then playerctl. linux (and anything else):
    playerctl. darwin: browser tab title. On Windows a failing source just
    ends its turn; elsewhere source errors propagate to the caller.
    """

    def __init__(
        self,
        platform: str,
        playerctl: PlayerctlSource,
        browser: BrowserTitleSource,
        cover_art: CoverArtClient,
        monitor_factory: Callable[[], MusicMonitor] = default_monitor,
    ) -> None:
        self.platform = platform
        self.playerctl = playerctl
        self.browser = browser
        self.cover_art = cover_art
        self._monitor_factory = monitor_factory
        self._monitor: Optional[MusicMonitor] = None
        self._lock = threading.Lock()

    def get_monitor(self) -> MusicMonitor:
        """The media session monitor, created and started on first use."""
        with self._lock:
            if self._monitor is None:
                self._monitor = self._monitor_factory()
            monitor = self._monitor
        monitor.start()
        return monitor

    def get_monitor_music(self) -> Optional[MusicInfo]:
        """Track from the media session monitor; failures count as no track."""
        try:
            return self.get_monitor().get_current_music()
        except Exception:
            logger.exception("Error getting music from media session monitor")
            return None

    def get_windows_music(self) -> Optional[MusicInfo]:
        music = self.get_monitor_music()
        if _found(music):
            logger.info("Music detected from media session: %s", music.to_dict())
            return music

        try:
            music = self.playerctl.get_current_music()
        except NowPlayingError as e:
            logger.warning("playerctl: %s", e)
            music = None
        if _found(music):
            logger.info("Music detected from playerctl: %s", music.to_dict())
            return music

        logger.info("No music detected on Windows")
        return None

    def resolve_music(self) -> Optional[MusicInfo]:
        """Current track from the first source of this platform that has one."""
        if self.platform == "darwin":
            return self.browser.get_current_music()
        if self.platform == "win32":
            return self.get_windows_music()
        return self.playerctl.get_current_music()

    def get_now_playing(self) -> NowPlayingData:
        """Current track with its cover. Raises NoMusicDetectedError if nothing plays."""
        music = self.resolve_music()
        if not _found(music):
            raise NoMusicDetectedError("No music detected")
        cover_url = self.cover_art.search_cover_url(music.artist, music.title)
        return NowPlayingData(artist=music.artist, title=music.title, cover_url=cover_url)

    def shutdown(self) -> None:
        """Stop the monitor if one was created."""
        with self._lock:
            monitor, self._monitor = self._monitor, None
        if monitor is not None:
            monitor.stop()

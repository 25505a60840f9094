"""Current track from the active browser tab title (macOS, via osascript)."""
import logging
from typing import List, Optional

from nowplaying.core.command import run_command
from nowplaying.core.errors import TrackParseError
from nowplaying.models.music import MusicInfo

logger = logging.getLogger(__name__)

SEPARATOR = " - "


def parse_browser_title(tab_title: str) -> MusicInfo:
    """Parse "TITLE - ARTIST" (web players put the song first).

    Segments after the artist (e.g. " - Deezer") are dropped. Anything without
    the separator raises TrackParseError, including an empty title.
    """
    parts = (tab_title or "").strip().split(SEPARATOR)
    if len(parts) < 2:
        raise TrackParseError(tab_title)
    return MusicInfo(artist=parts[1].strip(), title=parts[0].strip())


class BrowserTitleSource:
    """Reads the title of the active tab of the browser's front window."""

    def __init__(self, application: str, timeout: float) -> None:
        self.application = application
        self.timeout = timeout

    def command(self) -> List[str]:
        script = (
            f'tell application "{self.application}" '
            "to return title of active tab of front window"
        )
        return ["osascript", "-e", script]

    def get_current_music(self) -> Optional[MusicInfo]:
        """Return the tab's track, or None if osascript timed out.

        Raises SourceUnavailableError if osascript fails and TrackParseError
        if the tab title is not "TITLE - ARTIST".
        """
        output = run_command(self.command(), timeout=self.timeout)
        if output is None:
            return None
        music = parse_browser_title(output)
        logger.debug("Browser tab: %s by %s", music.title, music.artist)
        return music

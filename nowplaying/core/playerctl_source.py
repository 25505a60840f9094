"""Current track from playerctl (MPRIS players such as a browser web player)."""
import logging
from typing import List, Optional

from nowplaying.core.command import run_command
from nowplaying.core.errors import TrackParseError
from nowplaying.models.music import MusicInfo

logger = logging.getLogger(__name__)

SEPARATOR = " - "
PLAYERCTL_FORMAT = "{{ artist }} - {{ title }}"


def clean_artist(artist: str) -> str:
    """Keep only the first credited performer ("A, B" -> "A")."""
    return artist.split(",")[0].strip()


def clean_title(title: str) -> str:
    """Drop a single trailing hyphen left over from the format string."""
    title = title.strip()
    if title.endswith("-"):
        title = title[:-1]
    return title.strip()


def parse_playerctl_output(output: str) -> Optional[MusicInfo]:
    """Parse "ARTIST - TITLE".

    Empty output means nothing is playing and returns None. Non-empty output
    that is not two non-empty parts raises TrackParseError.
    """
    output = (output or "").strip()
    if not output:
        return None
    parts = output.split(SEPARATOR, 1)
    if len(parts) != 2:
        raise TrackParseError(output)
    artist, title = clean_artist(parts[0]), clean_title(parts[1])
    if not artist or not title:
        raise TrackParseError(output)
    return MusicInfo(artist=artist, title=title)


class PlayerctlSource:
    """Polls one playerctl player instance."""

    def __init__(self, instance: str, timeout: float) -> None:
        self.instance = instance
        self.timeout = timeout

    def command(self) -> List[str]:
        return ["playerctl", "-p", self.instance, "metadata", "--format", PLAYERCTL_FORMAT]

    def get_current_music(self) -> Optional[MusicInfo]:
        """Return the player's track, or None if nothing plays or the call timed out.

        Raises SourceUnavailableError if playerctl fails and TrackParseError
        if its output cannot be parsed.
        """
        output = run_command(self.command(), timeout=self.timeout)
        if output is None:
            return None
        music = parse_playerctl_output(output)
        if music is not None:
            logger.info("Cleaned metadata: Artist: %s, Title: %s", music.artist, music.title)
        return music

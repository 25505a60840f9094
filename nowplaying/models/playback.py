"""Transport status reported by a media session."""
from enum import Enum


class PlaybackStatus(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"
    UNKNOWN = "unknown"

    @classmethod
    def from_code(cls, code: int) -> "PlaybackStatus":
        """0 = stopped, 1 = playing, 2 = paused; any other code is unknown."""
        return _CODES.get(code, cls.UNKNOWN)


_CODES = {
    0: PlaybackStatus.STOPPED,
    1: PlaybackStatus.PLAYING,
    2: PlaybackStatus.PAUSED,
}

"""Play/pause/stop transitions driven by transport status codes."""
import logging
from typing import Callable, Optional

from nowplaying.models.music import MonitorState, MusicInfo
from nowplaying.models.playback import PlaybackStatus

logger = logging.getLogger(__name__)

Notify = Callable[[str, Optional[MusicInfo]], None]


class PlaybackStateMachine:
    """Tracks transport status independent of track identity.

    State only changes when a status code arrives; there is no implicit
    timeout to stopped.
    """

    def __init__(self, notify: Notify) -> None:
        self._notify = notify
        self.status = PlaybackStatus.UNKNOWN
        self.code: Optional[int] = None

    def handle_status(self, code: int, state: MonitorState) -> PlaybackStatus:
        status = PlaybackStatus.from_code(code)
        entering = status is not self.status
        self.status = status
        self.code = code

        if status is PlaybackStatus.STOPPED:
            # Stopped never keeps a track, even if one was set since the last stop.
            had_music = state.current_music is not None
            state.current_music = None
            if entering or had_music:
                self._notify("Music stopped", None)
        elif status is PlaybackStatus.PLAYING:
            if entering:
                self._notify("Music playing", state.current_music)
        elif status is PlaybackStatus.PAUSED:
            if entering:
                self._notify("Music paused", state.current_music)
        elif entering:
            logger.info("Unknown playback status: %s", code)
        return status

    def reset(self) -> None:
        self.status = PlaybackStatus.UNKNOWN
        self.code = None

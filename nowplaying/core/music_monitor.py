"""Current-track monitor over a native media-session source.

Run stand-alone to watch track changes until interrupted, or with ``--get``
to print the current track once and exit::

    python -m nowplaying.core.music_monitor --get
"""
import argparse
import logging
import signal
import sys
import threading
import time
from typing import Callable, List, Optional

from nowplaying.config import LOG_LEVEL, SNAPSHOT_DELAY_SEC
from nowplaying.core.media_session import MediaSessionSource, WinsdkSessionSource
from nowplaying.core.normalizer import (
    classify_session,
    has_active_timeline,
    has_changed,
    normalize,
    playback_code,
)
from nowplaying.core.playback_state import PlaybackStateMachine
from nowplaying.models.music import MonitorState, MusicInfo
from nowplaying.models.playback import PlaybackStatus
from nowplaying.models.session import RawSession, TimelineOnly

logger = logging.getLogger(__name__)

Listener = Callable[[str, Optional[MusicInfo]], None]


def describe(music: Optional[MusicInfo]) -> str:
    if music is None or not (music.artist and music.title):
        return "-"
    text = f"{music.title} by {music.artist}"
    if music.album:
        text += f" [{music.album}]"
    return text


class MusicMonitor:
    """Keeps the current track of the most recent media session.

    Change events from the source are applied as they arrive; the query
    methods re-read the latest session so callers always get fresh data.
    """

    def __init__(self, source: MediaSessionSource) -> None:
        self._source = source
        self._state = MonitorState()
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []
        self._playback = PlaybackStateMachine(notify=self._notify)

    @property
    def initialized(self) -> bool:
        return self._state.initialized

    @property
    def playback_status(self) -> PlaybackStatus:
        return self._playback.status

    def add_listener(self, listener: Listener) -> None:
        """Register a callback receiving (action, music) for each notification."""
        self._listeners.append(listener)

    def start(self) -> None:
        """Subscribe to session changes. No-op if already started."""
        with self._lock:
            if self._state.initialized:
                logger.debug("Monitor already initialized")
                return
            logger.info("Starting media session monitor...")
            try:
                self._source.subscribe(self._on_session_changed)
            except Exception as e:
                logger.error("Failed to initialize monitor: %s", e)
                return
            self._state.initialized = True

    def stop(self) -> None:
        """Unsubscribe and drop state. Teardown errors are logged, not raised."""
        logger.info("Stopping media session monitor...")
        with self._lock:
            if not self._state.initialized:
                return
            try:
                self._source.teardown()
            except Exception:
                logger.exception("Monitor teardown failed")
            self._state = MonitorState()
            self._playback.reset()

    def get_current_music(self) -> Optional[MusicInfo]:
        """Return the current track, or None. Starts the monitor if needed."""
        with self._lock:
            if not self._state.initialized:
                self.start()
            session = self._read_session()
            if session is not None:
                self._apply(session)
            return self._state.current_music

    def get_current_session(self) -> Optional[RawSession]:
        """Return the latest raw session snapshot (for debugging)."""
        with self._lock:
            if not self._state.initialized:
                self.start()
            return self._read_session()

    def is_music_playing(self) -> bool:
        """True if the latest session names a track or has a running timeline."""
        session = self.get_current_session()
        if not session:
            return False
        media = session.get("media")
        if isinstance(media, dict) and media.get("title") and media.get("artist"):
            return True
        return has_active_timeline(session)

    def _on_session_changed(self) -> None:
        with self._lock:
            session = self._read_session()
            logger.debug("Session changed: %s", session)
            if session is not None:
                self._apply(session)

    def _read_session(self) -> Optional[RawSession]:
        if not self._state.initialized:
            return None
        try:
            sessions = self._source.list_sessions()
        except Exception as e:
            logger.warning("Could not list media sessions: %s", e)
            return self._state.last_session
        session = sessions[0] if sessions else None
        self._state.last_session = session
        return session

    def _apply(self, session: RawSession) -> None:
        code = playback_code(session)
        if code is not None:
            status = self._playback.handle_status(code, self._state)
            if status is PlaybackStatus.STOPPED:
                return
        elif self._playback.status is PlaybackStatus.STOPPED:
            # No track while stopped until a new transport status arrives.
            return

        music = normalize(session)
        if music is None:
            shape = classify_session(session)
            if isinstance(shape, TimelineOnly):
                logger.debug(
                    "Music detected (no details): duration=%.1fs position=%.1fs",
                    shape.duration,
                    shape.position,
                )
            return
        # Compare before overwriting so the previous track is what we diff against.
        if has_changed(self._state.current_music, music):
            self._state.current_music = music
            self._notify("New track detected", music)

    def _notify(self, action: str, music: Optional[MusicInfo]) -> None:
        if music is not None and music.artist and music.title:
            logger.info("%s: %s", action, describe(music))
        else:
            logger.info("%s", action)
        for listener in list(self._listeners):
            try:
                listener(action, music)
            except Exception:
                logger.exception("Listener failed for %r", action)


def snapshot_current_music(
    source: Optional[MediaSessionSource] = None,
    delay: float = SNAPSHOT_DELAY_SEC,
) -> Optional[MusicInfo]:
    """Start a monitor, give sessions time to load, read the track once, stop."""
    monitor = MusicMonitor(source or WinsdkSessionSource())
    monitor.start()
    try:
        time.sleep(delay)
        return monitor.get_current_music()
    finally:
        monitor.stop()


def install_signal_handlers(monitor: MusicMonitor) -> None:
    """Stop the monitor and exit on SIGINT/SIGTERM."""

    def _shutdown(signum, frame) -> None:
        logger.info("Received signal %s, shutting down monitor", signum)
        monitor.stop()
        sys.exit(0)

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)


def _print_music(music: Optional[MusicInfo]) -> None:
    if music is None:
        print("No music detected")
        return
    print("Current track:")
    print(f"  Title: {music.title}")
    print(f"  Artist: {music.artist}")
    if music.album:
        print(f"  Album: {music.album}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Watch the track playing on this machine.")
    parser.add_argument(
        "--get",
        action="store_true",
        help="print the current track once and exit instead of monitoring",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=SNAPSHOT_DELAY_SEC,
        help="seconds to wait for sessions to load in --get mode",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(name)s: %(message)s")

    if args.get:
        _print_music(snapshot_current_music(delay=args.delay))
        return 0

    monitor = MusicMonitor(WinsdkSessionSource())
    install_signal_handlers(monitor)
    monitor.start()
    logger.info("Waiting for track changes (Ctrl+C to stop)")
    while True:
        time.sleep(1.0)


if __name__ == "__main__":
    sys.exit(main())

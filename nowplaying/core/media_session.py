"""Native media-session source (Windows System Media Transport Controls via winsdk)."""
import asyncio
import logging
from typing import Any, Callable, List, Optional, Protocol

from nowplaying.core.errors import SourceUnavailableError
from nowplaying.models.session import RawSession

logger = logging.getLogger(__name__)

# Optional: winsdk only exists on Windows
_WINSDK_AVAILABLE = False
try:
    from winsdk.windows.media.control import (
        GlobalSystemMediaTransportControlsSessionManager as MediaManager,
        GlobalSystemMediaTransportControlsSessionPlaybackStatus as WinPlaybackStatus,
    )
    _WINSDK_AVAILABLE = True
except ImportError:
    pass


class MediaSessionSource(Protocol):
    """What the monitor needs from a platform media-session facility."""

    def subscribe(self, on_change: Callable[[], None]) -> None:
        """Start delivering "current session changed" events. Raises on failure."""

    def list_sessions(self) -> List[RawSession]:
        """Active sessions, most relevant first."""

    def teardown(self) -> None:
        """Unsubscribe and release platform resources."""


def _timespan_seconds(value) -> float:
    if value is None:
        return 0.0
    try:
        return float(value.total_seconds())
    except (AttributeError, TypeError):
        pass
    try:
        # Some WinRT bindings expose a "duration" in 100ns ticks.
        return float(value.duration) / 10_000_000.0
    except (AttributeError, TypeError, ValueError):
        return 0.0


def _transport_code(status) -> Optional[int]:
    """Map the Windows playback status onto 0 stopped / 1 playing / 2 paused.

    CLOSED, OPENED and CHANGING become 100 + native value (unknown to the monitor).
    """
    if status is None:
        return None
    if status == WinPlaybackStatus.STOPPED:
        return 0
    if status == WinPlaybackStatus.PLAYING:
        return 1
    if status == WinPlaybackStatus.PAUSED:
        return 2
    return 100 + int(status)


class WinsdkSessionSource:
    """GlobalSystemMediaTransportControlsSessionManager wrapped as a MediaSessionSource."""

    def __init__(self) -> None:
        self._manager = None
        self._token = None

    def subscribe(self, on_change: Callable[[], None]) -> None:
        if not _WINSDK_AVAILABLE:
            raise SourceUnavailableError("winsdk is not installed (Windows only)")
        if self._manager is None:
            self._manager = asyncio.run(_request_manager())

        def _handler(sender, args) -> None:
            try:
                on_change()
            except Exception:
                logger.exception("Session change handler failed")

        self._token = self._manager.add_current_session_changed(_handler)
        logger.info("Subscribed to Windows media session changes")

    def list_sessions(self) -> List[RawSession]:
        if self._manager is None:
            return []
        ordered = []
        try:
            current = self._manager.get_current_session()
        except Exception as e:
            logger.debug("get_current_session failed: %s", e)
            current = None
        if current is not None:
            ordered.append(current)
        try:
            for session in self._manager.get_sessions():
                if current is not None and _app_id(session) == _app_id(current):
                    continue
                ordered.append(session)
        except Exception as e:
            logger.debug("get_sessions failed: %s", e)
        return [asyncio.run(_snapshot(session)) for session in ordered]

    def teardown(self) -> None:
        if self._manager is not None and self._token is not None:
            self._manager.remove_current_session_changed(self._token)
        self._token = None
        self._manager = None


async def _request_manager():
    return await MediaManager.request_async()


def _app_id(session) -> str:
    try:
        return session.source_app_user_model_id or ""
    except Exception:
        return ""


async def _snapshot(session) -> RawSession:
    """Build a RawSession dict from a winsdk session object."""
    raw: dict[str, Any] = {"sourceAppUserModelId": _app_id(session)}

    try:
        info = await session.try_get_media_properties_async()
    except Exception as e:
        logger.debug("Media properties unavailable: %s", e)
        info = None
    if info is not None:
        raw["media"] = {
            "title": getattr(info, "title", "") or "",
            "artist": getattr(info, "artist", "") or "",
            "albumTitle": getattr(info, "album_title", "") or "",
            "albumArtist": getattr(info, "album_artist", "") or "",
        }

    try:
        timeline = session.get_timeline_properties()
        raw["timeline"] = {
            "duration": _timespan_seconds(timeline.end_time),
            "position": _timespan_seconds(timeline.position),
        }
    except Exception as e:
        logger.debug("Timeline unavailable: %s", e)

    try:
        code = _transport_code(session.get_playback_info().playback_status)
    except Exception as e:
        logger.debug("Playback info unavailable: %s", e)
        code = None
    if code is not None:
        raw["playback"] = {"playbackStatus": code}

    return raw

"""Turn raw session snapshots into MusicInfo and detect track changes."""
from typing import Any, Optional

from nowplaying.models.music import MusicInfo
from nowplaying.models.session import (
    DirectFields,
    EmptySession,
    MediaFields,
    RawSession,
    SessionShape,
    TimelineOnly,
)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def classify_session(session: Optional[RawSession]) -> SessionShape:
    """Classify a snapshot. Only the first matching rule applies:
    nested media, then direct artist/title, then a timeline with positive duration.
    """
    if not session:
        return EmptySession()

    media = session.get("media")
    if media is not None:
        media = media if isinstance(media, dict) else {}
        return MediaFields(
            artist=_text(media.get("artist")),
            title=_text(media.get("title")),
            album=_text(media.get("album")) or _text(media.get("albumTitle")),
        )

    if session.get("artist") or session.get("title"):
        return DirectFields(
            artist=_text(session.get("artist")),
            title=_text(session.get("title")),
            album=_text(session.get("album")),
        )

    timeline = session.get("timeline") or {}
    if isinstance(timeline, dict):
        duration = _number(timeline.get("duration"))
        if duration > 0:
            return TimelineOnly(duration=duration, position=_number(timeline.get("position")))

    return EmptySession()


def normalize(session: Optional[RawSession]) -> Optional[MusicInfo]:
    """Return the track described by session, or None if it names no track."""
    shape = classify_session(session)
    if isinstance(shape, (MediaFields, DirectFields)):
        return MusicInfo(artist=shape.artist, title=shape.title, album=shape.album)
    return None


def playback_code(session: Optional[RawSession]) -> Optional[int]:
    """Transport status code carried by session (``playback.playbackStatus``), if any."""
    if not session:
        return None
    playback = session.get("playback")
    if not isinstance(playback, dict):
        return None
    code = playback.get("playbackStatus")
    if isinstance(code, bool) or not isinstance(code, int):
        return None
    return code


def has_changed(previous: Optional[MusicInfo], candidate: MusicInfo) -> bool:
    """True if there is no previous track or artist, title or album differ."""
    if previous is None:
        return True
    return previous.key() != candidate.key()


def has_active_timeline(session: Optional[RawSession]) -> bool:
    """True if session reports a timeline with a positive duration."""
    if not session:
        return False
    timeline = session.get("timeline")
    return isinstance(timeline, dict) and _number(timeline.get("duration")) > 0

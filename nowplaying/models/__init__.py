"""Data models for tracks, session snapshots and playback status."""
from nowplaying.models.music import MonitorState, MusicInfo, NowPlayingData
from nowplaying.models.playback import PlaybackStatus
from nowplaying.models.session import (
    DirectFields,
    EmptySession,
    MediaFields,
    RawSession,
    SessionShape,
    TimelineOnly,
)

__all__ = [
    "MusicInfo",
    "NowPlayingData",
    "MonitorState",
    "PlaybackStatus",
    "RawSession",
    "SessionShape",
    "MediaFields",
    "DirectFields",
    "TimelineOnly",
    "EmptySession",
]

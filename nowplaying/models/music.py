"""Canonical track record and monitor state."""
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True, eq=False)
class MusicInfo:
    """Artist/title/album of one track. A missing album compares equal to ""."""
    artist: str
    title: str
    album: Optional[str] = None

    def key(self) -> tuple[str, str, str]:
        return (self.artist, self.title, self.album or "")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MusicInfo):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def to_dict(self) -> dict:
        data = {"artist": self.artist, "title": self.title}
        if self.album is not None:
            data["album"] = self.album
        return data


@dataclass
class NowPlayingData:
    """Payload of /now-playing-data."""
    artist: str
    title: str
    cover_url: str = ""

    def to_dict(self) -> dict:
        return {"artist": self.artist, "title": self.title, "coverUrl": self.cover_url}


@dataclass
class MonitorState:
    """Mutable state owned by one MusicMonitor."""
    current_music: Optional[MusicInfo] = None
    initialized: bool = False
    last_session: Optional[dict[str, Any]] = field(default=None, repr=False)

from typing import Callable, List, Optional

import pytest

from nowplaying.core.errors import SourceUnavailableError
from nowplaying.core.music_monitor import MusicMonitor
from nowplaying.models.music import MusicInfo


class FakeSessionSource:
    """In-memory MediaSessionSource; push() simulates a platform change event."""

    def __init__(self, sessions: Optional[List[dict]] = None, fail_subscribe: bool = False) -> None:
        self.sessions = list(sessions or [])
        self.fail_subscribe = fail_subscribe
        self.fail_teardown = False
        self.subscribe_calls = 0
        self.teardown_calls = 0
        self.on_change: Optional[Callable[[], None]] = None

    def subscribe(self, on_change: Callable[[], None]) -> None:
        self.subscribe_calls += 1
        if self.fail_subscribe:
            raise SourceUnavailableError("no media session facility")
        self.on_change = on_change

    def list_sessions(self) -> List[dict]:
        return list(self.sessions)

    def teardown(self) -> None:
        self.teardown_calls += 1
        if self.fail_teardown:
            raise RuntimeError("teardown exploded")

    def push(self, session: Optional[dict]) -> None:
        self.sessions = [session] if session is not None else []
        assert self.on_change is not None
        self.on_change()


class FakeTrackSource:
    """Stands in for PlayerctlSource / BrowserTitleSource."""

    def __init__(self, music: Optional[MusicInfo] = None, error: Optional[Exception] = None) -> None:
        self.music = music
        self.error = error
        self.calls = 0

    def get_current_music(self) -> Optional[MusicInfo]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.music


class FakeCoverArt:
    def __init__(self, cover_url: str = "https://img.example/cover.jpg") -> None:
        self.cover_url = cover_url
        self.queries = []

    def search_cover_url(self, artist: str, title: str) -> str:
        self.queries.append((artist, title))
        return self.cover_url


def media_session(artist="Daft Punk", title="One More Time", album="Discovery", status=None, **extra):
    session = {"media": {"artist": artist, "title": title, "albumTitle": album}}
    if status is not None:
        session["playback"] = {"playbackStatus": status}
    session.update(extra)
    return session


@pytest.fixture
def source():
    return FakeSessionSource()


@pytest.fixture
def monitor(source):
    return MusicMonitor(source)


@pytest.fixture
def notifications(monitor):
    received = []
    monitor.add_listener(lambda action, music: received.append((action, music)))
    return received

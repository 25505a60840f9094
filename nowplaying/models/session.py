"""Raw session snapshots and the shapes they are classified into.

A RawSession is whatever dict an adapter built from the platform's session
object. It may carry a nested ``media`` mapping, direct ``artist``/``title``
keys, or only a ``timeline`` with duration/position. classify_session() in
nowplaying.core.normalizer turns it into exactly one of the shapes below.
"""
from dataclasses import dataclass
from typing import Any, Union

RawSession = dict[str, Any]


@dataclass(frozen=True)
class MediaFields:
    """Session has a nested media-info mapping."""
    artist: str
    title: str
    album: str


@dataclass(frozen=True)
class DirectFields:
    """Session carries artist/title directly."""
    artist: str
    title: str
    album: str


@dataclass(frozen=True)
class TimelineOnly:
    """Only a running timeline: something plays but the track is unidentified."""
    duration: float
    position: float


@dataclass(frozen=True)
class EmptySession:
    pass


SessionShape = Union[MediaFields, DirectFields, TimelineOnly, EmptySession]

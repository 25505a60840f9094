"""Current track, media-session track, and raw session endpoints."""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from nowplaying.api.state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()


class NowPlayingResponse(BaseModel):
    artist: str
    title: str
    coverUrl: str


class MusicResponse(BaseModel):
    artist: str
    title: str
    album: Optional[str] = None


class CurrentSessionResponse(BaseModel):
    session: Optional[dict[str, Any]] = None
    isPlaying: bool
    platform: str


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/now-playing-data", response_model=NowPlayingResponse)
def now_playing_data(state: AppState = Depends(get_state)):
    """Return artist, title and cover URL of the current track (500 if none)."""
    try:
        data = state.now_playing.get_now_playing()
    except Exception as e:
        logger.warning("Now playing: %s", e)
        return _error(500, "Error fetching data")
    return data.to_dict()


@router.get("/deezer-music", response_model=MusicResponse, response_model_exclude_none=True)
def deezer_music(state: AppState = Depends(get_state)):
    """Return the track reported by the media session monitor (404 if none)."""
    try:
        music = state.now_playing.get_monitor_music()
    except Exception:
        logger.exception("Error fetching media session music")
        return _error(500, "Error fetching Deezer music")
    if music is None:
        return _error(404, "No music detected")
    return music.to_dict()


@router.get("/current-session", response_model=CurrentSessionResponse)
def current_session(state: AppState = Depends(get_state)):
    """Return the raw media session snapshot and whether something is playing."""
    try:
        monitor = state.now_playing.get_monitor()
        session = monitor.get_current_session()
        is_playing = monitor.is_music_playing()
    except Exception:
        logger.exception("Error fetching session info")
        return _error(500, "Error fetching session info")
    return {"session": session, "isPlaying": is_playing, "platform": state.platform}

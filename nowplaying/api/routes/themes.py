"""HTML overlay themes served from the public directory."""
import logging
import re

from fastapi import APIRouter
from fastapi.responses import FileResponse, PlainTextResponse

from nowplaying.config import DEFAULT_THEME, PUBLIC_DIR

logger = logging.getLogger(__name__)

router = APIRouter()

_THEME_NAME = re.compile(r"^[A-Za-z0-9_-]+$")


def _theme_file(theme: str):
    return PUBLIC_DIR / f"{theme}-theme.html"


@router.get("/now-playing")
@router.get("/now-playing/{theme}")
def get_theme(theme: str = DEFAULT_THEME):
    """Serve <theme>-theme.html, falling back to the default theme."""
    path = _theme_file(theme) if _THEME_NAME.match(theme) else None
    if path is not None and path.is_file():
        return FileResponse(path, media_type="text/html")

    logger.warning("Theme not found: %s", theme)
    default_path = _theme_file(DEFAULT_THEME)
    if default_path.is_file():
        return FileResponse(default_path, media_type="text/html")
    logger.error("Default theme not found: %s", default_path)
    return PlainTextResponse("Aucun thème disponible.", status_code=404)

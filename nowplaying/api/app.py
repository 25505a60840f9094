"""FastAPI app, static themes, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool

from nowplaying.config import LOG_LEVEL, PUBLIC_DIR

# Configure logging in the worker process (so monitor INFO logs are visible under uvicorn)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from nowplaying.api.state import AppState, get_state

# Import routes after state to avoid circular imports
from nowplaying.api.routes import now_playing, themes

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    state = get_state()
    logger.info("Platform: %s", state.platform)
    if state.platform == "win32":
        logger.info("Windows detected - initializing media session monitor")
        # winsdk calls asyncio.run(), which needs a thread without a running loop.
        await run_in_threadpool(state.now_playing.get_monitor)
    yield
    logger.info("Shutting down server...")
    await run_in_threadpool(state.shutdown)


app = FastAPI(
    title="Now Playing API",
    description="Local REST API reporting the track playing on this machine",
    lifespan=lifespan,
)

app.include_router(now_playing.router, tags=["now-playing"])
app.include_router(themes.router, tags=["themes"])
app.mount("/", StaticFiles(directory=PUBLIC_DIR, check_dir=False), name="public")

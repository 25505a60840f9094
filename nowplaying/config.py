"""Configuration: env, player instance, Spotify credentials, server and timeouts."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of nowplaying package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so SPOTIFY_CLIENT_ID etc. are set
load_dotenv(BASE_DIR / ".env")

PUBLIC_DIR = BASE_DIR / "public"
DEFAULT_THEME = "default"

# API
API_HOST = os.getenv("NOWPLAYING_HOST", "0.0.0.0")
API_PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("NOWPLAYING_LOG_LEVEL", "INFO").upper()

# Spotify (client-credentials flow; only used for cover art search)
SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID", "")
SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET", "")

# playerctl player name (e.g. a specific chromium instance running the web player)
PLAYERCTL_INSTANCE = os.getenv("PLAYERCTL_INSTANCE", "chromium.instance3")

# macOS: browser whose front window's active tab title is read
BROWSER_APP = os.getenv("NOWPLAYING_BROWSER_APP", "Google Chrome")

# Timeout for playerctl / osascript invocations (seconds)
COMMAND_TIMEOUT_SEC = float(os.getenv("NOWPLAYING_COMMAND_TIMEOUT", "5"))

# Monitor CLI: wait this long after start() so sessions are loaded before reading
SNAPSHOT_DELAY_SEC = 1.0

"""Run an external command (playerctl, osascript) with a timeout."""
import logging
import subprocess
from typing import Optional, Sequence

from nowplaying.core.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def run_command(args: Sequence[str], timeout: float) -> Optional[str]:
    """Run args and return stripped stdout, or None if the command timed out.

    Raises SourceUnavailableError when the executable is missing or exits non-zero.
    """
    try:
        completed = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        logger.warning("%s timed out after %.1fs", args[0], timeout)
        return None
    except OSError as e:
        raise SourceUnavailableError(f"{args[0]} could not be run: {e}") from e

    if completed.returncode != 0:
        stderr = (completed.stderr or "").strip()
        raise SourceUnavailableError(
            f"{args[0]} exited with code {completed.returncode}: {stderr}"
        )
    return (completed.stdout or "").strip()

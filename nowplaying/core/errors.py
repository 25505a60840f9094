"""Errors raised by track sources and the cover-art lookup."""


class NowPlayingError(Exception):
    """Base class for now-playing failures."""


class SourceUnavailableError(NowPlayingError):
    """A source could not be queried (platform facility missing, command failed)."""


class TrackParseError(NowPlayingError):
    """A source answered, but its output does not describe a track."""

    def __init__(self, output: str, message: str = "Unable to parse song information") -> None:
        super().__init__(f"{message}: {output!r}")
        self.output = output


class MissingCredentialsError(NowPlayingError):
    """Spotify client id/secret are not configured."""


class NoMusicDetectedError(NowPlayingError):
    """No source reported a track."""

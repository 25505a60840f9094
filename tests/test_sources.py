import subprocess

import pytest

from nowplaying.core import browser_source, command, playerctl_source
from nowplaying.core.browser_source import BrowserTitleSource, parse_browser_title
from nowplaying.core.command import run_command
from nowplaying.core.errors import SourceUnavailableError, TrackParseError
from nowplaying.core.playerctl_source import (
    PlayerctlSource,
    clean_artist,
    clean_title,
    parse_playerctl_output,
)
from nowplaying.models.music import MusicInfo


class TestParsePlayerctlOutput:
    def test_artist_then_title(self):
        assert parse_playerctl_output("Daft Punk - One More Time") == MusicInfo(
            "Daft Punk", "One More Time"
        )

    def test_first_artist_and_trailing_hyphen_cleanup(self):
        assert parse_playerctl_output("Daft Punk, Pharrell - One More Time -") == MusicInfo(
            "Daft Punk", "One More Time"
        )

    def test_splits_on_first_separator_only(self):
        music = parse_playerctl_output("Queen - Bohemian Rhapsody - Remastered 2011")
        assert music == MusicInfo("Queen", "Bohemian Rhapsody - Remastered 2011")

    @pytest.mark.parametrize("output", ["", "   ", "\n"])
    def test_empty_output_is_nothing_playing(self, output):
        assert parse_playerctl_output(output) is None

    @pytest.mark.parametrize("output", ["No players found", " - One More Time", "Daft Punk - -"])
    def test_malformed_output_is_a_parse_failure(self, output):
        with pytest.raises(TrackParseError):
            parse_playerctl_output(output)

    def test_cleanup_helpers(self):
        assert clean_artist(" Daft Punk , Pharrell") == "Daft Punk"
        assert clean_title("One More Time --") == "One More Time -"


class TestPlayerctlSource:
    def test_command(self):
        source = PlayerctlSource("chromium.instance3", timeout=2)
        assert source.command() == [
            "playerctl",
            "-p",
            "chromium.instance3",
            "metadata",
            "--format",
            "{{ artist }} - {{ title }}",
        ]

    def test_get_current_music(self, monkeypatch):
        calls = []

        def fake_run(args, timeout):
            calls.append((args, timeout))
            return "Daft Punk - One More Time"

        monkeypatch.setattr(playerctl_source, "run_command", fake_run)
        source = PlayerctlSource("spotify", timeout=2.5)
        assert source.get_current_music() == MusicInfo("Daft Punk", "One More Time")
        assert calls[0][1] == 2.5

    def test_timeout_is_no_result(self, monkeypatch):
        monkeypatch.setattr(playerctl_source, "run_command", lambda args, timeout: None)
        assert PlayerctlSource("spotify", timeout=1).get_current_music() is None

    def test_command_failure_propagates(self, monkeypatch):
        def fail(args, timeout):
            raise SourceUnavailableError("playerctl exited with code 1")

        monkeypatch.setattr(playerctl_source, "run_command", fail)
        with pytest.raises(SourceUnavailableError):
            PlayerctlSource("spotify", timeout=1).get_current_music()


class TestParseBrowserTitle:
    def test_title_then_artist(self):
        music = parse_browser_title("One More Time - Daft Punk")
        assert music.title == "One More Time"
        assert music.artist == "Daft Punk"

    def test_site_suffix_is_dropped(self):
        music = parse_browser_title("One More Time - Daft Punk - Deezer")
        assert music == MusicInfo("Daft Punk", "One More Time")

    @pytest.mark.parametrize("title", ["Deezer", "", "One More Time-Daft Punk"])
    def test_missing_separator_is_a_parse_failure(self, title):
        with pytest.raises(TrackParseError):
            parse_browser_title(title)


class TestBrowserTitleSource:
    def test_command_names_application(self):
        args = BrowserTitleSource("Google Chrome", timeout=1).command()
        assert args[:2] == ["osascript", "-e"]
        assert 'tell application "Google Chrome"' in args[2]
        assert "title of active tab of front window" in args[2]

    def test_get_current_music(self, monkeypatch):
        monkeypatch.setattr(browser_source, "run_command", lambda args, timeout: "Song - Artist")
        assert BrowserTitleSource("Google Chrome", timeout=1).get_current_music() == MusicInfo(
            "Artist", "Song"
        )

    def test_unparsable_tab_raises(self, monkeypatch):
        monkeypatch.setattr(browser_source, "run_command", lambda args, timeout: "New Tab")
        with pytest.raises(TrackParseError):
            BrowserTitleSource("Google Chrome", timeout=1).get_current_music()


class TestRunCommand:
    def test_returns_stripped_stdout(self, monkeypatch):
        def fake_run(args, **kwargs):
            assert kwargs["timeout"] == 3
            return subprocess.CompletedProcess(args, 0, stdout="  A - B \n", stderr="")

        monkeypatch.setattr(command.subprocess, "run", fake_run)
        assert run_command(["playerctl"], timeout=3) == "A - B"

    def test_timeout_returns_none(self, monkeypatch):
        def fake_run(args, **kwargs):
            raise subprocess.TimeoutExpired(args, kwargs["timeout"])

        monkeypatch.setattr(command.subprocess, "run", fake_run)
        assert run_command(["playerctl"], timeout=1) is None

    def test_missing_executable(self, monkeypatch):
        def fake_run(args, **kwargs):
            raise FileNotFoundError(2, "No such file or directory", args[0])

        monkeypatch.setattr(command.subprocess, "run", fake_run)
        with pytest.raises(SourceUnavailableError):
            run_command(["playerctl"], timeout=1)

    def test_non_zero_exit(self, monkeypatch):
        def fake_run(args, **kwargs):
            return subprocess.CompletedProcess(args, 1, stdout="", stderr="No players found")

        monkeypatch.setattr(command.subprocess, "run", fake_run)
        with pytest.raises(SourceUnavailableError, match="No players found"):
            run_command(["playerctl"], timeout=1)

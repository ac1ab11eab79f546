from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from musixmatch_api import cli
from musixmatch_api.client import MusixmatchAPI
from musixmatch_api.types import TrackId, TrackNames
from tests.mocks.http_mock import MockSession, envelope, track_list

runner = CliRunner()


@pytest.fixture
def session(monkeypatch) -> MockSession:
    """Route every client the CLI builds through one mock session."""
    session = MockSession()
    real_from_config = MusixmatchAPI.from_config.__func__

    def _from_config(cls, cfg, *, session_=None, **_kw):
        return real_from_config(cls, cfg, session=session)

    monkeypatch.setattr(MusixmatchAPI, "from_config", classmethod(_from_config))
    monkeypatch.setattr(cli, "setup_logging", lambda debug: None)
    monkeypatch.setenv("MUSIXMATCH_API_KEY", "env-key")
    return session


def test_lyrics_by_id(session):
    session.queue(200, envelope({"lyrics": {"lyrics_body": "la la", "lyrics_copyright": "(c) someone"}}))

    result = runner.invoke(cli.app, ["lyrics", "123"])
    assert result.exit_code == 0
    assert "la la" in result.output
    assert "(c) someone" in result.output
    assert session.calls[0].params["apikey"] == "env-key"


def test_lyrics_by_names_with_key_option(session):
    session.queue(200, track_list({"track_id": 5}))
    session.queue(200, envelope({"lyrics": {"lyrics_body": "hello"}}))

    result = runner.invoke(cli.app, ["lyrics", "--artist", "A", "--track", "B", "--api-key", "opt-key"])
    assert result.exit_code == 0
    assert "hello" in result.output
    assert [c.endpoint for c in session.calls] == ["track.search", "track.lyrics.get"]
    assert session.calls[1].params["apikey"] == "opt-key"


def test_lyrics_matcher(session):
    session.queue(200, envelope({"lyrics": {"lyrics_body": "m"}}))

    result = runner.invoke(cli.app, ["lyrics", "1", "--matcher"])
    assert result.exit_code == 0
    assert session.calls[0].endpoint == "matcher.lyrics.get"


def test_lyrics_requires_identifier(session):
    result = runner.invoke(cli.app, ["lyrics", "--artist", "A"])
    assert result.exit_code == 1
    assert session.calls == []


def test_api_error_exit_code(session):
    session.queue(401, None)

    result = runner.invoke(cli.app, ["lyrics", "1"])
    assert result.exit_code == 1
    assert "MusixmatchAPIError: [401] Invalid API Key" in result.output


def test_bad_config_exit_code(session, monkeypatch):
    monkeypatch.setenv("MUSIXMATCH_TIMEOUT", "fast")

    result = runner.invoke(cli.app, ["lyrics", "1"])
    assert result.exit_code == 1
    assert "MusixmatchTypeError: Invalid MUSIXMATCH_TIMEOUT" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert session.calls == []


def test_subtitles_empty(session):
    session.queue(200, envelope({}))

    result = runner.invoke(cli.app, ["subtitles", "1"])
    assert result.exit_code == 0
    assert "No subtitles found" in result.output


def test_track_json(session):
    session.queue(200, envelope({"track": {"track_id": 1, "track_name": "Ünïcode"}}))

    result = runner.invoke(cli.app, ["track", "1"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"track_id": 1, "track_name": "Ünïcode"}


def test_flags(session):
    session.queue(200, track_list({"track_id": 1, "has_lyrics": 1, "explicit": 0}))

    result = runner.invoke(cli.app, ["flags", "1"])
    assert result.exit_code == 0
    assert "has_lyrics=yes" in result.output
    assert "explicit=no" in result.output
    assert len(session.calls) == 1


def test_chart_tracks(session):
    session.queue(
        200,
        envelope({"track_list": [{"track": {"track_id": 9, "track_name": "B", "artist_name": "A"}}]}),
    )

    result = runner.invoke(cli.app, ["chart-tracks", "US", "--chart", "hot", "--page-size", "5"])
    assert result.exit_code == 0
    assert "1. A - B (ID: 9)" in result.output
    assert session.calls[0].params["chart_name"] == "hot"


def test_chart_tracks_bad_page_size(session):
    result = runner.invoke(cli.app, ["chart-tracks", "US", "--page-size", "500"])
    assert result.exit_code == 1
    assert "MusixmatchRangeError" in result.output
    assert session.calls == []


def test_chart_artists(session):
    session.queue(200, envelope({"artist_list": [{"artist": {"artist_id": 7, "artist_name": "Q"}}]}))

    result = runner.invoke(cli.app, ["chart-artists", "GB"])
    assert result.exit_code == 0
    assert "1. Q (ID: 7)" in result.output


def test_artist_by_names(session):
    session.queue(200, track_list({"track_id": 1, "artist_id": 7}))
    session.queue(200, envelope({"artist": {"artist_id": 7}}))

    result = runner.invoke(cli.app, ["artist", "--artist", "Q", "--track", "Song"])
    assert result.exit_code == 0
    assert json.loads(result.output) == {"artist": {"artist_id": 7}}
    assert session.calls[1].params["artist_id"] == "7"


def test_status():
    result = runner.invoke(cli.app, ["status", "429"])
    assert result.exit_code == 0
    assert result.output.strip() == "[429] Too Many Requests"


def test_ping(session):
    with patch.object(MusixmatchAPI, "measure_latency", return_value=1500.0):
        result = runner.invoke(cli.app, ["ping"])
    assert result.exit_code == 0
    assert "1.50s" in result.output


def test_identifier_helper():
    assert cli._identifier("1", None, None) == TrackId("1")
    assert cli._identifier(None, "A", "B") == TrackNames("A", "B")

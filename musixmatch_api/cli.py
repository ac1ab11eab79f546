from __future__ import annotations

import json
from typing import Any, Callable

import typer

from musixmatch_api import __version__
from musixmatch_api.client import MusixmatchAPI
from musixmatch_api.config import load_config
from musixmatch_api.errors import MusixmatchError
from musixmatch_api.formatting import format_latency
from musixmatch_api.logging_setup import setup_logging
from musixmatch_api.status import describe_status
from musixmatch_api.types import ChartName, Identifier, TrackId, TrackNames


app = typer.Typer(no_args_is_help=True, add_completion=False)

API_KEY_HELP = "Musixmatch API key (default: $MUSIXMATCH_API_KEY)"


def _client(api_key: str | None, debug: bool) -> MusixmatchAPI:
    setup_logging(debug)
    cfg = load_config()
    if api_key:
        cfg = cfg.__class__(**{**cfg.__dict__, "api_key": api_key})
    return MusixmatchAPI.from_config(cfg)


def _identifier(track_id: str | None, artist: str | None, track: str | None) -> Identifier:
    if track_id:
        return TrackId(track_id)
    if artist and track:
        return TrackNames(artist_name=artist, track_name=track)
    typer.echo("Error: give a TRACK_ID or both --artist and --track", err=True)
    raise typer.Exit(code=1)


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _run(api_key: str | None, debug: bool, call: Callable[[MusixmatchAPI], Any]) -> Any:
    try:
        with _client(api_key, debug) as client:
            return call(client)
    except MusixmatchError as e:
        typer.echo(f"{e.name}: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def lyrics(
    track_id: str | None = typer.Argument(None, help="Musixmatch track id"),
    artist: str | None = typer.Option(None, "--artist", "-a", help="Artist name"),
    track: str | None = typer.Option(None, "--track", "-t", help="Track name"),
    matcher: bool = typer.Option(False, "--matcher", help="Use the matcher endpoint"),
    api_key: str | None = typer.Option(None, "--api-key", help=API_KEY_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Print the lyrics body of a track."""
    ident = _identifier(track_id, artist, track)
    if matcher:
        res = _run(api_key, debug, lambda c: c.fetch_matcher_lyrics(ident))
    else:
        res = _run(api_key, debug, lambda c: c.fetch_lyrics(ident))
    if not res or not res.get("lyrics_body"):
        typer.echo("No lyrics found")
        return
    typer.echo(res["lyrics_body"])
    if res.get("lyrics_copyright"):
        typer.echo()
        typer.echo(res["lyrics_copyright"])


@app.command()
def subtitles(
    track_id: str | None = typer.Argument(None, help="Musixmatch track id"),
    artist: str | None = typer.Option(None, "--artist", "-a", help="Artist name"),
    track: str | None = typer.Option(None, "--track", "-t", help="Track name"),
    matcher: bool = typer.Option(False, "--matcher", help="Use the matcher endpoint"),
    api_key: str | None = typer.Option(None, "--api-key", help=API_KEY_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Print synced lyrics (paid API key required)."""
    ident = _identifier(track_id, artist, track)
    if matcher:
        res = _run(api_key, debug, lambda c: c.fetch_matcher_subtitles(ident))
    else:
        res = _run(api_key, debug, lambda c: c.fetch_subtitles(ident))
    if not res or not res.get("subtitle_body"):
        typer.echo("No subtitles found")
        return
    typer.echo(res["subtitle_body"])


@app.command()
def track(
    track_id: str | None = typer.Argument(None, help="Musixmatch track id"),
    artist: str | None = typer.Option(None, "--artist", "-a", help="Artist name"),
    track_name: str | None = typer.Option(None, "--track", "-t", help="Track name"),
    search: bool = typer.Option(False, "--search", help="Use track.search instead of track.get"),
    api_key: str | None = typer.Option(None, "--api-key", help=API_KEY_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Print track metadata as JSON."""
    ident = _identifier(track_id, artist, track_name)
    if search:
        res = _run(api_key, debug, lambda c: c.search_track(ident))
    else:
        res = _run(api_key, debug, lambda c: c.get_track(ident))
    _echo_json(res)


@app.command()
def flags(
    track_id: str | None = typer.Argument(None, help="Musixmatch track id"),
    artist: str | None = typer.Option(None, "--artist", "-a", help="Artist name"),
    track: str | None = typer.Option(None, "--track", "-t", help="Track name"),
    api_key: str | None = typer.Option(None, "--api-key", help=API_KEY_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Show has_lyrics / instrumental / explicit / has_subtitle / restricted."""
    ident = _identifier(track_id, artist, track)
    res = _run(api_key, debug, lambda c: c.track_flags(ident))
    for name, value in res.items():
        typer.echo(f"{name}={'yes' if value else 'no'}")


@app.command("chart-artists")
def chart_artists(
    country: str = typer.Argument(..., help="Two-letter country code"),
    page: int = typer.Option(1, "--page", help="Page number"),
    page_size: int = typer.Option(10, "--page-size", help="Results per page (1-100)"),
    api_key: str | None = typer.Option(None, "--api-key", help=API_KEY_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """List the artist chart of a country."""
    res = _run(api_key, debug, lambda c: c.get_chart_artists(country, page, page_size))
    for i, item in enumerate((res or {}).get("artist_list") or [], 1):
        artist = item.get("artist") or {}
        typer.echo(f"{i}. {artist.get('artist_name', '?')} (ID: {artist.get('artist_id', '?')})")


@app.command("chart-tracks")
def chart_tracks(
    country: str = typer.Argument(..., help="Two-letter country code, XW for worldwide"),
    page: int = typer.Option(1, "--page", help="Page number"),
    page_size: int = typer.Option(10, "--page-size", help="Results per page (1-100)"),
    chart: str = typer.Option(ChartName.TOP.value, "--chart", help="top|hot|mxmWeekly|mxmWeeklyNew"),
    api_key: str | None = typer.Option(None, "--api-key", help=API_KEY_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """List the track chart of a country."""
    res = _run(api_key, debug, lambda c: c.get_chart_tracks(country, page, page_size, chart))
    for i, item in enumerate((res or {}).get("track_list") or [], 1):
        t = item.get("track") or {}
        typer.echo(f"{i}. {t.get('artist_name', '?')} - {t.get('track_name', '?')} (ID: {t.get('track_id', '?')})")


@app.command()
def artist(
    artist_id: int | None = typer.Argument(None, help="Musixmatch artist id"),
    artist_name: str | None = typer.Option(None, "--artist", "-a", help="Artist name (resolve id via a track)"),
    track_name: str | None = typer.Option(None, "--track", "-t", help="Any track of the artist"),
    api_key: str | None = typer.Option(None, "--api-key", help=API_KEY_HELP),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Print artist metadata as JSON."""
    if artist_id is None and not (artist_name and track_name):
        typer.echo("Error: give an ARTIST_ID or both --artist and --track", err=True)
        raise typer.Exit(code=1)

    def call(c: MusixmatchAPI) -> Any:
        aid = artist_id
        if aid is None:
            aid = c.resolve_artist_id(track_name, artist_name)
            if aid is None:
                return None
        return c.fetch_artist(aid)

    _echo_json(_run(api_key, debug, call))


@app.command()
def status(code: int = typer.Argument(..., help="HTTP status code")):
    """Explain a Musixmatch HTTP status code."""
    typer.echo(describe_status(code))


@app.command()
def ping(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")):
    """Measure latency to the Musixmatch API."""
    latency = _run(None, debug, lambda c: c.measure_latency())
    typer.echo(f"musixmatch-api {__version__}: {format_latency(latency)}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()

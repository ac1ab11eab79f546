from __future__ import annotations

import logging
import time
from typing import Any, Sequence

import requests

from .config import BASE_URL, ClientConfig
from .errors import (
    MusixmatchAPIError,
    MusixmatchRangeError,
    MusixmatchReferenceError,
    MusixmatchTypeError,
)
from .status import describe_status
from .transport import Transport
from .types import (
    Artist,
    ChartArtists,
    ChartName,
    ChartTracks,
    Identifier,
    Lyrics,
    Snippet,
    Subtitle,
    Track,
    TrackId,
    TrackNames,
    as_identifier,
)

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100


def _type_name(value: object) -> str:
    return type(value).__name__


def _require_str(value: Any, name: str) -> None:
    if not isinstance(value, str):
        raise MusixmatchTypeError(f'Expected {name} to be of type "str" but got {_type_name(value)} instead.')


def _require_int(value: Any, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise MusixmatchTypeError(f'Expected {name} to be of type "int" but got {_type_name(value)} instead.')


def _check_page_size(page_size: int) -> None:
    if page_size > MAX_PAGE_SIZE:
        raise MusixmatchRangeError(f"Invalid range: {page_size}. Expected: 1 to {MAX_PAGE_SIZE}")
    if page_size < 1:
        raise MusixmatchRangeError(f"Page size must be a valid positive number. Got: {page_size}")


def _field(body: Any, name: str) -> Any:
    return body.get(name) if isinstance(body, dict) else None


def _first_track(body: Any) -> Track | None:
    track_list = _field(body, "track_list")
    if not isinstance(track_list, list) or not track_list:
        return None
    return _field(track_list[0], "track")


def _flag(track: Track | None, *names: str) -> bool:
    """True only for the integer 1; 0, None, True or "1" are all False."""
    for name in names:
        value = _field(track, name)
        if value is not None:
            return type(value) is int and value == 1
    return False


class MusixmatchAPI:
    """
    Client for the Musixmatch REST API (v1.1).

    Every method validates its arguments before any request is sent, issues
    one or two HTTP calls and returns a part of ``message.body``. Failures
    raise a ``MusixmatchError`` subclass.

    The API key is the only mutable state. Changing it while another thread
    has a call in flight is up to the caller.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = BASE_URL,
        timeout_s: float = 10.0,
        session: requests.Session | None = None,
    ):
        if api_key is not None:
            _require_str(api_key, "api_key")
        self._api_key = api_key
        self._transport = Transport(base_url=base_url, timeout_s=timeout_s, session=session)

    @classmethod
    def from_config(cls, cfg: ClientConfig, *, session: requests.Session | None = None) -> "MusixmatchAPI":
        return cls(cfg.api_key, base_url=cfg.base_url, timeout_s=cfg.timeout_s, session=session)

    def __enter__(self) -> "MusixmatchAPI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    @property
    def api_key(self) -> str | None:
        return self._api_key

    def set_api_key(self, api_key: str) -> None:
        _require_str(api_key, "api_key")
        self._api_key = api_key

    # -- plumbing --------------------------------------------------------

    def _call(self, method: str, endpoint: str, params: dict[str, Any]) -> Any:
        response = self._transport.request(method, endpoint, params, api_key=self._api_key)
        if response.status_code != 200:
            raise MusixmatchAPIError(describe_status(response.status_code))
        return response.body()

    def _search(self, identifier: Identifier) -> Track | None:
        if isinstance(identifier, TrackId):
            params = {"track_id": identifier.track_id}
        else:
            params = {"q_artist": identifier.artist_name, "q_track": identifier.track_name}
        return _first_track(self._call("GET", "track.search", params))

    def _track_id_for(self, identifier: Identifier) -> str:
        if isinstance(identifier, TrackId):
            return identifier.track_id
        track_id = _field(self._search(identifier), "track_id")
        if track_id is None:
            raise MusixmatchReferenceError("No track found for", identifier.display)
        logger.debug("Resolved %s to track id %s", identifier.display, track_id)
        return str(track_id)

    def _by_track(self, identifier: Any, endpoint: str, field: str) -> Any:
        ident = as_identifier(identifier)
        track_id = self._track_id_for(ident)
        return _field(self._call("GET", endpoint, {"track_id": track_id}), field)

    # -- lyrics & subtitles ----------------------------------------------

    def fetch_lyrics(self, identifier: Identifier | str) -> Lyrics | None:
        """Lyrics of a track, by track id or by artist/track name."""
        return self._by_track(identifier, "track.lyrics.get", "lyrics")

    def fetch_subtitles(self, identifier: Identifier | str) -> Subtitle | None:
        """Time-synced lyrics. Needs a paid API key upstream."""
        return self._by_track(identifier, "track.subtitles.get", "subtitle")

    def fetch_matcher_lyrics(self, identifier: Identifier | str) -> Lyrics | None:
        return self._by_track(identifier, "matcher.lyrics.get", "lyrics")

    def fetch_matcher_subtitles(self, identifier: Identifier | str) -> Subtitle | None:
        return self._by_track(identifier, "matcher.subtitles.get", "subtitle")

    def post_lyrics(self, isrc: str, lines: Sequence[str]) -> str:
        """Submit lyrics for the recording identified by ``isrc``."""
        _require_str(isrc, "isrc")
        if isinstance(lines, str) or not isinstance(lines, Sequence):
            raise MusixmatchTypeError(
                f'Expected lines to be a sequence of "str" but got {_type_name(lines)} instead.'
            )
        for line in lines:
            _require_str(line, "lyrics line")

        self._call(
            "POST",
            "track.lyrics.post",
            {"track_isrc": isrc, "lyrics_body": "\n".join(lines)},
        )
        return "Lyrics Posted."

    # -- tracks ----------------------------------------------------------

    def resolve_track_id(self, track_name: str, artist_name: str) -> str | None:
        _require_str(track_name, "track_name")
        _require_str(artist_name, "artist_name")
        track_id = _field(self._search(TrackNames(artist_name, track_name)), "track_id")
        return None if track_id is None else str(track_id)

    def search_track(self, identifier: Identifier | str) -> Track | None:
        """First ``track.search`` hit for a track id or an artist/track pair."""
        return self._search(as_identifier(identifier))

    def get_track(self, identifier: Identifier | str) -> Track | None:
        return self._by_track(identifier, "track.get", "track")

    def get_track_snippet(self, track_id: str) -> Snippet | None:
        _require_str(track_id, "track_id")
        return self._call("GET", "track.snippet.get", {"track_id": track_id})

    def has_lyrics(self, identifier: Identifier | str) -> bool:
        return _flag(self.search_track(identifier), "has_lyrics")

    def is_instrumental(self, identifier: Identifier | str) -> bool:
        return _flag(self.search_track(identifier), "instrumental")

    def is_explicit(self, identifier: Identifier | str) -> bool:
        return _flag(self.search_track(identifier), "explicit")

    def has_subtitle(self, identifier: Identifier | str) -> bool:
        # upstream calls the field has_subtitles; older payloads use the singular
        return _flag(self.search_track(identifier), "has_subtitles", "has_subtitle")

    def is_restricted(self, identifier: Identifier | str) -> bool:
        return _flag(self.search_track(identifier), "restricted")

    def track_flags(self, identifier: Identifier | str) -> dict[str, bool]:
        """All boolean flags of a track from a single search."""
        track = self.search_track(identifier)
        return {
            "has_lyrics": _flag(track, "has_lyrics"),
            "instrumental": _flag(track, "instrumental"),
            "explicit": _flag(track, "explicit"),
            "has_subtitle": _flag(track, "has_subtitles", "has_subtitle"),
            "restricted": _flag(track, "restricted"),
        }

    # -- artists ---------------------------------------------------------

    def resolve_artist_id(self, track_name: str, artist_name: str) -> int | None:
        """Artist id of the first track matching the names."""
        _require_str(track_name, "track_name")
        _require_str(artist_name, "artist_name")
        return _field(self._search(TrackNames(artist_name, track_name)), "artist_id")

    def fetch_artist(self, artist_id: int) -> dict[str, Artist] | None:
        _require_int(artist_id, "artist_id")
        return self._call("GET", "artist.get", {"artist_id": artist_id})

    # -- charts ----------------------------------------------------------

    def get_chart_artists(self, country: str, page: int, page_size: int = 1) -> ChartArtists | None:
        _require_str(country, "country")
        _require_int(page, "page")
        _require_int(page_size, "page_size")
        _check_page_size(page_size)
        return self._call(
            "GET",
            "chart.artists.get",
            {"page": page, "page_size": page_size, "country": country},
        )

    def get_chart_tracks(
        self,
        country: str,
        page: int,
        page_size: int = 1,
        chart_name: ChartName | str = ChartName.TOP,
    ) -> ChartTracks | None:
        """
        Track chart for ``country`` (two-letter code, ``XW`` for worldwide).

        ``chart_name`` is one of ``top`` (editorial), ``hot`` (most viewed in
        the last 2 hours), ``mxmWeekly`` (last 7 days) or ``mxmWeeklyNew``
        (last 7 days, new releases only).
        """
        _require_str(country, "country")
        _require_int(page, "page")
        _require_int(page_size, "page_size")
        if not isinstance(chart_name, str):
            raise MusixmatchTypeError(
                f'Expected chart_name to be of type "str" but got {_type_name(chart_name)} instead.'
            )
        _check_page_size(page_size)
        chart = ChartName.parse(chart_name)
        return self._call(
            "GET",
            "chart.tracks.get",
            {"page": page, "page_size": page_size, "country": country, "chart_name": chart.upstream},
        )

    # -- misc ------------------------------------------------------------

    def measure_latency(self) -> float:
        """Milliseconds taken by one GET against the API root."""
        start = time.perf_counter()
        self._transport.request("GET", "", {}, api_key=None)
        return (time.perf_counter() - start) * 1000.0

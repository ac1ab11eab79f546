from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, TypedDict, Union

from .errors import MusixmatchError, MusixmatchTypeError


@dataclass(frozen=True, slots=True)
class TrackId:
    track_id: str

    @property
    def display(self) -> str:
        return f"track {self.track_id}"


@dataclass(frozen=True, slots=True)
class TrackNames:
    artist_name: str
    track_name: str

    @property
    def display(self) -> str:
        return f"{self.artist_name} - {self.track_name}"


Identifier = Union[TrackId, TrackNames]


def _type_name(value: object) -> str:
    return type(value).__name__


def as_identifier(value: Any) -> Identifier:
    """
    Normalize what callers pass as a track identifier.

    Accepts ``TrackId``/``TrackNames``, a bare string (track id) or a mapping
    with ``artist_name``/``track_name`` (``artistName``/``trackName`` also
    work). Everything else raises ``MusixmatchTypeError``.
    """
    if isinstance(value, (TrackId, TrackNames)):
        identifier = value
    elif isinstance(value, str):
        identifier = TrackId(value)
    elif isinstance(value, Mapping):
        identifier = TrackNames(
            artist_name=value.get("artist_name", value.get("artistName")),
            track_name=value.get("track_name", value.get("trackName")),
        )
    else:
        raise MusixmatchTypeError(
            'Expected a track id "str" or an artist/track name pair but got',
            _type_name(value),
            "instead.",
        )

    if isinstance(identifier, TrackId):
        if not isinstance(identifier.track_id, str):
            raise MusixmatchTypeError(
                f'Expected type to be "str" but got {_type_name(identifier.track_id)} instead.'
            )
    elif not isinstance(identifier.artist_name, str) or not isinstance(identifier.track_name, str):
        raise MusixmatchTypeError(
            'Expected artist_name and track_name to be of type "str" but got '
            f"{_type_name(identifier.artist_name)} and {_type_name(identifier.track_name)} instead."
        )
    return identifier


class ChartName(str, Enum):
    TOP = "top"  # editorial chart
    HOT = "hot"  # most viewed lyrics in the last 2 hours
    MXM_WEEKLY = "mxmWeekly"  # most viewed lyrics in the last 7 days
    MXM_WEEKLY_NEW = "mxmWeeklyNew"  # same, new releases only

    @property
    def upstream(self) -> str:
        return _UPSTREAM_CHART_NAMES[self]

    @classmethod
    def parse(cls, value: Any) -> "ChartName":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise MusixmatchTypeError('Expected type to be "str" but got', _type_name(value), "instead.")
        try:
            return cls(value)
        except ValueError:
            raise MusixmatchError("Invalid chart name", value) from None


_UPSTREAM_CHART_NAMES = {
    ChartName.TOP: "top",
    ChartName.HOT: "hot",
    ChartName.MXM_WEEKLY: "mxmweekly",
    ChartName.MXM_WEEKLY_NEW: "mxmweekly_new",
}


# Upstream payloads are passed through untouched. The TypedDicts below only
# document the fields callers usually read.


class Lyrics(TypedDict, total=False):
    lyrics_id: int
    explicit: int
    lyrics_body: str
    script_tracking_url: str
    pixel_tracking_url: str
    lyrics_copyright: str
    updated_time: str


class Subtitle(TypedDict, total=False):
    subtitle_id: int
    restricted: int
    subtitle_body: str
    subtitle_length: int
    subtitle_language: str
    lyrics_copyright: str
    updated_time: str


class Track(TypedDict, total=False):
    track_id: int
    track_name: str
    artist_id: int
    artist_name: str
    album_id: int
    album_name: str
    explicit: int
    has_lyrics: int
    has_subtitles: int
    instrumental: int
    restricted: int
    commontrack_id: int
    updated_time: str


class Artist(TypedDict, total=False):
    artist_id: int
    artist_name: str
    artist_country: str
    artist_rating: int
    restricted: int
    updated_time: str


class ChartArtists(TypedDict, total=False):
    artist_list: list[dict[str, Artist]]


class ChartTracks(TypedDict, total=False):
    track_list: list[dict[str, Track]]


class Snippet(TypedDict, total=False):
    snippet: dict[str, Any]

from __future__ import annotations

import pytest

from musixmatch_api.errors import (
    ErrorKind,
    MusixmatchAPIError,
    MusixmatchError,
    MusixmatchRangeError,
    MusixmatchReferenceError,
    MusixmatchSyntaxError,
    MusixmatchTypeError,
)


@pytest.mark.parametrize(
    "cls, kind",
    [
        (MusixmatchError, ErrorKind.GENERIC),
        (MusixmatchTypeError, ErrorKind.TYPE),
        (MusixmatchRangeError, ErrorKind.RANGE),
        (MusixmatchReferenceError, ErrorKind.REFERENCE),
        (MusixmatchSyntaxError, ErrorKind.SYNTAX),
        (MusixmatchAPIError, ErrorKind.API),
    ],
)
def test_kind_and_display_name(cls, kind):
    err = cls("boom")
    assert err.kind is kind
    assert err.name == cls.__name__
    assert isinstance(err, MusixmatchError)


def test_fragments_are_space_joined():
    err = MusixmatchTypeError('Expected type to be "str" but got', "int", "instead.")
    assert err.message == 'Expected type to be "str" but got int instead.'
    assert str(err) == err.message


def test_non_string_fragments_are_coerced():
    err = MusixmatchError("Invalid chart name", 42, None)
    assert err.message == "Invalid chart name 42 None"


def test_no_fragments_gives_empty_message():
    assert MusixmatchError().message == ""


def test_repr_includes_name():
    assert repr(MusixmatchAPIError("[401] Invalid API Key")) == "MusixmatchAPIError('[401] Invalid API Key')"

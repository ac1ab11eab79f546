from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    GENERIC = "generic"
    TYPE = "type"
    RANGE = "range"
    REFERENCE = "reference"
    SYNTAX = "syntax"
    API = "api"


class MusixmatchError(Exception):
    """
    Base error of the client.

    The message is built from one or more fragments joined by a single
    space. Non-string fragments are converted with ``str()``.
    """

    kind = ErrorKind.GENERIC

    def __init__(self, *fragments: object):
        self.message = " ".join(str(f) for f in fragments)
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.name}({self.message!r})"


class MusixmatchTypeError(MusixmatchError):
    kind = ErrorKind.TYPE


class MusixmatchRangeError(MusixmatchError):
    kind = ErrorKind.RANGE


class MusixmatchReferenceError(MusixmatchError):
    kind = ErrorKind.REFERENCE


class MusixmatchSyntaxError(MusixmatchError):
    kind = ErrorKind.SYNTAX


class MusixmatchAPIError(MusixmatchError):
    kind = ErrorKind.API

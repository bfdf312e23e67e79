"""Request options: timeouts, sockets, rate limits, HTTP versions and redirects."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from datetime import timedelta

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


class Timeout:
    """A duration in milliseconds, given as an integer or a ``timedelta``."""

    __slots__ = ("ms",)

    def __init__(self, duration: int | timedelta) -> None:
        if isinstance(duration, timedelta):
            self.ms = duration // timedelta(milliseconds=1)
        else:
            try:
                self.ms = operator.index(duration)
            except TypeError:
                raise TypeError(f"timeout must be an int or timedelta, not {type(duration).__name__}") from None

    def milliseconds(self) -> int:
        """Return the timeout in milliseconds, checked against the native long range."""
        if self.ms > _LONG_MAX:
            raise OverflowError(f"Timeout: timeout value overflow: {self.ms} ms.")
        if self.ms < _LONG_MIN:
            raise OverflowError(f"Timeout: timeout value underflow: {self.ms} ms.")
        return self.ms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeout):
            return NotImplemented
        return self.ms == other.ms

    def __hash__(self) -> int:
        return hash(self.ms)

    def __repr__(self) -> str:
        return f"Timeout({self.ms})"


class ConnectTimeout(Timeout):
    """A timeout for the connection phase only."""

    __slots__ = ()


class UnixSocket:
    """Path of a Unix domain socket to connect through."""

    __slots__ = ("path",)

    def __init__(self, path: str) -> None:
        self.path = str(path)

    def __str__(self) -> str:
        return self.path

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnixSocket):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"UnixSocket({self.path!r})"


@dataclass
class LimitRate:
    """Download and upload limits in bytes per second."""

    downrate: int = 0
    uprate: int = 0


class HttpVersionCode(enum.Enum):
    """The HTTP version to use for a connection."""

    VERSION_NONE = 0
    VERSION_1_0 = 1
    VERSION_1_1 = 2
    VERSION_2_0 = 3
    VERSION_2_0_TLS = 4
    VERSION_2_0_PRIOR_KNOWLEDGE = 5
    VERSION_3_0 = 6


@dataclass
class HttpVersion:
    """Selected HTTP version; ``VERSION_NONE`` lets the transport choose."""

    code: HttpVersionCode = HttpVersionCode.VERSION_NONE


class PostRedirectFlags(enum.IntFlag):
    """Whether a POST stays a POST after 301, 302 or 303 redirects."""

    NONE = 0x0
    POST_301 = 0x1 << 0
    POST_302 = 0x1 << 1
    POST_303 = 0x1 << 2
    POST_ALL = POST_301 | POST_302 | POST_303


def any_flags(flag: PostRedirectFlags) -> bool:
    """Return True if any flag is set."""
    return flag != PostRedirectFlags.NONE


@dataclass
class Redirect:
    """Redirect policy.

    ``maximum`` is the number of redirects to follow: 0 refuses any,
    -1 allows an unlimited number.
    """

    maximum: int = 50
    follow: bool = True
    cont_send_cred: bool = False
    post_flags: PostRedirectFlags = PostRedirectFlags.POST_ALL
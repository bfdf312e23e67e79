"""User callbacks for streaming request and response data."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class InfoType(enum.IntEnum):
    """Kind of data passed to a debug callback."""

    TEXT = 0
    HEADER_IN = 1
    HEADER_OUT = 2
    DATA_IN = 3
    DATA_OUT = 4
    SSL_DATA_IN = 5
    SSL_DATA_OUT = 6


@dataclass
class ReadCallback:
    """Supplies upload data.

    ``callback(size, userdata)`` returns at most ``size`` bytes, or ``None``
    to abort the transfer. ``size`` on the instance is the total upload
    size, or -1 if unknown.
    """

    callback: Callable[[int, Any], bytes | None]
    userdata: Any = 0
    size: int = -1

    def __call__(self, size: int) -> bytes | None:
        data = self.callback(size, self.userdata)
        if data is None:
            return None
        data = bytes(data)
        if len(data) > size:
            raise ValueError(f"read callback returned {len(data)} bytes, at most {size} allowed")
        return data


@dataclass
class HeaderCallback:
    """Receives each response header line; a false result aborts."""

    callback: Callable[[str, Any], bool]
    userdata: Any = 0

    def __call__(self, header: str) -> bool:
        return bool(self.callback(header, self.userdata))


@dataclass
class WriteCallback:
    """Receives response body chunks; a false result aborts."""

    callback: Callable[[str, Any], bool]
    userdata: Any = 0

    def __call__(self, data: str) -> bool:
        return bool(self.callback(data, self.userdata))


@dataclass
class ProgressCallback:
    """Receives transfer progress; a false result aborts."""

    callback: Callable[[int, int, int, int, Any], bool]
    userdata: Any = 0

    def __call__(self, download_total: int, download_now: int, upload_total: int, upload_now: int) -> bool:
        return bool(self.callback(download_total, download_now, upload_total, upload_now, self.userdata))


@dataclass
class DebugCallback:
    """Receives diagnostic data tagged with an :class:`InfoType`."""

    callback: Callable[[InfoType, str, Any], None]
    userdata: Any = 0

    def __call__(self, info_type: InfoType | int, data: str) -> None:
        self.callback(InfoType(info_type), data, self.userdata)
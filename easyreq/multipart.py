"""Multipart form parts: plain values, files on disk and in-memory buffers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class File:
    """A file on disk to upload."""

    filepath: str


@dataclass(init=False)
class Buffer:
    """In-memory bytes uploaded under a file name."""

    data: bytes
    filename: str

    def __init__(self, data: Iterable[int] | bytes | bytearray | memoryview, filename: str) -> None:
        if isinstance(data, str):
            raise TypeError("buffer data must be bytes, not str")
        self.data = bytes(data)
        self.filename = filename

    @property
    def datalen(self) -> int:
        return len(self.data)


@dataclass(init=False)
class Part:
    """One form field: a string or integer value, a :class:`File` or a :class:`Buffer`."""

    name: str
    value: str
    content_type: str
    data: bytes | None
    datalen: int
    is_file: bool
    is_buffer: bool

    def __init__(self, name: str, value: Any, content_type: str = "") -> None:
        self.name = name
        self.content_type = content_type
        self.data = None
        self.datalen = 0
        self.is_file = False
        self.is_buffer = False
        if isinstance(value, str):
            self.value = value
        elif isinstance(value, int):
            self.value = str(int(value))
        elif isinstance(value, File):
            self.value = value.filepath
            self.is_file = True
        elif isinstance(value, Buffer):
            self.value = value.filename
            self.data = value.data
            self.datalen = value.datalen
            self.is_buffer = True
        else:
            raise TypeError(f"unsupported part value type: {type(value).__name__}")


class Multipart:
    """An ordered collection of form parts.

    Items that are not :class:`Part` instances are taken as the argument
    tuple of one.
    """

    def __init__(self, parts: Iterable[Part | tuple[Any, ...]]) -> None:
        self.parts: list[Part] = [p if isinstance(p, Part) else Part(*p) for p in parts]

    def __iter__(self) -> Iterator[Part]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def __repr__(self) -> str:
        return f"Multipart({self.parts!r})"
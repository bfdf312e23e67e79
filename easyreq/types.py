"""Core value types: string holders for URLs and bodies, and a case-insensitive header map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, TypeVar

_T = TypeVar("_T", bound="StringHolder")
_MISSING = object()


def case_insensitive_less(a: str, b: str) -> bool:
    """Return True if ``a`` sorts before ``b`` when case is ignored."""
    return a.lower() < b.lower()


class StringHolder:
    """A thin mutable wrapper around a string.

    It can be built from nothing, from a string, from a string and a length
    (the first ``length`` characters), or from several strings which are
    concatenated in order.
    """

    __slots__ = ("_value",)

    def __init__(self, *args: Any) -> None:
        self._value = self._build(args)

    @staticmethod
    def _build(args: tuple[Any, ...]) -> str:
        if not args:
            return ""
        if len(args) == 2 and isinstance(args[0], str) and isinstance(args[1], int) and not isinstance(args[1], bool):
            text, length = args
            if length < 0 or length > len(text):
                raise ValueError(f"length {length} out of range for a string of {len(text)} characters")
            return text[:length]
        if len(args) == 1:
            (arg,) = args
            if isinstance(arg, StringHolder):
                return arg._value
            if isinstance(arg, str):
                return arg
            if isinstance(arg, Iterable) and not isinstance(arg, (bytes, bytearray)):
                return StringHolder._join(arg)
            raise TypeError(f"cannot build a string holder from {type(arg).__name__}")
        return StringHolder._join(args)

    @staticmethod
    def _join(parts: Iterable[Any]) -> str:
        pieces = []
        for part in parts:
            if isinstance(part, StringHolder):
                pieces.append(part._value)
            elif isinstance(part, str):
                pieces.append(part)
            else:
                raise TypeError(f"expected a string, got {type(part).__name__}")
        return "".join(pieces)

    @staticmethod
    def _coerce(other: Any) -> str | None:
        if isinstance(other, StringHolder):
            return other._value
        if isinstance(other, str):
            return other
        return None

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __len__(self) -> int:
        return len(self._value)

    def __add__(self: _T, other: Any) -> _T:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        return type(self)(self._value + text)

    def __iadd__(self: _T, other: Any) -> _T:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        self._value += text
        return self

    def __eq__(self, other: object) -> bool:
        text = self._coerce(other)
        if text is None:
            return NotImplemented
        return self._value == text

    def __hash__(self) -> int:
        return hash(self._value)


class Url(StringHolder):
    """A request URL."""

    __slots__ = ()


class Body(StringHolder):
    """A raw request body."""

    __slots__ = ()


class Header(MutableMapping[str, str]):
    """Header fields keyed case-insensitively.

    The spelling of a key is kept from its first insertion; iteration is in
    case-insensitive sorted order. Looking up a missing key yields an empty
    string rather than raising.
    """

    def __init__(self, data: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._entries: dict[str, tuple[str, str]] = {}
        if data is not None:
            self.update(data)

    def __getitem__(self, key: str) -> str:
        entry = self._entries.get(key.lower())
        return "" if entry is None else entry[1]

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError("header keys and values must be strings")
        folded = key.lower()
        existing = self._entries.get(folded)
        original = existing[0] if existing is not None else key
        self._entries[folded] = (original, value)

    def __delitem__(self, key: str) -> None:
        try:
            del self._entries[key.lower()]
        except KeyError:
            raise KeyError(key) from None

    def __iter__(self) -> Iterator[str]:
        for folded in sorted(self._entries):
            yield self._entries[folded][0]

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        theirs = other if isinstance(other, Header) else Header(other)
        mine = {folded: value for folded, (_, value) in self._entries.items()}
        return mine == {folded: value for folded, (_, value) in theirs._entries.items()}

    __hash__ = None  # type: ignore[assignment]

    def get(self, key: str, default: Any = None) -> Any:
        return self[key] if key in self else default

    def pop(self, key: str, default: Any = _MISSING) -> Any:
        if key in self:
            value = self[key]
            del self[key]
            return value
        if default is _MISSING:
            raise KeyError(key)
        return default

    def setdefault(self, key: str, default: str = "") -> str:
        if key not in self:
            self[key] = default
        return self[key]

    def __repr__(self) -> str:
        return f"Header({dict(self.items())!r})"
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any


def to_lower(text: str) -> str:
    """Lower-case ``text`` one character at a time.

    Characters whose lower-case form is longer than one character (dotted
    capital I lowers to two code points) are kept as they are, so the result
    has the same length as the input.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    chars = []
    for char in text:
        lower = char.lower()
        chars.append(lower if len(lower) == 1 else char)
    return "".join(chars)


def normalize_key(key: str) -> str:
    return to_lower(key)


class EditorConfigFile(Mapping[str, str]):
    """Immutable, case-insensitive view of the properties read from one file.

    Keys are stored lower-cased; lookups lower-case the requested key the same
    way, so ``snapshot["Indent_Size"]`` and ``snapshot["indent_size"]`` hit the
    same entry. Later pairs win over earlier ones with the same normalized key.
    """

    __slots__ = ("_options",)

    def __init__(self, options: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        pairs = options.items() if isinstance(options, Mapping) else options
        normalized: dict[str, str] = {}
        for key, value in pairs:
            normalized[normalize_key(key)] = value
        object.__setattr__(self, "_options", MappingProxyType(normalized))

    @property
    def options(self) -> Mapping[str, str]:
        return self._options

    @property
    def is_empty(self) -> bool:
        return not self._options

    def __getitem__(self, key: str) -> str:
        if not isinstance(key, str):
            raise KeyError(key)
        return self._options[normalize_key(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._options)!r})"


EMPTY = EditorConfigFile()

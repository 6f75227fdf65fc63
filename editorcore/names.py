"""Interned, case-preserving names backed by a shared hash pool."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

NAME_SIZE = 256
"""Names of this length or longer cannot be stored and become None."""

NONE_ID = 0
"""Entry id meaning 'no name'."""

_DJB2_SEED = 5381
_UINT32_MASK = 0xFFFFFFFF


class NameCase(Enum):
    """Whether hashing distinguishes upper and lower case."""

    CASE_SENSITIVE = "case_sensitive"
    IGNORE_CASE = "ignore_case"


def hash_string(text: str) -> int:
    """Return the 32-bit djb2 hash of ``text``."""
    value = _DJB2_SEED
    for char in text:
        value = (value * 33 + ord(char)) & _UINT32_MASK
    return value


def _lower_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def hash_name(text: str, case: NameCase) -> int:
    """Hash ``text`` either exactly or with every character lowered."""
    if case is NameCase.IGNORE_CASE:
        return hash_string("".join(_lower_char(c) for c in text))
    return hash_string(text)


@dataclass(frozen=True)
class NameEntry:
    """A stored string together with the id used to compare it."""

    text: str
    comparison_id: int = NONE_ID

    @property
    def is_wide(self) -> bool:
        return not self.text.isascii()

    @property
    def length(self) -> int:
        return len(self.text)


class NamePool:
    """Stores display entries and case-insensitive comparison entries."""

    def __init__(self) -> None:
        self._display: dict[int, NameEntry] = {}
        self._comparison: dict[int, NameEntry] = {}

    def store(self, text: str) -> int:
        """Store ``text`` if it is new and return its display id."""
        display_hash = hash_name(text, NameCase.CASE_SENSITIVE)
        if display_hash in self._display:
            return display_hash

        comparison_hash = hash_name(text, NameCase.IGNORE_CASE)
        if comparison_hash not in self._comparison:
            self._comparison[comparison_hash] = NameEntry(text)

        self._display[display_hash] = NameEntry(text, comparison_hash)
        return display_hash

    def find(self, text: str) -> int:
        """Return the display id of ``text``, or 0 if it was never stored."""
        display_hash = hash_name(text, NameCase.CASE_SENSITIVE)
        return display_hash if display_hash in self._display else NONE_ID

    def resolve(self, display_id: int) -> NameEntry:
        """Return the entry for ``display_id``; raise KeyError if unknown."""
        try:
            return self._display[display_id]
        except KeyError:
            raise KeyError(f"no name entry with id {display_id}") from None

    def __len__(self) -> int:
        return len(self._display) + len(self._comparison)


_default_pool = NamePool()


def get_name_pool() -> NamePool:
    """Return the process-wide name pool."""
    return _default_pool


class Name:
    """A name compared without regard to case but displayed as given."""

    __slots__ = ("_comparison_index", "_display_index", "_pool")

    def __init__(self, text: str | None = None, pool: NamePool | None = None) -> None:
        self._pool = pool if pool is not None else get_name_pool()
        self._comparison_index = NONE_ID
        self._display_index = NONE_ID
        if text is None or len(text) >= NAME_SIZE:
            return
        display_id = self._pool.store(text)
        self._display_index = display_id
        if display_id != NONE_ID:
            self._comparison_index = self._pool.resolve(display_id).comparison_id

    @property
    def comparison_index(self) -> int:
        return self._comparison_index

    @property
    def display_index(self) -> int:
        return self._display_index

    def is_none(self) -> bool:
        return self._display_index == NONE_ID and self._comparison_index == NONE_ID

    def __str__(self) -> str:
        if self.is_none():
            return "None"
        return self._pool.resolve(self._display_index).text

    def __repr__(self) -> str:
        return f"Name({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._comparison_index == other._comparison_index

    def __hash__(self) -> int:
        return hash(self._comparison_index)
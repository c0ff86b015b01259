"""The shell's environment: an ordered list of ``NAME=value`` or bare ``NAME`` entries."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from minishell.libft import isalnum, isalpha


def is_valid_identifier(name: Optional[str]) -> bool:
    """True if ``name`` is a letter or underscore followed by letters, digits or underscores."""
    if not name:
        return False
    first, rest = name[0], name[1:]
    if not (isalpha(first) or first == "_"):
        return False
    return all(isalnum(ch) or ch == "_" for ch in rest)


def make_entry(name: str, value: Optional[str]) -> str:
    """Build an environment entry; a missing value gives a bare name."""
    if value is None:
        return name
    return f"{name}={value}"


def matches_name(entry: Optional[str], name: Optional[str]) -> bool:
    """True if ``entry`` defines ``name``, with or without a value."""
    if not entry or not name:
        return False
    if not entry.startswith(name):
        return False
    return entry[len(name):len(name) + 1] in ("=", "")


def format_export_entry(entry: str) -> str:
    """Format an entry the way ``export`` without arguments lists it.

    Double quotes inside the value are dropped.
    """
    name, sep, value = entry.partition("=")
    if not sep:
        return f"declare -x {entry}"
    value = value.replace('"', "")
    return f'declare -x {name}="{value}"'


class Environment:
    """An ordered, mutable set of environment entries."""

    def __init__(self, entries: Optional[Iterable[str]] = None) -> None:
        self._entries: list[str] = list(entries) if entries is not None else []

    @property
    def entries(self) -> list[str]:
        """A copy of the raw entries, in order."""
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._index(name) is not None

    def _index(self, name: str) -> Optional[int]:
        return next(
            (i for i, entry in enumerate(self._entries) if matches_name(entry, name)),
            None,
        )

    def get(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or ``None`` if unset or without a value."""
        index = self._index(name)
        if index is None:
            return None
        _, sep, value = self._entries[index].partition("=")
        return value if sep else None

    def set(self, name: str, value: Optional[str] = None) -> None:
        """Replace the entry for ``name`` or append a new one."""
        entry = make_entry(name, value)
        index = self._index(name)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, name: str) -> None:
        """Remove every entry for ``name``."""
        self._entries = [e for e in self._entries if not matches_name(e, name)]

    def copy(self) -> "Environment":
        """Return an independent copy."""
        return Environment(self._entries)

    def env_lines(self) -> list[str]:
        """Entries that carry a value, in order, as ``env`` prints them."""
        return [entry for entry in self._entries if "=" in entry]

    def export_lines(self) -> list[str]:
        """All entries sorted and formatted as ``export`` prints them."""
        return [format_export_entry(entry) for entry in sorted(self._entries)]
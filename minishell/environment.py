"""The shell's environment variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping


class Environment:
    """An ordered set of variables; new variables go to the end."""

    def __init__(self, pairs: Iterable[tuple[str, str | None]] = ()) -> None:
        self._vars: dict[str, str | None] = {}
        for key, value in pairs:
            self._vars[key] = value

    def get(self, key: str) -> str | None:
        """Return the value of a variable, or None if it is not set."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Update a variable in place, or append it when new."""
        self._vars[key] = value

    def remove(self, key: str) -> None:
        """Drop a variable; unknown names are ignored."""
        self._vars.pop(key, None)

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Yield (key, value) pairs in order."""
        yield from self._vars.items()

    def to_array(self) -> list[str]:
        """Return the variables as KEY=VALUE strings for a child process."""
        return [f"{key}={'' if value is None else value}" for key, value in self._vars.items()]

    def to_dict(self) -> dict[str, str]:
        """Return the variables as a mapping suitable for subprocess."""
        return {key: "" if value is None else value for key, value in self._vars.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __repr__(self) -> str:
        return f"Environment({list(self._vars.items())!r})"


def init_env(envp: Iterable[str] | Mapping[str, str]) -> Environment:
    """Build an environment from KEY=VALUE entries, most recent entry first."""
    if isinstance(envp, Mapping):
        entries = [(key, value) for key, value in envp.items()]
    else:
        entries = []
        for entry in envp:
            key, sep, value = entry.partition("=")
            entries.append((key, value if sep else ""))
    return Environment(reversed(entries))
"""
envseed/environment.py
Environment stores the loader merges into.

The loader never touches ``os.environ`` directly; it talks to an
``EnvStore``. ``ProcessEnvironment`` is the real process environment,
``MemoryEnvironment`` a plain dict for tests and dry runs.
"""

from __future__ import annotations

import os
from typing import Mapping, MutableMapping, Optional, Protocol


class EnvStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def unset(self, key: str) -> None: ...


class MappingEnvironment:
    """EnvStore backed by any mutable str → str mapping."""

    def __init__(self, data: MutableMapping[str, str]):
        self._data = data

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def unset(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._data)} keys)"


class ProcessEnvironment(MappingEnvironment):
    """The real process environment (``os.environ``)."""

    def __init__(self):
        super().__init__(os.environ)


class MemoryEnvironment(MappingEnvironment):
    """In-memory store; nothing leaks into the process environment."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        super().__init__(dict(initial or {}))

    def as_dict(self) -> dict[str, str]:
        return dict(self._data)

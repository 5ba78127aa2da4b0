"""
Variable Environment

Mutable name -> value table consulted by variable nodes at evaluation time.
The environment is passed to ``evaluate`` explicitly; a process-wide default
instance is available through ``get_global_environment`` for callers that want
one shared table.
"""

import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Optional


class VariableEnvironment(Mapping):
    """Name -> float bindings, read through the Mapping protocol"""

    def __init__(self, bindings: Optional[Mapping] = None):
        self._bindings: Dict[str, float] = {}
        self._lock = threading.RLock()
        if bindings is not None:
            self.update(bindings)

    def set(self, name: str, value: float):
        """Insert or overwrite a binding. NaN and infinities are accepted."""
        with self._lock:
            self._bindings[name] = float(value)

    def get(self, name: str, default: Optional[float] = None) -> Optional[float]:
        with self._lock:
            return self._bindings.get(name, default)

    def clear(self):
        """Remove every binding"""
        with self._lock:
            self._bindings.clear()

    def update(self, bindings: Mapping):
        with self._lock:
            for name, value in bindings.items():
                self._bindings[name] = float(value)

    def snapshot(self) -> Mapping:
        """Immutable copy of the current bindings"""
        with self._lock:
            return MappingProxyType(dict(self._bindings))

    def __getitem__(self, name: str) -> float:
        with self._lock:
            return self._bindings[name]

    def __contains__(self, name) -> bool:
        with self._lock:
            return name in self._bindings

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._bindings))

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)

    def __repr__(self) -> str:
        return f"VariableEnvironment({dict(self.snapshot())!r})"


# Global instance
_GLOBAL_ENVIRONMENT: Optional[VariableEnvironment] = None
_ENVIRONMENT_LOCK = threading.Lock()


def get_global_environment() -> VariableEnvironment:
    """Get the process-wide environment, creating it on first use"""
    global _GLOBAL_ENVIRONMENT
    if _GLOBAL_ENVIRONMENT is not None:
        return _GLOBAL_ENVIRONMENT

    with _ENVIRONMENT_LOCK:
        if _GLOBAL_ENVIRONMENT is None:
            _GLOBAL_ENVIRONMENT = VariableEnvironment()

    return _GLOBAL_ENVIRONMENT


def reset_global_environment():
    """Drop the process-wide environment; the next call creates an empty one"""
    global _GLOBAL_ENVIRONMENT
    with _ENVIRONMENT_LOCK:
        _GLOBAL_ENVIRONMENT = None

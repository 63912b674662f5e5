"""
pkcs15_core.context
-------------------
ResolutionContext: a call-scoped bundle of directories, keyed by the
(key type, value type) pair each one serves.

A context is normally passed explicitly to ``decode``. Call chains that
cannot thread it through may establish an ambient one with ``use_context``;
it is stored in a ContextVar, so it is local to the current thread or task
and is reset when the ``with`` block exits.
"""

from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Dict, Iterable, Iterator, Optional, Tuple

from .directory.provider import Directory

TypePair = Tuple[type, type]


class ResolutionContext:
    """Borrows directories for the duration of a decode; owns none of them."""

    def __init__(self, directories: Iterable[Directory] = ()):
        self._directories: Dict[TypePair, Directory] = {}
        for directory in directories:
            self.add(directory)

    def add(self, directory: Directory, key_type: type = None, value_type: type = None) -> "ResolutionContext":
        pair = (key_type or directory.key_type, value_type or directory.value_type)
        self._directories[pair] = directory
        return self

    def get_directory(self, key_type: type, value_type: type) -> Optional[Directory]:
        return self._directories.get((key_type, value_type))

    def __contains__(self, pair: TypePair) -> bool:
        return pair in self._directories

    def __len__(self) -> int:
        return len(self._directories)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k.__name__}->{v.__name__}" for k, v in self._directories)
        return f"ResolutionContext({pairs})"


_ambient: ContextVar[Optional[ResolutionContext]] = ContextVar("pkcs15_resolution_context", default=None)


@contextmanager
def use_context(context: ResolutionContext) -> Iterator[ResolutionContext]:
    token = _ambient.set(context)
    try:
        yield context
    finally:
        _ambient.reset(token)


def current_context() -> Optional[ResolutionContext]:
    return _ambient.get()


def resolve_context(context: Optional[ResolutionContext] = None) -> ResolutionContext:
    """Explicit context first, then the ambient one, then an empty context."""
    if context is not None:
        return context
    ambient = _ambient.get()
    return ambient if ambient is not None else ResolutionContext()

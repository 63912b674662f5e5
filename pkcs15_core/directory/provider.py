# pkcs15_core/directory/provider.py
from __future__ import annotations
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Directory(Generic[K, V]):
    """
    Resolution capability: turn a key of ``key_type`` into a ``value_type`` object.

    ``lookup`` returns None when the key is not known to this directory; that
    is a normal outcome, not a format error. The core never mutates a
    directory, so one instance may serve concurrent read-only lookups.
    """
    key_type: type
    value_type: type

    def __init__(self, key_type: type, value_type: type):
        self.key_type = key_type
        self.value_type = value_type

    def lookup(self, key: K) -> Optional[V]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key_type.__name__} -> {self.value_type.__name__})"

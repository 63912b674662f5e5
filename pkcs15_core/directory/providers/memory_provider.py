from typing import Any, Dict, Mapping, Optional
from pkcs15_core.directory.provider import Directory


class MemoryDirectory(Directory):
    def __init__(self, key_type: type, value_type: type, entries: Optional[Mapping[Any, Any]] = None):
        super().__init__(key_type, value_type)
        self.entries: Dict[Any, Any] = dict(entries or {})

    def put(self, key, value):
        self.entries[key] = value

    def lookup(self, key):
        return self.entries.get(key)

    def __len__(self):
        return len(self.entries)


class IdentityDirectory(Directory):
    """Keys are their own values, e.g. when a token stores objects by value already."""

    def __init__(self, key_type: type):
        super().__init__(key_type, key_type)

    def lookup(self, key):
        return key if isinstance(key, self.key_type) else None

# pkcs15_core/directory/__init__.py

from .provider import Directory
from .providers.memory_provider import MemoryDirectory, IdentityDirectory
from .providers.sqlite_provider import SQLiteObjectStore, SQLiteDirectory
from pkcs15_core.basic import Path
import os


def load_directory(value_type: type, config: dict | None = None) -> Directory:
    """
    Factory resolver for the Path -> ``value_type`` object directory.

    For now:
        - memory (default)
        - sqlite
    """
    config = config or {}
    provider = config.get("provider") or os.getenv("PKCS15_DIRECTORY_PROVIDER", "memory")

    if provider == "memory":
        return MemoryDirectory(Path, value_type)

    if provider == "sqlite":
        db_path = config.get("sqlite_path") or os.getenv("PKCS15_DB_PATH", "db/pkcs15_objects.db")
        return SQLiteDirectory(SQLiteObjectStore(db_path), value_type)

    raise ValueError(f"Unknown directory provider: {provider}")


__all__ = [
    "Directory",
    "MemoryDirectory",
    "IdentityDirectory",
    "SQLiteObjectStore",
    "SQLiteDirectory",
    "load_directory",
]

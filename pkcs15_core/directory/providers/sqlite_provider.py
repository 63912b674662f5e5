from __future__ import annotations
from typing import Dict, List, Optional
import os, sqlite3, threading
from pkcs15_core.basic import Path
from pkcs15_core.directory.provider import Directory
from pkcs15_core.logger import get_logger

log = get_logger("pkcs15.directory")


class SQLiteObjectStore:
    """External container of DER-encoded token objects, keyed by Path."""

    def __init__(self, path="db/pkcs15_objects.db"):
        # If no directory, default to current working directory
        dir_path = os.path.dirname(path) or "."
        os.makedirs(dir_path, exist_ok=True)
        self.db = sqlite3.connect(path, check_same_thread=False)

        self._init()

    def _init(self) -> None:
        self.db.execute("""CREATE TABLE IF NOT EXISTS objects(
            path TEXT PRIMARY KEY,
            der BLOB NOT NULL
        )""")
        self.db.commit()

    def put_object(self, path: Path, der: bytes) -> None:
        self.db.execute(
            "INSERT INTO objects(path,der) VALUES(?,?) "
            "ON CONFLICT(path) DO UPDATE SET der=excluded.der",
            (path.storage_key(), der)
        )
        self.db.commit()

    def get_object(self, path: Path) -> Optional[bytes]:
        cur = self.db.execute("SELECT der FROM objects WHERE path=?", (path.storage_key(),))
        row = cur.fetchone()
        if not row: return None
        return bytes(row[0])

    def list_keys(self) -> List[str]:
        cur = self.db.execute("SELECT path FROM objects ORDER BY path")
        return [r[0] for r in cur.fetchall()]

    def close(self):
        self.db.close()


class SQLiteDirectory(Directory):
    """
    Lazily-loaded directory over a SQLiteObjectStore.

    Objects are decoded with ``value_type.from_der`` on first lookup and cached.
    """

    def __init__(self, store: SQLiteObjectStore, value_type: type):
        super().__init__(Path, value_type)
        self.store = store
        self._cache: Dict[Path, object] = {}
        self._lock = threading.Lock()

    def lookup(self, key: Path):
        with self._lock:
            if key in self._cache:
                return self._cache[key]
            der = self.store.get_object(key)
            if der is None:
                return None
            value = self.value_type.from_der(der)
            log.debug(f"loaded {self.value_type.__name__} from {key}", extra={"key": key})
            self._cache[key] = value
            return value

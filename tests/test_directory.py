import pytest

from pkcs15_core.basic import Path
from pkcs15_core.keys import RSAPrivateKeyObject
from pkcs15_core.directory import (
    MemoryDirectory, IdentityDirectory, SQLiteObjectStore, SQLiteDirectory, load_directory,
)


def test_memory_directory_lookup(key_path, rsa_object):
    d = MemoryDirectory(Path, RSAPrivateKeyObject)
    assert d.lookup(key_path) is None
    d.put(key_path, rsa_object)
    assert d.lookup(key_path) == rsa_object
    assert len(d) == 1
    assert d.key_type is Path and d.value_type is RSAPrivateKeyObject


def test_identity_directory():
    d = IdentityDirectory(int)
    assert d.lookup(5) == 5
    assert d.lookup("5") is None


def test_sqlite_store_roundtrip(tmp_path, key_path, rsa_object):
    store = SQLiteObjectStore(str(tmp_path / "objects.db"))
    store.put_object(key_path, rsa_object.to_der())
    assert store.get_object(key_path) == rsa_object.to_der()
    assert store.get_object(Path(b"\x00\x01")) is None
    assert store.list_keys() == [key_path.storage_key()]
    store.close()


def test_sqlite_directory_is_lazy_and_cached(tmp_path, key_path, rsa_object):
    store = SQLiteObjectStore(str(tmp_path / "objects.db"))
    store.put_object(key_path, rsa_object.to_der())
    d = SQLiteDirectory(store, RSAPrivateKeyObject)

    first = d.lookup(key_path)
    assert first == rsa_object
    # a later change in the container does not affect an already loaded object
    store.put_object(key_path, RSAPrivateKeyObject(modulus=1).to_der())
    assert d.lookup(key_path) is first
    assert d.lookup(Path(b"\x99\x99")) is None


def test_load_directory_modes(monkeypatch, tmp_path):
    monkeypatch.delenv("PKCS15_DIRECTORY_PROVIDER", raising=False)
    assert isinstance(load_directory(RSAPrivateKeyObject), MemoryDirectory)

    monkeypatch.setenv("PKCS15_DIRECTORY_PROVIDER", "sqlite")
    monkeypatch.setenv("PKCS15_DB_PATH", str(tmp_path / "env.db"))
    d = load_directory(RSAPrivateKeyObject)
    assert isinstance(d, SQLiteDirectory)
    assert d.value_type is RSAPrivateKeyObject

    d = load_directory(RSAPrivateKeyObject, {"provider": "memory"})
    assert isinstance(d, MemoryDirectory)

    with pytest.raises(ValueError):
        load_directory(RSAPrivateKeyObject, {"provider": "ldap"})

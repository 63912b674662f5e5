"""
pkcs15_core
===========
Typed decoding and encoding of PKCS#15 private key attribute records, with
pluggable resolution of members that reference objects stored elsewhere on
the token.

Provides:
- Attribute records (PrivateRSAKeyAttributes, PrivateECKeyAttributes) and
  algorithm dispatch
- Reference fields resolved through a call-scoped ResolutionContext
- Directory backends (in-memory, SQLite object container)
"""

from .errors import (
    Pkcs15Error, StructuralError, MissingFieldError,
    UnresolvedReferenceError, UnsupportedAlgorithmError,
)
from .basic import Path, Operations, KeyInfo, NullKeyInfo, ECKeyInfo
from .keys import RSAPrivateKeyObject, ECPrivateKeyObject
from .directory import (
    Directory, MemoryDirectory, IdentityDirectory,
    SQLiteObjectStore, SQLiteDirectory, load_directory,
)
from .context import ResolutionContext, use_context, current_context, resolve_context
from .reference import Unresolved, Resolved, ReferenceField, ObjectValueField, KeyInfoField
from .private_key import (
    KeyAlgorithm, SpecificPrivateKeyAttributes,
    register_private_key_attributes, private_key_attributes_class,
    decode_private_key_attributes,
)
from .attributes import PrivateRSAKeyAttributes, PrivateECKeyAttributes

__all__ = [
    "Pkcs15Error", "StructuralError", "MissingFieldError",
    "UnresolvedReferenceError", "UnsupportedAlgorithmError",
    "Path", "Operations", "KeyInfo", "NullKeyInfo", "ECKeyInfo",
    "RSAPrivateKeyObject", "ECPrivateKeyObject",
    "Directory", "MemoryDirectory", "IdentityDirectory",
    "SQLiteObjectStore", "SQLiteDirectory", "load_directory",
    "ResolutionContext", "use_context", "current_context", "resolve_context",
    "Unresolved", "Resolved", "ReferenceField", "ObjectValueField", "KeyInfoField",
    "KeyAlgorithm", "SpecificPrivateKeyAttributes",
    "register_private_key_attributes", "private_key_attributes_class",
    "decode_private_key_attributes",
    "PrivateRSAKeyAttributes", "PrivateECKeyAttributes",
]

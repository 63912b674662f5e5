# pkcs15_core/errors.py
from __future__ import annotations
from typing import Any, Optional


class Pkcs15Error(Exception):
    pass


class StructuralError(Pkcs15Error):
    """Input is not sequence-shaped, or an element has the wrong shape for its slot."""

    def __init__(self, message: str, record: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.record = record
        self.field = field


class MissingFieldError(Pkcs15Error):
    def __init__(self, record: str, field: str):
        super().__init__(f"Missing {field} member in {record} SEQUENCE.")
        self.record = record
        self.field = field


class UnresolvedReferenceError(Pkcs15Error):
    """An indirect reference could not be turned into a value."""

    def __init__(self, field: str, key: Any, reason: str = "key not found in directory"):
        super().__init__(f"Cannot resolve {field} reference {key}: {reason}")
        self.field = field
        self.key = key
        self.reason = reason


class UnsupportedAlgorithmError(Pkcs15Error):
    def __init__(self, algorithm: Any):
        super().__init__(f"No private key attributes registered for algorithm {algorithm!r}")
        self.algorithm = algorithm

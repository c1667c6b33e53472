from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO

from .md2 import MD2, md2

_DEFAULT_CHUNK_SIZE = 64 * 1024


def _select_hasher(algo: str) -> MD2:
    algo_normalized = algo.lower()
    if algo_normalized == "md2":
        return md2()
    raise ValueError(f"Unsupported algorithm: {algo}")


def to_bytes(value: Any) -> bytes:
    """
    Coerce a hashable payload to raw bytes.

    ``str`` is encoded as UTF-8; bytes, bytearray and memoryview are copied as-is.

    Raises:
        TypeError: If value is neither text nor bytes-like
    """
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Unsupported type for hashing: {type(value)!r}")


@dataclass(frozen=True)
class Digest:
    _digest: bytes

    def digest(self) -> bytes:
        return self._digest

    def hexdigest(self) -> str:
        return self._digest.hex()

    def intdigest(self) -> int:
        return int.from_bytes(self._digest, byteorder="big", signed=False)


def hash_bytes(value: Any, algo: str = "md2") -> Digest:
    """
    Hash text or bytes in one call.

    Args:
        value: str (hashed as UTF-8) or any bytes-like object
        algo: Hash algorithm to use (default: "md2")

    Returns:
        Digest object with digest(), hexdigest(), and intdigest() methods.

    Raises:
        ValueError: If algo is unsupported
        TypeError: If value is not text or bytes-like
    """
    hasher = _select_hasher(algo)
    hasher.update(to_bytes(value))
    return Digest(hasher.finalize())


def file_digest(
    fileobj: BinaryIO, chunk_size: int = _DEFAULT_CHUNK_SIZE, algo: str = "md2"
) -> Digest:
    """
    Hash a binary file object by streaming it in chunks until EOF.

    The file is read from its current position; it is not closed.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be a positive integer")
    hasher = _select_hasher(algo)
    for chunk in iter(lambda: fileobj.read(chunk_size), b""):
        hasher.update(chunk)
    return Digest(hasher.finalize())


__all__ = ["Digest", "file_digest", "hash_bytes", "to_bytes"]

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

DIGEST_SIZE = 16
BLOCK_SIZE = 16
_ROUNDS = 18

# Permutation of 0..255 built from the digits of pi (RFC 1319).
S = bytes(
    (
        41, 46, 67, 201, 162, 216, 124, 1, 61, 54, 84, 161, 236, 240, 6, 19,
        98, 167, 5, 243, 192, 199, 115, 140, 152, 147, 43, 217, 188, 76, 130, 202,
        30, 155, 87, 60, 253, 212, 224, 22, 103, 66, 111, 24, 138, 23, 229, 18,
        190, 78, 196, 214, 218, 158, 222, 73, 160, 251, 245, 142, 187, 47, 238, 122,
        169, 104, 121, 145, 21, 178, 7, 63, 148, 194, 16, 137, 11, 34, 95, 33,
        128, 127, 93, 154, 90, 144, 50, 39, 53, 62, 204, 231, 191, 247, 151, 3,
        255, 25, 48, 179, 72, 165, 181, 209, 215, 94, 146, 42, 172, 86, 170, 198,
        79, 184, 56, 210, 150, 164, 125, 182, 118, 252, 107, 226, 156, 116, 4, 241,
        69, 157, 112, 89, 100, 113, 135, 32, 134, 91, 207, 101, 230, 45, 168, 2,
        27, 96, 37, 173, 174, 176, 185, 246, 28, 70, 97, 105, 52, 64, 126, 15,
        85, 71, 163, 35, 221, 81, 175, 58, 195, 92, 249, 206, 186, 197, 234, 38,
        44, 83, 13, 110, 133, 40, 132, 9, 211, 223, 205, 244, 65, 129, 77, 82,
        106, 220, 55, 200, 108, 193, 171, 250, 36, 225, 123, 8, 12, 189, 177, 74,
        120, 136, 149, 139, 227, 99, 232, 109, 233, 203, 213, 254, 59, 0, 29, 57,
        242, 239, 183, 14, 102, 88, 208, 228, 166, 119, 114, 248, 235, 117, 75, 10,
        49, 68, 80, 180, 143, 237, 31, 26, 219, 153, 141, 51, 159, 17, 131, 20,
    )
)


class MD2:
    """
    Pure-Python MD2 (RFC 1319) implementation with a streaming API.

    The interface mirrors hashlib-style objects and returns 16-byte digests.
    ``finalize()`` consumes the object; ``digest()``, ``hexdigest()`` and
    ``str()`` work on a copy so hashing can continue afterwards.
    """

    name = "md2"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: BytesLike = b""):
        self._state = bytearray(DIGEST_SIZE)
        self._checksum = bytearray(BLOCK_SIZE)
        self._buffer = bytearray(BLOCK_SIZE)
        self._count = 0
        self._finalized = False
        self.update(data)

    @classmethod
    def with_input(cls, data: BytesLike) -> "MD2":
        return cls().update(data)

    def copy(self) -> "MD2":
        self._ensure_live()
        dup = self.__class__.__new__(self.__class__)
        dup._state = bytearray(self._state)
        dup._checksum = bytearray(self._checksum)
        dup._buffer = bytearray(self._buffer)
        dup._count = self._count
        dup._finalized = False
        return dup

    def update(self, data: BytesLike) -> "MD2":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")
        self._ensure_live()

        if isinstance(data, memoryview) and not data.c_contiguous:
            data = data.tobytes()
        with memoryview(data) as raw, raw.cast("B") as view:
            self._absorb(view)
        return self

    def finalize(self) -> bytes:
        """Pad, fold in the checksum and return the digest. The object is spent afterwards."""
        self._ensure_live()
        padding_len = BLOCK_SIZE - self._count
        self._buffer[self._count:] = bytes((padding_len,)) * padding_len
        self._compress(self._buffer)
        self._compress(bytes(self._checksum))
        self._finalized = True
        return bytes(self._state)

    def digest(self) -> bytes:
        return self.copy().finalize()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def __str__(self) -> str:
        return self.hexdigest()

    def __repr__(self) -> str:
        if self._finalized:
            return f"<{self.__class__.__name__} finalized>"
        return f"<{self.__class__.__name__} {self.hexdigest()}>"

    # Internal helpers -------------------------------------------------
    def _ensure_live(self) -> None:
        if self._finalized:
            raise ValueError("MD2 object has already been finalized")

    def _absorb(self, view: memoryview) -> None:
        available = min(len(view), BLOCK_SIZE - self._count)
        self._buffer[self._count:self._count + available] = view[:available]
        self._count += available

        # Anything past `available` belongs to the next call until the
        # leftover buffer has been consumed.
        if self._count < BLOCK_SIZE:
            return
        self._compress(self._buffer)

        offset = available
        while len(view) - offset >= BLOCK_SIZE:
            self._compress(view[offset:offset + BLOCK_SIZE])
            offset += BLOCK_SIZE

        remaining = len(view) - offset
        self._buffer[:remaining] = view[offset:]
        self._count = remaining

    def _compress(self, block: BytesLike) -> None:
        assert len(block) == BLOCK_SIZE, "MD2 blocks must be exactly 16 bytes"
        state = self._state

        x = bytearray(48)
        x[:16] = state
        x[16:32] = block
        for i in range(16):
            x[32 + i] = state[i] ^ block[i]

        t = 0
        for j in range(_ROUNDS):
            for k in range(48):
                x[k] ^= S[t]
                t = x[k]
            t = (t + j) & 0xFF

        state[:] = x[:16]

        # XOR accumulation is what the reference code and test vectors use;
        # the RFC text reads as plain assignment.
        checksum = self._checksum
        last = checksum[15]
        for j in range(16):
            checksum[j] ^= S[block[j] ^ last]
            last = checksum[j]


def new(data: BytesLike = b"") -> MD2:
    """Create a new MD2 object, optionally primed with ``data``."""
    return MD2(data)


def md2(data: BytesLike = b"") -> MD2:
    """Convenience constructor matching hashlib-style usage."""
    return MD2(data)


__all__ = ["MD2", "S", "BLOCK_SIZE", "DIGEST_SIZE", "md2", "new"]

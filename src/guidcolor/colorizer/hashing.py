"""
Purpose
-------
Turn an identifier into the two numbers that drive its color: a hue angle and a
brightness modifier.

Key behaviors
-------------
- Serializes the UUID in the mixed-endian GUID layout (UUID.bytes_le): the first three
  fields little-endian, the remaining eight bytes unchanged.
- Hashes those 16 bytes with XXH3 (64-bit), seeded, and takes the 8-byte canonical
  (big-endian) digest.
- Reads digest[0:4] and digest[4:8] as little-endian unsigned 32-bit integers and
  scales each by UINT32_MAX.

Conventions
-----------
- The byte layout, hash and digest decoding match the .NET GuidColor implementation
  (Guid.TryWriteBytes, XxHash3.TryHash, MemoryMarshal.Read<uint> on little-endian
  hardware), so the same GUID and seed give the same color there and here.
- Signed seeds are reinterpreted as their two's-complement unsigned 64-bit value.
- Size mismatches are programming errors and fail an assert.

Downstream usage
----------------
identifier_color.to_color(...) and to_colors(...) call identifier_digest(...) and
decode_digest(...)/decode_digests(...).
"""

from typing import Sequence, Tuple
import uuid
import numpy as np
from numpy.typing import NDArray
import xxhash
from guidcolor.colorizer.colorizer_config import (
    DIGEST_BYTE_ORDER,
    DIGEST_SIZE,
    IDENTIFIER_SIZE,
    SEED_MASK,
    UINT32_MAX
)

WORD_DTYPE: np.dtype = np.dtype("<u4" if DIGEST_BYTE_ORDER == "little" else ">u4")


def identifier_bytes(identifier: uuid.UUID) -> bytes:
    data: bytes = identifier.bytes_le
    assert len(data) == IDENTIFIER_SIZE
    return data


def identifier_digest(identifier: uuid.UUID, seed: int) -> bytes:
    """
    Compute the seeded XXH3-64 digest of an identifier's canonical bytes.

    Parameters
    ----------
    identifier : uuid.UUID
        Identifier to hash.
    seed : int
        Signed 64-bit seed; validated by the caller.

    Returns
    -------
    bytes
        8-byte digest in canonical (big-endian) order.
    """

    digest: bytes = xxhash.xxh3_64_digest(identifier_bytes(identifier), seed=seed & SEED_MASK)
    assert len(digest) == DIGEST_SIZE
    return digest


def decode_digest(digest: bytes) -> Tuple[float, float]:
    """
    Decode a digest into (hue_angle, brightness_mod).

    Parameters
    ----------
    digest : bytes
        8-byte digest as returned by identifier_digest.

    Returns
    -------
    Tuple[float, float]
        hue_angle in [0, 360] degrees and brightness_mod in [0, 1].
    """

    assert len(digest) == DIGEST_SIZE
    hue_value: int = int.from_bytes(digest[:4], DIGEST_BYTE_ORDER)
    brightness_value: int = int.from_bytes(digest[4:], DIGEST_BYTE_ORDER)
    return (hue_value / UINT32_MAX) * 360, brightness_value / UINT32_MAX


def decode_digests(digests: Sequence[bytes]) -> Tuple[NDArray, NDArray]:
    """
    Vectorized decode_digest over a batch of digests.

    Returns
    -------
    Tuple[NDArray, NDArray]
        (hue_angles, brightness_mods), both float64 arrays of shape (N,).
    """

    if len(digests) == 0:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)
    words: NDArray = np.frombuffer(b"".join(digests), dtype=WORD_DTYPE).reshape(-1, 2)
    values: NDArray = words.astype(np.float64)
    return (values[:, 0] / UINT32_MAX) * 360, values[:, 1] / UINT32_MAX

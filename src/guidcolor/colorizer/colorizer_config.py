"""
Purpose
-------
Centralized constants for the identifier colorizer.

Key behaviors
-------------
- Fixes the identifier and digest sizes and the byte order used to decode the digest.
- Defines the accepted seed range and the mask that maps a signed seed to the hash seed.
- Defines the HSL mapping (saturation, brightness range) and the darkness thresholds.

Conventions
-----------
- Every value here feeds the identifier -> color mapping; changing any of them changes the
  colors of all identifiers.
- The darkness rule reads: hue < WIDE_HUE_LOW or hue > WIDE_HUE_HIGH uses
  WIDE_DARK_THRESHOLD, every other hue uses NARROW_DARK_THRESHOLD (inclusive bounds).

Downstream usage
----------------
- colorizer_validation checks seeds against SEED_MIN/SEED_MAX.
- hashing uses IDENTIFIER_SIZE, DIGEST_SIZE, SEED_MASK, DIGEST_BYTE_ORDER and UINT32_MAX.
- identifier_color uses the HSL mapping and the darkness thresholds.
"""

from typing import Literal

DEFAULT_SEED: int = 0
SEED_MIN: int = -(2 ** 63)
SEED_MAX: int = 2 ** 63 - 1
SEED_MASK: int = 2 ** 64 - 1

IDENTIFIER_SIZE: int = 16
DIGEST_SIZE: int = 8
UINT32_MAX: int = 2 ** 32 - 1
DIGEST_BYTE_ORDER: Literal["little", "big"] = "little"

SATURATION: float = 1.0
BRIGHTNESS_SCALE: float = 0.6
BRIGHTNESS_OFFSET: float = 0.2

WIDE_HUE_LOW: float = 30.0
WIDE_HUE_HIGH: float = 210.0
WIDE_DARK_THRESHOLD: float = 0.7
NARROW_DARK_THRESHOLD: float = 0.45

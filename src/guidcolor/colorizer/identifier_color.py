"""
Purpose
-------
Derive a stable, visually distinct color for a 128-bit identifier, plus a flag telling
whether the color is dark enough to need light foreground text.

Key behaviors
-------------
- The nil UUID always maps to black and is reported as dark; nothing is hashed for it.
- Any other UUID is hashed (see guidcolor.colorizer.hashing) into a hue angle and a
  brightness modifier; the color is HSL(hue, 1.0, 0.6 * modifier + 0.2) converted to RGB.
- Darkness uses a hue-dependent threshold: hues below 30 or above 210 degrees (orange-red
  through magenta to blue) look darker at a given lightness, so they are dark up to a
  lightness of 0.7; the remaining hues are dark only up to 0.45.
- A seed reshuffles the whole mapping, so the same identifiers can be given a different
  color set in a different context.

Conventions
-----------
- Identifiers may be given as uuid.UUID, UUID strings or 16 bytes_le bytes.
- Seeds are signed 64-bit integers, 0 by default.
- HTML colors are uppercase "#RRGGBB"; the nil UUID renders as "#000000".

Downstream usage
----------------
Call to_color(...) or to_html_color(...) for single identifiers (e.g. a tag background)
and to_colors(...) for a batch, which returns NumPy arrays with one row per identifier.
"""

import logging
from typing import Sequence, Tuple
import uuid
import numpy as np
from numpy.typing import NDArray
from guidcolor.colorizer import hashing
from guidcolor.colorizer.colorizer_config import (
    BRIGHTNESS_OFFSET,
    BRIGHTNESS_SCALE,
    DEFAULT_SEED,
    NARROW_DARK_THRESHOLD,
    SATURATION,
    WIDE_DARK_THRESHOLD,
    WIDE_HUE_HIGH,
    WIDE_HUE_LOW
)
from guidcolor.colorizer.colorizer_validation import IdentifierLike, coerce_identifier, validate_seed
from guidcolor.converter.hsl import hsl_to_rgb_color, hsl_to_rgb_color_array
from guidcolor.converter.rgb_types import BLACK, RGBColor

logger = logging.getLogger(__name__)

NIL_IDENTIFIER: uuid.UUID = uuid.UUID(int=0)


def to_color(identifier: IdentifierLike, seed: int = DEFAULT_SEED) -> Tuple[RGBColor, bool]:
    """
    Map an identifier to a color and an is-dark flag.

    Parameters
    ----------
    identifier : uuid.UUID | str | bytes
        Identifier to colorize.
    seed : int, optional
        Signed 64-bit hash seed. Default is 0.

    Returns
    -------
    Tuple[RGBColor, bool]
        (color, is_dark). If is_dark is True, light text should be drawn on top of
        the color; otherwise dark text.

    Raises
    ------
    TypeError
        If identifier or seed has an unsupported type.
    ValueError
        If identifier cannot be parsed or seed is outside the signed 64-bit range.
    """

    guid: uuid.UUID = coerce_identifier(identifier)
    validate_seed(seed)
    if guid == NIL_IDENTIFIER:
        logger.debug("Nil identifier, returning black.")
        return BLACK, True

    hue_angle, brightness_mod = hashing.decode_digest(hashing.identifier_digest(guid, seed))
    brightness: float = BRIGHTNESS_SCALE * brightness_mod + BRIGHTNESS_OFFSET
    is_dark: bool = classify_darkness(hue_angle, brightness)
    return hsl_to_rgb_color(hue_angle, SATURATION, brightness), is_dark


def to_html_color(identifier: IdentifierLike, seed: int = DEFAULT_SEED) -> Tuple[str, bool]:
    """
    Same as to_color(...), with the color rendered as "#RRGGBB".
    """

    color, is_dark = to_color(identifier, seed)
    return color.to_html(), is_dark


def classify_darkness(hue_angle: float, brightness: float) -> bool:
    """
    Decide whether an HSL color (at full saturation) counts as dark.

    Parameters
    ----------
    hue_angle : float
        Hue in degrees, [0, 360].
    brightness : float
        HSL lightness in [0, 1].

    Returns
    -------
    bool
        True if light foreground text should be used over this color.
    """

    if hue_angle < WIDE_HUE_LOW or hue_angle > WIDE_HUE_HIGH:
        return brightness <= WIDE_DARK_THRESHOLD
    return brightness <= NARROW_DARK_THRESHOLD


def to_colors(identifiers: Sequence[IdentifierLike], seed: int = DEFAULT_SEED) -> Tuple[NDArray, NDArray]:
    """
    Batch version of to_color(...).

    Parameters
    ----------
    identifiers : Sequence[uuid.UUID | str | bytes]
        Identifiers to colorize.
    seed : int, optional
        Signed 64-bit hash seed shared by the whole batch. Default is 0.

    Returns
    -------
    Tuple[NDArray, NDArray]
        (colors, is_dark) where colors is a uint8 array of shape (N, 3) holding
        (red, green, blue) rows and is_dark is a bool array of shape (N,).
        Row i equals to_color(identifiers[i], seed).

    Raises
    ------
    TypeError
        If any identifier or the seed has an unsupported type.
    ValueError
        If any identifier cannot be parsed or seed is out of range.

    Notes
    -----
    - Hashing is done per identifier; the HSL mapping, darkness rule and RGB conversion
      run vectorized over the batch.
    """

    validate_seed(seed)
    guids = [coerce_identifier(identifier) for identifier in identifiers]
    colors: NDArray = np.zeros((len(guids), 3), dtype=np.uint8)
    is_dark: NDArray = np.ones(len(guids), dtype=np.bool_)
    hashed: NDArray = np.array([guid != NIL_IDENTIFIER for guid in guids], dtype=np.bool_)
    logger.debug("Colorizing %d identifiers (%d nil).", len(guids), len(guids) - int(hashed.sum()))
    if not hashed.any():
        return colors, is_dark

    digests = [hashing.identifier_digest(guid, seed) for guid in guids if guid != NIL_IDENTIFIER]
    hue_angles, brightness_mods = hashing.decode_digests(digests)
    brightness: NDArray = BRIGHTNESS_SCALE * brightness_mods + BRIGHTNESS_OFFSET
    wide: NDArray = (hue_angles < WIDE_HUE_LOW) | (hue_angles > WIDE_HUE_HIGH)
    is_dark[hashed] = np.where(wide, brightness <= WIDE_DARK_THRESHOLD, brightness <= NARROW_DARK_THRESHOLD)
    colors[hashed] = hsl_to_rgb_color_array(hue_angles, SATURATION, brightness)
    return colors, is_dark

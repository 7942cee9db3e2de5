"""
Purpose
-------
Convert hue/saturation/lightness values into RGB, either one color at a time or as
NumPy arrays for batches of colors.

Key behaviors
-------------
- Implements the "alternative" HSL to RGB formula
  (https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB_alternative):
  for n in (0, 8, 4) -> (red, green, blue),
  k = (n + hue / 30) mod 12 and channel = L - a * clamp(min(k - 3, 9 - k), -1, 1)
  where a = S * min(L, 1 - L).
- Normalizes the hue angle into [0, 360) first, so negative angles wrap around.
- Quantizes fractional channels to 8 bits by scaling by 256 and truncating,
  clamped to [0, 255]. There is no rounding step.

Conventions
-----------
- Saturation and lightness are expected in [0, 1]; they are not validated here.
- The array functions perform the same float64 operations in the same order as the
  scalar functions, so both paths produce bit-identical channels.

Downstream usage
----------------
guidcolor.colorizer.identifier_color calls hsl_to_rgb_color(...) per identifier and
hsl_to_rgb_color_array(...) for batches.
"""

from typing import Tuple
import numpy as np
from numpy.typing import ArrayLike, NDArray
from guidcolor.converter.rgb_types import RGBColor

CHANNEL_OFFSETS: Tuple[int, int, int] = (0, 8, 4)
CHANNEL_SCALE: int = 256
CHANNEL_MAX: int = 255


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Tuple[float, float, float]:
    """
    Convert an HSL color to fractional RGB channels.

    Parameters
    ----------
    hue : float
        Hue angle in degrees. Any real value; it is reduced modulo 360.
    saturation : float
        Saturation in [0, 1].
    lightness : float
        Lightness in [0, 1].

    Returns
    -------
    Tuple[float, float, float]
        (red, green, blue), each in [0, 1].
    """

    hue = hue % 360
    a: float = saturation * min(lightness, 1 - lightness)

    def channel(n: int) -> float:
        k: float = (n + hue / 30) % 12
        return lightness - a * max(-1, min(min(k - 3, 9 - k), 1))

    red, green, blue = (channel(n) for n in CHANNEL_OFFSETS)
    return red, green, blue


def hsl_to_rgb_color(hue: float, saturation: float, lightness: float) -> RGBColor:
    """
    Convert an HSL color to an 8-bit RGBColor.

    Parameters
    ----------
    hue : float
        Hue angle in degrees.
    saturation : float
        Saturation in [0, 1].
    lightness : float
        Lightness in [0, 1].

    Returns
    -------
    RGBColor
        Channels computed as min(255, int(channel * 256)).

    Notes
    -----
    - A channel of exactly 1.0 would scale to 256; the clamp maps it to 255.
    """

    return RGBColor(*(_quantize(channel) for channel in hsl_to_rgb(hue, saturation, lightness)))


def hsl_to_rgb_array(hue: ArrayLike, saturation: ArrayLike, lightness: ArrayLike) -> NDArray:
    """
    Vectorized hsl_to_rgb.

    Parameters
    ----------
    hue : numpy.typing.ArrayLike
        Hue angles in degrees.
    saturation : numpy.typing.ArrayLike
        Saturations in [0, 1], broadcast against hue.
    lightness : numpy.typing.ArrayLike
        Lightness values in [0, 1], broadcast against hue.

    Returns
    -------
    numpy.typing.NDArray
        float64 array of shape (*broadcast_shape, 3) holding (red, green, blue).

    Raises
    ------
    ValueError
        If the three inputs cannot be broadcast to a common shape.
    """

    hue_arr, saturation_arr, lightness_arr = np.broadcast_arrays(
        np.asarray(hue, dtype=np.float64),
        np.asarray(saturation, dtype=np.float64),
        np.asarray(lightness, dtype=np.float64)
    )
    hue_arr = np.mod(hue_arr, 360)
    a: NDArray = saturation_arr * np.minimum(lightness_arr, 1 - lightness_arr)
    channels = []
    for n in CHANNEL_OFFSETS:
        k: NDArray = np.mod(n + hue_arr / 30, 12)
        channels.append(lightness_arr - a * np.clip(np.minimum(k - 3, 9 - k), -1, 1))
    return np.stack(channels, axis=-1)


def hsl_to_rgb_color_array(hue: ArrayLike, saturation: ArrayLike, lightness: ArrayLike) -> NDArray:
    """
    Vectorized hsl_to_rgb_color; returns a uint8 array of shape (*broadcast_shape, 3).
    """

    scaled: NDArray = np.trunc(hsl_to_rgb_array(hue, saturation, lightness) * CHANNEL_SCALE)
    return np.clip(scaled, 0, CHANNEL_MAX).astype(np.uint8)


def _quantize(channel: float) -> int:
    return max(0, min(CHANNEL_MAX, int(channel * CHANNEL_SCALE)))

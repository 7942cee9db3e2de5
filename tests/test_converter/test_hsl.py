"""
Purpose
-------
Unit tests for guidcolor.converter.hsl and guidcolor.converter.rgb_types.

Key behaviors
-------------
- Checks reference HSL -> RGB values for the primaries and for zero saturation.
- Checks hue normalization (negative and > 360 angles wrap around).
- Checks 8-bit quantization: scale by 256, truncate, clamp to 255.
- Checks the vectorized conversion is bit-identical to the scalar one.
- Checks "#RRGGBB" rendering and parsing.

Downstream usage
----------------
Run with:
    pytest -q
"""

from __future__ import annotations
import numpy as np
import pytest
from guidcolor.converter.hsl import (
    hsl_to_rgb,
    hsl_to_rgb_array,
    hsl_to_rgb_color,
    hsl_to_rgb_color_array
)
from guidcolor.converter.rgb_types import BLACK, RGBColor


@pytest.mark.parametrize(
    "hue, saturation, lightness, expected",
    [
        (0, 1, 0.5, (1.0, 0.0, 0.0)),
        (120, 1, 0.5, (0.0, 1.0, 0.0)),
        (240, 1, 0.5, (0.0, 0.0, 1.0)),
        (0, 0, 0.5, (0.5, 0.5, 0.5)),
        (60, 1, 0.5, (1.0, 1.0, 0.0)),
        (180, 1, 0.5, (0.0, 1.0, 1.0)),
        (300, 1, 0.5, (1.0, 0.0, 1.0)),
    ],
)
def test_hsl_to_rgb_reference_values(
    hue: float, saturation: float, lightness: float, expected: tuple[float, float, float]
) -> None:
    assert hsl_to_rgb(hue, saturation, lightness) == pytest.approx(expected)


@pytest.mark.parametrize("saturation, lightness", [(1.0, 0.5), (0.3, 0.25), (0.8, 0.7)])
def test_hsl_to_rgb_hue_wraps_around(saturation: float, lightness: float) -> None:
    assert hsl_to_rgb(-10, saturation, lightness) == pytest.approx(hsl_to_rgb(350, saturation, lightness))
    assert hsl_to_rgb(480, saturation, lightness) == pytest.approx(hsl_to_rgb(120, saturation, lightness))
    assert hsl_to_rgb(360, saturation, lightness) == pytest.approx(hsl_to_rgb(0, saturation, lightness))


def test_hsl_to_rgb_extreme_lightness_gives_black_and_white() -> None:
    assert hsl_to_rgb(200, 1, 0) == pytest.approx((0.0, 0.0, 0.0))
    assert hsl_to_rgb(200, 1, 1) == pytest.approx((1.0, 1.0, 1.0))


def test_hsl_to_rgb_color_clamps_full_channel_to_255() -> None:
    # 1.0 * 256 == 256 must not overflow the 8-bit channel
    assert hsl_to_rgb_color(0, 1, 0.5) == RGBColor(255, 0, 0)
    assert hsl_to_rgb_color(0, 0, 1) == (255, 255, 255)


def test_hsl_to_rgb_color_truncates_instead_of_rounding() -> None:
    # 0.5 * 256 == 128 exactly; 0.4 * 256 == 102.4 -> 102, never 103
    assert hsl_to_rgb_color(0, 0, 0.5) == RGBColor(128, 128, 128)
    assert hsl_to_rgb_color(0, 1, 0.2) == RGBColor(102, 0, 0)


def test_hsl_to_rgb_color_array_matches_scalar_conversion() -> None:
    rng = np.random.default_rng(seed=42)
    hues = rng.uniform(-720, 720, size=500)
    lightness = rng.uniform(0.2, 0.8, size=500)

    fractional = hsl_to_rgb_array(hues, 1.0, lightness)
    quantized = hsl_to_rgb_color_array(hues, 1.0, lightness)

    assert fractional.shape == (500, 3)
    assert quantized.shape == (500, 3)
    assert quantized.dtype == np.uint8
    for i in range(500):
        assert tuple(fractional[i]) == hsl_to_rgb(float(hues[i]), 1.0, float(lightness[i]))
        assert tuple(int(c) for c in quantized[i]) == hsl_to_rgb_color(float(hues[i]), 1.0, float(lightness[i]))


def test_hsl_to_rgb_array_rejects_mismatched_shapes() -> None:
    with pytest.raises(ValueError):
        hsl_to_rgb_array(np.zeros(3), 1.0, np.zeros(4))


def test_rgb_color_html_rendering_is_uppercase_and_padded() -> None:
    assert RGBColor(255, 10, 0).to_html() == "#FF0A00"
    assert BLACK.to_html() == "#000000"


def test_rgb_color_from_html_parses_any_case() -> None:
    assert RGBColor.from_html("#ff0A00") == RGBColor(255, 10, 0)


@pytest.mark.parametrize("text", ["FF0A00", "#FF0A0", "#FF0A00A", "#GG0000", ""])
def test_rgb_color_from_html_rejects_malformed_strings(text: str) -> None:
    with pytest.raises(ValueError):
        RGBColor.from_html(text)

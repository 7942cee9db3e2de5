"""
Purpose
-------
Typed 8-bit RGB color value shared by the converter and the colorizer.

Key behaviors
-------------
- Stores red/green/blue channels as ints in [0, 255].
- Renders to and parses from the HTML "#RRGGBB" notation.

Conventions
-----------
- RGBColor is a NamedTuple, so it compares equal to a plain (r, g, b) tuple.
- HTML strings are rendered uppercase; parsing is case-insensitive.
"""

import re
from typing import NamedTuple

HTML_COLOR_PATTERN: re.Pattern = re.compile(r"#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")


class RGBColor(NamedTuple):
    red: int
    green: int
    blue: int

    def to_html(self) -> str:
        """Render the color as an uppercase "#RRGGBB" string."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    @classmethod
    def from_html(cls, text: str) -> "RGBColor":
        """
        Parse a "#RRGGBB" string.

        Parameters
        ----------
        text : str
            Hex color string, leading '#' required, any letter case.

        Returns
        -------
        RGBColor
            The parsed color.

        Raises
        ------
        ValueError
            If text is not exactly of the form "#RRGGBB".
        """

        match = HTML_COLOR_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError("HTML color must have the form #RRGGBB.")
        return cls(*(int(channel, 16) for channel in match.groups()))


BLACK: RGBColor = RGBColor(0, 0, 0)

"""Hex/HSL conversion and the DrawingML color-modifier algebra.

Theme colors in a presentation are rarely used as-is: a reference such as
``<a:schemeClr val="accent1"><a:lumMod val="75000"/></a:schemeClr>`` means
"accent 1, luminance scaled to 75%". The functions here turn such modifier
chains into a final RGB hex value. Modifier values in the file format are
thousandths of a percent (100000 = 100%); ``modifier_fraction`` converts
them to the 0-1 fractions consumed below.

Note the direction of ``shade``: a fraction of 1 leaves the color unchanged
and 0 yields black, whereas ``tint`` leaves the color unchanged at 0. This
mirrors the file format and must not be "fixed".
"""

import math
import re
from typing import Iterable, NamedTuple

_HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


class Hsl(NamedTuple):
    h: float  # [0, 360)
    s: float  # [0, 1]
    l: float  # [0, 1]


# -----------------------------------------------------------------------
# Validation / normalization
# -----------------------------------------------------------------------

def is_valid_hex_color(value: str) -> bool:
    """True for ``#RGB`` or ``#RRGGBB``."""
    return bool(re.fullmatch(r"#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})", value or ""))


def normalize_hex(value: str | None) -> str | None:
    """Normalize ``#abc`` / ``abc`` / ``aabbcc`` to ``#AABBCC``; None if malformed."""
    if not value:
        return None
    match = _HEX_RE.match(value.strip())
    if not match:
        return None
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.upper()}"


def _parse_channels(hex_color: str) -> tuple[int, int, int]:
    match = _HEX_RE.match(hex_color.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _channels_to_hex(r: float, g: float, b: float) -> str:
    def clamp(v: float) -> int:
        return min(255, max(0, _round_half_up(v)))

    return f"#{clamp(r):02x}{clamp(g):02x}{clamp(b):02x}"


# -----------------------------------------------------------------------
# Color space conversion
# -----------------------------------------------------------------------

def hex_to_hsl(hex_color: str) -> Hsl:
    """Convert a hex color to HSL (h in degrees, s and l as fractions)."""
    r, g, b = (c / 255 for c in _parse_channels(hex_color))
    high = max(r, g, b)
    low = min(r, g, b)
    l = (high + low) / 2

    if high == low:
        return Hsl(0.0, 0.0, l)

    d = high - low
    s = d / (2 - high - low) if l > 0.5 else d / (high + low)

    if high == r:
        h = ((g - b) / d + (6 if g < b else 0)) * 60
    elif high == g:
        h = ((b - r) / d + 2) * 60
    else:
        h = ((r - g) / d + 4) * 60

    return Hsl(h, s, l)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert HSL to hex. s and l are clamped into [0, 1]."""
    s = min(1.0, max(0.0, s))
    l = min(1.0, max(0.0, l))

    if s == 0:
        v = l * 255
        return _channels_to_hex(v, v, v)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    h_norm = h / 360

    return _channels_to_hex(
        _hue_to_rgb(p, q, h_norm + 1 / 3) * 255,
        _hue_to_rgb(p, q, h_norm) * 255,
        _hue_to_rgb(p, q, h_norm - 1 / 3) * 255,
    )


# -----------------------------------------------------------------------
# DrawingML modifiers
# -----------------------------------------------------------------------

def apply_tint(hex_color: str, fraction: float) -> str:
    """Blend toward white: 0 = unchanged, 1 = white."""
    r, g, b = _parse_channels(hex_color)
    return _channels_to_hex(
        r + (255 - r) * fraction,
        g + (255 - g) * fraction,
        b + (255 - b) * fraction,
    )


def apply_shade(hex_color: str, fraction: float) -> str:
    """Blend toward black: 1 = unchanged, 0 = black."""
    r, g, b = _parse_channels(hex_color)
    return _channels_to_hex(r * fraction, g * fraction, b * fraction)


def apply_lum_mod(hex_color: str, fraction: float) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, min(1.0, l * fraction))


def apply_lum_off(hex_color: str, fraction: float) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, min(1.0, l + fraction))


def apply_sat_mod(hex_color: str, fraction: float) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, min(1.0, s * fraction), l)


def apply_sat_off(hex_color: str, fraction: float) -> str:
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, min(1.0, s + fraction), l)


_MODIFIERS = {
    "tint": apply_tint,
    "shade": apply_shade,
    "lumMod": apply_lum_mod,
    "lumOff": apply_lum_off,
    "satMod": apply_sat_mod,
    "satOff": apply_sat_off,
}


def modifier_fraction(raw: str | None) -> float | None:
    """Convert a modifier ``val`` (1/1000 percent) to a fraction; None if malformed."""
    if raw is None:
        return None
    try:
        return int(raw.strip()) / 100000
    except (AttributeError, ValueError):
        return None


def apply_color_modifiers(
    base_hex: str,
    modifiers: Iterable[tuple[str, float]],
) -> str:
    """Apply ``(name, fraction)`` modifiers left to right.

    Unknown modifiers such as ``alpha`` are skipped: transparency cannot be
    represented in a flat hex color.
    """
    result = base_hex
    for name, fraction in modifiers:
        fn = _MODIFIERS.get(name)
        if fn is not None:
            result = fn(result, fraction)
    return result


# -----------------------------------------------------------------------
# UI helpers
# -----------------------------------------------------------------------

def lighten_color(hex_color: str, amount: float) -> str:
    """Blend each channel toward white by ``amount`` (0-1).

    Used to derive secondary text styles; unrelated to DrawingML ``tint``.
    """
    r, g, b = _parse_channels(hex_color)

    def lighten(c: int) -> int:
        return min(255, _round_half_up(c + (255 - c) * amount))

    return f"#{lighten(r):02x}{lighten(g):02x}{lighten(b):02x}"

"""Type-directed conversion of token values into SCSS syntax."""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from typing import Any, Callable

from sass_tokens.errors import TokenType

DEFAULT_COLOR_SPACE = "srgb"

GENERIC_FONT_FAMILIES = frozenset({
    "serif",
    "sans-serif",
    "monospace",
    "cursive",
    "fantasy",
    "system-ui",
    "ui-serif",
    "ui-sans-serif",
    "ui-monospace",
    "ui-rounded",
    "math",
    "emoji",
    "fangsong",
})

# Style Dictionary type names that map onto the catalog
STYLE_DICTIONARY_TYPE_ALIASES = {
    "size": TokenType.DIMENSION.value,
    "opacity": TokenType.NUMBER.value,
}

COMPOSITE_TYPES = frozenset({
    TokenType.TYPOGRAPHY.value,
    TokenType.SHADOW.value,
    TokenType.BORDER.value,
})

# Checked in order against the lowercased sub-field name
SUB_TYPE_KEYWORDS: tuple[tuple[tuple[str, ...], TokenType], ...] = (
    (("color",), TokenType.COLOR),
    (("family",), TokenType.FONT_FAMILY),
    (("weight",), TokenType.FONT_WEIGHT),
    (("size", "width", "height", "spacing", "offset", "blur", "spread"), TokenType.DIMENSION),
)
SUB_TYPE_EXACT = {
    "lineheight": TokenType.NUMBER,
    "style": TokenType.UNKNOWN,
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def camel_to_dash(name: str) -> str:
    """Convert ``fontFamily`` style names to ``font-family``."""
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def format_scalar(value: Any) -> str:
    """Stringify a scalar the way the token tooling prints it.

    Integral floats drop their fraction (``1.0`` -> ``1``) and booleans are
    lowercase, matching JSON/JavaScript number printing.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_scalar(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _format_float(value: float) -> str:
    """Shortest round-trip digits, using exponent notation only below 1e-6 or
    from 1e21 up (``1e-7``, ``1e+21``)."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _round_channel(channel: float) -> int:
    # Half-up rounding, not banker's rounding
    return int(math.floor(channel * 255 + 0.5))


def _has_alpha(alpha: Any) -> bool:
    return isinstance(alpha, (int, float)) and not isinstance(alpha, bool) and alpha < 1


def convert_color(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        color_space = value.get("colorSpace")
        components = value.get("components")
        alpha = value.get("alpha")
        if (
            color_space == DEFAULT_COLOR_SPACE
            and isinstance(components, list)
            and len(components) >= 3
        ):
            red, green, blue = (_round_channel(c) for c in components[:3])
            if _has_alpha(alpha):
                return f"rgba({red}, {green}, {blue}, {format_scalar(alpha)})"
            return f"#{red:02x}{green:02x}{blue:02x}"
        if color_space and isinstance(components, list):
            suffix = f" / {format_scalar(alpha)}" if _has_alpha(alpha) else ""
            channels = " ".join(format_scalar(c) for c in components)
            return f"color({color_space} {channels}{suffix})"
    return format_scalar(value)


def convert_measure(value: Any) -> str:
    """Render dimensions and durations given as ``{value, unit}``."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return f"{format_scalar(value.get('value'))}{format_scalar(value.get('unit', ''))}"
    return format_scalar(value)


def convert_font_family(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        families = [
            family if family in GENERIC_FONT_FAMILIES else f'"{family}"'
            for family in value
        ]
        return f"({', '.join(families)})"
    return format_scalar(value)


def convert_cubic_bezier(value: Any) -> str:
    if isinstance(value, list):
        return f"cubic-bezier({', '.join(format_scalar(v) for v in value)})"
    return format_scalar(value)


def infer_sub_type(field_name: str) -> str:
    """Guess the token type of a composite sub-field from its name."""
    lowered = field_name.lower()
    for keywords, token_type in SUB_TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return token_type.value
    return SUB_TYPE_EXACT.get(lowered, TokenType.UNKNOWN).value


def convert_composite(value: Any) -> str:
    """Render typography, shadow and border values as a Sass map literal."""
    if not isinstance(value, dict):
        return format_scalar(value)
    entries = [
        f"  {camel_to_dash(name)}: {convert_value(field, infer_sub_type(name))},"
        for name, field in value.items()
    ]
    return "(\n" + "\n".join(entries) + "\n)"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    TokenType.COLOR.value: convert_color,
    TokenType.DIMENSION.value: convert_measure,
    TokenType.FONT_FAMILY.value: convert_font_family,
    TokenType.FONT_WEIGHT.value: format_scalar,
    TokenType.DURATION.value: convert_measure,
    TokenType.CUBIC_BEZIER.value: convert_cubic_bezier,
    TokenType.NUMBER.value: format_scalar,
    **{composite: convert_composite for composite in COMPOSITE_TYPES},
}


def convert_value(value: Any, token_type: str) -> str:
    """Convert a token value to its SCSS representation.

    Args:
        value: Raw (ideally alias-resolved) token value.
        token_type: Catalog type name; unknown names are stringified as-is.

    Returns:
        SCSS value text.
    """
    converter = _CONVERTERS.get(token_type, format_scalar)
    return converter(value)

"""Error types and enumerations for token conversion."""

from __future__ import annotations

from enum import Enum


class TokenFormat(Enum):
    """Supported token document dialects."""

    DTCG = "dtcg"  # W3C Design Tokens Community Group ($value/$type)
    STYLE_DICTIONARY = "style-dictionary"  # value/type siblings


class OutputMode(Enum):
    """SCSS output shapes."""

    VARIABLES = "variables"  # One flat variable per token
    MAP = "map"  # One nested map per top-level group


class TokenType(Enum):
    """Token type catalog understood by the converter."""

    COLOR = "color"
    DIMENSION = "dimension"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    NUMBER = "number"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"
    BORDER = "border"
    UNKNOWN = "unknown"


class TokenImportError(Exception):
    """Base exception for all sass-tokens errors."""


class CircularReferenceError(TokenImportError):
    """Raised when alias resolution revisits a token that is still resolving."""

    def __init__(self, reference: str):
        super().__init__(f"Circular alias reference detected: {reference}")
        self.reference = reference


class TokenFileError(TokenImportError):
    """Raised when a token file cannot be read or parsed."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path

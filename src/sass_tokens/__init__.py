"""sass-tokens - design token JSON to SCSS.

Convert W3C DTCG and Style Dictionary token files into SCSS variables or maps.

Example:
    from sass_tokens import compile_tokens, ImporterOptions, OutputMode

    document = {"color": {"$type": "color", "primary": {"$value": "#0066cc"}}}

    # Flat variables
    print(compile_tokens(document).contents)  # $color-primary: #0066cc;

    # Nested maps
    options = ImporterOptions(output=OutputMode.MAP)
    print(compile_tokens(document, options=options).contents)

    # As an importer for token directories
    from sass_tokens import TokenImporter

    importer = TokenImporter("tokens/")
    result = importer.load(importer.canonicalize("token:colors"))
"""

from sass_tokens.converter import convert_value, infer_sub_type
from sass_tokens.detect import detect_format
from sass_tokens.errors import (
    CircularReferenceError,
    OutputMode,
    TokenFileError,
    TokenFormat,
    TokenImportError,
    TokenType,
)
from sass_tokens.extract import extract_tokens
from sass_tokens.generator import generate_scss, sanitize_name
from sass_tokens.importer import TOKEN_SCHEME, TokenImporter
from sass_tokens.pipeline import ImporterOptions, ImporterResult, compile_tokens
from sass_tokens.resolver import AliasResolver, resolve_aliases
from sass_tokens.tokens import TokenRecord

__version__ = "0.1.0"

__all__ = [
    # Main API
    "compile_tokens",
    "TokenImporter",
    "ImporterOptions",
    "ImporterResult",
    "TOKEN_SCHEME",
    # Pipeline stages
    "detect_format",
    "extract_tokens",
    "resolve_aliases",
    "AliasResolver",
    "convert_value",
    "infer_sub_type",
    "generate_scss",
    "sanitize_name",
    # Data model and enums
    "TokenRecord",
    "TokenFormat",
    "TokenType",
    "OutputMode",
    # Errors
    "TokenImportError",
    "CircularReferenceError",
    "TokenFileError",
]

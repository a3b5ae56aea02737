"""Token document to SCSS pipeline: detect, extract, resolve, generate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from sass_tokens.detect import detect_format
from sass_tokens.errors import OutputMode, TokenFormat
from sass_tokens.extract import extract_tokens
from sass_tokens.generator import generate_scss
from sass_tokens.resolver import resolve_aliases

log = logging.getLogger(__name__)

SCSS_SYNTAX = "scss"


@dataclass(frozen=True)
class ImporterOptions:
    """Conversion settings shared by the importer and the CLI.

    ``output`` accepts an OutputMode or its string value (``"variables"`` or
    ``"map"``).

    Raises:
        ValueError: If the output mode is not recognized.
    """

    output: OutputMode = OutputMode.VARIABLES
    resolve_aliases: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.output, OutputMode):
            return
        try:
            output = OutputMode(self.output)
        except ValueError:
            allowed = ", ".join(mode.value for mode in OutputMode)
            raise ValueError(
                f"Unknown output mode '{self.output}'. Expected one of: {allowed}."
            ) from None
        object.__setattr__(self, "output", output)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> ImporterOptions:
        """Build options from ``{"output": ..., "resolveAliases": ...}``."""
        if not options:
            return cls()
        output = options.get("output") or OutputMode.VARIABLES
        resolve = options.get("resolveAliases", options.get("resolve_aliases"))
        return cls(output=output, resolve_aliases=True if resolve is None else bool(resolve))


@dataclass(frozen=True)
class ImporterResult:
    """Rendered stylesheet fragment handed back to the Sass compiler."""

    contents: str
    syntax: str = SCSS_SYNTAX


def compile_tokens(
    document: Any,
    token_format: TokenFormat | None = None,
    options: ImporterOptions | None = None,
) -> ImporterResult:
    """Convert a parsed token document into SCSS.

    Args:
        document: Parsed JSON token data.
        token_format: Dialect of the document; detected when omitted.
        options: Output mode and alias handling.

    Returns:
        ImporterResult with the SCSS contents.

    Raises:
        CircularReferenceError: If alias resolution finds a cycle.
    """
    options = options or ImporterOptions()
    if token_format is None:
        token_format = detect_format(document)

    records = extract_tokens(document, token_format)
    if options.resolve_aliases:
        records = resolve_aliases(records)

    contents = generate_scss(records, options.output)
    log.debug("Generated SCSS %s for %d tokens", options.output.value, len(records))
    return ImporterResult(contents=contents)

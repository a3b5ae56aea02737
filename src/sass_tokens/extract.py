"""Flatten token documents into ordered token records."""

from __future__ import annotations

import logging
from typing import Any

from sass_tokens.converter import STYLE_DICTIONARY_TYPE_ALIASES
from sass_tokens.detect import METADATA_PREFIX
from sass_tokens.errors import TokenFormat, TokenType
from sass_tokens.tokens import TokenRecord

log = logging.getLogger(__name__)


def extract_tokens(document: Any, token_format: TokenFormat) -> list[TokenRecord]:
    """Extract flat token records from a token tree.

    Records are returned in document order. A document whose root is itself
    a token leaf yields no records, since a token needs a non-empty path.

    Args:
        document: Parsed JSON token data.
        token_format: Dialect of the document.

    Returns:
        List of TokenRecord in traversal order.
    """
    records: list[TokenRecord] = []

    if token_format == TokenFormat.DTCG:
        _walk_dtcg(document, [], None, records)
    else:
        _walk_style_dictionary(document, [], records)

    log.debug("Extracted %d tokens from %s document", len(records), token_format.value)
    return records


def _walk_dtcg(
    node: Any,
    path: list[str],
    inherited_type: str | None,
    records: list[TokenRecord],
) -> None:
    if not isinstance(node, dict):
        return

    effective_type = node.get("$type") or inherited_type
    if "$value" in node:
        if path:
            records.append(
                TokenRecord(
                    path=path,
                    type=effective_type or TokenType.UNKNOWN.value,
                    value=node["$value"],
                )
            )
        return

    for key, child in node.items():
        if key.startswith(METADATA_PREFIX):
            continue
        _walk_dtcg(child, [*path, key], effective_type, records)


def _walk_style_dictionary(
    node: Any,
    path: list[str],
    records: list[TokenRecord],
) -> None:
    if not isinstance(node, dict):
        return

    if "value" in node and "type" in node:
        if path:
            raw_type = node["type"] if isinstance(node["type"], str) else ""
            token_type = STYLE_DICTIONARY_TYPE_ALIASES.get(raw_type, raw_type)
            records.append(
                TokenRecord(
                    path=path,
                    type=token_type or TokenType.UNKNOWN.value,
                    value=node["value"],
                )
            )
        return

    for key, child in node.items():
        _walk_style_dictionary(child, [*path, key], records)

"""Token document dialect detection."""

from __future__ import annotations

import logging
from typing import Any

from sass_tokens.errors import TokenFormat

log = logging.getLogger(__name__)

METADATA_PREFIX = "$"


def detect_format(document: Any) -> TokenFormat:
    """Classify a parsed token document as DTCG or Style Dictionary.

    Any node carrying ``$value`` marks the document as DTCG, wherever it is.
    Otherwise a node carrying both ``value`` and ``type`` marks it as Style
    Dictionary. Documents without any leaf (including empty ones) default to
    DTCG. The result does not depend on key order.

    Args:
        document: Parsed JSON token data.

    Returns:
        The detected TokenFormat.
    """
    stack = [document]
    style_dictionary_leaf = False
    while stack:
        node = stack.pop()
        if not isinstance(node, dict):
            continue
        if "$value" in node:
            log.debug("Detected DTCG token document")
            return TokenFormat.DTCG
        if "value" in node and "type" in node:
            style_dictionary_leaf = True
        for key, child in node.items():
            if not key.startswith(METADATA_PREFIX):
                stack.append(child)

    if style_dictionary_leaf:
        log.debug("Detected Style Dictionary token document")
        return TokenFormat.STYLE_DICTIONARY

    log.debug("No token leaves found, defaulting to DTCG")
    return TokenFormat.DTCG

"""Token records and alias reference helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

ALIAS_PATTERN = re.compile(r"\{(.+)\}")


@dataclass
class TokenRecord:
    """A single design token flattened out of a token document."""

    path: list[str] = field(default_factory=list)  # Root to leaf, metadata keys excluded
    type: str = "unknown"
    value: Any = None

    @property
    def key(self) -> str:
        """Identity key used for alias lookup, e.g. ``color.primary``."""
        return ".".join(self.path)


def alias_target(value: Any) -> str | None:
    """Return the referenced key if ``value`` is a whole-string alias."""
    if not isinstance(value, str):
        return None
    match = ALIAS_PATTERN.fullmatch(value)
    return match.group(1) if match else None

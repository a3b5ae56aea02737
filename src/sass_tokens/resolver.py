"""Alias resolution across the tokens of a single document."""

from __future__ import annotations

import logging
from typing import Any

from sass_tokens.errors import CircularReferenceError
from sass_tokens.tokens import TokenRecord, alias_target

log = logging.getLogger(__name__)


class AliasResolver:
    """Resolves ``{group.token}`` references depth-first.

    Tokens are tracked with two sets: keys currently being resolved
    (``visiting``) and records already finished (``resolved``). Reaching a
    key that is still visiting means the reference graph has a cycle.

    The lookup table is last-write-wins when a document repeats a path.
    """

    def __init__(self, records: list[TokenRecord]) -> None:
        self._records = records
        self._lookup: dict[str, TokenRecord] = {}
        for record in records:
            self._lookup[record.key] = record
        self._visiting: set[str] = set()
        self._resolved: set[int] = set()

    def resolve(self) -> list[TokenRecord]:
        """Resolve every record in place and return the same list."""
        for record in self._records:
            self._resolve_record(record)
        return self._records

    def _resolve_record(self, record: TokenRecord) -> None:
        if id(record) in self._resolved:
            return

        key = record.key
        self._visiting.add(key)
        try:
            record.value = self._resolve_value(record.value)
        finally:
            self._visiting.discard(key)
        self._resolved.add(id(record))

    def _resolve_value(self, value: Any) -> Any:
        if isinstance(value, str):
            reference = alias_target(value)
            if reference is None:
                return value
            if reference in self._visiting:
                raise CircularReferenceError(reference)
            target = self._lookup.get(reference)
            if target is None:
                log.debug("Leaving unresolvable alias %s", value)
                return value
            self._resolve_record(target)
            return target.value

        if isinstance(value, dict):
            return {name: self._resolve_value(field) for name, field in value.items()}

        # Lists are left as-is, including any aliases inside them.
        return value


def resolve_aliases(records: list[TokenRecord]) -> list[TokenRecord]:
    """Replace alias values with the referenced token's resolved value.

    Args:
        records: Tokens extracted from one document. Mutated in place.

    Returns:
        The same list, with aliases substituted.

    Raises:
        CircularReferenceError: If aliases reference each other in a cycle.
    """
    return AliasResolver(records).resolve()

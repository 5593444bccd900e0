"""Key/value annotation entries attached to actions, triggers and sequences.

Annotation lists are ordered and may carry duplicate keys.  The helpers here
never mutate their input; each returns a fresh list.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class KeyValue(BaseModel):
    key: str
    value: Any = None


type KeyValueArr = list[KeyValue]


def find_key(key: str, arr: KeyValueArr | None) -> KeyValue | None:
    """Return the first entry with ``key``, or ``None``."""
    for kv in arr or []:
        if kv.key == key:
            return kv
    return None


def delete_key(key: str, arr: KeyValueArr | None, *, all_occurrences: bool = False) -> KeyValueArr:
    """Drop ``key`` from the list.

    By default only the first match is removed, so a list that already holds
    duplicates keeps the later copies.
    """
    result = list(arr or [])
    if all_occurrences:
        return [kv for kv in result if kv.key != key]

    for i, kv in enumerate(result):
        if kv.key == key:
            del result[i]
            break
    return result


def add_key_value(key: str, value: Any, arr: KeyValueArr | None) -> KeyValueArr:
    """Append ``key=value`` at the end of the list."""
    return [*(arr or []), KeyValue(key=key, value=value)]

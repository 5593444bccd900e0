"""Shared enumerations used across the deployer."""

from __future__ import annotations

from enum import StrEnum

# -- Web export --------------------------------------------------------------


class WebExportMode(StrEnum):
    """Target state for the web-export annotation triple."""

    ENABLED = "enabled"
    DISABLED = "disabled"
    RAW = "raw"


class DedupMode(StrEnum):
    """How many occurrences of a web annotation key are stripped before re-adding."""

    FIRST = "first"
    ALL = "all"


# -- Runtime -----------------------------------------------------------------


class JavaGuard(StrEnum):
    """Which kinds the missing-main-class check applies to.

    ``literal`` only matches the bare kind ``java``; ``normalized`` also
    matches versioned kinds such as ``java:default``.
    """

    LITERAL = "literal"
    NORMALIZED = "normalized"


# -- Values ------------------------------------------------------------------


class JSONKind(StrEnum):
    """Canonical JSON type names for parameter values."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

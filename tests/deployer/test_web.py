"""Unit tests for web action annotation reconciliation."""

from __future__ import annotations

import pytest

from wskpack.deployer.execution.web import (
    FINAL_ANNOT,
    RAW_HTTP_ANNOT,
    WEB_EXPORT_ANNOT,
    InvalidWebModeError,
    delete_web_annotation_keys,
    parse_web_mode,
    web_action,
)
from wskpack.deployer.models.annotations import KeyValue
from wskpack.deployer.models.enums import DedupMode, WebExportMode


def _pairs(annotations: list[KeyValue] | None) -> list[tuple[str, object]]:
    return [(kv.key, kv.value) for kv in annotations or []]


# ---------------------------------------------------------------------------
# Mode parsing
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("yes", WebExportMode.ENABLED),
        ("true", WebExportMode.ENABLED),
        ("TRUE", WebExportMode.ENABLED),
        ("Yes", WebExportMode.ENABLED),
        ("no", WebExportMode.DISABLED),
        ("false", WebExportMode.DISABLED),
        ("No", WebExportMode.DISABLED),
        ("raw", WebExportMode.RAW),
        ("RAW", WebExportMode.RAW),
        (True, WebExportMode.ENABLED),
        (False, WebExportMode.DISABLED),
        (WebExportMode.RAW, WebExportMode.RAW),
    ],
)
def test_parse_web_mode(value: str | bool | WebExportMode, expected: WebExportMode) -> None:
    assert parse_web_mode(value) == expected


@pytest.mark.parametrize("value", ["bogus", "", "enabled", "1", "BoGuS"])
def test_parse_web_mode_invalid(value: str) -> None:
    with pytest.raises(InvalidWebModeError) as exc_info:
        parse_web_mode(value)

    assert str(exc_info.value) == value
    assert exc_info.value.mode == value


# ---------------------------------------------------------------------------
# Target states
# ---------------------------------------------------------------------------


def test_enabled_from_empty() -> None:
    result = web_action("yes", [], "hello", False)

    assert _pairs(result) == [(WEB_EXPORT_ANNOT, True), (RAW_HTTP_ANNOT, False), (FINAL_ANNOT, True)]


def test_disabled_from_empty() -> None:
    result = web_action("no", None, "hello", False)

    assert _pairs(result) == [(WEB_EXPORT_ANNOT, False), (RAW_HTTP_ANNOT, False), (FINAL_ANNOT, False)]


def test_raw_from_empty() -> None:
    result = web_action("raw", [], "hello", False)

    assert _pairs(result) == [(WEB_EXPORT_ANNOT, True), (RAW_HTTP_ANNOT, True), (FINAL_ANNOT, True)]


def test_wire_key_literals() -> None:
    assert (WEB_EXPORT_ANNOT, RAW_HTTP_ANNOT, FINAL_ANNOT) == ("web-export", "raw-http", "final")


@pytest.mark.parametrize("start", ["yes", "no", "raw"])
def test_enabled_regardless_of_starting_state(start: str) -> None:
    initial = web_action(start, [], "hello", False)

    result = web_action("true", initial, "hello", False)

    assert _pairs(result) == [(WEB_EXPORT_ANNOT, True), (RAW_HTTP_ANNOT, False), (FINAL_ANNOT, True)]


# ---------------------------------------------------------------------------
# Ordering and preservation
# ---------------------------------------------------------------------------


def test_other_annotations_keep_order() -> None:
    annotations = [
        KeyValue(key="description", value="Backup"),
        KeyValue(key=WEB_EXPORT_ANNOT, value=False),
        KeyValue(key="exec", value="nodejs:default"),
        KeyValue(key=FINAL_ANNOT, value=False),
    ]

    result = web_action("yes", annotations, "authorizedBackup", False)

    assert _pairs(result) == [
        ("description", "Backup"),
        ("exec", "nodejs:default"),
        (WEB_EXPORT_ANNOT, True),
        (RAW_HTTP_ANNOT, False),
        (FINAL_ANNOT, True),
    ]


def test_input_not_mutated() -> None:
    annotations = [KeyValue(key=WEB_EXPORT_ANNOT, value=False), KeyValue(key="a", value=1)]
    snapshot = _pairs(annotations)

    result = web_action("raw", annotations, "hello", False)

    assert _pairs(annotations) == snapshot
    assert result is not annotations


@pytest.mark.parametrize("mode", ["yes", "no", "raw"])
def test_idempotent(mode: str) -> None:
    annotations = [KeyValue(key="description", value="x"), KeyValue(key=RAW_HTTP_ANNOT, value=True)]

    once = web_action(mode, annotations, "hello", False)
    twice = web_action(mode, once, "hello", False)

    assert _pairs(twice) == _pairs(once)


# ---------------------------------------------------------------------------
# Fetch guard
# ---------------------------------------------------------------------------


def test_fetch_with_empty_annotations_is_deferred() -> None:
    annotations: list[KeyValue] = []

    result = web_action("yes", annotations, "hello", True)

    assert result is annotations
    assert result == []


def test_fetch_with_none_annotations_is_deferred() -> None:
    assert web_action("raw", None, "hello", True) is None


def test_fetch_with_existing_annotations_applies() -> None:
    annotations = [KeyValue(key="description", value="x")]

    result = web_action("no", annotations, "hello", True)

    assert _pairs(result) == [
        ("description", "x"),
        (WEB_EXPORT_ANNOT, False),
        (RAW_HTTP_ANNOT, False),
        (FINAL_ANNOT, False),
    ]


def test_invalid_mode_fails_even_when_deferred() -> None:
    with pytest.raises(InvalidWebModeError, match="^bogus$"):
        web_action("bogus", [], "hello", True)


def test_invalid_mode_fails() -> None:
    with pytest.raises(InvalidWebModeError) as exc_info:
        web_action("bogus", [KeyValue(key="a", value=1)], "hello", False)

    assert str(exc_info.value) == "bogus"


# ---------------------------------------------------------------------------
# Duplicate keys
# ---------------------------------------------------------------------------


def test_first_dedup_leaves_stale_duplicate() -> None:
    annotations = [
        KeyValue(key=WEB_EXPORT_ANNOT, value=False),
        KeyValue(key=WEB_EXPORT_ANNOT, value="stale"),
    ]

    result = web_action("yes", annotations, "hello", False)

    assert _pairs(result) == [
        (WEB_EXPORT_ANNOT, "stale"),
        (WEB_EXPORT_ANNOT, True),
        (RAW_HTTP_ANNOT, False),
        (FINAL_ANNOT, True),
    ]


def test_all_dedup_removes_every_duplicate() -> None:
    annotations = [
        KeyValue(key=WEB_EXPORT_ANNOT, value=False),
        KeyValue(key="keep", value=1),
        KeyValue(key=WEB_EXPORT_ANNOT, value="stale"),
        KeyValue(key=FINAL_ANNOT, value=False),
        KeyValue(key=FINAL_ANNOT, value=False),
    ]

    result = web_action("yes", annotations, "hello", False, dedup=DedupMode.ALL)

    assert _pairs(result) == [
        ("keep", 1),
        (WEB_EXPORT_ANNOT, True),
        (RAW_HTTP_ANNOT, False),
        (FINAL_ANNOT, True),
    ]


def test_delete_web_annotation_keys() -> None:
    annotations = [
        KeyValue(key=RAW_HTTP_ANNOT, value=True),
        KeyValue(key="other", value="v"),
        KeyValue(key=FINAL_ANNOT, value=True),
    ]

    assert _pairs(delete_web_annotation_keys(annotations)) == [("other", "v")]
    assert delete_web_annotation_keys(None) == []

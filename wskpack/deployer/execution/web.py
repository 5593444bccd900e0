"""Web action annotations.

An action (or sequence) is exposed over HTTP through three annotations whose
keys are a wire contract with the platform:

=========  ==========  ========  =====
mode       web-export  raw-http  final
=========  ==========  ========  =====
enabled    true        false     true
disabled   false       false     false
raw        true        true      true
=========  ==========  ========  =====

``web_action`` strips whatever web keys are present and appends a fresh
triple, so applying the same mode twice gives the same list.
"""

from __future__ import annotations

from loguru import logger

from wskpack.deployer.models.annotations import KeyValueArr, add_key_value, delete_key
from wskpack.deployer.models.enums import DedupMode, WebExportMode

WEB_EXPORT_ANNOT = "web-export"
RAW_HTTP_ANNOT = "raw-http"
FINAL_ANNOT = "final"

WEB_ANNOTATION_KEYS = (WEB_EXPORT_ANNOT, RAW_HTTP_ANNOT, FINAL_ANNOT)

_MODE_ALIASES: dict[str, WebExportMode] = {
    "yes": WebExportMode.ENABLED,
    "true": WebExportMode.ENABLED,
    "no": WebExportMode.DISABLED,
    "false": WebExportMode.DISABLED,
    "raw": WebExportMode.RAW,
}

_MODE_VALUES: dict[WebExportMode, tuple[bool, bool, bool]] = {
    WebExportMode.ENABLED: (True, False, True),
    WebExportMode.DISABLED: (False, False, False),
    WebExportMode.RAW: (True, True, True),
}


class InvalidWebModeError(ValueError):
    """Unknown web-export mode.  The message is the offending value."""

    def __init__(self, mode: str) -> None:
        super().__init__(mode)
        self.mode = mode


def parse_web_mode(value: str | bool | WebExportMode) -> WebExportMode:
    """Map ``yes``/``true``/``no``/``false``/``raw`` (any case) to a mode.

    YAML manifests often yield real booleans, so ``True``/``False`` are
    accepted as well.
    """
    if isinstance(value, WebExportMode):
        return value
    text = str(value).lower() if isinstance(value, bool) else str(value)
    try:
        return _MODE_ALIASES[text.lower()]
    except KeyError:
        raise InvalidWebModeError(text) from None


def web_action(
    mode: str | bool | WebExportMode,
    annotations: KeyValueArr | None,
    entity_name: str,
    fetch: bool,
    *,
    dedup: DedupMode = DedupMode.FIRST,
) -> KeyValueArr | None:
    """Return ``annotations`` with the web triple set for ``mode``.

    When ``fetch`` is set and no annotations are known yet, the input is
    returned unchanged; the caller re-invokes once the current annotations
    have been fetched from the platform.

    Raises ``InvalidWebModeError`` for an unknown mode.
    """
    web_mode = parse_web_mode(mode)

    if not annotations and fetch:
        logger.debug("Web annotations for {} deferred until annotations are fetched", entity_name)
        return annotations

    result = delete_web_annotation_keys(annotations, dedup=dedup)
    for key, value in zip(WEB_ANNOTATION_KEYS, _MODE_VALUES[web_mode], strict=True):
        result = add_key_value(key, value, result)

    logger.debug("Web annotations for {} set to {}", entity_name, web_mode)
    return result


def delete_web_annotation_keys(annotations: KeyValueArr | None, *, dedup: DedupMode = DedupMode.FIRST) -> KeyValueArr:
    """Remove the web triple from ``annotations``.

    ``DedupMode.FIRST`` removes one occurrence per key, leaving later
    duplicates in place; ``DedupMode.ALL`` removes every occurrence.
    """
    result = list(annotations or [])
    for key in WEB_ANNOTATION_KEYS:
        result = delete_key(key, result, all_occurrences=dedup == DedupMode.ALL)
    return result

"""Data models for the deployer."""

from wskpack.deployer.models.annotations import KeyValue, KeyValueArr, add_key_value, delete_key, find_key
from wskpack.deployer.models.entities import Action, Rule, Trigger
from wskpack.deployer.models.enums import DedupMode, JavaGuard, JSONKind, WebExportMode
from wskpack.deployer.models.exec import BLACKBOX_KIND, Exec
from wskpack.deployer.models.records import ActionExposedURLBinding, ActionRecord, RuleRecord, TriggerRecord
from wskpack.deployer.models.values import (
    EnvironmentReference,
    LiteralValue,
    ParameterValue,
    json_kind,
    parse_parameter,
)

__all__ = [
    "BLACKBOX_KIND",
    "Action",
    "ActionExposedURLBinding",
    "ActionRecord",
    "DedupMode",
    "EnvironmentReference",
    "Exec",
    "JSONKind",
    "JavaGuard",
    "KeyValue",
    "KeyValueArr",
    "LiteralValue",
    "ParameterValue",
    "Rule",
    "RuleRecord",
    "Trigger",
    "TriggerRecord",
    "WebExportMode",
    "add_key_value",
    "delete_key",
    "find_key",
    "json_kind",
    "parse_parameter",
]

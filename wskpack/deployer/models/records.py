"""Deployment-plan records.

Each record pairs a platform entity with the package that owns it.  They are
built by the plan builder and read by the submitter; nothing here mutates
them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from wskpack.deployer.models.entities import Action, Rule, Trigger


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class ActionRecord(_Record):
    """Action plus the source file it was declared from in the manifest."""

    action: Action
    package_name: str
    filepath: str


class TriggerRecord(_Record):
    trigger: Trigger
    package_name: str


class RuleRecord(_Record):
    rule: Rule
    package_name: str


class ActionExposedURLBinding(_Record):
    """Binds an action to its exposed URL (``method/baseurl/relativeurl``)."""

    action_name: str
    exposed_url: str

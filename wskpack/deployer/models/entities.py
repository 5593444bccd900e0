"""Platform entities referenced by the deployment plan.

Only the fields the deployer reads or writes are modelled; the submitter
adds whatever else the platform request needs.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from wskpack.deployer.models.annotations import KeyValue, find_key
from wskpack.deployer.models.exec import Exec

FEED_ANNOT = "feed"


class Action(BaseModel):
    name: str
    namespace: str | None = None
    exec: Exec | None = None
    annotations: list[KeyValue] = Field(default_factory=list)
    parameters: list[KeyValue] = Field(default_factory=list)


class Trigger(BaseModel):
    name: str
    namespace: str | None = None
    annotations: list[KeyValue] = Field(default_factory=list)
    parameters: list[KeyValue] = Field(default_factory=list)

    @property
    def feed_action(self) -> str | None:
        """Feed action name if the trigger is backed by a feed, else ``None``.

        Alarm-based triggers carry a ``feed`` annotation such as
        ``/whisk.system/alarms/alarm``.
        """
        kv = find_key(FEED_ANNOT, self.annotations)
        if kv is None:
            return None
        return str(kv.value)


class Rule(BaseModel):
    name: str
    trigger: str
    action: str
    namespace: str | None = None

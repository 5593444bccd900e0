"""Execution descriptor handed to the deployment submitter."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

BLACKBOX_KIND = "blackbox"


class Exec(BaseModel):
    """Runtime kind plus code, image or main class for one action.

    Attributes
    ----------
    kind:
        Platform runtime identifier, e.g. ``nodejs:default`` or ``blackbox``.
    code:
        Inline source, or a base64 payload for zip bundles.  Unset for
        ``.jar`` artifacts and plain docker images.
    image:
        Container image reference; only set for docker (``blackbox``) actions.
    main:
        Entry point, typically the fully-qualified Java main class.
    """

    kind: str = Field(min_length=1)
    code: str | None = None
    image: str | None = None
    main: str | None = None

    @property
    def is_blackbox(self) -> bool:
        return self.kind == BLACKBOX_KIND

    def to_payload(self) -> dict[str, Any]:
        """Wire dict for the action-creation request (unset fields omitted)."""
        return self.model_dump(exclude_none=True)

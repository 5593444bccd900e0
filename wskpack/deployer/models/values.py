"""Parameter value models.

Manifest parameters are either literal values or ``$NAME`` references to
environment variables.  They are parsed once into a tagged union so callers
resolve them explicitly instead of inspecting types at substitution time.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from wskpack.deployer.models.enums import JSONKind

ENV_PREFIX = "$"


class LiteralValue(BaseModel):
    type: Literal["literal"] = "literal"
    value: Any = None

    def resolve(self, environ: Mapping[str, str] | None = None) -> Any:
        return self.value


class EnvironmentReference(BaseModel):
    type: Literal["env"] = "env"
    name: str

    def resolve(self, environ: Mapping[str, str] | None = None) -> str:
        """Value of the variable, or the bare name if it is unset or empty."""
        env = os.environ if environ is None else environ
        return env.get(self.name) or self.name


ParameterValue = Annotated[LiteralValue | EnvironmentReference, Field(discriminator="type")]


def parse_parameter(raw: Any) -> LiteralValue | EnvironmentReference:
    """Classify a raw manifest value.

    ``"$HOME"`` becomes ``EnvironmentReference(name="HOME")``.  Only the text
    between the first and second ``$`` is used as the name, so ``"$A$B"``
    refers to ``A``.
    """
    if isinstance(raw, str) and raw.startswith(ENV_PREFIX):
        return EnvironmentReference(name=raw.split(ENV_PREFIX)[1])
    return LiteralValue(value=raw)


def json_kind(value: Any) -> JSONKind:
    """Canonical JSON type name for a decoded JSON value."""
    match value:
        case None:
            return JSONKind.NULL
        # bool before int: bool is an int subclass
        case bool():
            return JSONKind.BOOLEAN
        case int():
            return JSONKind.INTEGER
        case float():
            return JSONKind.NUMBER
        case str():
            return JSONKind.STRING
        case list() | tuple():
            return JSONKind.ARRAY
        case dict():
            return JSONKind.OBJECT
        case _:
            msg = f"{type(value).__name__} is not a JSON value type"
            raise TypeError(msg)

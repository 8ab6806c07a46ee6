from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StrictStr


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


NonBlankStr = Annotated[StrictStr, AfterValidator(_not_blank)]


class FrontmatterRecord(BaseModel):
    """Metadata header of an agent, skill or command markdown file."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: NonBlankStr
    description: NonBlankStr
    # Advisory only; a non-string value is warned about, never rejected.
    model: object = None
    location: object = None

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class TextSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class LineBreak(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["break"] = "break"
    key: str  # render identity, e.g. "br-0"


Segment = Annotated[Union[TextSegment, LineBreak], Field(discriminator="kind")]

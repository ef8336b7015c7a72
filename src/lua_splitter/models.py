from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator


class SimpleName(BaseModel):
    kind: Literal["name"] = "name"
    name: str


class MemberAccess(BaseModel):
    kind: Literal["member"] = "member"
    base: "NameChain"
    indexer: Literal[".", ":"]
    member: str


NameChain = Annotated[SimpleName | MemberAccess, Field(discriminator="kind")]

MemberAccess.model_rebuild()  # necessary for recursive types


class ByteRange(BaseModel):
    """Half-open ``[start, end)`` offsets into the original source bytes."""

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_order(self) -> "ByteRange":
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) precedes start ({self.start})")
        return self


class SplitShape(str, Enum):
    DECLARATION = "declaration"
    LOCAL_LITERAL = "local_literal"
    ASSIGNED_LITERAL = "assigned_literal"


class SplitTarget(BaseModel):
    shape: SplitShape
    name: NameChain
    symbol: str
    parameters: list[str]
    function: ByteRange
    statement: ByteRange
    is_local: bool
    lhs_text: str


class Replacement(BaseModel):
    start: int
    end: int
    text: str


class ModuleRecord(BaseModel):
    symbol: str
    filename: str
    text: str
    degraded: bool = False


class SplitResult(BaseModel):
    modules: list[ModuleRecord]
    replacements: list[Replacement]
    modified_text: str

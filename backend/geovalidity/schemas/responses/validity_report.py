from typing import Literal
from pydantic import BaseModel, Field


class Position(BaseModel):
    type: str
    geometry_index: int | None = None
    ring: Literal["exterior", "interior"] | None = None
    ring_index: int | None = None
    coordinate_index: int | None = None
    whole_element: bool = False
    # Position inside a member of a geometry collection
    inner: 'Position | None' = None

class ProblemEntry(BaseModel):
    problem: str
    position: Position
    description: str

class ValidityReport(BaseModel):
    is_valid: bool
    problems: list[ProblemEntry] = Field(default_factory=list)

Position.model_rebuild()

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple


class PitchEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    pitcher_name: str
    pitch_type: str
    # Not used for grouping; carried through to the pitcher summary
    team_name: Optional[str] = None


class TypeSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    count: int = Field(ge=0)


class CategorySummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    total: int = Field(ge=0)
    types: Tuple[TypeSummary, ...] = ()


class PitcherSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    team_name: Optional[str] = None
    total: int = Field(ge=0)
    categories: Tuple[CategorySummary, ...] = ()


class Report(BaseModel):
    model_config = ConfigDict(frozen=True)

    game_pk: Optional[int] = None
    pitchers: Tuple[PitcherSummary, ...] = ()

    @property
    def total(self) -> int:
        return sum(p.total for p in self.pitchers)


# Service request bodies
class AggregateRequest(BaseModel):
    events: list[PitchEvent]

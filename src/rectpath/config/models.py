from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class SimModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    max_ticks: int = 10_000  # per run; one tick = one unit of movement

    @field_validator("max_ticks")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_ticks must be > 0")
        return v


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1


# ----------------- PATH PLANNERS ---------------------


class PlannerStraightModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["straight"] = "straight"


class PlannerObstacleAvoidingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["obstacle_avoiding"] = "obstacle_avoiding"
    max_depth: int = 8  # nested detours before giving up with "no path"

    @field_validator("max_depth")
    @classmethod
    def _at_least_one(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_depth must be >= 1")
        return v


PlannerUnion = Annotated[
    PlannerStraightModel | PlannerObstacleAvoidingModel,
    Field(discriminator="kind"),
]


class MechanicsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    planner: PlannerUnion = Field(default_factory=PlannerObstacleAvoidingModel)


# ----------------- BOARD ---------------------


class ObjectModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["static", "interactable", "selectable"]
    x: float
    y: float
    width: float
    height: float

    @field_validator("width", "height")
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


class BoardModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    objects: list[ObjectModel] = Field(default_factory=list)


# ----------------- SCRIPTED INPUT ---------------------


class InputModel(BaseModel):
    """One translated input event, e.g. a click already mapped to board coordinates."""

    model_config = ConfigDict(extra="forbid")
    t: float
    kind: Literal["cursor", "left_click", "right_click"]
    x: float
    y: float


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str
    sim: SimModel = SimModel()
    log: LogModel = LogModel()
    mechanics: MechanicsModel = Field(default_factory=MechanicsModel)
    board: BoardModel = Field(default_factory=BoardModel)
    inputs: list[InputModel] = Field(default_factory=list)

    @model_validator(mode="after")
    def _inputs_within_run(self):
        late = [i.t for i in self.inputs if i.t < 0 or i.t > self.sim.max_ticks]
        if late:
            raise ValueError(f"input ticks must lie in [0, {self.sim.max_ticks}], got {late}")
        return self

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .status_snapshot import StatusSnapshot

SetupStep = Literal["install", "start", "pull", "ready"]


class Readiness(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: SetupStep
    required_model: str
    selected_model: str  # Model a client should talk to right now
    status: StatusSnapshot

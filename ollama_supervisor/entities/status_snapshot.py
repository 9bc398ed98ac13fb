from pydantic import BaseModel, ConfigDict, Field, model_validator


class StatusSnapshot(BaseModel):
    """Consolidated installed/running/models report for the model host."""

    model_config = ConfigDict(frozen=True)

    installed: bool
    running: bool
    models: tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def validate_models_require_running(self):
        # The inventory is never queried against a server known to be down
        if not self.running and self.models:
            raise ValueError("models must be empty when the server is not running")
        return self

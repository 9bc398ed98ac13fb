from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ModelRecord(BaseModel):
    name: str = Field(min_length=1)
    size: Optional[int] = None  # Size on disk in bytes
    modified_at: Optional[str] = None  # Timestamp exactly as reported by the host

    @field_validator("size", mode="before")
    @classmethod
    def validate_size(cls, v: Any):
        # Metadata is optional; an unusable value is dropped rather than rejecting the record
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            return None
        return v

    @field_validator("modified_at", mode="before")
    @classmethod
    def validate_modified_at(cls, v: Any):
        if not isinstance(v, str) or not v:
            return None
        return v

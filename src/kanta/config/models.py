from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class KantaSettings(BaseModel):
    source_location: bool = True
    source_boundaries: list[str] = Field(default_factory=list)
    passthrough_modules: list[str] = Field(
        default_factory=lambda: ["_pytest", "pytest", "unittest"]
    )
    diff_context_lines: int = Field(default=3, ge=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

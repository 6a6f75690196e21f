"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, roverctl.toml only contains overrides.
An empty file (or none at all) runs missions under the strict, fail-fast rules.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from roverctl.domain.models import Plateau
from roverctl.domain.types import BoundaryPolicy, ErrorMode

# --- roverctl.toml sections ---


class MissionConfig(BaseModel):
    """[mission] section."""

    model_config = {"frozen": True}

    boundary_policy: BoundaryPolicy = BoundaryPolicy.STRICT
    error_mode: ErrorMode = ErrorMode.FAIL_FAST


class GridConfig(BaseModel):
    """[grid] section — default plateau for single-rover ``drive``.

    Both bounds unset means an unbounded grid.
    """

    model_config = {"frozen": True}

    max_x: int | None = Field(default=None, ge=0)
    max_y: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_both_or_neither(self) -> GridConfig:
        if (self.max_x is None) != (self.max_y is None):
            msg = "[grid] needs both max_x and max_y, or neither"
            raise ValueError(msg)
        return self

    def plateau(self) -> Plateau | None:
        if self.max_x is None or self.max_y is None:
            return None
        return Plateau(max_x=self.max_x, max_y=self.max_y)


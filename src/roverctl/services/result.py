"""ServiceResult and ServiceError: what every MissionService method returns.

A failed result carries one ServiceError. When several rovers fail under
``--collect-errors`` the first failure supplies ``code`` and ``message``
and every failure message is listed in ``detail["errors"]``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Error code, human message, and structured detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def messages(self) -> list[str]:
        """Every reported message, collected errors included."""
        collected = self.detail.get("errors")
        if collected:
            return [str(m) for m in collected]
        return [self.message]


class ServiceResult(BaseModel):
    """Outcome of one mission operation.

    Attributes:
        ok: Whether every rover finished without error.
        op: ``"run_mission"``, ``"validate_mission"`` or ``"drive"``.
        data: Plateau, policy, per-rover rows and final positions.
        error: Set when ``ok`` is False.
        meta: Telemetry span tree under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

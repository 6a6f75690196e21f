"""MissionService — parse missions and drive rovers.

Pipeline: PARSE → EXECUTE (per rover) → RESPOND

The boundary policy and error mode come from settings. In ``fail-fast``
mode the first failure ends the run; in ``collect`` mode every rover is
attempted and all failures are reported together in
``error.detail["errors"]``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from roverctl.domain.errors import InvalidCommandError, ParseError, RoverError
from roverctl.domain.interpreter import Execution, execute, parse_commands
from roverctl.domain.models import Mission, Plateau, Position
from roverctl.domain.parser import parse_mission, parse_position
from roverctl.domain.types import BoundaryPolicy, ErrorMode
from roverctl.services.base import BaseService
from roverctl.services.result import ServiceError, ServiceResult
from roverctl.services.telemetry import get_current_span, trace_span, traced

logger = logging.getLogger(__name__)


def _plateau_dict(plateau: Plateau | None) -> dict[str, int] | None:
    if plateau is None:
        return None
    return {"max_x": plateau.max_x, "max_y": plateau.max_y}


def _rover_row(index: int, instructions: str, execution: Execution) -> dict[str, Any]:
    return {"index": index, "instructions": instructions, **execution.to_dict()}


def _parse_failure(op: str, exc: ParseError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=exc.code,
            message=str(exc),
            detail={"errors": exc.errors},
        ),
    )


class MissionService(BaseService):
    """Runs rover missions under the configured boundary policy."""

    @property
    def policy(self) -> BoundaryPolicy:
        return self._settings.mission.boundary_policy

    @property
    def collect(self) -> bool:
        return self._settings.mission.error_mode is ErrorMode.COLLECT

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @traced
    def run(self, lines: Iterable[str]) -> ServiceResult:
        """Parse a mission and execute every rover in order."""
        op = "run_mission"

        with trace_span("parse"):
            try:
                mission = parse_mission(lines, collect=self.collect)
            except ParseError as exc:
                logger.debug("Mission parse failed: %s", exc)
                return _parse_failure(op, exc)

        return self._execute_mission(op, mission)

    @traced
    def validate(self, lines: Iterable[str]) -> ServiceResult:
        """Parse a mission without executing it."""
        op = "validate_mission"
        try:
            mission = parse_mission(lines, collect=self.collect)
        except ParseError as exc:
            return _parse_failure(op, exc)

        plans = [
            {"index": i, "start": str(plan.start), "instructions": plan.instructions}
            for i, plan in enumerate(mission.plans, start=1)
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "plateau": _plateau_dict(mission.plateau),
                "rover_count": len(plans),
                "rovers": plans,
            },
        )

    @traced
    def drive(
        self,
        start: str | Position,
        commands: str,
        *,
        plateau: Plateau | None = None,
    ) -> ServiceResult:
        """Drive a single rover from *start* through *commands*.

        *plateau* falls back to the configured ``[grid]``; with neither the
        grid is unbounded.
        """
        op = "drive"
        policy = self.policy
        if plateau is None:
            plateau = self._settings.grid.plateau()

        if policy is BoundaryPolicy.WRAP and plateau is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="CONFIG_ERROR",
                    message="The wrap policy needs a bounded grid (use --grid MAX_X MAX_Y)",
                ),
            )

        try:
            position = start if isinstance(start, Position) else parse_position(start)
        except ParseError as exc:
            return _parse_failure(op, exc)

        if plateau is not None and not plateau.contains(position.x, position.y):
            return _parse_failure(
                op,
                ParseError(
                    f"Rover #1 start out of bounds: ({position.x},{position.y}) "
                    f"> plateau ({plateau.max_x},{plateau.max_y})"
                ),
            )

        try:
            parsed = parse_commands(commands)
            execution = execute(position, parsed, plateau=plateau, policy=policy)
        except InvalidCommandError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=exc.code,
                    message=str(exc),
                    detail={"char": exc.char, "index": exc.index},
                ),
            )
        except RoverError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code=exc.code, message=str(exc), detail={"errors": [str(exc)]}),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "plateau": _plateau_dict(plateau),
                "policy": str(policy),
                "rovers": [_rover_row(1, commands.strip(), execution)],
                "positions": [str(execution.final)],
            },
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _execute_mission(self, op: str, mission: Mission) -> ServiceResult:
        policy = self.policy
        rows: list[dict[str, Any]] = []
        errors: list[dict[str, Any]] = []

        for index, plan in enumerate(mission.plans, start=1):
            with trace_span(f"rover_{index}") as span:
                try:
                    execution = execute(
                        plan.start,
                        plan.commands,
                        plateau=mission.plateau,
                        policy=policy,
                        rover_index=index,
                    )
                except RoverError as exc:
                    logger.debug("Rover #%d failed: %s", index, exc)
                    errors.append({"rover": index, "code": exc.code, "message": str(exc)})
                    if not self.collect:
                        break
                    continue
                if span is not None:
                    span.annotate("final", str(execution.final))
                rows.append(_rover_row(index, plan.instructions, execution))

        root = get_current_span()
        if root is not None:
            root.annotate("rovers", len(mission.plans))
            root.annotate("policy", str(policy))

        if errors:
            first = errors[0]
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=first["code"],
                    message=first["message"],
                    detail={
                        "errors": [e["message"] for e in errors],
                        "failed": [e["rover"] for e in errors],
                        "positions": [row["final"] for row in rows],
                    },
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "plateau": _plateau_dict(mission.plateau),
                "policy": str(policy),
                "rovers": rows,
                "positions": [row["final"] for row in rows],
            },
        )

"""BaseService — foundation for roverctl services.

Every service receives the frozen :class:`RoverSettings` at construction
time and reads its mission policy from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roverctl.config.settings import RoverSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class MissionService(BaseService):
            def run(self, lines: list[str]) -> ServiceResult:
                policy = self._settings.mission.boundary_policy
                ...
    """

    def __init__(self, settings: RoverSettings) -> None:
        self._settings = settings

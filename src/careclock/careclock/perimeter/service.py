from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_location, require_positive
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..workers.model import Identity
from .model import Perimeter
from .repository import PerimeterRepository

logger = logging.getLogger(__name__)


class PerimeterEditor:
    """Capability to replace the perimeter, handed out to managers only."""

    def __init__(self, service: "PerimeterService", identity: Identity):
        self._service = service
        self.identity = identity

    def replace(self, center: Any, radius_km: Any, *, now: datetime | None = None) -> Perimeter:
        perimeter = self._service.set(center, radius_km, now=now)
        logger.info(
            "Perimeter replaced by %s: center=(%s, %s) radius_km=%s",
            self.identity.worker_id,
            perimeter.center_latitude,
            perimeter.center_longitude,
            perimeter.radius_km,
        )
        return perimeter


class PerimeterService:
    def __init__(self, perimeters: PerimeterRepository):
        self._perimeters = perimeters

    def get(self) -> Optional[Perimeter]:
        """Current perimeter; ``None`` means nothing is inside."""
        return self._perimeters.get_current()

    def set(self, center: Any, radius_km: Any, *, now: datetime | None = None) -> Perimeter:
        center = require_location(center, "center")
        radius_km = require_positive(radius_km, "radius_km")
        return self._perimeters.replace(center=center, radius_km=radius_km, now=now or now_local())

    def acquire_editor(self, identity: Identity) -> PerimeterEditor:
        if identity.role != Role.MANAGER:
            logger.warning("Perimeter edit denied for %s (%s)", identity.worker_id, identity.role.value)
            raise AuthorizationError("Only managers can configure the perimeter")
        return PerimeterEditor(self, identity)

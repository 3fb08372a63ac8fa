from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import BoundaryEvent
from ..perimeter.model import Perimeter
from .geomath import is_within
from .model import LatLng

logger = logging.getLogger(__name__)


class BoundaryWatcher:
    """Turns a stream of position samples into boundary-crossing events.

    Mirrors what the mobile client does between ledger calls: it only reports
    crossings, it never clocks anybody in or out. The first sample only primes
    the state.
    """

    def __init__(self) -> None:
        self._was_inside: Optional[bool] = None
        self._stopped = False

    @property
    def was_inside(self) -> Optional[bool]:
        return self._was_inside

    def stop(self) -> None:
        self._stopped = True

    def observe(self, point: LatLng, perimeter: Optional[Perimeter], *, clocked_in: bool) -> Optional[BoundaryEvent]:
        if self._stopped:
            return None

        inside = perimeter is not None and is_within(point, perimeter.center, perimeter.radius_meters)
        previous, self._was_inside = self._was_inside, inside

        if previous is None or previous == inside:
            return None
        if not inside and clocked_in:
            logger.info("Worker left the work area while clocked in")
            return BoundaryEvent.LEFT_WHILE_CLOCKED_IN
        if inside and not clocked_in:
            return BoundaryEvent.ENTERED_WHILE_CLOCKED_OUT
        return None

from datetime import datetime

from src.careclock.careclock.core.enums import BoundaryEvent
from src.careclock.careclock.geo.model import LatLng
from src.careclock.careclock.geo.watcher import BoundaryWatcher
from src.careclock.careclock.perimeter.model import Perimeter

T0 = datetime(2026, 2, 2, 9, 0)
PERIMETER = Perimeter(1, 0.0, 0.0, 1.0, T0, T0)
INSIDE = LatLng(0.0, 0.001)
OUTSIDE = LatLng(0.0, 0.05)


def test_first_sample_only_primes_state():
    watcher = BoundaryWatcher()

    assert watcher.observe(OUTSIDE, PERIMETER, clocked_in=True) is None
    assert watcher.was_inside is False


def test_leaving_while_clocked_in_raises_alert():
    watcher = BoundaryWatcher()
    watcher.observe(INSIDE, PERIMETER, clocked_in=True)

    assert watcher.observe(OUTSIDE, PERIMETER, clocked_in=True) == BoundaryEvent.LEFT_WHILE_CLOCKED_IN


def test_entering_while_clocked_out_raises_reminder():
    watcher = BoundaryWatcher()
    watcher.observe(OUTSIDE, PERIMETER, clocked_in=False)

    assert watcher.observe(INSIDE, PERIMETER, clocked_in=False) == BoundaryEvent.ENTERED_WHILE_CLOCKED_OUT


def test_no_event_without_crossing_or_when_state_matches():
    watcher = BoundaryWatcher()
    watcher.observe(INSIDE, PERIMETER, clocked_in=False)

    assert watcher.observe(INSIDE, PERIMETER, clocked_in=False) is None
    # Leaving while clocked out is expected, no alert.
    assert watcher.observe(OUTSIDE, PERIMETER, clocked_in=False) is None


def test_missing_perimeter_counts_as_outside():
    watcher = BoundaryWatcher()
    watcher.observe(INSIDE, PERIMETER, clocked_in=True)

    assert watcher.observe(INSIDE, None, clocked_in=True) == BoundaryEvent.LEFT_WHILE_CLOCKED_IN


def test_stopped_watcher_ignores_samples():
    watcher = BoundaryWatcher()
    watcher.observe(INSIDE, PERIMETER, clocked_in=True)
    watcher.stop()

    assert watcher.observe(OUTSIDE, PERIMETER, clocked_in=True) is None

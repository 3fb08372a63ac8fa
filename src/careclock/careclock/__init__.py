"""CareClock package.

Geofenced attendance engine for care workers, organized by feature modules
(geo, perimeter, workers, shifts, stats) with service/repository layers and a
thin Flask JSON controller layer.
"""

# core/services/proximity.py
"""Radius based "near me" lookups over the place catalog.

A search radius is approximated by a latitude/longitude rectangle rather than
a great-circle distance, so places near the corners of the box may lie a
little outside the true radius. Both ends of both ranges are inclusive.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from core.errors import InvalidInput
from core.sa.database import store_errors
from core.sa.models import Place
from core.sa.repositories.place import PlaceRepository

logger = logging.getLogger(__name__)

METERS_PER_DEGREE = 111_000
DEFAULT_RADIUS = 5000
MAX_RESULTS = 200

# Below this, cos(lat) is treated as zero: the query point sits on a pole
MIN_COSINE = 1e-12


@dataclass(frozen=True)
class BoundingBox:
    lat_min: float
    lat_max: float
    # None means every longitude matches
    lng_min: Optional[float]
    lng_max: Optional[float]

    @property
    def lng_unbounded(self) -> bool:
        return self.lng_min is None


def normalize_radius(radius: Optional[float]) -> float:
    """Default a missing radius and clamp negative ones to zero"""
    if radius is None:
        return float(DEFAULT_RADIUS)
    if not math.isfinite(radius):
        raise InvalidInput(f"radius must be a finite number, got {radius!r}")
    return max(float(radius), 0.0)


def bounding_box(lat: float, lng: float, radius: Optional[float] = None) -> BoundingBox:
    """Convert a point and a radius in meters into a bounding box.

    Args:
        lat: Latitude of the query point in degrees
        lng: Longitude of the query point in degrees
        radius: Search radius in meters; defaults to 5000, negatives count as 0

    Returns:
        BoundingBox with the longitude range left open when the point is close
        enough to a pole that the longitude delta degenerates.
    """
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise InvalidInput(f"lat/lng must be finite numbers, got ({lat!r}, {lng!r})")

    radius = normalize_radius(radius)
    lat_delta = radius / METERS_PER_DEGREE

    cos_lat = math.cos(math.radians(lat))
    if abs(cos_lat) < MIN_COSINE:
        return BoundingBox(lat - lat_delta, lat + lat_delta, None, None)

    lng_delta = radius / (METERS_PER_DEGREE * abs(cos_lat))
    if lng_delta >= 180:
        # The box already wraps the whole parallel
        return BoundingBox(lat - lat_delta, lat + lat_delta, None, None)

    return BoundingBox(lat - lat_delta, lat + lat_delta, lng - lng_delta, lng + lng_delta)


class ProximityResolver:
    def __init__(self, session: Session):
        self.session = session
        self.places = PlaceRepository(session)

    def find_near(self, lat: float, lng: float, radius: Optional[float] = None) -> List[Place]:
        """Get up to 200 places inside the bounding box around a point.

        Results come back in storage order; no distance sort is applied.
        """
        box = bounding_box(lat, lng, radius)
        logger.debug(
            "find_near lat=%s lng=%s radius=%s box=%s", lat, lng, radius, box
        )

        with store_errors(self.session):
            return self.places.find_in_box(
                box.lat_min, box.lat_max, box.lng_min, box.lng_max, limit=MAX_RESULTS
            )

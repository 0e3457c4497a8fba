import math
from dataclasses import dataclass

EQUATOR_LAT_DEGREE_IN_MILES = 69.172


@dataclass(frozen=True)
class BoundingBox:
    lat_max: float
    lat_min: float
    lon_max: float
    lon_min: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.lat_min <= lat <= self.lat_max and self.lon_min <= lng <= self.lon_max

    def as_dict(self) -> dict[str, dict[str, float]]:
        return {
            "lat": {"max": self.lat_max, "min": self.lat_min},
            "lon": {"max": self.lon_max, "min": self.lon_min},
        }


def bounding_box(latitude: float, longitude: float, mile_radius: float) -> BoundingBox:
    """Approximate a mile radius around a point with a lat/lon box.

    A degree of latitude is taken as its length at the equator. The longitude
    span is widened by the cosine of the southern edge, not of the center.
    Undefined at the poles.
    """
    lat_max = latitude + mile_radius / EQUATOR_LAT_DEGREE_IN_MILES
    lat_min = latitude - (lat_max - latitude)
    lon_max = longitude + mile_radius / (
        math.cos(lat_min * math.pi / 180) * EQUATOR_LAT_DEGREE_IN_MILES
    )
    lon_min = longitude - (lon_max - longitude)
    return BoundingBox(lat_max=lat_max, lat_min=lat_min, lon_max=lon_max, lon_min=lon_min)


def is_within_box(
    lat: float,
    lng: float,
    center_lat: float,
    center_lng: float,
    mile_radius: float,
) -> bool:
    """Approximate radius test: true when the point falls inside bounding_box().

    Points near the box corners can pass while being farther than
    mile_radius from the center.
    """
    return bounding_box(center_lat, center_lng, mile_radius).contains(lat, lng)

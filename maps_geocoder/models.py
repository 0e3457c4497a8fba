from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

Coordinate = float | int | str | None


class ResponseFormat(str, Enum):
    JSON = "json"
    XML = "xml"


def _is_set(value: Coordinate) -> bool:
    # Zero is a real coordinate (equator, prime meridian), only None and "" are unset.
    return value is not None and value != ""


def _as_tuple(value: str | Sequence[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class LatLng:
    lat: Coordinate = None
    lng: Coordinate = None

    @property
    def is_complete(self) -> bool:
        return _is_set(self.lat) and _is_set(self.lng)

    def formatted(self) -> str | None:
        """Return "lat,lng", or None when either part is unset."""
        if not self.is_complete:
            return None
        return f"{self.lat},{self.lng}"


@dataclass(frozen=True)
class Bounds:
    southwest: LatLng | None = None
    northeast: LatLng | None = None

    def formatted(self) -> str | None:
        """Return "swLat,swLng|neLat,neLng", or None unless both corners are complete."""
        if self.southwest is None or self.northeast is None:
            return None
        southwest = self.southwest.formatted()
        northeast = self.northeast.formatted()
        if southwest and northeast:
            return f"{southwest}|{northeast}"
        return None


@dataclass(frozen=True)
class GeocodeRequest:
    address: str | None = None
    response_format: ResponseFormat = ResponseFormat.JSON
    coordinates: LatLng | None = None
    bounds: Bounds | None = None
    region: str | None = None
    language: str | None = None
    result_types: tuple[str, ...] = field(default=())
    location_types: tuple[str, ...] = field(default=())
    api_key: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "response_format", ResponseFormat(self.response_format))
        object.__setattr__(self, "result_types", _as_tuple(self.result_types))
        object.__setattr__(self, "location_types", _as_tuple(self.location_types))

    @property
    def is_json(self) -> bool:
        return self.response_format is ResponseFormat.JSON

    @property
    def is_xml(self) -> bool:
        return self.response_format is ResponseFormat.XML

    def with_format(self, response_format: ResponseFormat | str) -> "GeocodeRequest":
        return replace(self, response_format=ResponseFormat(response_format))

    def with_address(self, address: str | None) -> "GeocodeRequest":
        return replace(self, address=address)

    def with_coordinates(self, lat: Coordinate, lng: Coordinate) -> "GeocodeRequest":
        return replace(self, coordinates=LatLng(lat, lng))

    def with_bounds(
        self,
        southwest_lat: Coordinate,
        southwest_lng: Coordinate,
        northeast_lat: Coordinate,
        northeast_lng: Coordinate,
    ) -> "GeocodeRequest":
        return replace(
            self,
            bounds=Bounds(
                LatLng(southwest_lat, southwest_lng),
                LatLng(northeast_lat, northeast_lng),
            ),
        )

    def with_bounds_southwest(self, lat: Coordinate, lng: Coordinate) -> "GeocodeRequest":
        northeast = self.bounds.northeast if self.bounds else None
        return replace(self, bounds=Bounds(LatLng(lat, lng), northeast))

    def with_bounds_northeast(self, lat: Coordinate, lng: Coordinate) -> "GeocodeRequest":
        southwest = self.bounds.southwest if self.bounds else None
        return replace(self, bounds=Bounds(southwest, LatLng(lat, lng)))

    def with_region(self, region: str | None) -> "GeocodeRequest":
        return replace(self, region=region)

    def with_language(self, language: str | None) -> "GeocodeRequest":
        return replace(self, language=language)

    def with_result_type(self, result_type: str | Sequence[str]) -> "GeocodeRequest":
        """Accepts a single type or a sequence of types."""
        return replace(self, result_types=_as_tuple(result_type))

    def with_location_type(self, location_type: str | Sequence[str]) -> "GeocodeRequest":
        return replace(self, location_types=_as_tuple(location_type))

    def with_api_key(self, api_key: str | None) -> "GeocodeRequest":
        return replace(self, api_key=api_key)

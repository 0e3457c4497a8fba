from urllib.parse import urlencode
from maps_geocoder.models import GeocodeRequest, ResponseFormat

GEOCODE_BASE_URL = "https://maps.googleapis.com/maps/api/geocode/"


def location_param(request: GeocodeRequest) -> tuple[str, str] | None:
    """Return the ("address", ...) or ("latlng", ...) pair that identifies the target.

    Address wins over coordinates when both are given.
    """
    if request.address:
        return "address", request.address
    latlng = request.coordinates.formatted() if request.coordinates else None
    if latlng:
        return "latlng", latlng
    return None


def build_query_string(request: GeocodeRequest) -> str:
    """Serialize a request into the geocode API's query string.

    Keys appear in a fixed order: address or latlng, bounds, region,
    language, result_type, location_type, key. Address wins over
    coordinates when both are given. Unset values are left out entirely.
    """
    params = {}
    location = location_param(request)
    if location:
        key, value = location
        params[key] = value

    params["bounds"] = request.bounds.formatted() if request.bounds else None
    params["region"] = request.region
    params["language"] = request.language
    params["result_type"] = "|".join(request.result_types)
    params["location_type"] = "|".join(request.location_types)

    params = {k: v for k, v in params.items() if v}

    if request.api_key:
        params["key"] = request.api_key

    return urlencode(params)


def build_request_url(
    request: GeocodeRequest,
    base_url: str = GEOCODE_BASE_URL,
    response_format: ResponseFormat | str | None = None,
) -> str:
    fmt = ResponseFormat(response_format or request.response_format)
    return f"{base_url}{fmt.value}?{build_query_string(request)}"

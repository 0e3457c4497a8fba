from urllib.parse import parse_qsl
from maps_geocoder.models import GeocodeRequest, ResponseFormat
from maps_geocoder.query import (
    GEOCODE_BASE_URL,
    build_query_string,
    build_request_url,
    location_param,
)


def _keys(query: str) -> list[str]:
    return [k for k, _ in parse_qsl(query)]


def test_address_only():
    query = build_query_string(GeocodeRequest("1600 Amphitheatre Parkway, Mountain View, CA"))
    assert query == "address=1600+Amphitheatre+Parkway%2C+Mountain+View%2C+CA"


def test_address_wins_over_coordinates():
    request = GeocodeRequest("Paris").with_coordinates(48.8566, 2.3522)
    query = build_query_string(request)
    assert _keys(query) == ["address"]
    assert "latlng" not in query


def test_coordinates_only():
    request = GeocodeRequest().with_coordinates(40.714224, -73.961452)
    query = build_query_string(request)
    assert query == "latlng=40.714224%2C-73.961452"
    assert dict(parse_qsl(query)) == {"latlng": "40.714224,-73.961452"}


def test_partial_coordinates_dropped():
    request = GeocodeRequest().with_coordinates(40.714224, "")
    assert build_query_string(request) == ""


def test_zero_coordinates_are_sent():
    request = GeocodeRequest().with_coordinates(0, 0)
    assert dict(parse_qsl(build_query_string(request))) == {"latlng": "0,0"}


def test_bounds_all_corners_set():
    request = GeocodeRequest("Winnetka").with_bounds(34.172684, -118.604794, 34.236144, -118.500938)
    params = dict(parse_qsl(build_query_string(request)))
    assert params["bounds"] == "34.172684,-118.604794|34.236144,-118.500938"


def test_bounds_missing_one_corner_value_dropped():
    for args in [
        (None, -118.6, 34.23, -118.5),
        (34.17, None, 34.23, -118.5),
        (34.17, -118.6, "", -118.5),
        (34.17, -118.6, 34.23, None),
    ]:
        request = GeocodeRequest("Winnetka").with_bounds(*args)
        assert "bounds" not in _keys(build_query_string(request))


def test_result_types_pipe_joined():
    request = GeocodeRequest().with_coordinates(40.7, -73.9).with_result_type(["city", "country"])
    query = build_query_string(request)
    assert "result_type=city%7Ccountry" in query


def test_location_types_keep_duplicates():
    request = GeocodeRequest("Paris").with_location_type(["ROOFTOP", "ROOFTOP"])
    params = dict(parse_qsl(build_query_string(request)))
    assert params["location_type"] == "ROOFTOP|ROOFTOP"


def test_key_order_is_fixed():
    request = (
        GeocodeRequest()
        .with_api_key("secret")
        .with_location_type("ROOFTOP")
        .with_result_type("street_address")
        .with_language("es")
        .with_region("es")
        .with_bounds(1, 2, 3, 4)
        .with_address("Toledo")
    )
    assert _keys(build_query_string(request)) == [
        "address",
        "bounds",
        "region",
        "language",
        "result_type",
        "location_type",
        "key",
    ]


def test_empty_request_only_has_key():
    assert build_query_string(GeocodeRequest()) == ""
    assert build_query_string(GeocodeRequest().with_api_key("abc")) == "key=abc"


def test_empty_strings_are_dropped():
    request = GeocodeRequest("", region="", language="", api_key="")
    assert build_query_string(request) == ""


def test_build_request_url_json():
    url = build_request_url(GeocodeRequest("Paris"))
    assert url == "https://maps.googleapis.com/maps/api/geocode/json?address=Paris"


def test_build_request_url_uses_request_format():
    url = build_request_url(GeocodeRequest("Paris", ResponseFormat.XML))
    assert url == f"{GEOCODE_BASE_URL}xml?address=Paris"


def test_build_request_url_explicit_format_and_base():
    url = build_request_url(GeocodeRequest("Paris"), "http://localhost/geocode/", "xml")
    assert url == "http://localhost/geocode/xml?address=Paris"


def test_location_param():
    assert location_param(GeocodeRequest("Paris").with_coordinates(1, 2)) == ("address", "Paris")
    assert location_param(GeocodeRequest().with_coordinates(1, 2)) == ("latlng", "1,2")
    assert location_param(GeocodeRequest().with_coordinates(1, None)) is None
    assert location_param(GeocodeRequest()) is None

import logging
from maps_geocoder.client import GeocodeClient
from maps_geocoder.config import GEOCODER_CONFIG, get_api_key
from maps_geocoder.decode import GeocodeResponse, decode_response
from maps_geocoder.models import GeocodeRequest
from maps_geocoder.query import GEOCODE_BASE_URL, build_request_url, location_param

logger = logging.getLogger(__name__)


class Geocoder:
    def __init__(self, client: GeocodeClient | None = None, base_url: str = GEOCODE_BASE_URL):
        self.client = client or GeocodeClient()
        self.base_url = base_url

    def geocode(self, request: GeocodeRequest, raw: bool = False) -> GeocodeResponse:
        """Send one geocode request and decode the reply in the request's format."""
        url = build_request_url(request, base_url=self.base_url)
        location = location_param(request)
        mode = location[0] if location else "none"
        logger.info(f"Geocoding by {mode} ({request.response_format.value})")
        body = self.client.fetch(url)
        return decode_response(body, request.response_format, raw=raw)


def default_request(address: str | None = None) -> GeocodeRequest:
    """Build a request seeded from GEOCODER_CONFIG and the configured API key."""
    return GeocodeRequest(
        address=address,
        response_format=GEOCODER_CONFIG["format"],
        region=GEOCODER_CONFIG["region"] or None,
        language=GEOCODER_CONFIG["language"] or None,
        api_key=get_api_key(),
    )

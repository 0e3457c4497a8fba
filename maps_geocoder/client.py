import logging
import requests
from maps_geocoder.config import GEOCODER_CONFIG

logger = logging.getLogger(__name__)


class GeocodeClient:
    """Fetches raw geocode responses over HTTP.

    A session passed in by the caller is used as is; only a session the
    client creates itself gets the MapsGeocoder User-Agent.
    """

    def __init__(
        self,
        timeout: float | None = None,
        connect_timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.timeout = timeout if timeout is not None else GEOCODER_CONFIG["timeout"]
        self.connect_timeout = (
            connect_timeout if connect_timeout is not None else GEOCODER_CONFIG["connect_timeout"]
        )
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": "MapsGeocoder/1.0"})
        self.session = session

    def fetch(self, url: str) -> str:
        # The query string carries the API key, keep it out of the logs.
        endpoint = url.split("?")[0]
        logger.info(f"Fetching {endpoint}")
        try:
            resp = self.session.get(url, timeout=(self.connect_timeout, self.timeout))
            resp.raise_for_status()
        except requests.RequestException as e:
            reason = e.response.status_code if e.response is not None else type(e).__name__
            logger.error(f"Failed to fetch {endpoint}: {reason}")
            raise
        return resp.text

import json
import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass
from typing import Any
from maps_geocoder.models import ResponseFormat


@dataclass(frozen=True)
class RawResponse:
    body: str


@dataclass(frozen=True)
class JsonResponse:
    data: dict[str, Any]

    @property
    def status(self) -> str | None:
        return self.data.get("status")

    @property
    def results(self) -> list[dict[str, Any]]:
        return self.data.get("results", [])


@dataclass(frozen=True)
class XmlResponse:
    root: ElementTree.Element

    @property
    def status(self) -> str | None:
        return self.root.findtext("status")


GeocodeResponse = RawResponse | JsonResponse | XmlResponse


def decode_response(
    body: str, response_format: ResponseFormat | str, raw: bool = False
) -> GeocodeResponse:
    """Turn a response body into a RawResponse, JsonResponse or XmlResponse.

    Malformed bodies raise json.JSONDecodeError or ElementTree.ParseError.
    """
    if raw:
        return RawResponse(body)
    fmt = ResponseFormat(response_format)
    if fmt is ResponseFormat.JSON:
        return JsonResponse(json.loads(body))
    return XmlResponse(ElementTree.fromstring(body))

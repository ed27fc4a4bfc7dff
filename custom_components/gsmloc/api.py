"""OpenCelliD API client."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
import math
from xml.etree import ElementTree

import aiohttp

from .const import API_TIMEOUT, API_URL, LATITUDE_PATH, LONGITUDE_PATH
from .models import CellIdentity

_LOGGER = logging.getLogger(__name__)


class GsmlocApiError(Exception):
    """General cell lookup error."""


class RequestError(GsmlocApiError):
    """The lookup request failed."""


class ResponseParseError(GsmlocApiError):
    """The lookup response could not be parsed."""


@dataclass(frozen=True)
class LookupResponse:
    """Coordinates found in a lookup response."""

    latitude: float | None = None
    longitude: float | None = None


class OpenCellIdApiClient:
    """Client for the OpenCelliD cell lookup service."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str = API_URL,
        api_key: str | None = None,
        latitude_path: str = LATITUDE_PATH,
        longitude_path: str = LONGITUDE_PATH,
    ) -> None:
        """Initialize the API client."""
        self._session = session
        self._base_url = base_url
        self._api_key = api_key
        self._latitude_path = latitude_path
        self._longitude_path = longitude_path

    @property
    def base_url(self) -> str:
        """Return the lookup endpoint."""
        return self._base_url

    async def async_lookup(self, identity: CellIdentity) -> LookupResponse:
        """Look up the position of a cell."""
        params = {
            "mcc": identity.mcc,
            "mnc": identity.mnc,
            "lac": str(identity.lac),
            "cellid": str(identity.cid),
        }
        if self._api_key:
            params["key"] = self._api_key

        try:
            async with asyncio.timeout(API_TIMEOUT):
                resp = await self._session.get(self._base_url, params=params)
                body = await resp.read()
        except (TimeoutError, aiohttp.ClientError) as err:
            raise RequestError(f"Error communicating with OpenCelliD: {err}") from err

        if resp.status != 200:
            raise RequestError(f"OpenCelliD returned HTTP {resp.status}")

        try:
            document = ElementTree.fromstring(body)
        except (ElementTree.ParseError, ValueError) as err:
            raise ResponseParseError(f"Invalid XML from OpenCelliD: {err}") from err

        return extract_position(document, self._latitude_path, self._longitude_path)


def extract_position(
    document: ElementTree.Element,
    latitude_path: str = LATITUDE_PATH,
    longitude_path: str = LONGITUDE_PATH,
) -> LookupResponse:
    """Extract latitude and longitude from a lookup response.

    Each coordinate is extracted on its own; a missing one is None and does
    not affect the other.
    """
    return LookupResponse(
        latitude=get_double(document, latitude_path),
        longitude=get_double(document, longitude_path),
    )


def get_double(document: ElementTree.Element, path: str) -> float | None:
    """Return the float attribute addressed by a "/root/child/@attr" path."""
    element_path, _, attribute = path.rpartition("/@")
    steps = element_path.strip("/").split("/")
    if not attribute or steps[0] != document.tag:
        _LOGGER.debug("Path %s does not address document <%s>", path, document.tag)
        return None

    element = document
    if len(steps) > 1:
        element = document.find("/".join(steps[1:]))
    if element is None:
        return None

    raw = element.get(attribute)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        _LOGGER.debug("Failed to parse %s value %r", path, raw)
        return None
    if not math.isfinite(value):
        _LOGGER.debug("Ignoring non-finite %s value %r", path, raw)
        return None
    return value

"""HTTP client for the WSDOT Ferries API."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from ferry_departures.adapters.api_request_logger import log_api_request
from ferry_departures.adapters.wsdot_api.constants import DEFAULT_HEADERS
from ferry_departures.domain.exceptions import UpstreamMalformed, UpstreamUnavailable

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class WsdotHttpClient:
    """Performs authenticated GET requests and decodes JSON bodies."""

    def __init__(self, session: "ClientSession", base_url: str, access_code: str) -> None:
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._access_code = access_code

    async def _decode(self, response: "ClientResponse", url: str) -> Any:
        if response.status != 200:
            body = await response.text()
            raise UpstreamUnavailable(
                f"WSDOT API returned status {response.status} for {url}: {body[:200]}"
            )
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise UpstreamMalformed(f"WSDOT API returned invalid JSON for {url}: {e}") from e

    async def get_json(self, path: str) -> Any:
        """GET a path below the base URL.

        Raises:
            UpstreamUnavailable: On connection errors or non-200 responses.
            UpstreamMalformed: If the body is not JSON.
        """
        url = f"{self._base_url}{path}"
        params = {"apiaccesscode": self._access_code}
        log_api_request("GET", url, params=params, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(url, params=params, headers=DEFAULT_HEADERS) as response:
                return await self._decode(response, url)
        except aiohttp.ClientError as e:
            raise UpstreamUnavailable(f"Error contacting WSDOT API at {url}: {e}") from e

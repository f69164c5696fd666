"""HTTP client for the FairPlay board pages."""

import logging
import time

import httpx

from .config import config
from .models import FetchError, Site

logger = logging.getLogger(__name__)


class FairPlayClient:
    """HTTP client for the FairPlay booking board pages."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Vendor origin, defaults to the configured one
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = (base_url or config.base_url).rstrip("/")
        self.site_paths = config.site_paths
        self.timeout = config.request_timeout
        self.transport = transport
        self.static_headers = {
            "User-Agent": config.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "fr-CH,fr;q=0.9,en;q=0.7",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

    def board_url(self, site: Site | str, day_token: str | None = None) -> str:
        """Board page URL for a site, optionally for a specific day token.

        Args:
            site: 'ext' (outdoor) or 'int' (indoor)
            day_token: Vendor day token, None for the vendor's default day

        Returns:
            Absolute URL without cache buster
        """
        path = self.site_paths[Site(site).value]
        params = {"responsive": "false"}
        if day_token:
            params["d"] = day_token
        return str(httpx.URL(f"{self.base_url}/{path}", params=params))

    async def fetch_board(self, site: Site | str, day_token: str | None = None) -> str:
        """Fetch the board page of a site for a day token.

        Returns:
            Raw HTML
        """
        return await self.fetch_url(self.board_url(site, day_token))

    async def fetch_url(self, url: str) -> str:
        """GET a vendor page with a cache-busting parameter.

        Args:
            url: Absolute vendor URL

        Returns:
            Raw HTML

        Raises:
            FetchError: On non-2xx responses or transport failures
        """
        busted = httpx.URL(url).copy_merge_params({"_": str(int(time.time() * 1000))})
        logger.debug(f"GET {busted}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport, follow_redirects=True
            ) as client:
                response = await client.get(busted, headers=self.static_headers)
        except httpx.RequestError as e:
            raise FetchError(f"GET request failed for {url}: {e}", url=url) from e

        if not response.is_success:
            raise FetchError(
                f"HTTP {response.status_code} for {url}",
                status=response.status_code,
                url=url,
            )
        return response.text

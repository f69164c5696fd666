"""Day-token resolution by walking the vendor's paginated day bar."""

import logging
from datetime import date
from enum import Enum

from .board_parser import BoardParser
from .client import FairPlayClient
from .config import config
from .day_label import label_for
from .models import DayLink, DayNotFoundError, FetchError, Site

logger = logging.getLogger(__name__)


class ResolverState(str, Enum):
    FETCHING = "fetching"
    SCANNING = "scanning"
    FOLLOWING = "following"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class DayTokenResolver:
    """Finds the vendor's opaque day token for a calendar date.

    The day bar shows a small window of days whose last entry links to the
    next window. There is no date to token mapping, so the resolver fetches
    pages one after the other, each hop's URL coming from the previous page,
    and matches labels by exact equality.
    """

    def __init__(self, client: FairPlayClient | None = None):
        self.client = client or FairPlayClient()

    async def resolve(
        self, target_date: date, site: Site | str, max_hops: int | None = None
    ) -> str:
        """Resolve the day token of a date.

        Args:
            target_date: Wanted calendar day
            site: Board selector
            max_hops: Maximum number of pages fetched (configured default: 10)

        Returns:
            Day token

        Raises:
            DayNotFoundError: Label not found within the bound, or no next page
            FetchError: A page could not be fetched
        """
        max_hops = config.max_hops if max_hops is None else max_hops
        wanted = label_for(target_date)
        url = self.client.board_url(site)

        state = ResolverState.FETCHING
        hops = 0
        html = ""
        links: list[DayLink] = []
        labels_seen: list[str] = []
        token: str | None = None

        while True:
            logger.debug(f"Resolver state {state.value}, hop {hops}, wanted {wanted!r}")

            if state is ResolverState.FETCHING:
                if hops >= max_hops:
                    state = ResolverState.FAILED
                    continue
                try:
                    html = await self.client.fetch_url(url)
                except FetchError as e:
                    logger.error(f"Day bar fetch failed at hop {hops + 1} for {wanted!r}: {e}")
                    raise FetchError(
                        f"Resolving {wanted!r} failed at hop {hops + 1}: {e.message}",
                        status=e.status,
                        url=e.url,
                    ) from e
                hops += 1
                state = ResolverState.SCANNING

            elif state is ResolverState.SCANNING:
                links = BoardParser.extract_day_links(html, self.client.base_url)
                labels_seen.extend(link.label for link in links)
                hit = next((link for link in links if link.label == wanted), None)
                if hit is not None:
                    token = hit.day_token
                    state = ResolverState.FOUND
                else:
                    state = ResolverState.FOLLOWING

            elif state is ResolverState.FOLLOWING:
                last = links[-1] if links else None
                if last is None or not last.target_url:
                    state = ResolverState.EXHAUSTED
                else:
                    url = last.target_url
                    state = ResolverState.FETCHING

            elif state is ResolverState.FOUND:
                logger.info(f"Resolved {wanted!r} on {Site(site).value} to {token} after {hops} hop(s)")
                return token  # type: ignore

            elif state is ResolverState.EXHAUSTED:
                raise DayNotFoundError(wanted, hops, labels_seen, exhausted=True)

            else:
                raise DayNotFoundError(wanted, hops, labels_seen)


async def resolve_day_token(
    target_date: date,
    site: Site | str,
    max_hops: int | None = None,
    client: FairPlayClient | None = None,
) -> str:
    """Resolve the day token of a date with a one-off resolver."""
    return await DayTokenResolver(client).resolve(target_date, site, max_hops)

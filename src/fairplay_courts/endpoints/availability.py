import logging
from typing import Any

from ..board_parser import BoardParser
from ..client import FairPlayClient
from ..models import Site, ValidationError
from ..ranges import filter_ranges, merge_ranges
from ..utils import to_canonical_time

logger = logging.getLogger(__name__)


class AvailabilityEndpoint:
    """Endpoint for listing free courts on a day board."""

    def __init__(self, client: FairPlayClient | None = None):
        """Initialize endpoint."""
        self.client = client or FairPlayClient()

    async def get_free_courts(
        self,
        site: str = "ext",
        day_token: str | None = None,
        after: str | None = None,
        min_duration: int | None = None,
    ) -> dict[str, Any]:
        """List slots and free ranges per court.

        Args:
            site: 'ext' or 'int'
            day_token: Vendor day token, None for the vendor's default day
            after: Optional HH:MM lower bound for free ranges
            min_duration: Optional minimum free range length in minutes

        Returns:
            {site, url, times, courts: [{court, slots, freeRanges}]}

        Raises:
            ValidationError: Invalid site or filter values
            FetchError: The board could not be fetched
        """
        site = validate_site(site)
        if after is not None and to_canonical_time(after) is None:
            raise ValidationError("Invalid after time. Use HH:MM format.")
        if min_duration is not None and min_duration < 0:
            raise ValidationError("min_duration must not be negative.")

        url = self.client.board_url(site, day_token)
        html = await self.client.fetch_board(site, day_token)
        board = BoardParser.extract_board(html, self.client.base_url)

        courts = []
        for court in board.courts:
            ranges = merge_ranges(board.times, court.cells)
            if after is not None or min_duration is not None:
                ranges = filter_ranges(ranges, after or "00:00", min_duration or 0)
            courts.append(
                {
                    "court": court.court,
                    "slots": [
                        {"time": t, "status": cell.status.value, "href": cell.href}
                        for t, cell in zip(court.times, court.cells, strict=True)
                    ],
                    "freeRanges": [r.model_dump() for r in ranges],
                }
            )

        logger.debug(f"Listed {len(courts)} courts for {site.value} at {url}")
        return {"site": site.value, "url": url, "times": board.times, "courts": courts}


def validate_site(site: str | None) -> Site:
    """Parse the site selector.

    Raises:
        ValidationError: If the site is not 'ext' or 'int'
    """
    try:
        return Site(site)
    except ValueError as e:
        raise ValidationError(
            'Invalid site parameter. Must be "ext" or "int"'
        ) from e


# Global endpoint instance
availability_endpoint = AvailabilityEndpoint()

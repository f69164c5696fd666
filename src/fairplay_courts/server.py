"""MCP server exposing the FairPlay court lookups as tools."""

import logging
from typing import Any

from fastmcp import FastMCP

from .api import booking_response, error_message
from .combined_server import configure_logging
from .config import config
from .endpoints.availability import availability_endpoint
from .endpoints.booking import booking_endpoint
from .models import FairPlayError

logger = logging.getLogger(__name__)

# Create MCP server
mcp = FastMCP("FairPlay Courts Server")


@mcp.tool()
async def get_free_courts(
    site: str = "ext",
    day_token: str | None = None,
    after: str | None = None,
    min_duration: int | None = None,
) -> dict[str, Any]:
    """List court slots and merged free ranges on a FairPlay board.

    Args:
        site: 'ext' for outdoor courts, 'int' for indoor courts
        day_token: Vendor day token (see resolve_date_token), omit for today
        after: Only keep free ranges ending after this HH:MM time
        min_duration: Only keep free ranges of at least this many minutes

    Returns:
        Board times and, per court, slot statuses and free ranges
    """
    try:
        result = await availability_endpoint.get_free_courts(
            site=site, day_token=day_token, after=after, min_duration=min_duration
        )
        logger.debug(f"Retrieved {len(result['courts'])} courts for site {site}")
        return result

    except FairPlayError as e:
        logger.error(f"Error listing free courts for site {site}: {e}")
        return {"error": e.message}

    except Exception as e:
        logger.error(f"Unexpected error listing free courts for site {site}: {e}")
        return {"error": error_message(e)}


@mcp.tool()
async def resolve_date_token(site: str, date: str) -> dict[str, Any]:
    """Find the vendor day token of a calendar date.

    Args:
        site: 'ext' or 'int'
        date: Date in YYYY-MM-DD format (e.g., '2025-09-12')

    Returns:
        Token, site, date and the day-bar label that matched
    """
    try:
        return await booking_endpoint.resolve_date_token(site, date)

    except FairPlayError as e:
        logger.error(f"Failed to resolve date token for {site} on {date}: {e}")
        return {"error": e.message, "site": site, "date": date}

    except Exception as e:
        logger.error(f"Unexpected error resolving date token for {site} on {date}: {e}")
        return {"error": error_message(e), "site": site, "date": date}


@mcp.tool()
async def resolve_booking_link(
    date: str, time: str, court_number: int, site: str = "ext"
) -> dict[str, Any]:
    """Resolve the direct reservation URL of a free court slot.

    Args:
        date: Date in YYYY-MM-DD format
        time: Slot start in HH:MM format (e.g., '18:30')
        court_number: Court number (e.g., 3 for 'Tennis n°3')
        site: 'ext' or 'int'

    Returns:
        Reservation URL and day token, or success False with the error
    """
    try:
        request = booking_endpoint.validate_request(
            {"date": date, "time": time, "courtNumber": court_number, "site": site}
        )
        result = await booking_endpoint.resolve_booking(request)
        return booking_response(result)

    except FairPlayError as e:
        logger.error(
            f"Error resolving booking link for court {court_number} on {date} at {time}: {e}"
        )
        return {"success": False, "error": e.message}

    except Exception as e:
        logger.error(f"Unexpected error resolving booking link for court {court_number}: {e}")
        return {"success": False, "error": error_message(e)}


def main() -> None:
    """Main MCP server entry point."""
    configure_logging("INFO")
    logger.debug(f"Configuration loaded: {config.to_dict()}")
    mcp.run(show_banner=False)

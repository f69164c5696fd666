"""HTTP API for free-court listing and direct booking links."""

import logging
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .endpoints.availability import availability_endpoint
from .endpoints.booking import booking_endpoint
from .models import FairPlayError, ResolvedReservation, ValidationError

logger = logging.getLogger(__name__)


class CourtsApi:
    """FastAPI application exposing the court lookups."""

    def __init__(self):
        """Initialize the application."""
        self.app = FastAPI(title="FairPlay Courts")
        self._setup_routes()

    def _setup_routes(self):
        """Setup FastAPI routes."""

        @self.app.get("/health")
        async def health():
            """Health check endpoint."""
            return {"status": "healthy"}

        @self.app.get("/api/free-courts")
        async def free_courts(
            site: str = "ext",
            d: str | None = None,
            after: str | None = None,
            min_duration: int | None = None,
        ):
            """List slots and free ranges per court."""
            try:
                return await availability_endpoint.get_free_courts(
                    site=site, day_token=d, after=after, min_duration=min_duration
                )
            except ValidationError as e:
                return JSONResponse({"error": e.message}, status_code=400)
            except Exception as e:
                logger.error(f"Free courts error for site {site}, d={d}: {e}")
                return JSONResponse({"error": error_message(e)}, status_code=500)

        @self.app.get("/api/resolve-date-token")
        async def resolve_date_token(site: str | None = None, date: str | None = None):
            """Resolve the vendor day token of a date."""
            try:
                return await booking_endpoint.resolve_date_token(site, date)
            except ValidationError as e:
                return JSONResponse({"error": e.message}, status_code=400)
            except Exception as e:
                logger.error(f"Failed to resolve date token for {site} on {date}: {e}")
                return JSONResponse(
                    {"error": error_message(e), "site": site, "date": date}, status_code=500
                )

        @self.app.post("/api/direct-booking")
        async def direct_booking(request: Request):
            """Resolve the direct reservation URL of a free slot."""
            try:
                payload = await request.json()
            except ValueError:
                payload = None
            if not isinstance(payload, dict):
                payload = None

            try:
                booking = booking_endpoint.validate_request(payload)
            except ValidationError as e:
                return JSONResponse(
                    {"success": False, "error": e.message}, status_code=400
                )

            try:
                result = await booking_endpoint.resolve_booking(booking)
            except Exception as e:
                logger.error(f"Direct booking error: {e}")
                return JSONResponse(
                    {"success": False, "error": error_message(e)}, status_code=500
                )
            return booking_response(result)

    def run(self, host: str = "0.0.0.0", port: int = 8000):
        """Run the HTTP server.

        Args:
            host: Host to bind to
            port: Port to bind to
        """
        logger.info(f"Starting HTTP server on {host}:{port}")
        uvicorn.run(self.app, host=host, port=port, log_level="info")


def booking_response(result: ResolvedReservation) -> dict[str, Any]:
    """Success payload of a resolved reservation."""
    return {
        "success": True,
        "reservationUrl": result.reservation_url,
        "dayToken": result.day_token,
        "site": result.site.value,
        "date": result.date,
        "time": result.time,
        "courtNumber": result.court_number,
    }


def error_message(error: Exception) -> str:
    """Client-facing message of an error."""
    if isinstance(error, FairPlayError):
        return error.message
    return str(error) or "Unknown error"


# Global API instance
courts_api = CourtsApi()
app = courts_api.app

"""Direct booking-link resolution."""

import logging
from typing import Any

import pydantic

from ..board_parser import BoardParser
from ..client import FairPlayClient
from ..config import config
from ..day_label import label_for
from ..models import BookingRequest, ResolvedReservation, ValidationError
from ..resolver import DayTokenResolver
from ..utils import parse_date, validate_time
from .availability import validate_site

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("date", "time", "courtNumber", "site")


class BookingEndpoint:
    """Endpoint resolving the reservation URL a player would click."""

    def __init__(
        self,
        client: FairPlayClient | None = None,
        slot_times: list[str] | None = None,
    ):
        """Initialize booking endpoint.

        Args:
            client: Vendor HTTP client
            slot_times: Fixed board slot labels (HHhMM), defaults to the configured ones
        """
        self.client = client or FairPlayClient()
        self.slot_times = slot_times or config.slot_times

    def validate_request(self, payload: dict[str, Any] | None) -> BookingRequest:
        """Check a raw request body and build a BookingRequest.

        Args:
            payload: Body with date, time, courtNumber and site

        Raises:
            ValidationError: Missing field, invalid site, date, time or court
        """
        payload = payload or {}
        missing = [name for name in REQUIRED_FIELDS if not payload.get(name)]
        if missing:
            raise ValidationError(
                f"Missing required parameters: {', '.join(REQUIRED_FIELDS)}",
                details={"missing": missing},
            )

        site = validate_site(payload["site"])
        if parse_date(payload["date"]) is None:
            raise ValidationError("Invalid date format. Use YYYY-MM-DD.")
        if not validate_time(payload["time"]):
            raise ValidationError("Invalid time format. Use HH:MM.")

        try:
            request = BookingRequest(
                date=payload["date"],
                time=payload["time"],
                court_number=payload["courtNumber"],
                site=site,
            )
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid courtNumber: {payload['courtNumber']!r}") from e

        if request.court_number <= 0:
            raise ValidationError("courtNumber must be a positive integer.")
        return request

    async def resolve_date_token(self, site: str | None, date: str | None) -> dict[str, Any]:
        """Resolve the vendor day token of a date.

        Returns:
            {token, site, date, label}
        """
        if not site or not date:
            raise ValidationError("Missing site or date parameter")
        site_value = validate_site(site)
        target = parse_date(date)
        if target is None:
            raise ValidationError("Invalid date format. Use YYYY-MM-DD.")

        token = await DayTokenResolver(self.client).resolve(target, site_value)
        return {
            "token": token,
            "site": site_value.value,
            "date": date,
            "label": label_for(target),
        }

    async def resolve_booking(self, request: BookingRequest) -> ResolvedReservation:
        """Resolve the direct reservation URL for a validated request.

        Raises:
            FairPlayError: Any resolution step failed; there is no partial result
        """
        target = parse_date(request.date)
        if target is None:
            raise ValidationError("Invalid date format. Use YYYY-MM-DD.")

        day_token = await DayTokenResolver(self.client).resolve(target, request.site)
        html = await self.client.fetch_board(request.site, day_token)
        reservation_url = BoardParser.find_reservation_link(
            html,
            court_number=request.court_number,
            time=request.time,
            slot_times=self.slot_times,
            origin=self.client.base_url,
        )

        logger.info(
            f"Resolved booking link for court {request.court_number} on {request.date} "
            f"at {request.time} ({request.site.value})"
        )
        return ResolvedReservation(
            reservation_url=reservation_url,
            day_token=day_token,
            site=request.site,
            date=request.date,
            time=request.time,
            court_number=request.court_number,
        )


# Global booking endpoint instance
booking_endpoint = BookingEndpoint()

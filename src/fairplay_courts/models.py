"""Data models for the FairPlay courts service."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Site(str, Enum):
    """Booking board selector: outdoor or indoor courts."""

    EXT = "ext"
    INT = "int"


class CellStatus(str, Enum):
    """Status of one slot in a court's time grid."""

    FREE = "free"
    BOOKED = "booked"
    UNAVAILABLE = "unavailable"
    CLOSED = "closed"


class DayLink(BaseModel):
    """One entry of the vendor's day-selector bar."""

    label: str = Field(..., description="Rendered label, e.g. 'Ve 12'")
    target_url: str | None = Field(None, description="Absolute navigation URL")
    day_token: str | None = Field(None, description="Vendor day token ('d' parameter)")


class Cell(BaseModel):
    """Represents one slot of a court column."""

    status: CellStatus = Field(..., description="Slot status")
    href: str | None = Field(None, description="Absolute booking link when free")


class CourtBoard(BaseModel):
    """Represents a court column aligned with its time labels."""

    court: str = Field(..., description="Court display name, e.g. 'Tennis n°3'")
    times: list[str] = Field(..., description="Time labels in HH:MM format")
    cells: list[Cell] = Field(..., description="Cells aligned 1:1 with times")


class Board(BaseModel):
    """Represents a parsed day board."""

    times: list[str] = Field(..., description="Page time labels in HH:MM format")
    courts: list[CourtBoard] = Field(..., description="Court columns")


class FreeRange(BaseModel):
    """Represents a maximal run of free cells."""

    start: str = Field(..., description="First free slot, HH:MM")
    end: str = Field(..., description="Slot after the last free one, HH:MM")
    href: str | None = Field(None, description="First booking link in the run")


class FilteredRange(FreeRange):
    """A free range clipped to a lower time bound."""

    duration: int = Field(..., description="Length of the unclipped range in minutes")


class BookingRequest(BaseModel):
    """Represents a direct booking-link request."""

    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., description="Date in YYYY-MM-DD format")
    time: str = Field(..., description="Time in HH:MM format")
    court_number: int = Field(..., alias="courtNumber", description="Court number")
    site: Site = Field(..., description="Board selector")


class ResolvedReservation(BaseModel):
    """Represents a resolved reservation link."""

    reservation_url: str = Field(..., description="Absolute reservation URL")
    day_token: str = Field(..., description="Vendor day token")
    site: Site = Field(..., description="Board selector")
    date: str = Field(..., description="Date in YYYY-MM-DD format")
    time: str = Field(..., description="Time in HH:MM format")
    court_number: int = Field(..., description="Court number")


class ApiError(BaseModel):
    """Represents an API error response."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: dict | None = Field(None, description="Additional error details")


class FairPlayError(Exception):
    """Base exception; carries an ApiError model for the error envelope."""

    code = "FAIRPLAY_ERROR"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(f"[{self.code}] {message}")
        self.error = ApiError(code=self.code, message=message, details=details)
        self.message = message
        self.details = details


class FetchError(FairPlayError):
    """Non-2xx response from the vendor, or a transport failure."""

    code = "FETCH_ERROR"

    def __init__(self, message: str, status: int | None = None, url: str | None = None):
        super().__init__(message, details={"status": status, "url": url})
        self.status = status
        self.url = url


class DayNotFoundError(FairPlayError):
    """The wanted day label never appeared on the day bar."""

    code = "DAY_NOT_FOUND"

    def __init__(self, wanted: str, hops: int, labels_seen: list[str], exhausted: bool = False):
        reason = "no further day-bar page" if exhausted else f"within {hops} hops"
        super().__init__(
            f'Date "{wanted}" not found {reason}. Labels seen: {", ".join(labels_seen) or "none"}',
            details={"wanted": wanted, "hops": hops, "labels_seen": labels_seen},
        )
        self.wanted = wanted
        self.hops = hops
        self.labels_seen = labels_seen
        self.exhausted = exhausted


class CourtNotFoundError(FairPlayError):
    code = "COURT_NOT_FOUND"


class InvalidTimeError(FairPlayError):
    code = "INVALID_TIME"


class IndexOutOfRangeError(FairPlayError):
    code = "INDEX_OUT_OF_RANGE"


class SlotNotFreeError(FairPlayError):
    """The targeted cell is not free; keeps the raw class string."""

    code = "SLOT_NOT_FREE"

    def __init__(self, message: str, cell_class: str):
        super().__init__(message, details={"class": cell_class})
        self.cell_class = cell_class


class LinkNotFoundError(FairPlayError):
    code = "LINK_NOT_FOUND"


class ValidationError(FairPlayError):
    """Malformed or incomplete caller input."""

    code = "VALIDATION_ERROR"

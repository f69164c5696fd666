"""Board parsing utilities for the FairPlay booking site."""

import logging
import re

from bs4 import BeautifulSoup, Tag

from .models import (
    Board,
    Cell,
    CellStatus,
    CourtBoard,
    CourtNotFoundError,
    DayLink,
    IndexOutOfRangeError,
    InvalidTimeError,
    LinkNotFoundError,
    SlotNotFreeError,
)
from .utils import (
    absolute_url,
    extract_embedded_url,
    get_query_param,
    to_canonical_time,
    to_vendor_time,
)

logger = logging.getLogger(__name__)

DAY_BAR_SELECTOR = ".barre-top .btn-bar, .barre-top .btn-bar-active"
TIME_COLUMN_CLASS = "colonne-heures"
TIME_LABEL_CLASS = "heure"
COURT_COLUMN_CLASS = "colonne"
CELL_CLASS = "cases"
HEADER_CLASS = "entete"
FOOTER_CLASS = "pied"

# Class keywords per status, tested in this order; first match wins
STATUS_KEYWORDS: list[tuple[CellStatus, tuple[str, ...]]] = [
    (CellStatus.FREE, ("libre",)),
    (CellStatus.BOOKED, ("membre", "reserve", "occupe")),
    (CellStatus.CLOSED, ("ferme",)),
    (CellStatus.UNAVAILABLE, ("indispo", "bloque")),
]

day_href_regex = re.compile(r"href\s*=\s*'([^']+)'")
reservation_regex = re.compile(r"(reservation1\.php\?[^'\"\s)]+)")


class BoardParser:
    """Parser for the vendor's day bar and court board pages."""

    @staticmethod
    def extract_day_links(html: str, origin: str) -> list[DayLink]:
        """
        Parses the day-selector bar of a board page.

        Each entry carries its label and an onclick handler such as
        window.location.href='tableau.php?responsive=false&d=XYZ'; return false;

        Args:
            html: Board page HTML
            origin: Vendor origin the relative links resolve against

        Returns:
            Day links in page order; entries without a day token are dropped
        """
        if not html:
            return []

        soup = BeautifulSoup(html, "html.parser")
        links: list[DayLink] = []
        for elem in soup.select(DAY_BAR_SELECTOR):
            label = elem.get_text().strip()
            relative = extract_embedded_url(elem.get("onclick"), day_href_regex)  # type: ignore
            url = absolute_url(relative, origin) if relative else None
            token = get_query_param(url, "d")
            if token:
                links.append(DayLink(label=label, target_url=url, day_token=token))
        return links

    @staticmethod
    def extract_board(html: str, origin: str) -> Board:
        """
        Parses a day board into time labels and per-court cell statuses.

        Args:
            html: Board page HTML
            origin: Vendor origin booking links resolve against

        Returns:
            Board whose court columns are aligned with the time labels
        """
        if not html:
            return Board(times=[], courts=[])

        soup = BeautifulSoup(html, "html.parser")
        times = BoardParser._extract_times(soup)

        courts = []
        for col in soup.find_all("div", class_=COURT_COLUMN_CLASS):
            header = col.find(class_=HEADER_CLASS)
            if header is None:
                continue
            name = header.get_text().strip()
            cells = [
                Cell(
                    status=BoardParser.classify(cell),
                    href=BoardParser._booking_href(cell, origin),
                )
                for cell in BoardParser._slot_cells(col)
            ]

            size = min(len(cells), len(times))
            # a trailing closing label is expected
            if len(cells) not in (len(times), len(times) - 1):
                logger.warning(
                    f"{name}: {len(cells)} cells for {len(times)} time labels, truncating to {size}"
                )
            courts.append(CourtBoard(court=name, times=times[:size], cells=cells[:size]))

        return Board(times=times, courts=courts)

    @staticmethod
    def find_reservation_link(
        html: str,
        court_number: int,
        time: str,
        slot_times: list[str],
        origin: str,
    ) -> str:
        """Locate the reservation URL of one free slot on a day board.

        Args:
            html: Board page HTML for the wanted day
            court_number: Court number, e.g. 3 for 'Tennis n°3'
            time: Slot time in HH:MM format
            slot_times: Fixed ordered slot labels of the board (HHhMM)
            origin: Vendor origin the link resolves against

        Returns:
            Absolute reservation URL

        Raises:
            CourtNotFoundError, InvalidTimeError, IndexOutOfRangeError,
            SlotNotFreeError, LinkNotFoundError
        """
        court_name = f"Tennis n°{court_number}"
        # 'Tennis n°1' must not match inside 'Tennis n°10'
        court_regex = re.compile(re.escape(court_name) + r"(?!\d)")
        soup = BeautifulSoup(html or "", "html.parser")

        column = None
        for col in soup.find_all("div", class_=COURT_COLUMN_CLASS):
            if court_regex.search(col.get_text()):
                column = col
                break
        if column is None:
            raise CourtNotFoundError(f'Court "{court_name}" not found on the board')

        cells = BoardParser._slot_cells(column)

        vendor_time = to_vendor_time(time)
        if vendor_time is None or vendor_time not in slot_times:
            raise InvalidTimeError(
                f"Time {time} is not one of the board slots: {', '.join(slot_times)}"
            )
        index = slot_times.index(vendor_time)

        if index >= len(cells):
            raise IndexOutOfRangeError(
                f"Slot {vendor_time} (index {index}) is beyond the {len(cells)} cells of {court_name}"
            )

        cell = cells[index]
        cell_class = " ".join(cell.get("class") or [])
        if BoardParser.classify(cell) is not CellStatus.FREE:
            raise SlotNotFreeError(
                f"Slot {vendor_time} on {court_name} is not free (class: {cell_class})",
                cell_class=cell_class,
            )

        relative = extract_embedded_url(cell.get("onclick"), reservation_regex)  # type: ignore
        if relative is None:
            raise LinkNotFoundError(
                f"No reservation link in slot {vendor_time} on {court_name}"
            )
        return absolute_url(relative, origin)

    @staticmethod
    def classify(cell: Tag) -> CellStatus:
        """Status of a cell from its class list; unavailable when nothing matches."""
        classes = " ".join(cell.get("class") or []).lower()
        for status, keywords in STATUS_KEYWORDS:
            if any(keyword in classes for keyword in keywords):
                return status
        return CellStatus.UNAVAILABLE

    @staticmethod
    def _extract_times(soup: BeautifulSoup) -> list[str]:
        """Time axis from the first time column, in HH:MM format"""
        container = soup.find("div", class_=TIME_COLUMN_CLASS) or soup
        times = []
        for elem in container.find_all(class_=TIME_LABEL_CLASS):
            label = to_canonical_time(elem.get_text().strip())
            if label is not None:
                times.append(label)
        return times

    @staticmethod
    def _slot_cells(column: Tag) -> list[Tag]:
        """Time-slot cells of a court column, without header and footer decoration"""
        cells = []
        for cell in column.find_all(class_=CELL_CLASS):
            if FOOTER_CLASS in (cell.get("class") or []):
                continue
            if HEADER_CLASS in (cell.get("class") or []):
                continue
            if cell.find(class_=HEADER_CLASS) is not None:
                continue
            cells.append(cell)
        return cells

    @staticmethod
    def _booking_href(cell: Tag, origin: str) -> str | None:
        relative = extract_embedded_url(cell.get("onclick"), reservation_regex)  # type: ignore
        return absolute_url(relative, origin) if relative else None

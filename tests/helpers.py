"""Builders for fake FairPlay pages and a mock vendor transport."""

import httpx

from fairplay_courts.client import FairPlayClient
from fairplay_courts.config import DEFAULT_SLOT_TIMES

ORIGIN = "https://fairplay.test"


def day_bar(entries: list[tuple[str, str]], next_token: str | None = None, path: str = "tableau.php") -> str:
    """Day-selector bar; the first entry is the active one."""
    spans = []
    for i, (label, token) in enumerate(entries):
        css = "btn-bar-active" if i == 0 else "btn-bar"
        spans.append(
            f'<span class="{css}" onclick="window.location.href=\'{path}?responsive=false&amp;d={token}\'; return false;">{label}</span>'
        )
    # decorative separator without link
    spans.append('<span class="btn-bar">|</span>')
    if next_token:
        spans.append(
            f'<span class="btn-bar" onclick="window.location.href=\'{path}?responsive=false&amp;d={next_token}\'; return false;">&gt;&gt;</span>'
        )
    return f'<div class="barre-top">{"".join(spans)}</div>'


def free_cell(token: str, court: int, time: str, site: str = "ext") -> tuple[str, str]:
    return (
        f"tennis_{site}_libre cases",
        f"window.open('reservation1.php?d={token}&amp;c={court}&amp;t={time}','_self'); return false;",
    )


def booked_cell(site: str = "ext") -> tuple[str, str | None]:
    return (f"tennis_{site}_membre cases", None)


def court_column(name: str, cells: list[tuple[str, str | None]]) -> str:
    rows = []
    for css, onclick in cells:
        handler = f' onclick="{onclick}"' if onclick else ""
        rows.append(f'<div class="{css}"{handler}></div>')
    return (
        '<div class="colonne">'
        f'<div class="cases"><span class="entete">{name}</span></div>'
        f'{"".join(rows)}'
        f'<div class="cases pied">{name}</div>'
        "</div>"
    )


def board_page(
    times: list[str],
    columns: list[str],
    bar: str = "",
) -> str:
    hours = "".join(f'<div class="heure">{t}</div>' for t in times)
    return (
        "<html><body>"
        f"{bar}"
        '<div class="tableau">'
        f'<div class="colonne-heures">{hours}</div>'
        f'{"".join(columns)}'
        "</div></body></html>"
    )


def court_cells(
    token: str, court: int, free_times: set[str], slot_times: list[str] = DEFAULT_SLOT_TIMES
) -> list[tuple[str, str | None]]:
    """One cell per slot, free at the given vendor times and booked elsewhere."""
    return [
        free_cell(token, court, t) if t in free_times else booked_cell()
        for t in slot_times
    ]


def vendor_client(pages: dict[str | None, str], calls: list[httpx.Request] | None = None) -> FairPlayClient:
    """Client whose vendor serves `pages` keyed by the 'd' parameter."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        token = request.url.params.get("d")
        if token not in pages:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=pages[token], headers={"content-type": "text/html"})

    return FairPlayClient(base_url=ORIGIN, transport=httpx.MockTransport(handler))


WEEK_1 = [("Lu 1", "D1"), ("Ma 2", "D2"), ("Me 3", "D3"), ("Je 4", "D4"), ("Ve 5", "D5")]
WEEK_2 = [("Lu 8", "D8"), ("Ma 9", "D9"), ("Me 10", "D10"), ("Je 11", "D11"), ("Ve 12", "ABC123")]


def booking_pages(board: str) -> dict[str | None, str]:
    """Two-week day bar walk ending on `board` for Ve 12 (token ABC123)."""
    return {
        None: board_page([], [], bar=day_bar(WEEK_1, next_token="PAGE2")),
        "PAGE2": board_page([], [], bar=day_bar(WEEK_2)),
        "ABC123": board,
    }

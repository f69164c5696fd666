"""Free-range merging over a court's slot sequence."""

from .models import Cell, CellStatus, FilteredRange, FreeRange
from .utils import time_to_minutes, to_canonical_time


def merge_ranges(times: list[str], cells: list[Cell]) -> list[FreeRange]:
    """Collapse contiguous free cells into ranges.

    `times` may be one label longer than `cells`, the extra label being the
    closing boundary of the last slot. When a run reaches the end of the
    labels, its end is the last label available.

    Args:
        times: Time labels aligned with cells
        cells: Cells of one court

    Returns:
        One FreeRange per maximal run of free cells, in time order
    """
    ranges: list[FreeRange] = []
    count = min(len(times), len(cells))
    i = 0
    while i < count:
        if cells[i].status is not CellStatus.FREE:
            i += 1
            continue

        start = i
        href = None
        while i < count and cells[i].status is CellStatus.FREE:
            if href is None and cells[i].href:
                href = cells[i].href
            i += 1

        end = times[i] if i < len(times) else times[-1]
        ranges.append(FreeRange(start=times[start], end=end, href=href))

    return ranges


def filter_ranges(
    ranges: list[FreeRange], after: str = "00:00", min_duration: int = 0
) -> list[FilteredRange]:
    """Keep ranges ending after `after` and lasting at least `min_duration` minutes.

    Starts earlier than `after` are clipped to it; the duration is the one
    of the unclipped range.
    """
    after_minutes = time_to_minutes(after)
    result = []
    for r in ranges:
        start, end = time_to_minutes(r.start), time_to_minutes(r.end)
        duration = end - start
        if end <= after_minutes or duration < min_duration:
            continue
        result.append(
            FilteredRange(
                start=to_canonical_time(after) if start < after_minutes else r.start,  # type: ignore
                end=r.end,
                href=r.href,
                duration=duration,
            )
        )
    return result

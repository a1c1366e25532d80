from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationControls:
    prev_disabled: bool
    next_disabled: bool


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, page), max(1, total_pages))


def pagination_controls(page: int, total_pages: int) -> PaginationControls:
    return PaginationControls(
        prev_disabled=page <= 1,
        next_disabled=page >= max(1, total_pages),
    )


def next_page(page: int, total_pages: int) -> int:
    if pagination_controls(page, total_pages).next_disabled:
        return page
    return page + 1


def prev_page(page: int) -> int:
    return max(1, page - 1)

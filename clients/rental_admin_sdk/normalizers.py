from __future__ import annotations

import logging
from typing import Any

from clients.rental_admin_sdk.models import ListResult

logger = logging.getLogger(__name__)


def normalize_listing(payload: Any, *, page: int = 1, page_size: int = 10) -> ListResult:
    safe_page = max(1, int(page or 1))
    safe_page_size = max(1, int(page_size or 10))

    rows: list[Any] = []
    total_pages: int | None = None
    total_count: int | None = None

    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        for key in ("data", "items", "rows"):
            if isinstance(payload.get(key), list):
                rows = payload[key]
                break

        total_pages = _to_int(payload.get("totalPages"))
        if total_pages is None:
            total_pages = _to_int(payload.get("total_pages"))
        total_count = _to_int(payload.get("count"))
        if total_count is None:
            total_count = _to_int(payload.get("total"))
        safe_page = _to_int(payload.get("page")) or safe_page

    records = [row for row in rows if isinstance(row, dict)]
    if len(records) > safe_page_size:
        logger.warning("listing returned %s rows for page size %s; extra rows dropped", len(records), safe_page_size)
        records = records[:safe_page_size]

    return ListResult(
        items=records,
        page=max(1, safe_page),
        total_pages=max(1, total_pages) if total_pages is not None else 1,
        total_count=total_count if total_count is not None else len(records),
    )


def extract_record(payload: Any) -> dict[str, Any] | None:
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if isinstance(data, dict):
        return data
    if isinstance(data, list) and data and isinstance(data[0], dict):
        return data[0]
    if "id" in payload:
        return payload
    return None


def extract_message(payload: Any) -> str | None:
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return None


def _to_int(value: Any) -> int | None:
    try:
        if value is None or value == "":
            return None
        return int(value)
    except (TypeError, ValueError):
        return None

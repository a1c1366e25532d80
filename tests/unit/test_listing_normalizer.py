from clients.rental_admin_sdk.normalizers import extract_message, extract_record, normalize_listing


def test_listing_envelope_is_read() -> None:
    payload = {"count": 14, "page": 2, "pageSize": 6, "totalPages": 3, "data": [{"id": 7}, {"id": 8}]}

    result = normalize_listing(payload, page=2, page_size=6)

    assert result.items == [{"id": 7}, {"id": 8}]
    assert result.page == 2
    assert result.total_pages == 3
    assert result.total_count == 14


def test_rows_beyond_page_size_are_dropped() -> None:
    payload = {"data": [{"id": index} for index in range(9)], "totalPages": 2}

    result = normalize_listing(payload, page=1, page_size=6)

    assert len(result.items) == 6
    assert result.ids == [0, 1, 2, 3, 4, 5]


def test_missing_envelope_fields_fall_back_to_safe_defaults() -> None:
    result = normalize_listing({"data": [{"id": 1}, "junk", None]}, page=1, page_size=6)

    assert result.items == [{"id": 1}]
    assert result.total_pages == 1
    assert result.total_count == 1


def test_zero_total_pages_is_clamped_to_one() -> None:
    result = normalize_listing({"data": [], "totalPages": 0, "count": 0})

    assert result.total_pages == 1
    assert result.items == []


def test_extract_record_and_message() -> None:
    assert extract_record({"data": {"id": 42, "name": "Branch X"}}) == {"id": 42, "name": "Branch X"}
    assert extract_record({"data": [{"id": 3}]}) == {"id": 3}
    assert extract_record({"id": 5, "name": "bare"}) == {"id": 5, "name": "bare"}
    assert extract_record({"message": "ok"}) is None
    assert extract_message({"message": "Branch created"}) == "Branch created"
    assert extract_message({}) is None

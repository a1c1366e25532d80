import pytest

from clients.rental_admin_sdk.errors import ApiError
from clients.rental_admin_sdk.models import ListResult
from clients.rental_admin_sdk.resource_client import ResourceClient
from clients.rental_admin_sdk.resources import get_resource

from rental_console.app.deletion_controller import DeletionController
from rental_console.app.list_controller import ListController
from rental_console.app.notifications import Notifier
from rental_console.app.state import SessionUser
from rental_console.app.tenant_context import TenantResolver


class StubTenantsClient:
    def list_tenants(self):
        return []


class DeleteHttp:
    def __init__(self) -> None:
        self.calls: list[dict] = []
        self.delete_error: ApiError | None = None
        self.on_delete = None

    def request(self, method, path, json_body=None, headers=None, params=None):
        self.calls.append({"method": method, "path": path, "json_body": json_body})
        if method == "DELETE":
            if self.on_delete:
                self.on_delete()
            if self.delete_error:
                raise self.delete_error
            return {"message": "Deleted"}
        return {"data": [{"id": 1}, {"id": 2}, {"id": 3}], "totalPages": 1, "count": 3}


def _wire(http: DeleteHttp, resource: str = "vehicles"):
    notifier = Notifier()
    resolver = TenantResolver(StubTenantsClient(), notifier)
    resolver.load_session(SessionUser(id=1, tenant_id=7, role_id=2))
    client = ResourceClient(http, get_resource(resource))
    listing = ListController(client, resolver, notifier)
    listing.result = ListResult(items=[{"id": 1}, {"id": 2}, {"id": 3}])
    return DeletionController(client, listing, resolver, notifier), listing, notifier


def test_single_delete_then_refetch() -> None:
    http = DeleteHttp()
    deletion, _, notifier = _wire(http)

    deletion.request_delete("single", 5)
    ok = deletion.confirm()

    assert ok is True
    assert [call["method"] for call in http.calls] == ["DELETE", "GET"]
    assert http.calls[0]["path"] == "/api/v1/admin/vehicles/5"
    assert deletion.pending is None
    assert notifier.history[-1].title == "Deleted"


def test_bulk_selection_is_cleared_only_after_the_call() -> None:
    http = DeleteHttp()
    deletion, listing, _ = _wire(http)
    listing.select_all_on_page()
    seen_during_call: list[list[int]] = []
    http.on_delete = lambda: seen_during_call.append(listing.selection.ids)

    deletion.request_delete("bulk")
    deletion.confirm()

    assert seen_during_call == [[1, 2, 3]]
    assert http.calls[0]["json_body"] == {"tenant_id": 7, "vehicle_ids": [1, 2, 3]}
    assert len(listing.selection) == 0


def test_failed_bulk_delete_still_clears_selection_and_refetches() -> None:
    http = DeleteHttp()
    http.delete_error = ApiError(code="HTTP_ERROR", message="Some vehicles are rented", status_code=409)
    deletion, listing, notifier = _wire(http)
    listing.toggle_selection(2)

    deletion.request_delete("bulk")
    ok = deletion.confirm()

    assert ok is False
    assert len(listing.selection) == 0
    assert [call["method"] for call in http.calls] == ["DELETE", "GET"]
    assert notifier.history[-1].level == "danger"
    assert notifier.history[-1].description == "Some vehicles are rented"


def test_empty_bulk_selection_is_a_no_op() -> None:
    http = DeleteHttp()
    deletion, _, _ = _wire(http)

    deletion.request_delete("bulk")

    assert deletion.confirm() is False
    assert http.calls == []


def test_cancel_drops_pending_target() -> None:
    http = DeleteHttp()
    deletion, _, _ = _wire(http)
    deletion.request_delete("single", 5)

    deletion.cancel()

    assert deletion.confirm() is False
    assert http.calls == []


def test_single_delete_needs_an_id() -> None:
    deletion, _, _ = _wire(DeleteHttp())

    with pytest.raises(ValueError):
        deletion.request_delete("single")


def test_bulk_delete_on_rental_contracts_is_reported() -> None:
    http = DeleteHttp()
    deletion, listing, notifier = _wire(http, resource="rental-contracts")
    listing.toggle_selection(1)

    deletion.request_delete("bulk")
    ok = deletion.confirm()

    assert ok is False
    assert [call["method"] for call in http.calls] == ["GET"]
    assert notifier.history[-1].category == "api"

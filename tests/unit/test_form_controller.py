import pytest

from clients.rental_admin_sdk.errors import ApiError
from clients.rental_admin_sdk.models import FieldErrors, MessageError
from clients.rental_admin_sdk.resource_client import ResourceClient
from clients.rental_admin_sdk.resources import get_resource

from rental_console.app.form_controller import FormController, FormMode
from rental_console.app.notifications import Notifier
from rental_console.app.state import SessionUser
from rental_console.app.tenant_context import TenantResolver


class StubTenantsClient:
    def list_tenants(self):
        return []


class RecordingHttp:
    def __init__(self, response=None, error: ApiError | None = None) -> None:
        self.calls: list[dict] = []
        self.response = response if response is not None else {"data": {"id": 42}, "message": "Branch created"}
        self.error = error
        self.during_call = None

    def request(self, method, path, json_body=None, headers=None, params=None):
        self.calls.append({"method": method, "path": path, "json_body": json_body})
        if self.during_call:
            self.during_call()
        if self.error:
            raise self.error
        return self.response


def _form(http: RecordingHttp, resource: str = "branches", tenant_id: int | None = 7, role_id: int = 2):
    notifier = Notifier()
    resolver = TenantResolver(StubTenantsClient(), notifier)
    resolver.load_session(SessionUser(id=1, tenant_id=tenant_id, role_id=role_id))
    return FormController(ResourceClient(http, get_resource(resource)), resolver, notifier), notifier


def test_create_success_resets_draft_and_calls_back() -> None:
    http = RecordingHttp()
    form, notifier = _form(http)
    called: list[bool] = []
    form.update_field("name", "  Branch X ")
    form.update_field("latitude", "24.7136")

    saved = form.save(on_success=lambda: called.append(True))

    assert saved is True
    assert called == [True]
    assert form.mode is FormMode.CREATE
    assert form.draft["name"] == ""
    assert form.submit_error is None
    assert http.calls[0]["method"] == "POST"
    assert http.calls[0]["json_body"]["name"] == "Branch X"
    assert http.calls[0]["json_body"]["name_ar"] is None
    assert http.calls[0]["json_body"]["latitude"] == 24.7136
    assert http.calls[0]["json_body"]["tenant_id"] == 7
    assert notifier.history[-1].title == "Saved"
    assert notifier.history[-1].description == "Branch created"


def test_validation_failure_keeps_mode_and_draft() -> None:
    http = RecordingHttp(error=ApiError(code="HTTP_ERROR", message="Name is required", status_code=400))
    form, _ = _form(http)
    form.set_edit_mode({"id": 3, "name": "Old", "status": "active", "tenant_id": 7})
    form.update_field("name", "")
    draft_before = dict(form.draft)

    saved = form.save(on_success=lambda: None)

    assert saved is False
    assert form.mode is FormMode.EDIT
    assert form.draft == draft_before
    assert form.submit_error == MessageError(text="Name is required")
    assert http.calls[0]["method"] == "PUT"
    assert http.calls[0]["path"] == "/api/v1/admin/branches/3"


def test_field_errors_are_kept_as_a_list() -> None:
    http = RecordingHttp(
        error=ApiError(code="VALIDATION_ERROR", message="a; b", details=["Name is required", "Slug taken"], status_code=400)
    )
    form, _ = _form(http, resource="roles")

    form.save()

    assert form.submit_error == FieldErrors(items=["Name is required", "Slug taken"])


def test_second_save_while_in_flight_is_refused() -> None:
    http = RecordingHttp()
    form, _ = _form(http)
    nested: list[bool] = []
    http.during_call = lambda: nested.append(form.save())

    form.save()

    assert nested == [False]
    assert len(http.calls) == 1
    assert form.loading is False


def test_save_without_tenant_makes_no_request() -> None:
    http = RecordingHttp()
    form, notifier = _form(http, tenant_id=None, role_id=9)
    form.update_field("name", "Branch X")

    saved = form.save()

    assert saved is False
    assert http.calls == []
    assert form.submit_error.kind == "message"
    assert notifier.history[-1].category == "scope"


def test_cancel_discards_draft() -> None:
    form, _ = _form(RecordingHttp())
    form.set_edit_mode({"id": 3, "name": "Old"})

    form.cancel()

    assert form.mode is FormMode.CREATE
    assert form.record_id is None
    assert form.draft["name"] == ""


def test_submit_enabled_tracks_loading() -> None:
    http = RecordingHttp()
    form, _ = _form(http)
    observed: list[bool] = []
    http.during_call = lambda: observed.append(form.submit_enabled)

    form.save()

    assert observed == [False]
    assert form.submit_enabled is True


def test_vehicle_draft_falls_back_to_selected_branch() -> None:
    http = RecordingHttp(response={"data": {"id": 1}})
    notifier = Notifier()
    resolver = TenantResolver(StubTenantsClient(), notifier)
    resolver.load_session(SessionUser(id=1, tenant_id=7, role_id=2))
    form = FormController(
        ResourceClient(http, get_resource("vehicles")),
        resolver,
        notifier,
        secondary_id=lambda: 4,
    )
    form.update_field("make", "Toyota")

    form.save()

    assert http.calls[0]["json_body"]["branch_id"] == 4
    assert notifier.history[-1].description == "vehicle saved successfully"


def test_malformed_start_date_is_reported_inline() -> None:
    http = RecordingHttp()
    form, _ = _form(http, resource="subscriptions")
    form.update_field("plan_id", 2)
    form.update_field("start_date", "2024-13-40")
    draft_before = dict(form.draft)

    saved = form.save()

    assert saved is False
    assert http.calls == []
    assert form.submit_error.kind == "message"
    assert form.submit_error.text
    assert form.draft == draft_before
    assert form.loading is False


def test_edit_mode_needs_a_record_id() -> None:
    http = RecordingHttp()
    form, _ = _form(http)

    with pytest.raises(ValueError):
        form.set_edit_mode({"name": "Unsaved"})

    assert form.mode is FormMode.CREATE
    assert form.record_id is None

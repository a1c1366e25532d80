from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from clients.rental_admin_sdk.errors import TenantScopeError
from clients.rental_admin_sdk.models import FieldErrors, MessageError, SaveResult
from clients.rental_admin_sdk.resource_client import ResourceClient

from rental_console.app.infrastructure.logging.logger import get_logger, log_action
from rental_console.app.notifications import Notifier
from rental_console.app.payloads import PayloadShaper, shaper_for
from rental_console.app.tenant_context import TenantResolver


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class FormController:
    """Create/edit state for one resource form.

    ``save`` returns True only when the backend accepted the draft. A rejected
    draft keeps the mode and the draft and exposes ``submit_error``; a save
    attempted while another is in flight returns False without a request.
    """

    def __init__(
        self,
        client: ResourceClient,
        resolver: TenantResolver,
        notifier: Notifier,
        shaper: PayloadShaper | None = None,
        secondary_id: Callable[[], int | None] | None = None,
    ) -> None:
        self.client = client
        self.resolver = resolver
        self.notifier = notifier
        self.shaper = shaper or shaper_for(client.spec.name)
        self.secondary_id = secondary_id
        self.mode = FormMode.CREATE
        self.record_id: int | None = None
        self.draft: dict[str, Any] = self.shaper.defaults()
        self.submit_error: MessageError | FieldErrors | None = None
        self.loading = False
        self._logger = get_logger(f"rental_console.{client.spec.name}")

    @property
    def submit_enabled(self) -> bool:
        return not self.loading

    def set_create_mode(self) -> None:
        self.mode = FormMode.CREATE
        self.record_id = None
        self.draft = self.shaper.defaults()
        self.submit_error = None

    def set_edit_mode(self, record: dict[str, Any]) -> None:
        if record.get("id") is None:
            raise ValueError("Only a persisted record with an id can be edited.")
        self.mode = FormMode.EDIT
        self.record_id = record["id"]
        self.draft = self.shaper.hydrate(record)
        self.submit_error = None

    def update_field(self, name: str, value: Any) -> None:
        self.draft = {**self.draft, name: value}

    def cancel(self) -> None:
        self.set_create_mode()

    def save(self, on_success: Callable[[], None] | None = None) -> bool:
        if self.loading:
            return False
        self.loading = True
        self.submit_error = None
        try:
            result = self._submit()
        finally:
            self.loading = False

        tenant_id = self.resolver.tenant_id
        action = "update" if self.mode is FormMode.EDIT else "create"
        if not result.ok:
            self.submit_error = result.error
            log_action(self._logger, self.client.spec.name, action, self._role_id(), tenant_id, "rejected")
            return False

        self.notifier.success(
            "saved",
            description=result.message or self.notifier.text("saved_description", label=self.client.spec.label),
        )
        log_action(self._logger, self.client.spec.name, action, self._role_id(), tenant_id, "success")
        self.set_create_mode()
        if on_success:
            on_success()
        return True

    def _submit(self) -> SaveResult:
        try:
            payload = self.shaper.shape(self.draft)
        except ValueError as error:
            return SaveResult.failure(MessageError(text=str(error)))
        key = self.client.spec.secondary_filter_key
        if key and self.secondary_id and payload.get(key) in (None, ""):
            payload[key] = self.secondary_id()
        scope = self.resolver.scope()
        try:
            if self.mode is FormMode.EDIT:
                return self.client.update(self.record_id, payload, scope)
            return self.client.create(payload, scope)
        except TenantScopeError as error:
            self.notifier.error("save_failed", error)
            return SaveResult.failure(MessageError(text=error.message))

    def _role_id(self) -> int | None:
        return self.resolver.user.role_id if self.resolver.user else None

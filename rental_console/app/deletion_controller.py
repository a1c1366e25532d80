from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from clients.rental_admin_sdk.errors import ApiError
from clients.rental_admin_sdk.resource_client import ResourceClient

from rental_console.app.infrastructure.logging.logger import get_logger, log_action
from rental_console.app.list_controller import ListController
from rental_console.app.notifications import Notifier
from rental_console.app.tenant_context import TenantResolver

DeleteKind = Literal["single", "bulk"]


@dataclass(frozen=True)
class DeleteTarget:
    kind: DeleteKind
    id: int | None = None


class DeletionController:
    def __init__(
        self,
        client: ResourceClient,
        list_controller: ListController,
        resolver: TenantResolver,
        notifier: Notifier,
    ) -> None:
        self.client = client
        self.list_controller = list_controller
        self.resolver = resolver
        self.notifier = notifier
        self.pending: DeleteTarget | None = None
        self._logger = get_logger(f"rental_console.{client.spec.name}")

    def request_delete(self, kind: DeleteKind, record_id: int | None = None) -> DeleteTarget:
        if kind not in ("single", "bulk"):
            raise ValueError(f"Unknown delete kind: {kind}")
        if kind == "single" and record_id is None:
            raise ValueError("A single delete needs a record id.")
        self.pending = DeleteTarget(kind=kind, id=record_id if kind == "single" else None)
        return self.pending

    def cancel(self) -> None:
        self.pending = None

    def confirm(self) -> bool:
        """Run the pending delete, then refetch the listing whatever the outcome."""
        target = self.pending
        self.pending = None
        if target is None:
            return False
        selection = self.list_controller.selection
        if target.kind == "bulk" and not len(selection):
            return False

        scope = self.resolver.scope()
        action = "delete" if target.kind == "single" else "bulk_delete"
        ok = False
        try:
            if target.kind == "single":
                message = self.client.remove(target.id, scope)
            else:
                message = self.client.remove_bulk(selection.ids, scope)
        except ApiError as error:
            self.notifier.error("delete_failed", error)
            log_action(self._logger, self.client.spec.name, action, self._role_id(), scope.tenant_id, "error", error.code)
        else:
            ok = True
            self.notifier.success("deleted", description=message)
            log_action(self._logger, self.client.spec.name, action, self._role_id(), scope.tenant_id, "success")
        finally:
            if target.kind == "bulk":
                self.list_controller.clear_selection()

        self.list_controller.refresh()
        return ok

    def _role_id(self) -> int | None:
        return self.resolver.user.role_id if self.resolver.user else None

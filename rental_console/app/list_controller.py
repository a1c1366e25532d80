from __future__ import annotations

from enum import Enum
from typing import Any

from clients.rental_admin_sdk.errors import ApiError
from clients.rental_admin_sdk.models import ListQuery, ListResult
from clients.rental_admin_sdk.resource_client import ResourceClient

from rental_console.app.infrastructure.logging.logger import get_logger, log_action
from rental_console.app.notifications import Notifier
from rental_console.app.selection import Selection
from rental_console.app.tenant_context import TenantResolver
from rental_console.app.ui import pagination
from rental_console.app.ui.pagination import clamp_page, pagination_controls


class ListStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class ListController:
    """Paginated, filtered listing of one resource for the active tenant.

    Each fetch takes a sequence token and its response is applied only while
    that token is the latest issued, so an older reply can never overwrite a
    newer one. Selection survives page changes and is scoped to whatever
    page ``select_all_on_page`` is called on.
    """

    def __init__(
        self,
        client: ResourceClient,
        resolver: TenantResolver,
        notifier: Notifier,
        page_size: int | None = None,
    ) -> None:
        self.client = client
        self.resolver = resolver
        self.notifier = notifier
        self.query = ListQuery(page_size=page_size or client.spec.page_size)
        self.result = ListResult.empty()
        self.status = ListStatus.IDLE
        self.selection = Selection()
        self._issued = 0
        self._logger = get_logger(f"rental_console.{client.spec.name}")

    @property
    def items(self) -> list[dict[str, Any]]:
        return self.result.items

    @property
    def loading(self) -> bool:
        return self.status is ListStatus.LOADING

    @property
    def can_go_previous(self) -> bool:
        return not pagination_controls(self.query.page, self.result.total_pages).prev_disabled

    @property
    def can_go_next(self) -> bool:
        return not pagination_controls(self.query.page, self.result.total_pages).next_disabled

    def load(self) -> None:
        tenant_id = self.resolver.tenant_id
        if tenant_id is None:
            return
        self._issued += 1
        token = self._issued
        query = self.query
        self.status = ListStatus.LOADING
        try:
            result = self.client.list(query, self.resolver.scope(query.secondary_filter))
        except ApiError as error:
            if token != self._issued:
                return
            self._apply_failure(error, tenant_id)
            return
        if token != self._issued:
            self._logger.debug("dropping stale %s listing (token %s, latest %s)", self.client.spec.name, token, self._issued)
            return
        self.result = result
        self.status = ListStatus.LOADED
        log_action(self._logger, self.client.spec.name, "list", self._role_id(), tenant_id, "success")

    def refresh(self) -> None:
        self.load()

    def set_search(self, search_text: str) -> None:
        self.query = self.query.with_search(search_text)
        self.load()

    def set_status_filter(self, status_filter: str | None) -> None:
        self.query = self.query.with_status(status_filter)
        self.load()

    def set_secondary_filter(self, secondary_id: int | None) -> None:
        self.query = self.query.with_secondary(secondary_id)
        self.load()

    def set_page(self, page: int) -> None:
        self.query = self.query.with_page(clamp_page(page, self.result.total_pages))
        self.load()

    def next_page(self) -> None:
        if self.can_go_next:
            self.set_page(pagination.next_page(self.query.page, self.result.total_pages))

    def previous_page(self) -> None:
        if self.can_go_previous:
            self.set_page(pagination.prev_page(self.query.page))

    def on_tenant_changed(self, tenant_id: int | None) -> None:
        self.query = self.query.with_secondary(None)
        self.selection = self.selection.clear()
        if tenant_id is None:
            self.result = ListResult.empty()
            self.status = ListStatus.IDLE
            return
        self.load()

    def toggle_selection(self, record_id: int) -> None:
        self.selection = self.selection.toggle(record_id)

    def select_all_on_page(self) -> None:
        self.selection = self.selection.select_all(self.result.ids)

    def clear_selection(self) -> None:
        self.selection = self.selection.clear()

    def _apply_failure(self, error: ApiError, tenant_id: int) -> None:
        self.result = ListResult.empty()
        self.query = self.query.with_page(1)
        self.status = ListStatus.ERRORED
        self.notifier.error("fetch_failed", error, label=self.client.spec.label)
        log_action(self._logger, self.client.spec.name, "list", self._role_id(), tenant_id, "error", error.code)

    def _role_id(self) -> int | None:
        return self.resolver.user.role_id if self.resolver.user else None

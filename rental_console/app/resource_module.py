from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from clients.rental_admin_sdk.errors import ApiError
from clients.rental_admin_sdk.http_client import HttpClient
from clients.rental_admin_sdk.resource_client import ResourceClient
from clients.rental_admin_sdk.resources import get_resource

from rental_console.app.deletion_controller import DeletionController
from rental_console.app.form_controller import FormController
from rental_console.app.list_controller import ListController
from rental_console.app.notifications import Notifier
from rental_console.app.payloads import shaper_for
from rental_console.app.permissions import AccessDecision, check_page_access
from rental_console.app.tenant_context import TenantResolver


@dataclass
class ResourceModule:
    """One back-office screen: a listing with its form and delete dialog."""

    client: ResourceClient
    resolver: TenantResolver
    notifier: Notifier
    listing: ListController
    form: FormController
    deletion: DeletionController
    route: str | None = None
    _unsubscribe: Callable[[], None] | None = field(default=None, repr=False)

    @classmethod
    def build(
        cls,
        resource_name: str,
        http: HttpClient,
        resolver: TenantResolver,
        notifier: Notifier,
        route: str | None = None,
    ) -> "ResourceModule":
        client = ResourceClient(http, get_resource(resource_name))
        listing = ListController(client, resolver, notifier)
        form = FormController(
            client,
            resolver,
            notifier,
            shaper=shaper_for(resource_name),
            secondary_id=lambda: listing.query.secondary_filter,
        )
        deletion = DeletionController(client, listing, resolver, notifier)
        module = cls(client, resolver, notifier, listing, form, deletion, route=route)
        module._unsubscribe = resolver.subscribe(module.on_tenant_changed)
        return module

    def mount(self) -> AccessDecision:
        """Load the first page unless the page gate turns the session user away."""
        decision = check_page_access(self.resolver.user, self.route) if self.route else AccessDecision("allow")
        if decision.allowed:
            self.listing.load()
        return decision

    def on_tenant_changed(self, tenant_id: int | None) -> None:
        self.form.set_create_mode()
        self.deletion.cancel()
        self.listing.on_tenant_changed(tenant_id)

    def fetch_details(self, record_id: int) -> dict[str, Any] | None:
        try:
            return self.client.get(record_id, self.resolver.scope())
        except ApiError as error:
            self.notifier.error("details_failed", error, label=self.client.spec.label)
            return None

    def save(self) -> bool:
        return self.form.save(on_success=self.listing.refresh)

    def close(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

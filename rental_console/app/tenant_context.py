from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from clients.rental_admin_sdk.errors import ApiError, TenantScopeError
from clients.rental_admin_sdk.models import ResourceScope, TenantOption
from clients.rental_admin_sdk.tenants_client import TenantsClient

from rental_console.app.config import AppConfig
from rental_console.app.infrastructure.logging.logger import get_logger, log_action
from rental_console.app.notifications import Notifier
from rental_console.app.state import SessionUser

TenantListener = Callable[[int | None], None]


class TenantSelectionError(ValueError):
    pass


def is_super_admin(role_id: int | None, super_admin_role_id: int) -> bool:
    return role_id is not None and role_id == super_admin_role_id


def resolve_tenant_context(
    *, super_admin: bool, session_tenant_id: int | None, selected_tenant_id: int | None
) -> tuple[int | None, str]:
    if super_admin:
        if selected_tenant_id is None:
            return None, "Super-admin must select a tenant explicitly."
        return selected_tenant_id, "Super-admin with an explicit tenant."

    if session_tenant_id is None:
        return None, "The session carries no tenant for the current role."

    return session_tenant_id, "Tenant resolved from the session."


@dataclass
class TenantContext:
    tenant_id: int | None = None
    is_super_admin: bool = False
    selectable_tenants: list[TenantOption] = field(default_factory=list)


class TenantResolver:
    def __init__(
        self,
        tenants_client: TenantsClient,
        notifier: Notifier,
        config: AppConfig | None = None,
    ) -> None:
        self.tenants_client = tenants_client
        self.notifier = notifier
        self.config = config or AppConfig()
        self.context = TenantContext()
        self.user: SessionUser | None = None
        self._tenants_loaded = False
        self._listeners: list[TenantListener] = []
        self._logger = get_logger("rental_console.tenants")

    @property
    def tenant_id(self) -> int | None:
        return self.context.tenant_id

    def subscribe(self, listener: TenantListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def load_session(self, user: SessionUser) -> TenantContext:
        previous = self.context.tenant_id
        self.user = user
        super_admin = is_super_admin(user.role_id, self.config.super_admin_role_id)
        tenant_id, _reason = resolve_tenant_context(
            super_admin=super_admin,
            session_tenant_id=user.tenant_id,
            selected_tenant_id=None,
        )
        self.context = TenantContext(tenant_id=tenant_id, is_super_admin=super_admin)
        self._tenants_loaded = False
        if super_admin:
            self.ensure_tenants_loaded()
        if tenant_id != previous:
            self._notify(tenant_id)
        return self.context

    def ensure_tenants_loaded(self) -> list[TenantOption]:
        if not self.context.is_super_admin or self._tenants_loaded:
            return self.context.selectable_tenants
        try:
            self.context.selectable_tenants = self.tenants_client.list_tenants()
        except ApiError as error:
            self.context.selectable_tenants = []
            self.notifier.error("tenants_failed", error)
            log_action(self._logger, "tenants", "list", self._role_id(), None, "error", error.code)
            return []
        self._tenants_loaded = True
        return self.context.selectable_tenants

    def select_tenant(self, tenant_id: int | None) -> None:
        if not self.context.is_super_admin:
            raise TenantSelectionError("Only a super-admin can switch the active tenant.")
        if tenant_id is not None and tenant_id not in {option.id for option in self.context.selectable_tenants}:
            raise TenantSelectionError(f"Tenant {tenant_id} is not selectable.")
        if tenant_id == self.context.tenant_id:
            return
        self.context.tenant_id = tenant_id
        log_action(self._logger, "tenants", "select", self._role_id(), tenant_id, "success")
        self._notify(tenant_id)

    def scope(self, secondary_id: int | None = None) -> ResourceScope:
        return ResourceScope(tenant_id=self.context.tenant_id, secondary_id=secondary_id)

    def require_tenant_id(self, resource: str, operation: str) -> int:
        if self.context.tenant_id is None:
            raise TenantScopeError.unresolved(resource, operation)
        return self.context.tenant_id

    def _role_id(self) -> int | None:
        return self.user.role_id if self.user else None

    def _notify(self, tenant_id: int | None) -> None:
        for listener in list(self._listeners):
            listener(tenant_id)

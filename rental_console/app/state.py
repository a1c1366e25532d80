from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SessionUser:
    id: int
    tenant_id: int | None = None
    role_id: int | None = None
    roles: tuple[str, ...] = ()
    permissions: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SessionUser":
        return cls(
            id=int(payload["id"]),
            tenant_id=_optional_int(payload.get("tenantId", payload.get("tenant_id"))),
            role_id=_optional_int(payload.get("roleId", payload.get("role_id"))),
            roles=tuple(str(role) for role in payload.get("roles") or ()),
            permissions=tuple(str(code) for code in payload.get("permissions") or ()),
        )


@dataclass
class SessionState:
    """Entry point for the identity provider: holds the signed-in user whose
    ``SessionUser`` is handed to ``TenantResolver.load_session`` and the page gate."""

    user: SessionUser | None = None
    language: str = "en"

    def is_authenticated(self) -> bool:
        return self.user is not None

    def apply_session(self, payload: dict[str, Any]) -> SessionUser:
        self.user = SessionUser.from_payload(payload)
        return self.user

    def clear(self) -> None:
        self.user = None


def _optional_int(value: Any) -> int | None:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None

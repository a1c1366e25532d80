from __future__ import annotations

from typing import Any

from clients.rental_admin_sdk.errors import ApiError, TenantScopeError


def build_error_payload(error: Exception) -> dict[str, Any]:
    if isinstance(error, ApiError):
        category = _classify_api_error(error)
        return {
            "category": category,
            "code": error.code,
            "message": error.message,
            "trace_id": error.trace_id,
            "status_code": error.status_code,
        }
    return {
        "category": "internal",
        "code": "INTERNAL_ERROR",
        "message": str(error),
        "trace_id": None,
        "status_code": None,
    }


def _classify_api_error(error: ApiError) -> str:
    if isinstance(error, TenantScopeError):
        return "scope"
    if error.code in {"NETWORK_ERROR", "TIMEOUT_ERROR"}:
        return "network"
    if error.status_code in {401, 403}:
        return "auth"
    if error.status_code in {400, 409, 422}:
        return "validation"
    if error.status_code and error.status_code >= 500:
        return "server"
    return "api"

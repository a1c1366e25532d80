from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ApiError(Exception):
    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    trace_id: str | None = None
    status_code: int | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    @property
    def messages(self) -> list[str]:
        """Every human readable message carried by the error, in server order."""
        if isinstance(self.details, list) and self.details:
            return [str(item) for item in self.details]
        return [self.message]

    @classmethod
    def from_http_response(cls, response: httpx.Response) -> "ApiError":
        trace_id = response.headers.get("X-Trace-ID") or response.headers.get("X-Trace-Id")
        try:
            payload = response.json()
        except ValueError:
            return cls(
                code="HTTP_ERROR",
                message=response.text or response.reason_phrase or "HTTP request failed",
                details=None,
                trace_id=trace_id,
                status_code=response.status_code,
            )

        if isinstance(payload, dict):
            raw = payload.get("error") or payload.get("message") or payload.get("errors")
            if isinstance(raw, list):
                items = [str(item) for item in raw if item not in (None, "")]
                return cls(
                    code=str(payload.get("code") or "VALIDATION_ERROR"),
                    message="; ".join(items) or response.text or "HTTP request failed",
                    details=items,
                    trace_id=payload.get("trace_id") or trace_id,
                    status_code=response.status_code,
                )
            return cls(
                code=str(payload.get("code") or "HTTP_ERROR"),
                message=str(raw or response.text or "HTTP request failed"),
                details=payload.get("details"),
                trace_id=payload.get("trace_id") or trace_id,
                status_code=response.status_code,
            )

        return cls(
            code="HTTP_ERROR",
            message=response.text or "HTTP request failed",
            details=payload,
            trace_id=trace_id,
            status_code=response.status_code,
        )


class TenantScopeError(ApiError):
    """Raised before any network I/O when no tenant has been resolved."""

    @classmethod
    def unresolved(cls, resource: str, operation: str) -> "TenantScopeError":
        return cls(
            code="TENANT_SCOPE_REQUIRED",
            message=f"Select a tenant before running {operation} on {resource}.",
            details={"resource": resource, "operation": operation},
        )


class UnsupportedOperationError(ApiError):
    @classmethod
    def for_resource(cls, resource: str, operation: str) -> "UnsupportedOperationError":
        return cls(
            code="OPERATION_NOT_SUPPORTED",
            message=f"{resource} does not support {operation}.",
            details={"resource": resource, "operation": operation},
        )

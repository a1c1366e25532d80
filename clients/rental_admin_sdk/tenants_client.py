from __future__ import annotations

from clients.rental_admin_sdk.config import API_PREFIX
from clients.rental_admin_sdk.http_client import HttpClient
from clients.rental_admin_sdk.models import TenantOption


class TenantsClient:
    def __init__(self, http_client: HttpClient) -> None:
        self.http_client = http_client

    def list_tenants(self) -> list[TenantOption]:
        payload = self.http_client.request("GET", f"{API_PREFIX}/tenants")
        rows = payload.get("data") if isinstance(payload.get("data"), list) else []
        return [TenantOption(id=row["id"], name=str(row.get("name") or row["id"])) for row in rows if isinstance(row, dict) and "id" in row]
